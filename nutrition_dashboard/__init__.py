"""Nutrition dashboard HTTP API."""
