"""Factories and assertion helpers for API tests."""

from __future__ import annotations

from typing import Any, Dict

import httpx

ACTOR_ID = "0f8c5a8e-3b1d-4f7a-9d2e-5c6b7a8d9e01"
MEMBER_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"

DASHBOARD_PREFIX = "/api/v1/nutrition-dashboard"


def make_daily_dashboard(**overrides: Any) -> Dict[str, Any]:
    """Return a daily dashboard payload as produced by the data service."""

    payload: Dict[str, Any] = {
        "member": {"id": ACTOR_ID, "fullName": "Ada Lovelace", "householdRole": "owner"},
        "date": "2024-05-15",
        "totals": {"calories": 1850, "protein_g": 92.5, "carbs_g": 210, "fat_g": 61},
        "targets": {"calories": 2100},
        "mealTypeCounts": {"breakfast": 1, "lunch": 2, "dinner": 1},
    }
    payload.update(overrides)
    return payload


def make_weekly_dashboard(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "weekStart": "2024-05-13",
        "weekEnd": "2024-05-19",
        "days": [{"date": "2024-05-13", "calories": 1920}],
    }
    payload.update(overrides)
    return payload


def assert_problem(
    response: httpx.Response, status: int, *, title: str | None = None, detail: str | None = None
) -> Dict[str, Any]:
    """Assert ``response`` is a problem detail and return its body."""

    assert response.status_code == status, response.text
    assert response.headers["content-type"].startswith("application/problem+json")
    body = response.json()
    assert body["status"] == status
    assert body["instance"].startswith("/")
    if title is not None:
        assert body["title"] == title, f"Expected title {title!r}, saw {body['title']!r}"
    if detail is not None:
        assert body["detail"] == detail, f"Expected detail {detail!r}, saw {body['detail']!r}"
    return body
