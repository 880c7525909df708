"""Ports for the nutrition dashboard application layer."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ...models.dashboard import (
    DailyDashboardRequest,
    HealthMetricsRequest,
    MemberSummaryRequest,
    WeeklyDashboardRequest,
)


@runtime_checkable
class NutritionDashboardService(Protocol):
    """Port exposing the dashboard data operations used by the API."""

    async def get_household_timezone(self, actor_member_id: str) -> str:
        """Return the stored timezone of the actor's household, possibly empty."""

    async def get_daily(self, request: DailyDashboardRequest) -> Any:
        """Return the daily dashboard payload for a member."""

    async def get_weekly(self, request: WeeklyDashboardRequest) -> Any:
        """Return the weekly dashboard payload starting at ``week_start``."""

    async def get_member_summary(self, request: MemberSummaryRequest) -> Any:
        """Return per-member summaries for the actor's household."""

    async def get_health_metrics(self, request: HealthMetricsRequest) -> Any:
        """Return health metrics for a member."""


@runtime_checkable
class RateLimiter(Protocol):
    """Port deciding whether a request may proceed."""

    async def acquire(self, key: str) -> bool:
        """Record a hit for ``key`` and return ``False`` when over the limit."""


__all__ = ["NutritionDashboardService", "RateLimiter"]
