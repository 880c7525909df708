from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..dashboard.application.ports import NutritionDashboardService
from ..domain.calendar import (
    Clock,
    is_known_timezone,
    monday_of_week,
    normalize_timezone,
    today_in_timezone,
    utc_now,
)
from ..models.dashboard import (
    DailyDashboardRequest,
    HealthMetricsRequest,
    MemberSummaryRequest,
    WeeklyDashboardRequest,
)

logger = logging.getLogger(__name__)


async def resolve_household_timezone(
    service: NutritionDashboardService, actor_member_id: str
) -> str:
    """Look up the actor's household timezone, falling back to UTC."""
    stored = await service.get_household_timezone(actor_member_id)
    timezone = normalize_timezone(stored)
    stored_name = (stored or "").strip()
    if stored_name and not is_known_timezone(stored_name):
        logger.warning(
            "Household timezone %r for member %s is not recognised; using %s",
            stored,
            actor_member_id,
            timezone,
        )
    return timezone


@dataclass
class GetDailyDashboardUseCase:
    """Return the daily dashboard, defaulting to today in the household zone."""

    service: NutritionDashboardService
    clock: Clock = utc_now

    async def __call__(
        self,
        actor_member_id: str,
        *,
        date: Optional[str] = None,
        member_id: Optional[str] = None,
    ) -> Any:
        timezone = await resolve_household_timezone(self.service, actor_member_id)
        request = DailyDashboardRequest(
            actor_member_id=actor_member_id,
            date=date or today_in_timezone(timezone, self.clock),
            member_id=member_id,
        )
        return await self.service.get_daily(request)


@dataclass
class GetWeeklyDashboardUseCase:
    """Return the weekly dashboard, defaulting to the current ISO week."""

    service: NutritionDashboardService
    clock: Clock = utc_now

    async def __call__(
        self,
        actor_member_id: str,
        *,
        week_start: Optional[str] = None,
        member_id: Optional[str] = None,
    ) -> Any:
        timezone = await resolve_household_timezone(self.service, actor_member_id)
        # A caller-supplied week start is forwarded as given, even mid-week.
        if week_start is None:
            week_start = monday_of_week(today_in_timezone(timezone, self.clock))
        request = WeeklyDashboardRequest(
            actor_member_id=actor_member_id,
            week_start=week_start,
            member_id=member_id,
        )
        return await self.service.get_weekly(request)


@dataclass
class GetMemberSummaryUseCase:
    """Return household member summaries for a single day."""

    service: NutritionDashboardService
    clock: Clock = utc_now

    async def __call__(self, actor_member_id: str, *, date: Optional[str] = None) -> Any:
        timezone = await resolve_household_timezone(self.service, actor_member_id)
        request = MemberSummaryRequest(
            actor_member_id=actor_member_id,
            date=date or today_in_timezone(timezone, self.clock),
        )
        return await self.service.get_member_summary(request)


@dataclass
class GetHealthMetricsUseCase:
    """Return health metrics; no date is involved so no timezone lookup."""

    service: NutritionDashboardService

    async def __call__(
        self, actor_member_id: str, *, member_id: Optional[str] = None
    ) -> Any:
        request = HealthMetricsRequest(
            actor_member_id=actor_member_id, member_id=member_id
        )
        return await self.service.get_health_metrics(request)


__all__ = [
    "GetDailyDashboardUseCase",
    "GetHealthMetricsUseCase",
    "GetMemberSummaryUseCase",
    "GetWeeklyDashboardUseCase",
    "resolve_household_timezone",
]
