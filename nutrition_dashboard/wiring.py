"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

from typing import AsyncIterator

import httpx
from fastapi import Depends

from .application.dashboard import (
    GetDailyDashboardUseCase,
    GetHealthMetricsUseCase,
    GetMemberSummaryUseCase,
    GetWeeklyDashboardUseCase,
)
from .dashboard.application.ports import NutritionDashboardService, RateLimiter
from .dashboard.infrastructure import (
    PassThroughRateLimiter,
    create_dashboard_service_adapter,
)
from .domain.calendar import Clock, utc_now
from .settings import Settings, get_settings


def get_clock() -> Clock:
    return utc_now


def provide_rate_limiter() -> RateLimiter:
    return PassThroughRateLimiter()


async def provide_dashboard_service(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[NutritionDashboardService]:
    async with httpx.AsyncClient(timeout=settings.dashboard_service_timeout) as http_client:
        yield create_dashboard_service_adapter(http_client=http_client, settings=settings)


def get_daily_dashboard_use_case(
    service: NutritionDashboardService = Depends(provide_dashboard_service),
    clock: Clock = Depends(get_clock),
) -> GetDailyDashboardUseCase:
    return GetDailyDashboardUseCase(service, clock)


def get_weekly_dashboard_use_case(
    service: NutritionDashboardService = Depends(provide_dashboard_service),
    clock: Clock = Depends(get_clock),
) -> GetWeeklyDashboardUseCase:
    return GetWeeklyDashboardUseCase(service, clock)


def get_member_summary_use_case(
    service: NutritionDashboardService = Depends(provide_dashboard_service),
    clock: Clock = Depends(get_clock),
) -> GetMemberSummaryUseCase:
    return GetMemberSummaryUseCase(service, clock)


def get_health_metrics_use_case(
    service: NutritionDashboardService = Depends(provide_dashboard_service),
) -> GetHealthMetricsUseCase:
    return GetHealthMetricsUseCase(service)


__all__ = [
    "get_clock",
    "provide_rate_limiter",
    "provide_dashboard_service",
    "get_daily_dashboard_use_case",
    "get_weekly_dashboard_use_case",
    "get_member_summary_use_case",
    "get_health_metrics_use_case",
]
