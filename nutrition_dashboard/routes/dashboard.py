from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..application.dashboard import (
    GetDailyDashboardUseCase,
    GetHealthMetricsUseCase,
    GetMemberSummaryUseCase,
    GetWeeklyDashboardUseCase,
)
from ..models.problems import ProblemDetail
from ..security import require_actor_id
from ..wiring import (
    get_daily_dashboard_use_case,
    get_health_metrics_use_case,
    get_member_summary_use_case,
    get_weekly_dashboard_use_case,
)
from .utils import (
    date_query,
    enforce_rate_limit,
    member_id_query,
    reject_repeated_query_params,
    week_start_query,
)

router: APIRouter = APIRouter(
    dependencies=[Depends(enforce_rate_limit), Depends(reject_repeated_query_params)],
    responses={
        400: {"model": ProblemDetail, "description": "Invalid query parameters."},
        401: {"model": ProblemDetail, "description": "Missing credentials or actor."},
        429: {"model": ProblemDetail, "description": "Rate limit exceeded."},
    },
)


@router.get("/daily")
@router.head("/daily", include_in_schema=False)
async def get_daily_dashboard(
    date: Optional[str] = date_query,
    member_id: Optional[str] = member_id_query,
    actor_id: str = Depends(require_actor_id),
    use_case: GetDailyDashboardUseCase = Depends(get_daily_dashboard_use_case),
) -> JSONResponse:
    """Daily nutrition dashboard for the actor or a household member."""
    data = await use_case(actor_id, date=date, member_id=member_id)
    return JSONResponse(data)


@router.get("/weekly")
@router.head("/weekly", include_in_schema=False)
async def get_weekly_dashboard(
    week_start: Optional[str] = week_start_query,
    member_id: Optional[str] = member_id_query,
    actor_id: str = Depends(require_actor_id),
    use_case: GetWeeklyDashboardUseCase = Depends(get_weekly_dashboard_use_case),
) -> JSONResponse:
    """Weekly nutrition dashboard starting at ``weekStart``."""
    data = await use_case(actor_id, week_start=week_start, member_id=member_id)
    return JSONResponse(data)


@router.get("/member-summary")
@router.head("/member-summary", include_in_schema=False)
async def get_member_summary(
    date: Optional[str] = date_query,
    actor_id: str = Depends(require_actor_id),
    use_case: GetMemberSummaryUseCase = Depends(get_member_summary_use_case),
) -> JSONResponse:
    data = await use_case(actor_id, date=date)
    return JSONResponse(data)


@router.get("/health-metrics")
@router.head("/health-metrics", include_in_schema=False)
async def get_health_metrics(
    member_id: Optional[str] = member_id_query,
    actor_id: str = Depends(require_actor_id),
    use_case: GetHealthMetricsUseCase = Depends(get_health_metrics_use_case),
) -> JSONResponse:
    data = await use_case(actor_id, member_id=member_id)
    return JSONResponse(data)
