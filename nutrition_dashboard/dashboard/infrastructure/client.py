"""HTTP-backed implementation of the nutrition dashboard service port."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from ...errors import ProblemError
from ...models.dashboard import (
    DailyDashboardRequest,
    DashboardRequest,
    HealthMetricsRequest,
    MemberSummaryRequest,
    WeeklyDashboardRequest,
)
from ...settings import Settings
from ..application.ports import NutritionDashboardService

logger = logging.getLogger(__name__)


class HttpNutritionDashboardService(NutritionDashboardService):
    """Call the upstream dashboard data service over HTTP."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http_client = http_client
        self._base_url: str = settings.dashboard_service_url.rstrip("/")
        self._headers: Dict[str, str] = {
            "Authorization": f"Bearer {settings.dashboard_service_token}",
            "Accept": "application/json",
        }
        self._timeout: float = settings.dashboard_service_timeout

    async def get_household_timezone(self, actor_member_id: str) -> str:
        member = quote(actor_member_id, safe="")
        data = await self._get(f"/members/{member}/household/timezone")
        timezone = data.get("timezone") if isinstance(data, dict) else None
        return timezone if isinstance(timezone, str) else ""

    async def get_daily(self, request: DailyDashboardRequest) -> Any:
        return await self._get_nutrition("daily", request)

    async def get_weekly(self, request: WeeklyDashboardRequest) -> Any:
        return await self._get_nutrition("weekly", request)

    async def get_member_summary(self, request: MemberSummaryRequest) -> Any:
        return await self._get_nutrition("member-summary", request)

    async def get_health_metrics(self, request: HealthMetricsRequest) -> Any:
        return await self._get_nutrition("health-metrics", request)

    async def _get_nutrition(self, view: str, request: DashboardRequest) -> Any:
        params = request.model_dump(
            by_alias=True, exclude_none=True, exclude={"actor_member_id"}
        )
        member = quote(request.actor_member_id, safe="")
        return await self._get(f"/members/{member}/nutrition/{view}", params=params)

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self._base_url}{path}"
        try:
            response = await self._http_client.get(
                url, headers=self._headers, params=params, timeout=self._timeout
            )
        except httpx.TimeoutException as exc:
            logger.warning("Dashboard service timed out on %s", path)
            raise ProblemError(
                504, "Gateway Timeout", "Request to dashboard service timed out"
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("Dashboard service unreachable on %s: %s", path, exc)
            raise ProblemError(
                502, "Bad Gateway", "Dashboard service is unreachable"
            ) from exc
        if response.status_code >= 400:
            raise _upstream_problem(response)
        return response.json()


def _upstream_problem(response: httpx.Response) -> ProblemError:
    """Translate an upstream error response, keeping its status and wording."""
    title = response.reason_phrase or "Error"
    detail = response.text or title
    problem_type = "about:blank"
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        title = body.get("title") or title
        detail = body.get("detail") or body.get("error") or detail
        problem_type = body.get("type") or problem_type
    return ProblemError(response.status_code, str(title), str(detail), type=problem_type)


def create_dashboard_service_adapter(
    *, http_client: httpx.AsyncClient, settings: Settings
) -> NutritionDashboardService:
    return HttpNutritionDashboardService(http_client, settings)


__all__ = ["HttpNutritionDashboardService", "create_dashboard_service_adapter"]
