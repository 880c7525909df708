"""Doubles for the dashboard service and rate limiter ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from nutrition_dashboard.dashboard.application.ports import (
    NutritionDashboardService,
    RateLimiter,
)
from nutrition_dashboard.models.dashboard import (
    DailyDashboardRequest,
    HealthMetricsRequest,
    MemberSummaryRequest,
    WeeklyDashboardRequest,
)


@dataclass
class _Expectation:
    expected: Any = None
    returns: Any = None
    raises: Exception | None = None


class NutritionDashboardServiceFake(NutritionDashboardService):
    """Dashboard service double with expectation helpers and call history."""

    def __init__(self, timezone: str = "UTC") -> None:
        self.timezone = timezone
        self.calls: List[Tuple[str, Any]] = []
        self._expectations: Dict[str, List[_Expectation]] = {
            "timezone": [],
            "daily": [],
            "weekly": [],
            "member_summary": [],
            "health_metrics": [],
        }

    def with_timezone(self, timezone: str) -> "NutritionDashboardServiceFake":
        self.timezone = timezone
        return self

    def expect_timezone(
        self, actor_member_id: str | None = None, *, raises: Exception | None = None
    ) -> "NutritionDashboardServiceFake":
        self._expectations["timezone"].append(_Expectation(actor_member_id, raises=raises))
        return self

    def expect_daily(
        self,
        request: DailyDashboardRequest | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NutritionDashboardServiceFake":
        self._expectations["daily"].append(_Expectation(request, returns, raises))
        return self

    def expect_weekly(
        self,
        request: WeeklyDashboardRequest | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NutritionDashboardServiceFake":
        self._expectations["weekly"].append(_Expectation(request, returns, raises))
        return self

    def expect_member_summary(
        self,
        request: MemberSummaryRequest | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NutritionDashboardServiceFake":
        self._expectations["member_summary"].append(_Expectation(request, returns, raises))
        return self

    def expect_health_metrics(
        self,
        request: HealthMetricsRequest | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NutritionDashboardServiceFake":
        self._expectations["health_metrics"].append(_Expectation(request, returns, raises))
        return self

    def call_names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def assert_last_call(self, name: str, argument: Any = None) -> None:
        assert self.calls, "No dashboard service call was recorded"
        last_name, last_argument = self.calls[-1]
        assert last_name == name, f"Expected last call {name!r}, saw {last_name!r}"
        if argument is not None:
            assert (
                last_argument == argument
            ), f"Expected {name} called with {argument!r}, saw {last_argument!r}"

    async def get_household_timezone(self, actor_member_id: str) -> str:
        self._handle("timezone", actor_member_id)
        return self.timezone

    async def get_daily(self, request: DailyDashboardRequest) -> Any:
        return self._handle("daily", request)

    async def get_weekly(self, request: WeeklyDashboardRequest) -> Any:
        return self._handle("weekly", request)

    async def get_member_summary(self, request: MemberSummaryRequest) -> Any:
        return self._handle("member_summary", request)

    async def get_health_metrics(self, request: HealthMetricsRequest) -> Any:
        return self._handle("health_metrics", request)

    def _handle(self, name: str, argument: Any) -> Any:
        self.calls.append((name, argument))
        expectations = self._expectations[name]
        if not expectations:
            return {}
        expectation = expectations.pop(0)
        if expectation.expected is not None and expectation.expected != argument:
            raise AssertionError(
                f"Expected {name} called with {expectation.expected!r} but got {argument!r}"
            )
        if expectation.raises:
            raise expectation.raises
        return expectation.returns


class RateLimiterFake(RateLimiter):
    """Rate limiter double that records keys and admits on demand."""

    def __init__(self, allow: bool = True) -> None:
        self.allow = allow
        self.keys: List[str] = []

    async def acquire(self, key: str) -> bool:
        self.keys.append(key)
        return self.allow


__all__ = ["NutritionDashboardServiceFake", "RateLimiterFake"]
