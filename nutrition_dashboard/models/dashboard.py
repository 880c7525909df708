from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ISO_DATE_PATTERN: str = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
UUID_PATTERN: str = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


class DashboardRequest(BaseModel):
    """Parameters shared by every dashboard data-service call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    actor_member_id: str = Field(..., alias="actorMemberId", min_length=1)


class DailyDashboardRequest(DashboardRequest):
    date: str = Field(..., pattern=ISO_DATE_PATTERN)
    member_id: Optional[str] = Field(None, alias="memberId", pattern=UUID_PATTERN)


class WeeklyDashboardRequest(DashboardRequest):
    week_start: str = Field(..., alias="weekStart", pattern=ISO_DATE_PATTERN)
    member_id: Optional[str] = Field(None, alias="memberId", pattern=UUID_PATTERN)


class MemberSummaryRequest(DashboardRequest):
    date: str = Field(..., pattern=ISO_DATE_PATTERN)


class HealthMetricsRequest(DashboardRequest):
    member_id: Optional[str] = Field(None, alias="memberId", pattern=UUID_PATTERN)
