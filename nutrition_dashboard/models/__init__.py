from .dashboard import (
    ISO_DATE_PATTERN,
    UUID_PATTERN,
    DailyDashboardRequest,
    DashboardRequest,
    HealthMetricsRequest,
    MemberSummaryRequest,
    WeeklyDashboardRequest,
)
from .problems import ProblemDetail

__all__ = [
    'ISO_DATE_PATTERN',
    'UUID_PATTERN',
    'DashboardRequest',
    'DailyDashboardRequest',
    'WeeklyDashboardRequest',
    'MemberSummaryRequest',
    'HealthMetricsRequest',
    'ProblemDetail',
]
