from .client import HttpNutritionDashboardService, create_dashboard_service_adapter
from .rate_limit import PassThroughRateLimiter

__all__ = [
    "HttpNutritionDashboardService",
    "PassThroughRateLimiter",
    "create_dashboard_service_adapter",
]
