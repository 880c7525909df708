from .ports import NutritionDashboardService, RateLimiter

__all__ = ["NutritionDashboardService", "RateLimiter"]
