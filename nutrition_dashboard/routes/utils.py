from fastapi import Depends, Query, Request
from fastapi.exceptions import RequestValidationError

from ..dashboard.application.ports import RateLimiter
from ..errors import ProblemError
from ..models.dashboard import ISO_DATE_PATTERN, UUID_PATTERN
from ..security import require_actor_id
from ..wiring import provide_rate_limiter

date_query = Query(
    default=None,
    pattern=ISO_DATE_PATTERN,
    description="Calendar date in YYYY-MM-DD format, defaults to today in the household timezone.",
)

week_start_query = Query(
    default=None,
    alias="weekStart",
    pattern=ISO_DATE_PATTERN,
    description="First day of the week in YYYY-MM-DD format, defaults to the current Monday.",
)

member_id_query = Query(
    default=None,
    alias="memberId",
    pattern=UUID_PATTERN,
    description="Household member to report on, defaults to the acting member.",
)


async def enforce_rate_limit(
    actor_id: str = Depends(require_actor_id),
    limiter: RateLimiter = Depends(provide_rate_limiter),
) -> None:
    if not await limiter.acquire(f"{actor_id}:read"):
        raise ProblemError(429, "Too Many Requests", "Rate limit exceeded")


SINGLE_VALUE_QUERY_PARAMS = ("date", "weekStart", "memberId")


async def reject_repeated_query_params(request: Request) -> None:
    """Refuse ``?memberId=a&memberId=b``; scalar queries would keep only the last value."""
    errors = [
        {
            "loc": ("query", name),
            "msg": "Query parameter must not be repeated",
            "type": "repeated_value",
        }
        for name in SINGLE_VALUE_QUERY_PARAMS
        if len(request.query_params.getlist(name)) > 1
    ]
    if errors:
        raise RequestValidationError(errors)
