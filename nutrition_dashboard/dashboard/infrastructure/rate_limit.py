from __future__ import annotations

from ..application.ports import RateLimiter


class PassThroughRateLimiter(RateLimiter):
    """Admit every request; throttling is enforced in front of this service."""

    async def acquire(self, key: str) -> bool:
        return True


__all__ = ["PassThroughRateLimiter"]
