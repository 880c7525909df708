"""Timezone and calendar helpers used to default dashboard dates."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from functools import lru_cache
from typing import Callable, Dict, Optional
from zoneinfo import ZoneInfo, available_timezones

DEFAULT_TIMEZONE: str = "UTC"

# Present in some host databases but not IANA zone names.
HOST_ONLY_KEYS = frozenset({"localtime", "posixrules", "Factory"})

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@lru_cache(maxsize=1)
def _zone_names() -> Dict[str, str]:
    return {
        name.lower(): name
        for name in available_timezones()
        if name not in HOST_ONLY_KEYS
    }


def canonical_timezone(name: str) -> Optional[str]:
    """Return the database spelling of ``name``, matched case-insensitively."""
    return _zone_names().get(name.lower())


def is_known_timezone(name: str) -> bool:
    """Return ``True`` when ``name`` resolves in the timezone database."""
    return canonical_timezone(name) is not None


def normalize_timezone(tz: Optional[str]) -> str:
    """Return the canonical name of ``tz`` when it is a known IANA zone, else ``UTC``.

    Households may store an empty, stale or oddly cased timezone preference.
    Such values must never fail a request, so every lookup miss collapses to
    the default zone.
    """

    value = (tz or "").strip()
    if not value:
        return DEFAULT_TIMEZONE
    return canonical_timezone(value) or DEFAULT_TIMEZONE


def today_in_timezone(tz: str, clock: Clock = utc_now) -> str:
    """Return the local calendar date for ``tz`` as ``YYYY-MM-DD``.

    Args:
        tz: Timezone name, expected to be normalized already.
        clock: Source of the current instant. Naive values are read as UTC.
    """

    now = clock()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(ZoneInfo(tz)).date().isoformat()


def monday_of_week(value: str) -> str:
    """Return the Monday starting the ISO week that contains ``value``."""
    day = date.fromisoformat(value)
    # Sunday=0 .. Saturday=6, shifted so Monday is zero.
    day_of_week = (day.weekday() + 1) % 7
    offset = (day_of_week + 6) % 7
    return (day - timedelta(days=offset)).isoformat()


__all__ = [
    "Clock",
    "DEFAULT_TIMEZONE",
    "canonical_timezone",
    "is_known_timezone",
    "monday_of_week",
    "normalize_timezone",
    "today_in_timezone",
    "utc_now",
]
