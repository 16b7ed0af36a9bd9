"""UTC time helpers shared by the scorers and schemas."""

from datetime import datetime, timedelta, timezone
from typing import Annotated

from pydantic import AfterValidator

ONE_DAY = timedelta(days=1)
ONE_HOUR = timedelta(hours=1)


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def resolve_now(now: datetime | None) -> datetime:
    """Return ``now`` normalized to UTC, or the current time if omitted."""
    return utc_now() if now is None else ensure_utc(now)


def whole_days_since(moment: datetime, now: datetime) -> int:
    """Whole days elapsed from ``moment`` to ``now`` (floored, may be negative)."""
    return (now - ensure_utc(moment)) // ONE_DAY


def whole_hours_since(moment: datetime, now: datetime) -> int:
    """Whole hours elapsed from ``moment`` to ``now`` (floored, may be negative)."""
    return (now - ensure_utc(moment)) // ONE_HOUR


UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]
