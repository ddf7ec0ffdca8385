"""Time utilities for timezone-aware UTC datetimes."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return a timezone-aware UTC datetime for defaults and onupdate hooks."""
    return datetime.now(UTC)


def truncate_to_millis(value: datetime) -> datetime:
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


def from_epoch_millis(millis: int) -> datetime:
    """Convert epoch milliseconds to a naive UTC datetime."""
    seconds, remainder = divmod(millis, 1000)
    return datetime.fromtimestamp(seconds, UTC).replace(microsecond=remainder * 1000, tzinfo=None)

