from datetime import datetime, timedelta, timezone

# Ticks are 100-nanosecond intervals since 0001-01-01 00:00:00 UTC
TICKS_PER_SECOND = 10_000_000
TICKS_PER_MICROSECOND = 10
_EPOCH = datetime(1, 1, 1, tzinfo=timezone.utc)


def datetime_to_ticks(value: datetime) -> int:
    """Convert a datetime to the tick count stored in tablature files.

    Args:
        value: Datetime to convert. Naive values are taken as UTC.

    Returns:
        Number of ticks as a non-negative integer
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    delta = value.astimezone(timezone.utc) - _EPOCH
    return (
        delta.days * 86400 * TICKS_PER_SECOND
        + delta.seconds * TICKS_PER_SECOND
        + delta.microseconds * TICKS_PER_MICROSECOND
    )


def ticks_to_datetime(ticks: int) -> datetime:
    """Convert a stored tick count back to an aware UTC datetime.

    Sub-microsecond precision is dropped.
    """
    if ticks < 0:
        raise ValueError(f"Tick count must not be negative: {ticks}")
    return _EPOCH + timedelta(microseconds=ticks // TICKS_PER_MICROSECOND)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
