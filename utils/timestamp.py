"""Millisecond timestamp utilities."""

import time
from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def now_millis():
    """Current time in milliseconds since Unix epoch."""
    return time.time_ns() // 1_000_000


def to_millis(dt):
    """Milliseconds since epoch for a datetime. Naive values are local time."""
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return (dt - EPOCH) // _ONE_MS


def from_millis(epoch_ms):
    """UTC datetime for milliseconds since epoch."""
    return EPOCH + timedelta(milliseconds=epoch_ms)


def format_timestamp(epoch_ms=None):
    """Format timestamp as ISO 8601 with milliseconds."""
    if epoch_ms is None:
        epoch_ms = now_millis()

    dt = from_millis(epoch_ms)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
