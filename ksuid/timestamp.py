"""Wall-clock helpers in milliseconds and microseconds."""

import time
from datetime import datetime, timezone


def now_millis():
    """Current time in milliseconds since Unix epoch."""
    return time.time_ns() // 1_000_000


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return time.time_ns() // 1_000


def from_millis(epoch_ms):
    """UTC datetime for a millisecond timestamp."""
    seconds, millis = divmod(epoch_ms, 1000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=millis * 1000)


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    seconds, micros = divmod(epoch_us, 1_000_000)
    dt = datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=micros)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"


def iso_seconds(epoch_ms):
    """Format a millisecond timestamp as ISO 8601 to the second."""
    return from_millis(epoch_ms).strftime("%Y-%m-%dT%H:%M:%SZ")
