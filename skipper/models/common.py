"""Common types and time helpers shared across models."""

from datetime import UTC, datetime
from typing import TypeAlias

EpochSeconds: TypeAlias = int

SECONDS_PER_DAY = 86400

# 9999-12-31 23:59:59 UTC, the last second datetime can represent.
MAX_EPOCH = 253402300799


def utc_now() -> datetime:
    return datetime.now(UTC)


def from_epoch(ts: EpochSeconds) -> datetime:
    return datetime.fromtimestamp(ts, UTC)


def to_epoch(value: str) -> EpochSeconds:
    """Parse an ISO 8601 string into UTC epoch seconds.

    Naive values are taken as UTC, never as server-local time.
    """
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return int(dt.timestamp())


def format_utc(ts: EpochSeconds) -> str:
    """Human-readable UTC rendering, e.g. 'Saturday 18 July 2026, 09:00 UTC'."""
    return from_epoch(ts).strftime("%A %d %B %Y, %H:%M UTC")
