"""Timestamp helpers for the JSON wire and storage format.

Timestamps travel as integer epoch milliseconds; the domain works with
timezone-aware UTC datetimes.
"""

from __future__ import annotations

from datetime import datetime, timezone


def to_millis(moment: datetime) -> int:
    return round(moment.timestamp() * 1000)


def from_millis(millis: int) -> datetime:
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


def optional_millis(moment: datetime | None) -> int | None:
    return None if moment is None else to_millis(moment)
