"""Timestamp codec — millisecond ISO-8601 strings with an explicit UTC offset.

Every stored timestamp goes through :func:`to_iso`, so the text form is
fixed-width and sorts lexically in time order::

    2024-05-01T09:30:00.125Z
"""

from __future__ import annotations

from datetime import UTC, datetime


def normalize(dt: datetime) -> datetime:
    """Return *dt* as an aware UTC datetime truncated to milliseconds.

    Naive datetimes are taken to already be in UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    else:
        dt = dt.astimezone(UTC)
    return dt.replace(microsecond=dt.microsecond - dt.microsecond % 1000)


def utc_now() -> datetime:
    """Current instant, UTC, millisecond precision."""
    return normalize(datetime.now(UTC))


def to_iso(dt: datetime) -> str:
    """Encode *dt* as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return normalize(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def from_iso(text: str) -> datetime:
    """Decode a stored timestamp (``Z`` or ``+00:00`` suffix) into UTC."""
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return normalize(datetime.fromisoformat(text))
