"""Column types."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator

from contact_book.models.timestamps import from_iso, to_iso


class IsoTimestamp(TypeDecorator[datetime]):
    """Datetime stored as a millisecond ISO-8601 ``TEXT`` value.

    The text form is identical on every backend, so it sorts lexically and
    round-trips without depending on a driver's datetime handling.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Any) -> str | None:
        if value is None:
            return None
        return to_iso(value)

    def process_result_value(self, value: str | None, dialect: Any) -> datetime | None:
        if value is None:
            return None
        return from_iso(value)
