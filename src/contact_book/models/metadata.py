"""Per-contact metadata — flags, reminder cadence and timestamps."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Self

from contact_book.models.timestamps import normalize, utc_now

_TIMESTAMP_FIELDS = (
    "created_at",
    "updated_at",
    "last_seen_at",
    "next_reminder_at",
    "last_reminder_at",
)


@dataclass(frozen=True)
class Metadata:
    """Auxiliary state kept 1:1 with a contact.

    Timestamps are normalised to UTC with millisecond precision on
    construction, matching what the store can hold, so a record read back
    compares equal to the one written.
    """

    contact_id: int
    starred: bool = False
    is_archived: bool = False
    frequency: int | None = None
    created_at: datetime = field(default_factory=utc_now)
    # defaults to created_at
    updated_at: datetime = None  # type: ignore[assignment]
    last_seen_at: datetime | None = None
    next_reminder_at: datetime | None = None
    last_reminder_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)
        for name in _TIMESTAMP_FIELDS:
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, normalize(value))

    @classmethod
    def for_contact(cls, contact_id: int, now: datetime | None = None) -> Self:
        """Default record written alongside a new contact."""
        now = now or utc_now()
        return cls(contact_id=contact_id, created_at=now, updated_at=now)
