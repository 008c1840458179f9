"""SQLAlchemy ORM tables for contacts and their metadata.

``contact_metadata.contact_id`` is a logical reference to ``contacts.id``.
No database constraint ties the two, so deleting a contact leaves its
metadata row in place.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - SQLAlchemy needs this at runtime for Mapped[datetime]

from sqlalchemy import BigInteger, Boolean, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from contact_book.db.base import Base
from contact_book.db.types import IsoTimestamp
from contact_book.models import Contact, IndexedContact, Metadata

# SQLite only autoincrements a column declared INTEGER, which is 64-bit there
RowId = BigInteger().with_variant(Integer, "sqlite")

MAX_ROW_ID = 2**63 - 1
"""Largest id either backend can store; no row can have a bigger one."""


class ContactRow(Base):
    """One row per contact; ``id`` is issued by the store."""

    __tablename__ = "contacts"
    # ids are never reused, even after the highest one is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(RowId, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    display_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone_number: Mapped[str] = mapped_column(Text, nullable=False)

    @classmethod
    def from_entity(cls, contact: Contact) -> ContactRow:
        return cls(
            first_name=contact.first_name,
            last_name=contact.last_name,
            display_name=contact.display_name,
            email=contact.email,
            phone_number=contact.phone_number,
        )

    def to_entity(self) -> IndexedContact:
        return IndexedContact(
            id=self.id,
            contact=Contact(
                first_name=self.first_name,
                last_name=self.last_name,
                display_name=self.display_name,
                email=self.email,
                phone_number=self.phone_number,
            ),
        )

    def __repr__(self) -> str:
        return f"<ContactRow id={self.id}>"


class ContactMetadataRow(Base):
    """Metadata for one contact, keyed by its own row id."""

    __tablename__ = "contact_metadata"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(RowId, primary_key=True, autoincrement=True)
    contact_id: Mapped[int] = mapped_column(
        RowId,
        unique=True,
        nullable=False,
        index=True,
        comment="contacts.id this record belongs to",
    )
    starred: Mapped[bool] = mapped_column(Boolean, nullable=False)
    is_archived: Mapped[bool] = mapped_column(Boolean, nullable=False)
    frequency: Mapped[int | None] = mapped_column(
        Integer, nullable=True, comment="Reminder cadence"
    )
    created_at: Mapped[datetime] = mapped_column(IsoTimestamp, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(IsoTimestamp, nullable=False)
    last_seen_at: Mapped[datetime | None] = mapped_column(IsoTimestamp, nullable=True)
    next_reminder_at: Mapped[datetime | None] = mapped_column(IsoTimestamp, nullable=True)
    last_reminder_at: Mapped[datetime | None] = mapped_column(IsoTimestamp, nullable=True)

    @classmethod
    def from_entity(cls, metadata: Metadata) -> ContactMetadataRow:
        return cls(
            contact_id=metadata.contact_id,
            starred=metadata.starred,
            is_archived=metadata.is_archived,
            frequency=metadata.frequency,
            created_at=metadata.created_at,
            updated_at=metadata.updated_at,
            last_seen_at=metadata.last_seen_at,
            next_reminder_at=metadata.next_reminder_at,
            last_reminder_at=metadata.last_reminder_at,
        )

    def to_entity(self) -> Metadata:
        return Metadata(
            contact_id=self.contact_id,
            starred=self.starred,
            is_archived=self.is_archived,
            frequency=self.frequency,
            created_at=self.created_at,
            updated_at=self.updated_at,
            last_seen_at=self.last_seen_at,
            next_reminder_at=self.next_reminder_at,
            last_reminder_at=self.last_reminder_at,
        )

    def __repr__(self) -> str:
        return f"<ContactMetadataRow id={self.id} contact_id={self.contact_id}>"

