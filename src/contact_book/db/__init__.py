"""Relational schema: ORM tables, column types and schema bootstrap."""

from contact_book.db.base import Base
from contact_book.db.schema import create_schema, drop_schema
from contact_book.db.tables import ContactMetadataRow, ContactRow

__all__ = [
    "Base",
    "ContactMetadataRow",
    "ContactRow",
    "create_schema",
    "drop_schema",
]
