"""Tests for the ORM tables and the timestamp column type."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.schema import CreateTable

from contact_book.db.tables import ContactMetadataRow, ContactRow
from contact_book.db.types import IsoTimestamp
from contact_book.models import Contact, IndexedContact, Metadata


class TestIsoTimestamp:
    def test_bind_encodes_iso(self) -> None:
        col = IsoTimestamp()
        value = datetime(2024, 5, 1, 9, 30, 0, 125400, tzinfo=UTC)
        assert col.process_bind_param(value, None) == "2024-05-01T09:30:00.125Z"

    def test_result_decodes_iso(self) -> None:
        col = IsoTimestamp()
        assert col.process_result_value("2024-05-01T09:30:00.125Z", None) == datetime(
            2024, 5, 1, 9, 30, 0, 125000, tzinfo=UTC
        )

    def test_null_passthrough(self) -> None:
        col = IsoTimestamp()
        assert col.process_bind_param(None, None) is None
        assert col.process_result_value(None, None) is None


class TestRowMapping:
    def test_contact_row(self) -> None:
        contact = Contact.new("John", "Smith", "johndoe@example.com", "123-456-7890")
        row = ContactRow.from_entity(contact)
        row.id = 4
        assert row.to_entity() == IndexedContact(id=4, contact=contact)
        assert repr(row) == "<ContactRow id=4>"

    def test_metadata_row(self) -> None:
        meta = Metadata(
            contact_id=2,
            starred=True,
            frequency=30,
            next_reminder_at=datetime(2024, 6, 1, tzinfo=UTC),
        )
        row = ContactMetadataRow.from_entity(meta)
        assert row.to_entity() == meta

    def test_table_names(self) -> None:
        assert ContactRow.__tablename__ == "contacts"
        assert ContactMetadataRow.__tablename__ == "contact_metadata"


class TestRowIdColumns:
    def _ddl(self, row: type, dialect) -> str:
        return str(CreateTable(row.__table__).compile(dialect=dialect))

    def test_sqlite_ids_are_autoincrement_integer(self) -> None:
        ddl = self._ddl(ContactRow, sqlite.dialect())
        assert "AUTOINCREMENT" in ddl
        assert "BIGINT" not in ddl

    def test_postgresql_ids_are_bigint(self) -> None:
        assert "BIGSERIAL" in self._ddl(ContactRow, postgresql.dialect())
        meta_ddl = self._ddl(ContactMetadataRow, postgresql.dialect())
        assert "contact_id BIGINT NOT NULL" in meta_ddl
