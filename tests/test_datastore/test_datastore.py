"""Tests for the Datastore handle and schema bootstrap."""

from __future__ import annotations

import pytest
from sqlalchemy import text

from contact_book.config.settings import DatabaseConfig
from contact_book.datastore.client import Datastore
from contact_book.db.base import Base
from contact_book.db.schema import create_schema, drop_schema


def _memory_config(**kwargs) -> DatabaseConfig:
    return DatabaseConfig(engine="sqlite", dsn="sqlite+aiosqlite:///:memory:", **kwargs)


async def _table_names(ds: Datastore) -> set[str]:
    async with ds.session() as session:
        result = await session.execute(
            text("SELECT name FROM sqlite_master WHERE type='table'")
        )
        return {row[0] for row in result.fetchall()}


# ---------------------------------------------------------------------------
# Datastore client
# ---------------------------------------------------------------------------


class TestDatastore:
    """Test Datastore lifecycle and session management."""

    async def test_open_close(self) -> None:
        ds = Datastore(_memory_config())
        assert not ds.is_open
        await ds.open()
        assert ds.is_open
        await ds.close()
        assert not ds.is_open

    async def test_close_is_idempotent(self) -> None:
        ds = Datastore(_memory_config())
        await ds.open()
        await ds.close()
        await ds.close()
        assert not ds.is_open

    async def test_open_twice_keeps_engine(self) -> None:
        ds = Datastore(_memory_config())
        await ds.open()
        engine = ds.engine
        await ds.open()
        assert ds.engine is engine
        await ds.close()

    async def test_context_manager_opens_and_closes(self) -> None:
        ds = Datastore(_memory_config())
        async with ds as opened:
            assert opened is ds
            assert ds.is_open
        assert not ds.is_open

    async def test_context_manager_closes_on_error(self) -> None:
        ds = Datastore(_memory_config())
        with pytest.raises(ValueError, match="boom"):
            async with ds:
                raise ValueError("boom")
        assert not ds.is_open

    async def test_engine_property_when_closed(self) -> None:
        ds = Datastore(_memory_config())
        with pytest.raises(RuntimeError, match="not open"):
            _ = ds.engine

    async def test_session_when_closed(self) -> None:
        ds = Datastore(_memory_config())
        with pytest.raises(RuntimeError, match="not open"):
            ds.session()

    async def test_session_basic_operations(self) -> None:
        ds = Datastore(_memory_config())
        await ds.open()
        async with ds.session() as session:
            result = await session.execute(text("SELECT 1"))
            assert result.scalar() == 1
        await ds.close()

    async def test_open_with_base_creates_tables(self) -> None:
        import contact_book.db.tables  # noqa: F401

        ds = Datastore(_memory_config())
        await ds.open(base=Base)
        assert {"contacts", "contact_metadata"} <= await _table_names(ds)
        await ds.close()


class TestSchema:
    async def test_create_and_drop(self) -> None:
        ds = Datastore(_memory_config())
        await ds.open()
        await create_schema(ds.engine)
        assert {"contacts", "contact_metadata"} <= await _table_names(ds)
        await drop_schema(ds.engine)
        assert not {"contacts", "contact_metadata"} & await _table_names(ds)
        await ds.close()

    async def test_create_is_repeatable(self) -> None:
        ds = Datastore(_memory_config())
        await ds.open()
        await create_schema(ds.engine)
        await create_schema(ds.engine)
        assert "contacts" in await _table_names(ds)
        await ds.close()
