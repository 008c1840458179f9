"""Shared test fixtures for the contact-book test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from contact_book.config.settings import DatabaseConfig, DatabaseEngine
from contact_book.datastore.client import Datastore
from contact_book.db.base import Base
from contact_book.models import Contact
from contact_book.repository import SqlContactRepository, SqlMetadataRepository

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@pytest.fixture
def db_config() -> DatabaseConfig:
    """In-memory SQLite configuration."""
    return DatabaseConfig(
        engine=DatabaseEngine.SQLITE,
        dsn="sqlite+aiosqlite:///:memory:",
    )


@pytest.fixture
async def datastore(db_config: DatabaseConfig) -> AsyncIterator[Datastore]:
    """An open datastore with every table created."""
    import contact_book.db.tables  # noqa: F401

    ds = Datastore(db_config)
    await ds.open(base=Base)
    yield ds
    await ds.close()


@pytest.fixture
def metadata_repo(datastore: Datastore) -> SqlMetadataRepository:
    return SqlMetadataRepository(datastore)


@pytest.fixture
def contact_repo(
    datastore: Datastore, metadata_repo: SqlMetadataRepository
) -> SqlContactRepository:
    return SqlContactRepository(datastore, metadata_repo)


@pytest.fixture
def john() -> Contact:
    return Contact.new("John", "Smith", "johndoe@example.com", "123-456-7890")


@pytest.fixture
def jane() -> Contact:
    return Contact.new("Jane", "Doe", "jane@example.com", "555-0100")
