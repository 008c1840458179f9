"""Shared plumbing for SQL-backed repositories."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from contact_book.db.tables import MAX_ROW_ID
from contact_book.errors import BackendError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sqlalchemy.ext.asyncio import AsyncSession

    from contact_book.datastore.client import Datastore

logger = logging.getLogger(__name__)


class SqlRepository:
    """Holds the shared datastore and turns store failures into ``BackendError``.

    The datastore is borrowed, never closed here.
    """

    def __init__(self, datastore: Datastore) -> None:
        self._ds = datastore

    @staticmethod
    def _storable(row_id: int) -> bool:
        """Whether *row_id* fits the id columns; any other id has no row."""
        return 0 < row_id <= MAX_ROW_ID

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self._ds.session() as session:
                yield session
        except (SQLAlchemyError, OverflowError) as exc:
            # drivers raise OverflowError for ints wider than the column
            logger.warning("%s: store error: %s", type(self).__name__, exc)
            msg = f"store error: {exc}"
            raise BackendError(msg) from exc
