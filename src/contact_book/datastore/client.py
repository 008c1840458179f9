"""The shared connection handle for the contact book.

One ``Datastore`` is opened by whoever bootstraps the application and
handed to every repository. Repositories open a short-lived session per
call and never close the datastore itself.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from contact_book.datastore.engines import create_engine

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.ext.asyncio import AsyncEngine
    from sqlalchemy.orm import DeclarativeBase

    from contact_book.config.settings import DatabaseConfig

logger = logging.getLogger(__name__)


class Datastore:
    """Pooled async engine plus the session factory bound to it.

    Usage::

        async with Datastore(db_config) as ds:
            repo = SqlMetadataRepository(ds)
            ...
    """

    def __init__(self, config: DatabaseConfig) -> None:
        self._config = config
        self._engine: AsyncEngine | None = None
        self._sessions: async_sessionmaker[AsyncSession] | None = None

    async def __aenter__(self) -> Self:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    def _require_open(self) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
        if self._engine is None or self._sessions is None:
            msg = "Datastore is not open. Call open() first."
            raise RuntimeError(msg)
        return self._engine, self._sessions

    @property
    def engine(self) -> AsyncEngine:
        """The underlying engine; ``RuntimeError`` while closed."""
        return self._require_open()[0]

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    async def open(self, *, base: type[DeclarativeBase] | None = None) -> None:
        """Create the engine, and the tables of *base* when one is given.

        Opening an already open datastore does nothing.
        """
        if self._engine is not None:
            return
        self._engine = create_engine(self._config)
        self._sessions = async_sessionmaker(self._engine, expire_on_commit=False)
        if base is not None:
            async with self._engine.begin() as conn:
                await conn.run_sync(base.metadata.create_all)
        logger.debug("Datastore opened (%s)", self._config.engine)

    async def close(self) -> None:
        """Dispose the engine and every pooled connection. Safe to repeat."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._sessions = None
        logger.debug("Datastore closed")

    def session(self) -> AsyncSession:
        """A new session; use it as an async context manager."""
        return self._require_open()[1]()
