"""Schema bootstrap — create or drop every table on an engine.

There is no migration history; tables are created straight from the ORM
definitions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from contact_book.db.base import Base

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    import contact_book.db.tables  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_schema(engine: AsyncEngine) -> None:
    """Drop all tables (test/dev utility only)."""
    import contact_book.db.tables  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
