"""SQL metadata repository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select

from contact_book.db.tables import ContactMetadataRow
from contact_book.errors import NotFoundError
from contact_book.repository.base import SqlRepository
from contact_book.repository.ports import MetadataRepo

if TYPE_CHECKING:
    from contact_book.models import Metadata

logger = logging.getLogger(__name__)


class SqlMetadataRepository(SqlRepository, MetadataRepo):
    """Data access layer for contact metadata."""

    async def create(self, metadata: Metadata) -> int:
        """Persist a full metadata record and return its row id."""
        row = ContactMetadataRow.from_entity(metadata)
        async with self._session() as session:
            session.add(row)
            await session.commit()
            row_id = row.id
        logger.debug("Created metadata %d for contact %d", row_id, metadata.contact_id)
        return row_id

    async def get_by_id(self, contact_id: int) -> Metadata:
        """Find metadata by the contact it belongs to."""
        if not self._storable(contact_id):
            raise NotFoundError("metadata for contact", contact_id)
        async with self._session() as session:
            stmt = select(ContactMetadataRow).where(
                ContactMetadataRow.contact_id == contact_id
            )
            result = await session.execute(stmt)
            row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError("metadata for contact", contact_id)
        return row.to_entity()
