"""SQL contact repository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import delete, select, update

from contact_book.db.tables import ContactRow
from contact_book.errors import NotFoundError, PartialError
from contact_book.models import Metadata
from contact_book.repository.base import SqlRepository
from contact_book.repository.ports import ContactRepo

if TYPE_CHECKING:
    from contact_book.datastore.client import Datastore
    from contact_book.models import Contact, ContactPatch, IndexedContact
    from contact_book.repository.ports import MetadataRepo

logger = logging.getLogger(__name__)


class SqlContactRepository(SqlRepository, ContactRepo):
    """Data access layer for contacts.

    Creating a contact is two writes: the contact row, then its default
    metadata through the injected ``MetadataRepo``. They are not wrapped in
    one transaction; if the second write fails the contact row stays and
    ``PartialError`` reports its id.
    """

    def __init__(self, datastore: Datastore, metadata_repo: MetadataRepo) -> None:
        super().__init__(datastore)
        self._metadata = metadata_repo

    async def create_contact(self, contact: Contact) -> int:
        """Persist a new contact and its default metadata."""
        row = ContactRow.from_entity(contact)
        async with self._session() as session:
            session.add(row)
            await session.commit()
            contact_id = row.id

        try:
            await self._metadata.create(Metadata.for_contact(contact_id))
        except Exception as exc:
            logger.error("Contact %d created without metadata: %s", contact_id, exc)
            msg = f"contact {contact_id} was created but its metadata was not: {exc}"
            raise PartialError(msg, contact_id=contact_id) from exc

        logger.debug("Created contact %d", contact_id)
        return contact_id

    async def get_all_contacts(self) -> list[IndexedContact]:
        """List every contact, ascending by id."""
        async with self._session() as session:
            result = await session.execute(select(ContactRow).order_by(ContactRow.id))
            return [row.to_entity() for row in result.scalars().all()]

    async def get_contact_by_id(self, contact_id: int) -> IndexedContact:
        """Find contact by primary key."""
        if not self._storable(contact_id):
            raise NotFoundError("contact", contact_id)
        async with self._session() as session:
            row = await session.get(ContactRow, contact_id)
        if row is None:
            raise NotFoundError("contact", contact_id)
        return row.to_entity()

    async def update_contact(self, patch: ContactPatch) -> None:
        """Write the present fields of *patch* in a single UPDATE."""
        changes = patch.changes()
        if not self._storable(patch.id):
            raise NotFoundError("contact", patch.id)
        async with self._session() as session:
            if not changes:
                if await session.get(ContactRow, patch.id) is None:
                    raise NotFoundError("contact", patch.id)
                return
            stmt = update(ContactRow).where(ContactRow.id == patch.id).values(**changes)
            result = await session.execute(stmt)
            if result.rowcount == 0:  # type: ignore[union-attr]
                raise NotFoundError("contact", patch.id)
            await session.commit()
        logger.debug("Updated contact %d (%s)", patch.id, ", ".join(changes))

    async def delete_contact_by_id(self, contact_id: int) -> int:
        """Delete a contact; its metadata row is kept."""
        if not self._storable(contact_id):
            raise NotFoundError("contact", contact_id)
        async with self._session() as session:
            stmt = delete(ContactRow).where(ContactRow.id == contact_id)
            result = await session.execute(stmt)
            if result.rowcount == 0:  # type: ignore[union-attr]
                raise NotFoundError("contact", contact_id)
            await session.commit()
        logger.debug("Deleted contact %d", contact_id)
        return contact_id
