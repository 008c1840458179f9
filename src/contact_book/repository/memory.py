"""In-memory repositories (no database).

Same contracts and semantics as the SQL backend: ids are issued
monotonically and never reused, listings are ordered by id, and a failed
metadata write after a contact insert is reported as ``PartialError``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from contact_book.errors import BackendError, NotFoundError, PartialError
from contact_book.models import IndexedContact, Metadata
from contact_book.repository.ports import ContactRepo, MetadataRepo

if TYPE_CHECKING:
    from contact_book.models import Contact, ContactPatch

logger = logging.getLogger(__name__)


class InMemoryMetadataRepository(MetadataRepo):
    """Stores metadata records in a dict keyed by contact id."""

    def __init__(self) -> None:
        self._by_contact: dict[int, tuple[int, Metadata]] = {}
        self._last_id = 0

    async def create(self, metadata: Metadata) -> int:  # noqa: ASYNC910
        if metadata.contact_id in self._by_contact:
            msg = f"metadata for contact {metadata.contact_id} already exists"
            raise BackendError(msg)
        self._last_id += 1
        self._by_contact[metadata.contact_id] = (self._last_id, metadata)
        return self._last_id

    async def get_by_id(self, contact_id: int) -> Metadata:  # noqa: ASYNC910
        entry = self._by_contact.get(contact_id)
        if entry is None:
            raise NotFoundError("metadata for contact", contact_id)
        return entry[1]


class InMemoryContactRepository(ContactRepo):
    """Stores contacts in a dict keyed by id."""

    def __init__(self, metadata_repo: MetadataRepo) -> None:
        self._metadata = metadata_repo
        self._contacts: dict[int, Contact] = {}
        self._last_id = 0

    async def create_contact(self, contact: Contact) -> int:
        self._last_id += 1
        contact_id = self._last_id
        self._contacts[contact_id] = contact
        try:
            await self._metadata.create(Metadata.for_contact(contact_id))
        except Exception as exc:
            logger.error("Contact %d created without metadata: %s", contact_id, exc)
            msg = f"contact {contact_id} was created but its metadata was not: {exc}"
            raise PartialError(msg, contact_id=contact_id) from exc
        return contact_id

    async def get_all_contacts(self) -> list[IndexedContact]:  # noqa: ASYNC910
        return [
            IndexedContact(id=contact_id, contact=self._contacts[contact_id])
            for contact_id in sorted(self._contacts)
        ]

    async def get_contact_by_id(self, contact_id: int) -> IndexedContact:  # noqa: ASYNC910
        contact = self._contacts.get(contact_id)
        if contact is None:
            raise NotFoundError("contact", contact_id)
        return IndexedContact(id=contact_id, contact=contact)

    async def update_contact(self, patch: ContactPatch) -> None:  # noqa: ASYNC910
        contact = self._contacts.get(patch.id)
        if contact is None:
            raise NotFoundError("contact", patch.id)
        self._contacts[patch.id] = patch.apply(contact)

    async def delete_contact_by_id(self, contact_id: int) -> int:  # noqa: ASYNC910
        if self._contacts.pop(contact_id, None) is None:
            raise NotFoundError("contact", contact_id)
        return contact_id
