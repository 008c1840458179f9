"""Repository contracts.

Callers depend on these abstract classes only, so the SQL backend, the
in-memory backend and the test doubles in :mod:`contact_book.testing`
are interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contact_book.models import Contact, ContactPatch, IndexedContact, Metadata


class ContactRepo(ABC):
    """Persists contacts and writes one metadata record per new contact."""

    @abstractmethod
    async def create_contact(self, contact: Contact) -> int:
        """Insert *contact* and its default metadata; return the new id.

        Raises:
            PartialError: The contact row was written but writing its metadata
                raised, whatever the exception; the cause is chained.
            BackendError: The store failed.
        """

    @abstractmethod
    async def get_all_contacts(self) -> list[IndexedContact]:
        """Return every contact, ascending by id."""

    @abstractmethod
    async def get_contact_by_id(self, contact_id: int) -> IndexedContact:
        """Return one contact.

        Raises:
            NotFoundError: No contact has that id.
        """

    @abstractmethod
    async def update_contact(self, patch: ContactPatch) -> None:
        """Write the present fields of *patch*; absent fields stay as stored.

        Raises:
            NotFoundError: ``patch.id`` does not exist.
        """

    @abstractmethod
    async def delete_contact_by_id(self, contact_id: int) -> int:
        """Delete one contact and return its id. Metadata is left in place.

        Raises:
            NotFoundError: No contact has that id.
        """


class MetadataRepo(ABC):
    """Persists per-contact metadata, looked up by contact id."""

    @abstractmethod
    async def create(self, metadata: Metadata) -> int:
        """Insert *metadata*; return the metadata row id.

        Raises:
            BackendError: The store failed, or *metadata.contact_id* already
                has a record.
        """

    @abstractmethod
    async def get_by_id(self, contact_id: int) -> Metadata:
        """Return the metadata of contact *contact_id*.

        Raises:
            NotFoundError: The contact has no metadata row.
        """
