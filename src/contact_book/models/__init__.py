"""Domain entities: contacts, patches and metadata."""

from contact_book.models.contact import Contact, ContactPatch, IndexedContact
from contact_book.models.metadata import Metadata

__all__ = ["Contact", "ContactPatch", "IndexedContact", "Metadata"]
