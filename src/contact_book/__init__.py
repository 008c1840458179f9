"""contact-book — a personal contact book over an async relational store.

- models: entities (Contact, IndexedContact, ContactPatch, Metadata).
- db: ORM tables and schema bootstrap.
- datastore: the pooled async connection handle.
- repository: ContactRepo / MetadataRepo contracts and their backends.
- testing: deterministic doubles for the repository contracts.
"""

from contact_book.errors import (
    BackendError,
    ConfigError,
    ContactBookError,
    NotFoundError,
    PartialError,
    RepoError,
    ValidationError,
)
from contact_book.models import Contact, ContactPatch, IndexedContact, Metadata
from contact_book.repository import (
    ContactRepo,
    InMemoryContactRepository,
    InMemoryMetadataRepository,
    MetadataRepo,
    SqlContactRepository,
    SqlMetadataRepository,
)

__version__ = "0.1.0"

__all__ = [
    "BackendError",
    "ConfigError",
    "Contact",
    "ContactBookError",
    "ContactPatch",
    "ContactRepo",
    "InMemoryContactRepository",
    "InMemoryMetadataRepository",
    "IndexedContact",
    "Metadata",
    "MetadataRepo",
    "NotFoundError",
    "PartialError",
    "RepoError",
    "SqlContactRepository",
    "SqlMetadataRepository",
    "ValidationError",
]
