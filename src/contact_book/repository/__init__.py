"""Repositories — data access layer.

Each repository encapsulates all storage access for its entity behind the
contracts in :mod:`contact_book.repository.ports`.
"""

from contact_book.repository.contacts import SqlContactRepository
from contact_book.repository.memory import (
    InMemoryContactRepository,
    InMemoryMetadataRepository,
)
from contact_book.repository.metadata import SqlMetadataRepository
from contact_book.repository.ports import ContactRepo, MetadataRepo

__all__ = [
    "ContactRepo",
    "InMemoryContactRepository",
    "InMemoryMetadataRepository",
    "MetadataRepo",
    "SqlContactRepository",
    "SqlMetadataRepository",
]
