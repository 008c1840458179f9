"""Error taxonomy for the contact book."""

from contact_book.errors.book_errors import (
    ConfigError,
    ContactBookError,
    ValidationError,
)
from contact_book.errors.repo_errors import (
    BackendError,
    NotFoundError,
    PartialError,
    RepoError,
)

__all__ = [
    "BackendError",
    "ConfigError",
    "ContactBookError",
    "NotFoundError",
    "PartialError",
    "RepoError",
    "ValidationError",
]
