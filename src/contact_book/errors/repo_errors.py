"""Repository errors — not found, backend failure, partial write."""

from __future__ import annotations

from contact_book.errors.book_errors import ContactBookError


class RepoError(ContactBookError):
    """Error returned by a repository operation."""

    def __init__(self, message: str, *, code: str = "repo-error") -> None:
        super().__init__(message, code=code)


class NotFoundError(RepoError):
    """The operation targeted an id with no row behind it."""

    def __init__(self, entity: str, key: int) -> None:
        super().__init__(f"{entity} {key} not found", code="not-found")
        self.entity = entity
        self.key = key


class BackendError(RepoError):
    """The underlying store failed (connectivity, constraint, serialization)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="backend-error")


class PartialError(RepoError):
    """A multi-step write stopped halfway.

    ``contact_id`` names the contact row that *was* written; its metadata row
    is missing and needs reconciling by the caller.
    """

    def __init__(self, message: str, *, contact_id: int) -> None:
        super().__init__(message, code="partial-failure")
        self.contact_id = contact_id
