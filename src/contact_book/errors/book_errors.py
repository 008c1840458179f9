"""ContactBookError — base exception class for all contact-book errors."""

from __future__ import annotations


class ContactBookError(Exception):
    """Base error for all contact-book operations.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code string.
    """

    def __init__(self, message: str, *, code: str = "contact-book-error") -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class ValidationError(ContactBookError):
    """Malformed input rejected while building an entity, before any I/O."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="validation-error")


class ConfigError(ContactBookError):
    """Settings that cannot work together, caught before connecting."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="config-error")
