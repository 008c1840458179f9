"""Test doubles for the repository contracts."""

from contact_book.testing.doubles import (
    Call,
    Expectation,
    MockContactRepo,
    MockMetadataRepo,
)

__all__ = ["Call", "Expectation", "MockContactRepo", "MockMetadataRepo"]
