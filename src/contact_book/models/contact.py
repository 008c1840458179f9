"""Contact entities — Contact, IndexedContact and the ContactPatch builder."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Self

from contact_book.errors import ValidationError

# Fields a patch may carry, in column order.
PATCH_FIELDS = ("first_name", "last_name", "display_name", "email", "phone_number")


@dataclass(frozen=True)
class Contact:
    """A person in the contact book.

    Build new contacts with :meth:`new`, which validates the raw input.
    The plain constructor does not validate: rows read back from the store
    are rebuilt as-is, even if a patch has written an empty value.
    """

    first_name: str
    last_name: str
    display_name: str
    email: str
    phone_number: str

    @classmethod
    def new(cls, first_name: str, last_name: str, email: str, phone: str) -> Self:
        """Validate raw fields and derive the display name.

        Emptiness is checked on the raw input; nothing is trimmed or
        re-cased.

        Raises:
            ValidationError: If any of the four fields is empty.
        """
        for name, value in (
            ("first_name", first_name),
            ("last_name", last_name),
            ("email", email),
            ("phone_number", phone),
        ):
            if not value:
                raise ValidationError(f"{name} must not be empty")

        return cls(
            first_name=first_name,
            last_name=last_name,
            display_name=f"{first_name} {last_name}",
            email=email,
            phone_number=phone,
        )


@dataclass(frozen=True)
class IndexedContact:
    """A stored contact paired with its store-assigned id."""

    id: int
    contact: Contact


@dataclass(frozen=True)
class ContactPatch:
    """A sparse update to one contact.

    ``None`` marks a field as absent; any string, the empty string included,
    is a value to write. The display name is never recomputed from the name
    fields, so a patch touching only ``first_name`` leaves it stale.
    """

    id: int
    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None
    email: str | None = None
    phone_number: str | None = None

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise ValidationError(f"contact id must be positive, got {self.id}")

    @classmethod
    def new(
        cls,
        id: int,  # noqa: A002
        first_name: str | None = None,
        last_name: str | None = None,
        display_name: str | None = None,
        email: str | None = None,
        phone_number: str | None = None,
    ) -> Self:
        """Build a patch.

        Raises:
            ValidationError: If ``id`` is not positive.
        """
        return cls(
            id=id,
            first_name=first_name,
            last_name=last_name,
            display_name=display_name,
            email=email,
            phone_number=phone_number,
        )

    def changes(self) -> dict[str, str]:
        """Return the present fields only, keyed by column name."""
        return {
            name: value
            for name in PATCH_FIELDS
            if (value := getattr(self, name)) is not None
        }

    @property
    def is_empty(self) -> bool:
        return not self.changes()

    def apply(self, contact: Contact) -> Contact:
        """Merge this patch onto *contact*; absent fields are left untouched."""
        return dataclasses.replace(contact, **self.changes())
