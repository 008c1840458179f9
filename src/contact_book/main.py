"""Interactive front end for the contact book.

    contact-book add                  prompt for a new contact
    contact-book list                 list all contacts
    contact-book show <id>            show one contact
    contact-book edit <id> k=v ...    patch fields (first_name, last_name,
                                      display_name, email, phone_number)
    contact-book delete <id>          delete a contact
    contact-book meta <id>            show a contact's metadata

Settings come from ``CONTACTBOOK_*`` environment variables (see
:mod:`contact_book.config.settings`).
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from contact_book.config.settings import AppConfig
from contact_book.datastore.client import Datastore
from contact_book.db.schema import create_schema
from contact_book.errors import ContactBookError
from contact_book.models import Contact, ContactPatch
from contact_book.models.contact import PATCH_FIELDS
from contact_book.models.timestamps import to_iso
from contact_book.repository import SqlContactRepository, SqlMetadataRepository

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from contact_book.models import IndexedContact
    from contact_book.repository import ContactRepo, MetadataRepo

logger = logging.getLogger(__name__)

USAGE = __doc__ or ""


def _print_contact(item: IndexedContact) -> None:
    c = item.contact
    print(f"[{item.id}] {c.display_name}")
    print(f"    Contact number: {c.phone_number}")
    print(f"    Contact email:  {c.email}")


def _parse_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        msg = f"not a contact id: {raw!r}"
        raise ContactBookError(msg, code="usage") from None


def _parse_edits(pairs: list[str]) -> dict[str, str]:
    edits: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or key not in PATCH_FIELDS:
            msg = f"expected field=value with field in {', '.join(PATCH_FIELDS)}, got {pair!r}"
            raise ContactBookError(msg, code="usage")
        edits[key] = value
    return edits


async def _cmd_add(contacts: ContactRepo, _metadata: MetadataRepo, _args: list[str]) -> None:
    print("Welcome. Below insert the contact information")
    contact = Contact.new(
        input("First name: "),
        input("Last name: "),
        input("Email: "),
        input("Phone: "),
    )
    contact_id = await contacts.create_contact(contact)
    print()
    _print_contact(await contacts.get_contact_by_id(contact_id))


async def _cmd_list(contacts: ContactRepo, _metadata: MetadataRepo, _args: list[str]) -> None:
    items = await contacts.get_all_contacts()
    if not items:
        print("No contacts yet.")
    for item in items:
        _print_contact(item)


async def _cmd_show(contacts: ContactRepo, _metadata: MetadataRepo, args: list[str]) -> None:
    _print_contact(await contacts.get_contact_by_id(_parse_id(args[0])))


async def _cmd_edit(contacts: ContactRepo, _metadata: MetadataRepo, args: list[str]) -> None:
    patch = ContactPatch.new(_parse_id(args[0]), **_parse_edits(args[1:]))
    await contacts.update_contact(patch)
    print("Contact updated")
    _print_contact(await contacts.get_contact_by_id(patch.id))


async def _cmd_delete(contacts: ContactRepo, _metadata: MetadataRepo, args: list[str]) -> None:
    deleted = await contacts.delete_contact_by_id(_parse_id(args[0]))
    print(f"Deleted contact {deleted}")


async def _cmd_meta(_contacts: ContactRepo, metadata: MetadataRepo, args: list[str]) -> None:
    meta = await metadata.get_by_id(_parse_id(args[0]))
    print(f"Contact {meta.contact_id}")
    print(f"    starred:     {meta.starred}")
    print(f"    archived:    {meta.is_archived}")
    print(f"    frequency:   {meta.frequency if meta.frequency is not None else '-'}")
    print(f"    created at:  {to_iso(meta.created_at)}")
    print(f"    updated at:  {to_iso(meta.updated_at)}")


# name -> (handler, number of required positional args)
COMMANDS: dict[str, tuple[Callable[[ContactRepo, MetadataRepo, list[str]], Awaitable[None]], int]] = {
    "add": (_cmd_add, 0),
    "list": (_cmd_list, 0),
    "show": (_cmd_show, 1),
    "edit": (_cmd_edit, 1),
    "delete": (_cmd_delete, 1),
    "meta": (_cmd_meta, 1),
}


async def run(command: str, args: list[str], config: AppConfig) -> None:
    """Open the datastore, run one command against the SQL repositories, close."""
    handler, _ = COMMANDS[command]
    async with Datastore(config.db) as datastore:
        await create_schema(datastore.engine)
        metadata = SqlMetadataRepository(datastore)
        contacts = SqlContactRepository(datastore, metadata)
        await handler(contacts, metadata, args)


def main(argv: list[str] | None = None) -> int:
    """Entry point. Returns the process exit code."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv or argv[0] not in COMMANDS:
        print(USAGE)
        return 1

    command, args = argv[0], argv[1:]
    if len(args) < COMMANDS[command][1]:
        print(USAGE)
        return 1

    config = AppConfig()
    logging.basicConfig(
        level=logging.DEBUG if config.debug else config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        asyncio.run(run(command, args, config))
    except ContactBookError as exc:
        print(f"error: {exc.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
