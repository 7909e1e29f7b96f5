"""Artist contact lookup.

The sync orchestrator only depends on the :class:`ContactResolver`
protocol.  :class:`LocalContactResolver` is a best-effort implementation
backed by an in-memory contact table, typically loaded from a JSON file
with :func:`load_contacts`.  Hosts with a secured contact store inject
their own resolver instead.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from flyer_sync.exceptions import ContactsFileError
from flyer_sync.models.contact import PLACEHOLDER_CONTACT, ContactRecord

logger = logging.getLogger(__name__)

_CONTACT_LIST = TypeAdapter(list[ContactRecord])


class ContactResolver(Protocol):
    """Anything that can map an artist name to a contact record."""

    def resolve(self, artist_name: str) -> ContactRecord:
        """Return the contact for *artist_name*; never ``None``."""
        ...


class LocalContactResolver:
    """Case-insensitive lookup over a locally held contact table.

    Misses return :data:`PLACEHOLDER_CONTACT`.  When the table lists the
    same artist twice, the first entry wins.

    Args:
        contacts: Contact records to index.
    """

    def __init__(self, contacts: Iterable[ContactRecord] = ()) -> None:
        self._by_artist: dict[str, ContactRecord] = {}
        for contact in contacts:
            self._by_artist.setdefault(_key(contact.artist), contact)

    def __len__(self) -> int:
        return len(self._by_artist)

    def resolve(self, artist_name: str) -> ContactRecord:
        contact = self._by_artist.get(_key(artist_name))
        if contact is None:
            logger.debug("No contact found for '%s', using placeholder", artist_name)
            return PLACEHOLDER_CONTACT
        return contact


def load_contacts(path: Path) -> list[ContactRecord]:
    """Load a JSON array of contact objects from *path*.

    Each object needs an ``artist`` key and may carry ``manager``,
    ``email`` and ``phone``.

    Raises:
        ContactsFileError: If the file cannot be read or does not hold a
            valid contact list.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ContactsFileError(f"Cannot read contacts file {path}: {exc}") from exc

    try:
        contacts = _CONTACT_LIST.validate_json(raw)
    except ValidationError as exc:
        raise ContactsFileError(f"Invalid contacts file {path}: {exc}") from exc

    logger.info("Loaded %d contact(s) from %s", len(contacts), path)
    return contacts


def _key(name: str) -> str:
    return name.strip().casefold()
