"""Contact records used to annotate synced events."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ContactRecord(BaseModel):
    """Management contact for an artist.

    Attributes:
        artist: Artist name; matched case-insensitively.
        manager: Manager's name.
        email: Manager's email address.
        phone: Manager's phone number.
    """

    model_config = ConfigDict(frozen=True)

    artist: str
    manager: str = ""
    email: str = ""
    phone: str = ""


# Returned for artists missing from the contact table.
PLACEHOLDER_CONTACT = ContactRecord(
    artist="",
    manager="[MANAGER NAME HERE]",
    email="[MANAGER EMAIL HERE]",
    phone="[MANAGER PHONE HERE]",
)
