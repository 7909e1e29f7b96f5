"""Render the notes block attached to each calendar page.

The description names the main artist and lineup, then lists the
management contact of the main artist and of every other lineup member.
Output depends only on the event and the resolver's answers.
"""

from __future__ import annotations

from flyer_sync.contacts import ContactResolver
from flyer_sync.models.event import EventRecord


def lineup_members(event: EventRecord) -> list[str]:
    """Split ``full_lineup`` on commas, trimming and dropping empty names.

    Falls back to ``[main_artist]`` when the lineup is empty.
    """
    members = [name.strip() for name in event.full_lineup.split(",")]
    members = [name for name in members if name]
    return members or [event.main_artist]


def other_lineup_members(event: EventRecord) -> list[str]:
    """Lineup members other than the main artist, first occurrence only."""
    seen = {event.main_artist.casefold()}
    others: list[str] = []
    for name in lineup_members(event):
        key = name.casefold()
        if key in seen:
            continue
        seen.add(key)
        others.append(name)
    return others


def compose_description(event: EventRecord, resolver: ContactResolver) -> str:
    """Build the page description for *event*.

    Args:
        event: The record being synced.
        resolver: Contact lookup used for every artist named.

    Returns:
        A multi-line notes block ending with a newline.
    """
    main_contact = resolver.resolve(event.main_artist)

    lines = [
        "***TOUR/EVENT NOTES***",
        "",
        f"**Main Artist: {event.main_artist}**",
        f"Full Lineup: {event.full_lineup.strip() or event.main_artist}",
        "",
        "***MANAGEMENT CONTACTS***",
        f"Manager: {main_contact.manager}",
        f"Email: {main_contact.email}",
        f"Phone: {main_contact.phone}",
    ]

    others = other_lineup_members(event)
    if others:
        lines.append("")
        lines.append("***OTHER LINEUP CONTACTS***")
        for artist in others:
            contact = resolver.resolve(artist)
            lines.append(f"- {artist}: {contact.manager} ({contact.email})")

    return "\n".join(lines) + "\n"
