"""Map event records to the page-creation proxy request body.

The proxy expects::

    {"subject": str, "date": "YYYY-MM-DD", "location": str, "description": str}

``subject`` is ``"<main artist>: <venue>"`` where the venue is the part of
``location`` before the first comma.
"""

from __future__ import annotations

from flyer_sync.calendar.description import compose_description
from flyer_sync.contacts import ContactResolver
from flyer_sync.models.event import EventRecord


def venue_name(location: str) -> str:
    """Return the venue part of a ``"Venue, City, State"`` location.

    A location without a comma (or with nothing before it) is used whole.
    """
    venue = location.split(",", 1)[0].strip()
    return venue or location.strip()


def build_subject(event: EventRecord) -> str:
    """Return the page title, e.g. ``"Dirt Monkey: Crofoot Ballroom"``."""
    venue = venue_name(event.location)
    if not venue:
        return event.main_artist
    return f"{event.main_artist}: {venue}"


def build_page_payload(event: EventRecord, resolver: ContactResolver) -> dict:
    """Build the proxy request body for *event*.

    ``date`` and ``location`` are passed through verbatim.
    """
    return {
        "subject": build_subject(event),
        "date": event.date,
        "location": event.location,
        "description": compose_description(event, resolver),
    }
