"""Calendar page sync for flyer-sync."""

from __future__ import annotations

from flyer_sync.calendar.client import PageProxyClient
from flyer_sync.calendar.description import compose_description
from flyer_sync.calendar.page_mapper import build_page_payload, venue_name
from flyer_sync.calendar.sync import sync_events

__all__ = [
    "PageProxyClient",
    "build_page_payload",
    "compose_description",
    "sync_events",
    "venue_name",
]
