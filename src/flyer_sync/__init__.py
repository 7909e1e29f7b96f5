"""flyer-sync: flyer image to calendar sync.

Extracts event listings from a photographed flyer or tour schedule with
Google Gemini and creates one calendar page per event through a proxy.
"""

from __future__ import annotations

from flyer_sync.calendar import PageProxyClient, compose_description, sync_events
from flyer_sync.contacts import ContactResolver, LocalContactResolver, load_contacts
from flyer_sync.exceptions import (
    ClientError,
    ExtractionError,
    ExtractionParseError,
    NetworkError,
    ServerError,
    SyncItemError,
    TransportError,
)
from flyer_sync.gemini import GeminiExtractor, build_event_records
from flyer_sync.models import (
    ContactRecord,
    EventRecord,
    SyncResult,
    SyncStatus,
)
from flyer_sync.transport import send

__version__ = "0.1.0"

__all__ = [
    "ClientError",
    "ContactRecord",
    "ContactResolver",
    "EventRecord",
    "ExtractionError",
    "ExtractionParseError",
    "GeminiExtractor",
    "LocalContactResolver",
    "NetworkError",
    "PageProxyClient",
    "ServerError",
    "SyncItemError",
    "SyncResult",
    "SyncStatus",
    "TransportError",
    "build_event_records",
    "compose_description",
    "load_contacts",
    "send",
    "sync_events",
]
