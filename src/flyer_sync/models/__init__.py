"""Data models for flyer-sync."""

from __future__ import annotations

from flyer_sync.models.calendar import SyncResult
from flyer_sync.models.contact import PLACEHOLDER_CONTACT, ContactRecord
from flyer_sync.models.event import EventRecord, SyncStatus
from flyer_sync.models.extraction import ExtractedEvent
from flyer_sync.models.result import Err, ErrorKind, Ok, Result

__all__ = [
    "PLACEHOLDER_CONTACT",
    "ContactRecord",
    "Err",
    "ErrorKind",
    "EventRecord",
    "ExtractedEvent",
    "Ok",
    "Result",
    "SyncResult",
    "SyncStatus",
]
