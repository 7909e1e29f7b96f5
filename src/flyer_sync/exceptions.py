"""Custom exceptions for the flyer-sync pipeline.

Exception hierarchy::

    FlyerSyncError                    (base for all flyer-sync errors)
    +-- TransportError                (HTTP call failed)
    |   +-- NetworkError              (no response; retryable)
    |   +-- ServerError               (5xx / other non-2xx; retryable)
    |   +-- ClientError               (4xx; terminal)
    +-- ExtractionError               (image could not be turned into events)
    |   +-- ExtractionParseError      (AI output missing or malformed)
    +-- SyncItemError                 (one record failed to sync)
    +-- InvalidStatusTransitionError  (illegal EventRecord status change)
    +-- ContactsFileError             (contact list could not be loaded)
"""

from __future__ import annotations


class FlyerSyncError(Exception):
    """Base exception for all flyer-sync errors."""


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------


class TransportError(FlyerSyncError):
    """Base exception for failed HTTP calls.

    Attributes:
        status_code: HTTP status code of the failing response, or ``None``
            if no response was received.
    """

    retryable: bool = False

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NetworkError(TransportError):
    """Raised when no response was received (connection error, timeout)."""

    retryable = True


class ServerError(TransportError):
    """Raised for 5xx responses and any other non-2xx, non-4xx status."""

    retryable = True


class ClientError(TransportError):
    """Raised for 4xx responses.  Never retried.

    The message is the ``message`` field of the server's JSON error body,
    or a default explanation when the body carries none.
    """


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


class ExtractionError(FlyerSyncError):
    """Raised for unrecoverable extraction failures.

    Covers transport failures while calling the AI service as well as
    unusable responses (see :class:`ExtractionParseError`).  An extraction
    error aborts the whole batch; no partial results are returned.
    """


class ExtractionParseError(ExtractionError):
    """Raised when the AI response has no text payload or is not a JSON list.

    Attributes:
        raw_response: The raw AI output that failed to parse.
    """

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response


# ---------------------------------------------------------------------------
# Sync
# ---------------------------------------------------------------------------


class SyncItemError(FlyerSyncError):
    """Raised when a single event record fails to sync.

    Caught by the sync orchestrator and recorded on the record; it never
    aborts the batch.
    """


class InvalidStatusTransitionError(FlyerSyncError):
    """Raised on a status change other than ``Ready to Sync -> terminal``."""


class ContactsFileError(FlyerSyncError):
    """Raised when a contacts file cannot be read or validated."""
