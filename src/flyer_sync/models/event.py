"""Event records and their sync status state machine.

An :class:`EventRecord` is created in the ``Ready to Sync`` state and moves
exactly once, to either ``Success`` or ``Failed``.  Terminal records are
never reprocessed; a failed event has to be resubmitted as a new record.
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from flyer_sync.exceptions import InvalidStatusTransitionError
from flyer_sync.models.extraction import ExtractedEvent


class SyncStatus(str, Enum):
    """Sync state of an :class:`EventRecord`."""

    READY_TO_SYNC = "Ready to Sync"
    SUCCESS = "Success"
    FAILED = "Failed"

    @property
    def is_terminal(self) -> bool:
        return self is not SyncStatus.READY_TO_SYNC


def new_event_id() -> str:
    """Return a collision-resistant record identifier."""
    return uuid.uuid4().hex


class EventRecord(BaseModel):
    """An extracted event held in the in-memory event collection.

    Attributes:
        id: Opaque identifier assigned at extraction time.  Immutable.
        main_artist: Headlining artist.
        full_lineup: Comma-separated lineup; empty means just the main
            artist.
        date: ``YYYY-MM-DD`` string.
        location: ``"Venue, City, State"`` string.
        status: Current :class:`SyncStatus`.
        failure_reason: Reason attached to a ``Failed`` status, else
            ``None``.
        page_id: External page identifier, set only on ``Success``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_event_id, frozen=True)
    main_artist: str = Field(alias="mainArtist", min_length=1)
    full_lineup: str = Field(default="", alias="fullLineup")
    date: str
    location: str = ""
    status: SyncStatus = SyncStatus.READY_TO_SYNC
    failure_reason: str | None = None
    page_id: str | None = Field(default=None, alias="pageId")

    @classmethod
    def from_extracted(cls, data: ExtractedEvent | dict[str, Any]) -> EventRecord:
        """Create a fresh ``Ready to Sync`` record from one AI array element.

        Args:
            data: An :class:`ExtractedEvent` or the raw element dict.

        Returns:
            A new record with a fresh ``id`` and no ``page_id``.

        Raises:
            pydantic.ValidationError: If *data* is a dict that does not
                describe a valid event.
        """
        extracted = (
            data if isinstance(data, ExtractedEvent) else ExtractedEvent.model_validate(data)
        )
        return cls(
            main_artist=extracted.main_artist,
            full_lineup=extracted.full_lineup,
            date=extracted.date,
            location=extracted.location,
        )

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def mark_success(self, page_id: str | None) -> None:
        """Transition ``Ready to Sync -> Success`` and store *page_id*."""
        self._require_ready(SyncStatus.SUCCESS)
        self.status = SyncStatus.SUCCESS
        self.page_id = page_id

    def mark_failed(self, reason: str) -> None:
        """Transition ``Ready to Sync -> Failed(reason)``."""
        self._require_ready(SyncStatus.FAILED)
        self.status = SyncStatus.FAILED
        self.failure_reason = reason

    def _require_ready(self, target: SyncStatus) -> None:
        if self.status is not SyncStatus.READY_TO_SYNC:
            raise InvalidStatusTransitionError(
                f"Event {self.id} cannot move from {self.status.value!r} "
                f"to {target.value!r}"
            )

    # ------------------------------------------------------------------
    # Display helpers
    # ------------------------------------------------------------------

    @property
    def is_pending(self) -> bool:
        return self.status is SyncStatus.READY_TO_SYNC

    @property
    def status_label(self) -> str:
        """Status as shown to the user, e.g. ``"Failed: bad id"``."""
        if self.status is SyncStatus.FAILED and self.failure_reason:
            return f"{self.status.value}: {self.failure_reason}"
        return self.status.value
