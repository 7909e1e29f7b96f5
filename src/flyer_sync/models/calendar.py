"""Data models for calendar sync results.

Defines the structured output from the sync orchestrator:

- :class:`SyncResult` -- aggregated outcome of syncing event records to
  the calendar store, including counts and failure details.
"""

from __future__ import annotations

from dataclasses import dataclass, field

NO_EVENTS_MESSAGE = "No events to sync."


@dataclass
class SyncResult:
    """Aggregated result of one sync run.

    Per-record statuses are written onto the records themselves; this
    object only carries the totals.

    Attributes:
        success_count: Number of records that reached ``Success``.
        fail_count: Number of records that reached ``Failed``.
        failures: Details of records that failed to sync.  Each dict
            contains ``"event"`` (record id), ``"artist"`` and ``"error"``
            keys.
        skipped_empty: ``True`` when the run was a no-op because the
            collection was empty.
    """

    success_count: int = 0
    fail_count: int = 0
    failures: list[dict] = field(default_factory=list)
    skipped_empty: bool = False

    @property
    def total_processed(self) -> int:
        """Number of records this run attempted."""
        return self.success_count + self.fail_count

    @property
    def has_failures(self) -> bool:
        """Whether any record failed to sync."""
        return self.fail_count > 0

    @property
    def message(self) -> str:
        """Human-readable summary line."""
        if self.skipped_empty:
            return NO_EVENTS_MESSAGE
        return (
            f"Sync Complete! {self.success_count} events synced successfully, "
            f"{self.fail_count} failed."
        )
