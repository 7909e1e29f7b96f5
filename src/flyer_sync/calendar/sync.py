"""Sync orchestrator for pushing event records to the calendar store.

Provides :func:`sync_events`, which walks the ``Ready to Sync`` records of
an event collection in order and creates one calendar page per record,
strictly one at a time.  Each record's status is updated in place.

Partial failures are handled gracefully -- a single failing record does
not prevent the remaining records from being processed.  Totals are
aggregated into a :class:`~flyer_sync.models.calendar.SyncResult`.
"""

from __future__ import annotations

import logging

from flyer_sync.calendar.client import PageProxyClient
from flyer_sync.calendar.page_mapper import build_page_payload
from flyer_sync.contacts import ContactResolver
from flyer_sync.exceptions import SyncItemError
from flyer_sync.models.calendar import NO_EVENTS_MESSAGE, SyncResult
from flyer_sync.models.event import EventRecord
from flyer_sync.models.result import Err, ErrorKind, Result

logger = logging.getLogger(__name__)


def sync_events(
    records: list[EventRecord],
    client: PageProxyClient,
    resolver: ContactResolver,
) -> SyncResult:
    """Sync every pending record in *records* to the calendar store.

    Records are processed sequentially in collection order; the next page
    is only requested once the previous call has settled.  Records already
    in ``Success`` or ``Failed`` are left untouched.

    Args:
        records: The event collection.  Mutated in place.
        client: Proxy client used to create pages.
        resolver: Contact lookup used to build descriptions.

    Returns:
        A :class:`SyncResult` with success and failure counts.
    """
    result = SyncResult()

    if not records:
        logger.info(NO_EVENTS_MESSAGE)
        result.skipped_empty = True
        return result

    pending = [record for record in records if record.is_pending]
    logger.info("Starting sync of %d pending event(s)", len(pending))

    for record in pending:
        # The same record object may appear twice in the collection.
        if not record.is_pending:
            continue
        logger.info("Syncing: %s on %s...", record.main_artist, record.date)
        outcome = _sync_record(record, client, resolver)

        if outcome.is_ok:
            record.mark_success(outcome.value)
            result.success_count += 1
            continue

        record.mark_failed(outcome.detail)
        result.fail_count += 1
        result.failures.append(
            {
                "event": record.id,
                "artist": record.main_artist,
                "error": outcome.detail,
            }
        )
        logger.error(
            "Sync failed for %s (%s): %s",
            record.main_artist,
            outcome.kind.value,
            outcome.detail,
        )

    logger.info(result.message)
    return result


def _sync_record(
    record: EventRecord,
    client: PageProxyClient,
    resolver: ContactResolver,
) -> Result[str | None]:
    """Build the payload for *record* and create its page.

    Unexpected exceptions (e.g. from a host-supplied resolver) are turned
    into a :class:`SyncItemError` outcome so the batch keeps going.
    """
    try:
        payload = build_page_payload(record, resolver)
        return client.create_page(payload)
    except Exception as exc:
        error = SyncItemError(f"Failed to create page: {exc}")
        logger.exception("Unexpected error syncing %s", record.main_artist)
        return Err(ErrorKind.SYNC_ITEM, str(error))
