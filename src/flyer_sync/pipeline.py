"""Pipeline orchestrator for the flyer-to-calendar workflow.

Wires all components together: image loading, Gemini event extraction,
contact lookup, and sequential calendar sync.  The top-level entry point
is :func:`run_pipeline`, which returns a :class:`PipelineResult` suitable
for rendering by the demo output formatter.
"""

from __future__ import annotations

import logging
import mimetypes
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from flyer_sync.calendar.client import PageProxyClient
from flyer_sync.calendar.sync import sync_events
from flyer_sync.config import Settings
from flyer_sync.contacts import ContactResolver, LocalContactResolver, load_contacts
from flyer_sync.exceptions import ContactsFileError, ExtractionError
from flyer_sync.gemini import GeminiExtractor, build_event_records
from flyer_sync.models.calendar import SyncResult
from flyer_sync.models.event import EventRecord
from flyer_sync.prompts import DEFAULT_MIME_TYPE

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Event collection
# ---------------------------------------------------------------------------


@dataclass
class EventBoard:
    """The in-memory event collection, owned by the host.

    The sync orchestrator receives :attr:`events` by reference and updates
    record statuses in place.
    """

    events: list[EventRecord] = field(default_factory=list)

    def add_extracted(self, raw_events: Iterable[Any]) -> list[EventRecord]:
        """Append records built from one extraction batch.

        The batch is validated as a whole before anything is appended.

        Returns:
            The newly created records.

        Raises:
            ExtractionParseError: If any element is not a valid event.
        """
        records = build_event_records(raw_events)
        self.events.extend(records)
        return records

    @property
    def pending(self) -> list[EventRecord]:
        """Records still waiting to be synced, in collection order."""
        return [event for event in self.events if event.is_pending]


# ---------------------------------------------------------------------------
# Result dataclass
# ---------------------------------------------------------------------------


@dataclass
class PipelineResult:
    """Aggregated result from one pipeline run.

    Attributes:
        image_path: Path to the input flyer image.
        events: Every record on the board after the run (earlier batches
            included).
        extracted: Records created from this run's image.
        sync_result: Sync totals, or ``None`` when sync did not run.
        warnings: Non-fatal problems from any stage.
        duration_seconds: Wall-clock time for the full pipeline.
        dry_run: Whether sync was skipped on request.
    """

    image_path: Path
    events: list[EventRecord] = field(default_factory=list)
    extracted: list[EventRecord] = field(default_factory=list)
    sync_result: SyncResult | None = None
    warnings: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0
    dry_run: bool = False


# ---------------------------------------------------------------------------
# Pipeline entry point
# ---------------------------------------------------------------------------


def run_pipeline(
    image_path: Path,
    settings: Settings,
    board: EventBoard | None = None,
    dry_run: bool = False,
    extractor: GeminiExtractor | None = None,
    client: PageProxyClient | None = None,
    resolver: ContactResolver | None = None,
) -> PipelineResult:
    """Run extraction and sync for one flyer image.

    1. **Extract** -- send the image to Gemini and add the returned
       events to *board*.  An extraction failure is recorded as a warning
       and nothing is added.
    2. **Sync** -- create a calendar page for every pending record on the
       board, one at a time.  Skipped in dry-run mode.

    Args:
        image_path: Path to the flyer image.
        settings: Application :class:`~flyer_sync.config.Settings`.
        board: Event collection to extend.  A fresh one is used if
            ``None``.
        dry_run: If ``True``, extract but do not sync.
        extractor: Override for the Gemini client (useful for testing).
        client: Override for the proxy client (useful for testing).
        resolver: Contact lookup.  Built from ``settings.contacts_path``
            when ``None``.

    Returns:
        A :class:`PipelineResult` with all pipeline outputs.

    Raises:
        FileNotFoundError: If *image_path* does not exist.
        PermissionError: If *image_path* is not readable.
    """
    start_time = time.monotonic()
    board = board if board is not None else EventBoard()
    result = PipelineResult(image_path=image_path, events=board.events, dry_run=dry_run)

    # ------------------------------------------------------------------
    # Stage 1: Extract
    # ------------------------------------------------------------------
    image_bytes = image_path.read_bytes()
    mime_type = _guess_mime_type(image_path)
    logger.info("Stage 1: Analyzing %s (%s)", image_path, mime_type)

    extractor = extractor or GeminiExtractor(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        max_attempts=settings.max_attempts,
    )

    try:
        raw_events = extractor.extract(image_bytes, mime_type=mime_type)
        result.extracted = board.add_extracted(raw_events)
    except ExtractionError as exc:
        msg = f"AI Analysis Failed: {exc}"
        result.warnings.append(msg)
        logger.error(msg)
        result.duration_seconds = time.monotonic() - start_time
        return result

    logger.info("Stage 1 complete: %d event(s) extracted", len(result.extracted))

    # ------------------------------------------------------------------
    # Stage 2: Sync
    # ------------------------------------------------------------------
    if dry_run:
        logger.info("Stage 2: Dry-run mode -- skipping calendar sync")
    else:
        logger.info("Stage 2: Syncing %d pending event(s)", len(board.pending))
        if resolver is None:
            resolver = _build_resolver(settings, result.warnings)
        client = client or PageProxyClient(
            settings.page_proxy_url, max_attempts=settings.max_attempts
        )
        result.sync_result = sync_events(board.events, client, resolver)

    result.duration_seconds = time.monotonic() - start_time
    logger.info("Pipeline complete in %.1fs", result.duration_seconds)
    return result


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _guess_mime_type(image_path: Path) -> str:
    mime_type, _ = mimetypes.guess_type(image_path.name)
    if mime_type is None or not mime_type.startswith("image/"):
        return DEFAULT_MIME_TYPE
    return mime_type


def _build_resolver(settings: Settings, warnings: list[str]) -> LocalContactResolver:
    """Load the configured contact list, falling back to an empty table."""
    if settings.contacts_path is None:
        return LocalContactResolver()

    try:
        return LocalContactResolver(load_contacts(settings.contacts_path))
    except ContactsFileError as exc:
        msg = f"Contacts unavailable, using placeholders: {exc}"
        warnings.append(msg)
        logger.warning(msg)
        return LocalContactResolver()
