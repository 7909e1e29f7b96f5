"""Console output for the flyer-to-calendar pipeline.

Renders a :class:`~flyer_sync.pipeline.PipelineResult` as a status table
(one row per event record) followed by a summary.  The primary entry point
is :func:`format_pipeline_result`; :func:`print_pipeline_result` writes
the same text to stdout.
"""

from __future__ import annotations

import sys

from flyer_sync.calendar.page_mapper import venue_name
from flyer_sync.models.event import EventRecord
from flyer_sync.pipeline import PipelineResult

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH
_PAGE_ID_PREVIEW = 8


def format_pipeline_result(result: PipelineResult) -> str:
    """Render *result* as a multi-line string ready for console display."""
    lines: list[str] = [_SEPARATOR, "  FLYER SCHEDULE SYNC", _SEPARATOR, ""]
    lines.append(f"  Image: {result.image_path}")
    lines.append(f"  Extracted: {len(result.extracted)} event(s)")

    lines.append("")
    if result.events:
        lines.extend(format_event_table(result.events))
    else:
        lines.append("  No events on the board.")

    lines.append("")
    lines.append("--- SUMMARY ---")
    if result.dry_run:
        lines.append("  Dry run: calendar sync skipped.")
    elif result.sync_result is not None:
        lines.append(f"  {result.sync_result.message}")
        for failure in result.sync_result.failures:
            lines.append(f"  [FAIL] {failure['artist']}: {failure['error']}")

    for warning in result.warnings:
        lines.append(f"  Warning: {warning}")
    lines.append(f"  Duration: {result.duration_seconds:.1f}s")
    lines.append(_SEPARATOR)

    return "\n".join(lines)


def format_event_table(events: list[EventRecord]) -> list[str]:
    """Return table lines with Subject, Date, Venue and Status columns."""
    rows = [("Subject", "Date", "Venue", "Status")]
    rows.extend(
        (
            f"{event.main_artist} - {venue_name(event.location)}",
            event.date,
            event.location,
            _status_cell(event),
        )
        for event in events
    )

    widths = [max(len(row[col]) for row in rows) for col in range(3)]
    lines = []
    for subject, date, venue, status in rows:
        lines.append(
            f"  {subject:<{widths[0]}}  {date:<{widths[1]}}  "
            f"{venue:<{widths[2]}}  {status}".rstrip()
        )
    return lines


def print_pipeline_result(result: PipelineResult) -> None:
    """Format and print a :class:`PipelineResult` to stdout."""
    sys.stdout.write(format_pipeline_result(result) + "\n")


def _status_cell(event: EventRecord) -> str:
    if event.page_id:
        return f"{event.status_label} (ID: {event.page_id[:_PAGE_ID_PREVIEW]}...)"
    return event.status_label
