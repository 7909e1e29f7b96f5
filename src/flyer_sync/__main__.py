"""Entry point for ``python -m flyer_sync``.

Accepts a flyer image, extracts its events with Gemini, and syncs them to
the calendar proxy.  Uses stdlib :mod:`argparse` for argument parsing.

Exit codes:
    0 -- Pipeline completed (including extraction or per-event failures,
         which are reported in the output).
    1 -- An error occurred (file not found, unreadable, config error).
    2 -- Argument parsing error (handled by argparse).
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

from flyer_sync.config import ConfigError, load_settings
from flyer_sync.demo_output import print_pipeline_result
from flyer_sync.log import setup_logging
from flyer_sync.pipeline import run_pipeline


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="flyer-sync",
        description="Extract events from a flyer image and sync them to the calendar.",
    )
    parser.add_argument(
        "image_file",
        type=str,
        help="Path to the flyer or schedule image.",
    )
    parser.add_argument(
        "--contacts",
        type=str,
        default=None,
        help="JSON contact list (overrides CONTACTS_PATH from config).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Extract events but skip calendar sync.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the flyer-sync CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``
            when ``None`` (the normal case).

    Returns:
        Exit code: ``0`` on success, ``1`` on error.
    """
    args = build_parser().parse_args(argv)

    # --- Load configuration -------------------------------------------
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.contacts is not None:
        settings = dataclasses.replace(settings, contacts_path=Path(args.contacts))

    log_level = "DEBUG" if args.verbose else settings.log_level
    try:
        setup_logging(log_level)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    # --- Validate image file ------------------------------------------
    image_path = Path(args.image_file)
    if not image_path.exists():
        print(f"Error: File not found: {image_path}", file=sys.stderr)
        return 1
    if not image_path.is_file():
        print(f"Error: Not a file: {image_path}", file=sys.stderr)
        return 1

    # --- Run pipeline -------------------------------------------------
    try:
        result = run_pipeline(image_path, settings, dry_run=args.dry_run)
    except (FileNotFoundError, PermissionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print_pipeline_result(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
