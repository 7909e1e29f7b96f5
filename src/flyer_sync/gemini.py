"""Gemini client for flyer event extraction.

Calls the Gemini ``generateContent`` REST endpoint through the resilient
transport, then parses the model's text answer into a list of event dicts.
The model sometimes wraps its JSON in markdown code fences; these are
stripped before parsing.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from typing import Any

import requests
from pydantic import ValidationError

from flyer_sync.exceptions import (
    ExtractionError,
    ExtractionParseError,
    TransportError,
)
from flyer_sync.models.event import EventRecord
from flyer_sync.prompts import DEFAULT_MIME_TYPE, build_extraction_payload
from flyer_sync.transport import DEFAULT_MAX_ATTEMPTS, send

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta"

NO_STRUCTURED_DATA_MESSAGE = (
    "AI did not return structured data. Please ensure the image text is clear."
)
PARSE_FAILURE_MESSAGE = "Failed to parse AI response into a structured JSON list."

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```$")


class GeminiExtractor:
    """Extracts event data from flyer images via Google Gemini.

    Args:
        api_key: Google Gemini API key.
        model: Model identifier.  Defaults to ``"gemini-2.5-flash"``.
        endpoint: Base URL of the Generative Language REST API.
        max_attempts: Attempts per request passed to the transport.
        session: Optional :class:`requests.Session` for connection reuse.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        endpoint: str = DEFAULT_ENDPOINT,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        session: requests.Session | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._endpoint = endpoint.rstrip("/")
        self._max_attempts = max_attempts
        self._session = session

    @property
    def url(self) -> str:
        """Full ``generateContent`` URL for the configured model."""
        return f"{self._endpoint}/models/{self._model}:generateContent"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def extract(
        self,
        image_bytes: bytes,
        mime_type: str = DEFAULT_MIME_TYPE,
    ) -> list[dict[str, Any]]:
        """Extract event dicts from a flyer image.

        Args:
            image_bytes: Raw image file contents.
            mime_type: MIME type of the image.

        Returns:
            The parsed JSON array, element for element as the model
            returned it.  Assigning ids and statuses is left to
            :func:`build_event_records`.

        Raises:
            ExtractionError: If the Gemini call fails after retries.
            ExtractionParseError: If the response carries no text payload
                or the text is not a JSON list.
        """
        payload = build_extraction_payload(image_bytes, mime_type)
        logger.info(
            "Requesting event extraction from %s (%d byte image)",
            self._model,
            len(image_bytes),
        )

        body = self._call_api(payload)
        raw_text = extract_response_text(body)
        logger.debug("Raw AI response:\n%s", raw_text)

        events = parse_events_text(raw_text)
        logger.info("AI returned %d event(s)", len(events))
        return events

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _call_api(self, payload: dict) -> Any:
        """POST *payload* to Gemini and return the decoded JSON body.

        Raises:
            ExtractionError: On transport failures or a non-JSON body.
        """
        try:
            response = send(
                "POST",
                self.url,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "x-goog-api-key": self._api_key,
                },
                max_attempts=self._max_attempts,
                session=self._session,
            )
        except TransportError as exc:
            logger.error("Gemini API error: %s", exc)
            raise ExtractionError(f"Gemini API call failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise ExtractionParseError(
                NO_STRUCTURED_DATA_MESSAGE, raw_response=response.text
            ) from exc


# ---------------------------------------------------------------------------
# Response parsing
# ---------------------------------------------------------------------------


def extract_response_text(body: Any) -> str:
    """Return ``candidates[0].content.parts[0].text`` from a Gemini response.

    Raises:
        ExtractionParseError: If any step of the path is missing or the
            text is empty.
    """
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = None

    if not isinstance(text, str) or not text.strip():
        logger.error("AI response has no text payload: %s", body)
        raise ExtractionParseError(NO_STRUCTURED_DATA_MESSAGE)
    return text


def strip_code_fences(text: str) -> str:
    """Remove a leading ```` ```json ```` fence and a trailing ```` ``` ````."""
    cleaned = _LEADING_FENCE.sub("", text.strip())
    cleaned = _TRAILING_FENCE.sub("", cleaned)
    return cleaned.strip()


def parse_events_text(raw_text: str) -> list[dict[str, Any]]:
    """Parse the model's text answer into a list of event dicts.

    Args:
        raw_text: The text payload, possibly wrapped in code fences.

    Returns:
        The decoded JSON array.

    Raises:
        ExtractionParseError: If the text is not valid JSON or does not
            decode to a list.  The raw text is logged and attached to the
            error.
    """
    cleaned = strip_code_fences(raw_text)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.error("Failed to parse AI response: %s", raw_text)
        raise ExtractionParseError(PARSE_FAILURE_MESSAGE, raw_response=raw_text) from exc

    if not isinstance(data, list):
        logger.error("AI response is not a JSON list: %s", raw_text)
        raise ExtractionParseError(PARSE_FAILURE_MESSAGE, raw_response=raw_text)
    return data


def build_event_records(raw_events: Iterable[Any]) -> list[EventRecord]:
    """Turn parsed AI elements into fresh ``Ready to Sync`` records.

    All elements are validated before any record is returned, so a single
    malformed element rejects the whole batch.

    Raises:
        ExtractionParseError: If any element is not a valid event.
    """
    records: list[EventRecord] = []
    for index, element in enumerate(raw_events):
        if not isinstance(element, dict):
            raise ExtractionParseError(
                f"{PARSE_FAILURE_MESSAGE} Element {index} is not an object.",
                raw_response=repr(element),
            )
        try:
            records.append(EventRecord.from_extracted(element))
        except ValidationError as exc:
            logger.error("Invalid event at index %d: %s", index, exc)
            raise ExtractionParseError(
                f"{PARSE_FAILURE_MESSAGE} Element {index} is invalid: "
                f"{exc.error_count()} validation error(s).",
                raw_response=json.dumps(element, default=str),
            ) from exc
    return records
