"""Prompt and payload builders for the Gemini flyer-extraction call.

The instruction text and the encoded image travel together as two parts of
a single multimodal ``generateContent`` request.
"""

from __future__ import annotations

import base64

DEFAULT_MIME_TYPE = "image/jpeg"

_EXTRACTION_PROMPT = """\
Analyze the events in this image. For each event, extract the main artist, \
the full lineup (all artists listed), the date in YYYY-MM-DD format, and the \
venue/location. Return only a JSON array matching the schema provided below. \
DO NOT include any explanatory text outside the JSON.

Schema:
[
    {
        "mainArtist": "string",
        "fullLineup": "string (comma-separated list of all artists)",
        "date": "YYYY-MM-DD",
        "location": "Venue Name, City, State"
    }
]
"""


def build_extraction_prompt() -> str:
    """Return the instruction sent alongside the flyer image.

    The prompt asks for a bare JSON array whose elements have exactly
    ``mainArtist``, ``fullLineup``, ``date`` and ``location``.
    """
    return _EXTRACTION_PROMPT


def encode_image(image_bytes: bytes) -> str:
    """Base64-encode *image_bytes* as a single unframed ASCII string."""
    return base64.b64encode(image_bytes).decode("ascii")


def build_extraction_payload(
    image_bytes: bytes,
    mime_type: str = DEFAULT_MIME_TYPE,
) -> dict:
    """Build the ``generateContent`` request body for a flyer image.

    Args:
        image_bytes: Raw image file contents.
        mime_type: MIME type of the image.  Defaults to ``"image/jpeg"``.

    Returns:
        A JSON-serialisable ``dict`` with the instruction text part, the
        inline image part, and a JSON response MIME type.
    """
    return {
        "contents": [
            {
                "role": "user",
                "parts": [
                    {"text": build_extraction_prompt()},
                    {
                        "inlineData": {
                            "mimeType": mime_type,
                            "data": encode_image(image_bytes),
                        }
                    },
                ],
            }
        ],
        "generationConfig": {"responseMimeType": "application/json"},
    }
