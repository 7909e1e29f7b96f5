"""Tests for the extraction prompt and payload builders."""

from __future__ import annotations

import base64

from flyer_sync.prompts import build_extraction_payload, build_extraction_prompt, encode_image


def test_prompt_names_every_field() -> None:
    prompt = build_extraction_prompt()
    for field in ("mainArtist", "fullLineup", "date", "location", "YYYY-MM-DD"):
        assert field in prompt
    assert "JSON array" in prompt


def test_encode_image_is_unframed_base64() -> None:
    encoded = encode_image(b"\x00\x01binary\xff")

    assert "\n" not in encoded
    assert not encoded.startswith("data:")
    assert base64.b64decode(encoded) == b"\x00\x01binary\xff"


def test_payload_has_text_then_image_part() -> None:
    payload = build_extraction_payload(b"img")

    parts = payload["contents"][0]["parts"]
    assert parts[0] == {"text": build_extraction_prompt()}
    assert parts[1] == {"inlineData": {"mimeType": "image/jpeg", "data": encode_image(b"img")}}
    assert payload["generationConfig"]["responseMimeType"] == "application/json"
