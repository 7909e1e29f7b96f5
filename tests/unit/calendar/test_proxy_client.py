"""Tests for the page-creation proxy client."""

from __future__ import annotations

from unittest.mock import MagicMock

import requests
import responses
from responses import matchers

from flyer_sync.calendar.client import PageProxyClient
from flyer_sync.models.result import Err, ErrorKind, Ok

_PROXY = "https://proxy.example.com/api/notion-event-creator"
_PAYLOAD = {
    "subject": "A: Venue",
    "date": "2025-05-01",
    "location": "Venue, City, ST",
    "description": "notes",
}


class TestCreatePage:
    @responses.activate
    def test_success_returns_page_id(self, no_sleep: MagicMock) -> None:
        responses.add(
            responses.POST,
            _PROXY,
            json={"notionPageId": "abcdef1234567890"},
            status=200,
            match=[matchers.json_params_matcher(_PAYLOAD)],
        )

        outcome = PageProxyClient(_PROXY).create_page(_PAYLOAD)

        assert outcome == Ok("abcdef1234567890")

    @responses.activate
    def test_success_without_page_id(self, no_sleep: MagicMock) -> None:
        responses.add(responses.POST, _PROXY, json={}, status=200)

        assert PageProxyClient(_PROXY).create_page(_PAYLOAD) == Ok(None)

    @responses.activate
    def test_success_with_unreadable_body(self, no_sleep: MagicMock) -> None:
        responses.add(responses.POST, _PROXY, body="OK", status=200)

        outcome = PageProxyClient(_PROXY).create_page(_PAYLOAD)

        assert isinstance(outcome, Err)
        assert outcome.kind is ErrorKind.SYNC_ITEM

    @responses.activate
    def test_client_error(self, no_sleep: MagicMock) -> None:
        responses.add(responses.POST, _PROXY, json={"message": "bad id"}, status=404)

        assert PageProxyClient(_PROXY).create_page(_PAYLOAD) == Err(ErrorKind.CLIENT, "bad id")
        assert len(responses.calls) == 1

    @responses.activate
    def test_server_error_exhausted(self, no_sleep: MagicMock) -> None:
        for _ in range(2):
            responses.add(responses.POST, _PROXY, status=500)

        outcome = PageProxyClient(_PROXY, max_attempts=2).create_page(_PAYLOAD)

        assert outcome == Err(ErrorKind.SERVER, "HTTP error! status: 500")
        assert len(responses.calls) == 2

    @responses.activate
    def test_network_error(self, no_sleep: MagicMock) -> None:
        responses.add(responses.POST, _PROXY, body=requests.ConnectionError("down"))

        outcome = PageProxyClient(_PROXY, max_attempts=1).create_page(_PAYLOAD)

        assert isinstance(outcome, Err)
        assert outcome.kind is ErrorKind.NETWORK
