"""Resilient HTTP transport with bounded retry and exponential backoff.

:func:`send` issues a single logical request and classifies failures:

- **No response** (connection error, timeout): :class:`NetworkError`,
  retried.
- **HTTP 4xx**: :class:`ClientError` carrying the server's ``message``,
  raised immediately (never retried).
- **Any other non-2xx status**: :class:`ServerError`, retried.

Retries back off exponentially (``base_delay * 2**attempt`` seconds, i.e.
1s, 2s, 4s with the defaults).  A retryable failure on the final attempt
is raised to the caller.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

from flyer_sync.exceptions import (
    ClientError,
    NetworkError,
    ServerError,
    TransportError,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3
_DEFAULT_BASE_DELAY = 1.0  # seconds
_DEFAULT_TIMEOUT = 30.0  # seconds, per attempt

DEFAULT_CLIENT_ERROR_MESSAGE = "Check Notion Database/Token access."


def send(
    method: str,
    url: str,
    *,
    json: Any = None,
    headers: dict[str, str] | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    base_delay: float = _DEFAULT_BASE_DELAY,
    timeout: float = _DEFAULT_TIMEOUT,
    session: requests.Session | None = None,
) -> requests.Response:
    """Send an HTTP request, retrying transient failures.

    Args:
        method: HTTP method, e.g. ``"POST"``.
        url: Target URL.
        json: JSON-serialisable request body, or ``None``.
        headers: Extra request headers.
        max_attempts: Total number of attempts (not retries).  Defaults
            to 3.
        base_delay: Initial backoff delay in seconds.  Doubled on each
            subsequent retry.
        timeout: Per-attempt request timeout in seconds.
        session: Optional :class:`requests.Session` to reuse connections.

    Returns:
        The successful (2xx) :class:`requests.Response`, unread.

    Raises:
        ClientError: On any 4xx response.
        NetworkError: If no response was received on the final attempt.
        ServerError: If the final attempt returned another non-2xx status.
        ValueError: If *max_attempts* is less than 1.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    http = session or requests

    for attempt in range(max_attempts):
        try:
            response = _attempt(http, method, url, json=json, headers=headers, timeout=timeout)
        except ClientError as exc:
            logger.error("%s %s failed with HTTP %s: %s", method, url, exc.status_code, exc)
            raise
        except (NetworkError, ServerError) as exc:
            if attempt >= max_attempts - 1:
                logger.error(
                    "%s %s failed after %d attempt(s): %s",
                    method,
                    url,
                    max_attempts,
                    exc,
                )
                raise
            delay = base_delay * (2**attempt)
            logger.warning(
                "%s, retrying in %.1fs (attempt %d/%d)",
                exc,
                delay,
                attempt + 1,
                max_attempts,
            )
            time.sleep(delay)
            continue

        return response

    # Should not be reached, but as a safety net:
    raise TransportError("Retry loop exhausted unexpectedly")  # pragma: no cover


def _attempt(
    http: Any,
    method: str,
    url: str,
    *,
    json: Any,
    headers: dict[str, str] | None,
    timeout: float,
) -> requests.Response:
    """Perform one attempt and raise the classified error on failure."""
    try:
        response = http.request(method, url, json=json, headers=headers, timeout=timeout)
    except (requests.ConnectionError, requests.Timeout) as exc:
        raise NetworkError(f"Network error: {exc}") from exc

    status = response.status_code
    if 200 <= status < 300:
        return response
    if 400 <= status < 500:
        raise ClientError(_client_error_message(response), status_code=status)
    raise ServerError(f"HTTP error! status: {status}", status_code=status)


def _client_error_message(response: requests.Response) -> str:
    """Return the ``message`` field of a JSON error body, or the default."""
    try:
        body = response.json()
    except ValueError:
        return DEFAULT_CLIENT_ERROR_MESSAGE

    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return DEFAULT_CLIENT_ERROR_MESSAGE
