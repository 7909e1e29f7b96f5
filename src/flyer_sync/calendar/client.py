"""Client for the page-creation proxy in front of the Notion calendar.

Provides :class:`PageProxyClient`, which posts one page per call through
the resilient transport and reports the outcome as a tagged
:data:`~flyer_sync.models.result.Result` instead of raising.
"""

from __future__ import annotations

import logging

import requests

from flyer_sync.exceptions import ClientError, NetworkError, ServerError, TransportError
from flyer_sync.models.result import Err, ErrorKind, Ok, Result
from flyer_sync.transport import DEFAULT_MAX_ATTEMPTS, send

logger = logging.getLogger(__name__)

# Key of the created page's identifier in the proxy's success body.
_PAGE_ID_KEY = "notionPageId"


class PageProxyClient:
    """Creates calendar pages through the proxy endpoint.

    Args:
        proxy_url: URL of the proxy's page-creation endpoint.
        max_attempts: Attempts per page passed to the transport.
        session: Optional :class:`requests.Session`.  Pass one here to
            reuse connections across a batch.
    """

    def __init__(
        self,
        proxy_url: str,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        session: requests.Session | None = None,
    ) -> None:
        self._proxy_url = proxy_url
        self._max_attempts = max_attempts
        self._session = session

    def create_page(self, payload: dict) -> Result[str | None]:
        """Create one calendar page.

        Args:
            payload: Request body from
                :func:`~flyer_sync.calendar.page_mapper.build_page_payload`.

        Returns:
            ``Ok(page_id)`` on success (``page_id`` may be ``None`` if the
            proxy omitted it), or ``Err(kind, detail)`` on failure.
        """
        try:
            response = send(
                "POST",
                self._proxy_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                max_attempts=self._max_attempts,
                session=self._session,
            )
        except TransportError as exc:
            return Err(_error_kind(exc), str(exc))

        try:
            body = response.json()
        except ValueError:
            logger.error(
                "Proxy returned a non-JSON body for '%s'", payload.get("subject", "?")
            )
            return Err(ErrorKind.SYNC_ITEM, "Proxy returned an unreadable response.")

        page_id = body.get(_PAGE_ID_KEY) if isinstance(body, dict) else None
        if page_id is None:
            logger.warning(
                "Proxy response for '%s' has no %s",
                payload.get("subject", "?"),
                _PAGE_ID_KEY,
            )
        else:
            page_id = str(page_id)
            logger.info("Created page '%s' (id=%s)", payload.get("subject", "?"), page_id)
        return Ok(page_id)


def _error_kind(exc: TransportError) -> ErrorKind:
    if isinstance(exc, ClientError):
        return ErrorKind.CLIENT
    if isinstance(exc, NetworkError):
        return ErrorKind.NETWORK
    if isinstance(exc, ServerError):
        return ErrorKind.SERVER
    return ErrorKind.SYNC_ITEM
