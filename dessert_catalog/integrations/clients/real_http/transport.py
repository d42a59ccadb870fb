"""
Real HTTP transport.

Performs exactly one GET per call through httpx and maps every failure onto
the integration error taxonomy. No retries; the timeout comes from config.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from dessert_catalog.integrations.contracts.errors import InvalidURL, NoData, TransportError
from dessert_catalog.integrations.contracts.interfaces import TransportClient

logger = logging.getLogger(__name__)


def validate_url(url: str, params: Optional[Mapping[str, Any]] = None) -> httpx.URL:
    """Parse ``url`` (plus query ``params``) and require an absolute http(s) URL."""
    try:
        parsed = httpx.URL(url, params=params) if params else httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidURL(str(url), str(exc)) from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidURL(str(url), "expected an absolute http(s) URL")
    return parsed


class HttpTransport(TransportClient):
    def __init__(
        self,
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self._client = client

    async def fetch(self, url: str) -> bytes:
        request_url = validate_url(url)
        logger.debug("GET %s", request_url)
        try:
            if self._client is not None:
                response = await self._client.get(request_url)
            else:
                async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                    response = await client.get(request_url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("HTTP %s from %s", e.response.status_code, request_url)
            raise TransportError(e, url=url, status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.warning("Request error connecting to %s: %s", request_url, e)
            raise TransportError(e, url=url) from e

        if not response.content:
            raise NoData(url)
        return response.content
