"""
Local Catalog Transport (Mock/Local).

Purpose:
- Serves canned TheMealDB responses without calling the network.
- Records every URL it is asked for, so callers can assert how many requests
  were issued (including none at all).

Usage:
- Tests wire it into CatalogFetcher / RecipeFetcher in place of HttpTransport.
- scripts/run_catalog.py --offline serves the sample payloads in data/.

Swap:
Replace with clients/real_http/transport.HttpTransport to talk to the live API.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import httpx

from dessert_catalog.integrations.contracts.errors import InvalidURL, NoData, TransportError
from dessert_catalog.integrations.contracts.interfaces import TransportClient
from dessert_catalog.integrations.clients.real_http.transport import validate_url
from dessert_catalog.integrations.policy.catalog_service import build_catalog_url
from dessert_catalog.integrations.policy.recipe_service import build_lookup_url
from dessert_catalog.utils.config_loader import MealDBApiConfig

logger = logging.getLogger(__name__)

Body = Union[bytes, str, Dict[str, Any], BaseException]


class LocalCatalogTransport(TransportClient):
    """
    Transport stub keyed by request URL.

    Route values may be bytes, text, a JSON-serialisable dict, or an exception
    instance to raise as the transport failure. Unknown URLs behave like an
    HTTP 404.
    """

    def __init__(self, routes: Optional[Dict[str, Body]] = None) -> None:
        self.routes: Dict[str, Body] = {}
        self.calls: List[str] = []
        for url, body in (routes or {}).items():
            self.add_route(url, body)

    def add_route(self, url: str, body: Body) -> None:
        self.routes[str(validate_url(url))] = body

    async def fetch(self, url: str) -> bytes:
        key = str(validate_url(url))
        self.calls.append(key)
        logger.info("[MOCK] GET %s", key)

        if key not in self.routes:
            request = httpx.Request("GET", key)
            response = httpx.Response(404, request=request)
            cause = httpx.HTTPStatusError("Not Found", request=request, response=response)
            raise TransportError(cause, url=url, status_code=404)

        body = self.routes[key]
        if isinstance(body, (InvalidURL, TransportError, NoData)):
            raise body
        if isinstance(body, BaseException):
            raise TransportError(body, url=url)
        if isinstance(body, dict):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        if not body:
            raise NoData(url)
        return body

    @classmethod
    def from_directory(cls, data_dir: Path, api: Optional[MealDBApiConfig] = None) -> "LocalCatalogTransport":
        """
        Build routes from a directory of sample payloads.

        ``catalog.json`` answers the category filter; ``lookup_<id>.json``
        answers the lookup for ``<id>``.
        """
        api = api or MealDBApiConfig()
        transport = cls()
        catalog_file = data_dir / "catalog.json"
        if catalog_file.exists():
            transport.add_route(str(build_catalog_url(api)), catalog_file.read_bytes())
        for lookup_file in sorted(data_dir.glob("lookup_*.json")):
            recipe_id = lookup_file.stem[len("lookup_"):]
            transport.add_route(str(build_lookup_url(api, recipe_id)), lookup_file.read_bytes())
        return transport
