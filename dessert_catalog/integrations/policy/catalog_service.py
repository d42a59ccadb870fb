"""
Catalog Service

Fetches the dessert catalog (category filter endpoint) through a
TransportClient and decodes it into DessertSummary values.
"""

import logging
from typing import List, Optional

import httpx

from dessert_catalog.integrations.clients.real_http.transport import validate_url
from dessert_catalog.integrations.contracts.catalog import DessertSummary
from dessert_catalog.integrations.contracts.errors import CatalogIntegrationError
from dessert_catalog.integrations.contracts.interfaces import TransportClient
from dessert_catalog.integrations.policy.response_wrappers import decode_catalog_payload
from dessert_catalog.utils.config_loader import MealDBApiConfig

logger = logging.getLogger(__name__)


def build_catalog_url(api: MealDBApiConfig) -> httpx.URL:
    return validate_url(f"{api.base_url.rstrip('/')}/{api.catalog_path}", params={"c": api.category})


class CatalogFetcher:
    def __init__(self, transport: TransportClient, api: Optional[MealDBApiConfig] = None):
        self.transport = transport
        self.api = api or MealDBApiConfig()

    async def fetch_catalog(self) -> List[DessertSummary]:
        """
        Request the catalog for the configured category.

        Order is the server's; no dedup or sort. A single malformed entry fails
        the whole payload with DecodeError.
        """
        url = build_catalog_url(self.api)
        try:
            body = await self.transport.fetch(str(url))
            desserts = decode_catalog_payload(body)
        except CatalogIntegrationError as e:
            logger.error("Catalog fetch failed for category %s: %s", self.api.category, e)
            raise
        logger.info("Fetched %d catalog entries for category %s", len(desserts), self.api.category)
        return desserts
