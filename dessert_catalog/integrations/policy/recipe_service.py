"""
Recipe Service

Looks up a single recipe by id and normalizes the flat slot schema into a
Recipe. NotFound (unknown id) and DecodeError (unreadable body) stay distinct
so callers can tell them apart.
"""

import logging
from typing import Optional

import httpx

from dessert_catalog.integrations.clients.real_http.transport import validate_url
from dessert_catalog.integrations.contracts.errors import CatalogIntegrationError, NotFound
from dessert_catalog.integrations.contracts.interfaces import TransportClient
from dessert_catalog.integrations.contracts.recipe import Recipe
from dessert_catalog.integrations.policy.response_wrappers import DEFAULT_SLOT_COUNT, decode_recipe_payload
from dessert_catalog.utils.config_loader import MealDBApiConfig

logger = logging.getLogger(__name__)


def build_lookup_url(api: MealDBApiConfig, recipe_id: str) -> httpx.URL:
    return validate_url(f"{api.base_url.rstrip('/')}/{api.lookup_path}", params={"i": recipe_id})


class RecipeFetcher:
    def __init__(
        self,
        transport: TransportClient,
        api: Optional[MealDBApiConfig] = None,
        slot_count: int = DEFAULT_SLOT_COUNT,
    ):
        self.transport = transport
        self.api = api or MealDBApiConfig()
        self.slot_count = slot_count

    async def fetch_recipe(self, recipe_id: str) -> Recipe:
        url = build_lookup_url(self.api, recipe_id)
        try:
            body = await self.transport.fetch(str(url))
            recipe = decode_recipe_payload(body, recipe_id, slot_count=self.slot_count)
        except NotFound:
            logger.info("No recipe for id %s", recipe_id)
            raise
        except CatalogIntegrationError as e:
            logger.error("Recipe fetch failed for id %s: %s", recipe_id, e)
            raise
        logger.info("Fetched recipe %s with %d ingredients", recipe_id, len(recipe.ingredients))
        return recipe
