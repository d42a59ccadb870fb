"""
Integrations layer.
This package contains all code used to talk to TheMealDB:
- the transport (one HTTP GET per call, or a local stub)
- contracts for the catalog and recipe payloads
- fetch-and-normalize services built on the transport

Key rule:
- Callers MUST NOT call TheMealDB directly.
- They go through CatalogFetcher / RecipeFetcher, which take a TransportClient.
- We use the local stub transport in tests and offline runs, and HttpTransport
  otherwise.
"""

from .contracts.catalog import DessertSummary, RawCatalogEntry, RawCatalogPayload
from .contracts.errors import (
    CatalogIntegrationError,
    DecodeError,
    InvalidURL,
    NoData,
    NotFound,
    TransportError,
)
from .contracts.interfaces import CatalogObserver, TransportClient
from .contracts.recipe import RawRecipeMeal, RawRecipePayload, Recipe
from .policy.catalog_service import CatalogFetcher, build_catalog_url
from .policy.recipe_service import RecipeFetcher, build_lookup_url
from .policy.response_wrappers import decode_catalog_payload, decode_recipe_payload, normalize_recipe

__all__ = [
    # contracts
    "DessertSummary", "RawCatalogEntry", "RawCatalogPayload",
    "RawRecipeMeal", "RawRecipePayload", "Recipe",
    "CatalogObserver", "TransportClient",
    # errors
    "CatalogIntegrationError", "DecodeError", "InvalidURL", "NoData",
    "NotFound", "TransportError",
    # services
    "CatalogFetcher", "RecipeFetcher", "build_catalog_url", "build_lookup_url",
    "decode_catalog_payload", "decode_recipe_payload", "normalize_recipe",
]
