"""Error sink for fetch failures that must not propagate (catalog refresh)."""
from typing import Any, Dict, Optional
import logging

from dessert_catalog.integrations.contracts.errors import (
    CatalogIntegrationError,
    DecodeError,
    InvalidURL,
    NoData,
    NotFound,
    TransportError,
)

logger = logging.getLogger(__name__)

_KINDS = (
    (InvalidURL, "invalid_url", "The catalog address is misconfigured."),
    (TransportError, "transport", "We couldn't reach the recipe catalog. Please try again later."),
    (NoData, "no_data", "The recipe catalog returned an empty response."),
    (DecodeError, "decode", "The recipe catalog returned data we couldn't read."),
    (NotFound, "not_found", "We couldn't find that recipe."),
)


def error_kind(exc: BaseException) -> str:
    for exc_type, kind, _ in _KINDS:
        if isinstance(exc, exc_type):
            return kind
    return "internal"


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        kind = error_kind(exc)
        if isinstance(exc, CatalogIntegrationError):
            logger.error("Catalog integration failure (%s): %s", kind, exc)
        else:
            logger.error("Unhandled exception in catalog pipeline: %s", exc, exc_info=exc)
        message = next(
            (text for _, k, text in _KINDS if k == kind),
            "An internal error occurred while loading recipes. Please try again later.",
        )
        return {
            "message": message,
            "kind": kind,
            "fallback": True,
            "metadata": {"error": str(exc), "context": context or {}},
        }
