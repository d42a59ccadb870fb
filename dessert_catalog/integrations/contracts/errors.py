"""
Failure taxonomy shared by the transport, the fetchers and the store.

Every failure is raised to the immediate caller; CatalogStore is the only
place that converts them into an error-sink call.
"""

from __future__ import annotations

from typing import Any, Optional


class CatalogIntegrationError(Exception):
    """Base class for every catalog/recipe integration failure."""


class InvalidURL(CatalogIntegrationError, ValueError):
    def __init__(self, url: str, reason: str = "") -> None:
        message = f"Invalid URL {url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.url = url


class TransportError(CatalogIntegrationError):
    def __init__(self, cause: BaseException, *, url: str = "", status_code: Optional[int] = None) -> None:
        super().__init__(f"Transport failure for {url or 'request'}: {cause}")
        self.cause = cause
        self.url = url
        self.status_code = status_code


class NoData(CatalogIntegrationError):
    def __init__(self, url: str) -> None:
        super().__init__(f"Empty response body from {url}")
        self.url = url


class DecodeError(CatalogIntegrationError):
    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


class NotFound(CatalogIntegrationError):
    def __init__(self, recipe_id: str) -> None:
        super().__init__(f"No recipe found for id {recipe_id!r}")
        self.recipe_id = recipe_id
