"""
Mock integration clients.

These clients return canned (but realistic) TheMealDB responses without
calling any external API. They are used when:
- tests need deterministic payloads and a record of issued requests
- the demo script runs with --offline

Important:
- Mock clients must follow the SAME TransportClient interface as the real one.
"""

from .local_catalog import LocalCatalogTransport

__all__ = ["LocalCatalogTransport"]
