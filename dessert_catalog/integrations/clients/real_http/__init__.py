"""
Real HTTP integration clients.

These clients communicate with TheMealDB over HTTP.

Important:
- Must implement the same TransportClient interface as the mock clients
- Return raw bytes only; decoding happens in integrations/policy

Switching:
The selection of mock vs real transport happens where the fetchers are built
(scripts/run_catalog.py, or the caller's own wiring).
"""

from .transport import HttpTransport, validate_url

__all__ = ["HttpTransport", "validate_url"]
