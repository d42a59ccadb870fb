from abc import ABC, abstractmethod
from typing import Callable, Sequence

from .catalog import DessertSummary

# Receives each new catalog snapshot after it has been swapped in.
CatalogObserver = Callable[[Sequence[DessertSummary]], None]


# ---------------------------------------------------------------------------
# Abstract transport interface
# ---------------------------------------------------------------------------

class TransportClient(ABC):
    """Every transport used by the fetchers must implement this interface."""

    @abstractmethod
    async def fetch(self, url: str) -> bytes:
        """
        Perform a single GET against ``url`` and return the body.

        Raises InvalidURL, TransportError or NoData. Exactly one outcome per
        call; no retries.
        """
