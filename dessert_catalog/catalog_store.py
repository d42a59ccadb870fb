"""
Catalog store: the last successfully fetched dessert list.

All writes go through one writer task fed by a queue, so the snapshot is only
ever replaced in one place. Readers get an immutable tuple and can never see a
half-written list. Concurrent refreshes are not serialized against each other:
whichever fetch finishes last is applied last.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from dessert_catalog.error_handler import ErrorHandler
from dessert_catalog.integrations.contracts.catalog import DessertSummary
from dessert_catalog.integrations.contracts.interfaces import CatalogObserver
from dessert_catalog.integrations.policy.catalog_service import CatalogFetcher

logger = logging.getLogger(__name__)

ErrorSink = Callable[[Exception, Dict[str, Any]], Any]


class CatalogStore:
    def __init__(self, fetcher: CatalogFetcher, error_sink: Optional[ErrorSink] = None):
        self.fetcher = fetcher
        self.error_sink = error_sink or ErrorHandler().handle_exception
        self._desserts: Tuple[DessertSummary, ...] = ()
        self._observers: List[CatalogObserver] = []
        self._inbox: Optional[asyncio.Queue] = None
        self._writer: Optional[asyncio.Task] = None
        self._in_flight: Set[asyncio.Task] = set()
        self._closed = False

    @property
    def desserts(self) -> Tuple[DessertSummary, ...]:
        """Current snapshot; empty until the first successful refresh."""
        return self._desserts

    def subscribe(self, observer: CatalogObserver) -> Callable[[], None]:
        """Register ``observer`` for new snapshots. Returns an unsubscribe callable."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def refresh(self) -> "asyncio.Task[None]":
        """
        Fetch the catalog in the background and apply it when it arrives.

        Must be called from a running event loop. The returned task completes
        once the new snapshot is applied or the failure has been handed to the
        error sink; it never raises. Once aclose() has started, refresh() is a
        no-op and the fetcher is not called.
        """
        loop = asyncio.get_running_loop()
        if self._closed:
            return loop.create_task(self._skip_refresh())
        self._ensure_writer()
        task = loop.create_task(self._refresh())
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    async def aclose(self) -> None:
        """Wait for in-flight refreshes, then stop the writer."""
        self._closed = True
        if self._in_flight:
            await asyncio.gather(*list(self._in_flight))
        if self._writer is not None:
            writer, self._writer, self._inbox = self._writer, None, None
            writer.cancel()
            try:
                await writer
            except asyncio.CancelledError:
                pass

    async def __aenter__(self) -> "CatalogStore":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # --- internals -----------------------------------------------------------

    def _ensure_writer(self) -> None:
        if self._writer is None or self._writer.done():
            self._inbox = asyncio.Queue()
            self._writer = asyncio.get_running_loop().create_task(self._run_writer())

    async def _refresh(self) -> None:
        try:
            desserts = await self.fetcher.fetch_catalog()
        except Exception as exc:
            self._report(exc)
            return

        inbox = self._inbox
        if inbox is None or self._writer is None or self._writer.done():
            self._report(RuntimeError("catalog store writer is not running"))
            return
        applied = asyncio.get_running_loop().create_future()
        await inbox.put((tuple(desserts), applied))
        await applied

    async def _skip_refresh(self) -> None:
        logger.warning("Refresh requested on a closed catalog store; ignoring")

    async def _run_writer(self) -> None:
        inbox = self._inbox
        while True:
            snapshot, applied = await inbox.get()
            try:
                self._desserts = snapshot
                logger.info("Catalog updated: %d desserts", len(snapshot))
                self._notify(snapshot)
            finally:
                if not applied.done():
                    applied.set_result(None)
                inbox.task_done()

    def _notify(self, snapshot: Tuple[DessertSummary, ...]) -> None:
        for observer in list(self._observers):
            try:
                observer(snapshot)
            except Exception:
                logger.exception("Catalog observer %r failed", observer)

    def _report(self, exc: Exception) -> None:
        try:
            self.error_sink(exc, {"operation": "refresh"})
        except Exception:
            logger.exception("Error sink failed while reporting %r", exc)
