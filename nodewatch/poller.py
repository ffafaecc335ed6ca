"""Periodic fetch-and-filter task.

``Poller.run_once`` performs one cycle: fetch the source page, filter it,
commit the result to the :class:`~nodewatch.store.SnapshotStore`.  The
background thread started by ``Poller.start`` runs a cycle immediately and
then one every ``interval`` seconds, always waiting for the previous cycle
to finish before the next wait begins.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

import httpx

from nodewatch.scraper import fetch_url, filter_nodes
from nodewatch.scraper.models import RawPage
from nodewatch.store import NodeSnapshot, SnapshotStore

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now().astimezone()


class Poller:
    """Background loop: fetch -> filter -> commit -> wait."""

    def __init__(
        self,
        store: SnapshotStore,
        source_url: str,
        threshold_mbps: float,
        interval: float,
        fetch: Callable[[str], RawPage] = fetch_url,
    ) -> None:
        self._store = store
        self._source_url = source_url
        self._threshold = threshold_mbps
        self._interval = interval
        self._fetch = fetch
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def source_url(self) -> str:
        return self._source_url

    @property
    def threshold_mbps(self) -> float:
        return self._threshold

    # ------------------------------------------------------------------
    # One cycle
    # ------------------------------------------------------------------
    def run_once(self) -> NodeSnapshot:
        """Fetch and filter the source once, then commit the outcome.

        A failed fetch leaves the previous node list in place and records the
        error message; it never raises.
        """
        logger.info("Polling %s", self._source_url)
        try:
            page = self._fetch(self._source_url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            message = f"fetch failed: {exc}"
            logger.error(message)
            return self._store.record_error(message, _now())

        nodes = filter_nodes(page.html, self._threshold)
        snap = self._store.set(nodes, _now())

        if not nodes:
            logger.info("No nodes above %gM", self._threshold)
        else:
            for node in nodes:
                logger.info("  %s", node)
            logger.info("%d node(s) above %gM", len(nodes), self._threshold)
        return snap

    # ------------------------------------------------------------------
    # Background thread
    # ------------------------------------------------------------------
    def _poll(self) -> None:
        """Run one cycle; an unexpected error is logged and recorded, not raised."""
        try:
            self.run_once()
        except Exception as exc:
            logger.exception("Poll of %s failed", self._source_url)
            self._store.record_error(f"poll failed: {exc}", _now())

    def run_forever(self) -> None:
        """Poll until :meth:`stop` is called."""
        self._poll()
        while not self._stop.wait(self._interval):
            self._poll()

    def start(self) -> None:
        """Start the polling thread (no-op if it is already running)."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self.run_forever, name="nodewatch-poller", daemon=True
        )
        self._thread.start()
        logger.info(
            "Poller started: every %gs, threshold %gM", self._interval, self._threshold
        )

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        """Ask the loop to exit and wait up to *timeout* seconds for it.

        An in-flight fetch is not interrupted; the daemon thread is simply
        abandoned if it outlives *timeout*.
        """
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Poller stopped")
