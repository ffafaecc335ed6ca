"""FastAPI application factory.

Lifespan
--------
On startup the app creates the shared :class:`~nodewatch.store.SnapshotStore`
(available to every request as ``request.app.state.store``) and, unless told
otherwise, starts the background :class:`~nodewatch.poller.Poller`.  On
shutdown it stops the poller.

Routers
-------
    /nodes     — the filtered node list from the most recent poll
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from nodewatch import __version__
from nodewatch.config import settings
from nodewatch.poller import Poller
from nodewatch.store import SnapshotStore

from nodewatch.api.routers import nodes as nodes_router


def create_app(
    source_url: Optional[str] = None,
    start_poller: bool = True,
) -> FastAPI:
    """Return a fully-configured FastAPI application instance.

    Args:
        source_url: Page to poll.  Defaults to ``settings.source_url``.
        start_poller: Set to ``False`` to serve the store without polling
            (tests populate ``app.state.store`` themselves).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Create the store and run the poller for the app's lifetime."""
        store = SnapshotStore()
        poller = Poller(
            store,
            source_url=source_url or settings.source_url,
            threshold_mbps=settings.threshold_mbps,
            interval=settings.poll_interval,
        )
        app.state.store = store
        app.state.poller = poller
        if start_poller:
            poller.start()
        try:
            yield
        finally:
            if start_poller:
                # join() blocks, so it runs off the event loop.
                await asyncio.to_thread(poller.stop)

    app = FastAPI(
        title="nodewatch API",
        description=(
            "Read-only view of the relay nodes whose advertised bandwidth "
            "exceeds the configured threshold, refreshed periodically from "
            "the source page."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(nodes_router.router, prefix="/nodes", tags=["nodes"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn nodewatch.api.app:app
app = create_app()
