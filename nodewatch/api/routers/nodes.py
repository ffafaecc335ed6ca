"""Node list endpoint.

Routes
------
GET /nodes    Filtered nodes, threshold and status of the most recent poll
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


# ---------------------------------------------------------------------------
# Pydantic schemas
# ---------------------------------------------------------------------------

class NodesResponse(BaseModel):
    count: int
    threshold_m: float
    updated_at: str
    last_error: str
    nodes: list[str]


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

@router.get("", response_model=NodesResponse)
def list_nodes(request: Request) -> dict[str, Any]:
    """Return the snapshot committed by the latest poll.

    ``updated_at`` is an ISO-8601 timestamp, or an empty string when no poll
    has completed yet.  ``last_error`` is empty unless the latest poll failed,
    in which case ``nodes`` still holds the previous successful result.
    """
    snap = request.app.state.store.snapshot()
    return {
        "count": snap.count,
        "threshold_m": request.app.state.poller.threshold_mbps,
        "updated_at": snap.updated_at_iso(),
        "last_error": snap.last_error,
        "nodes": snap.node_list(),
    }
