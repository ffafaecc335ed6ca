"""In-memory snapshot of the most recent poll.

The store holds one immutable :class:`NodeSnapshot`.  Writers swap it out
wholesale under a lock; readers get a copy, so a reader can never see a new
node list paired with an old timestamp or error.

Usage::

    store = SnapshotStore()
    store.set(["1.1.1.1 带宽:250M"], datetime.now().astimezone())
    snap = store.snapshot()
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class NodeSnapshot:
    nodes: Tuple[str, ...] = ()
    updated_at: Optional[datetime] = None
    last_error: str = ""

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------
    @property
    def count(self) -> int:
        return len(self.nodes)

    def node_list(self) -> List[str]:
        """Return the nodes as a fresh list the caller may mutate."""
        return list(self.nodes)

    def updated_at_iso(self) -> str:
        """ISO-8601 timestamp of the last poll, or ``""`` before the first one."""
        if self.updated_at is None:
            return ""
        return self.updated_at.isoformat(timespec="seconds")


class SnapshotStore:
    """Thread-safe holder for the current :class:`NodeSnapshot`."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot = NodeSnapshot()

    def set(
        self,
        nodes: Iterable[str],
        updated_at: datetime,
        error: Optional[str] = None,
    ) -> NodeSnapshot:
        """Replace nodes, timestamp and error together."""
        snap = NodeSnapshot(
            nodes=tuple(nodes),
            updated_at=updated_at,
            last_error=error or "",
        )
        with self._lock:
            self._snapshot = snap
        return snap

    def record_error(self, error: str, updated_at: datetime) -> NodeSnapshot:
        """Mark the latest poll as failed, keeping the previous node list."""
        with self._lock:
            self._snapshot = replace(
                self._snapshot, updated_at=updated_at, last_error=error
            )
            return self._snapshot

    def snapshot(self) -> NodeSnapshot:
        """Return a copy of the current snapshot."""
        with self._lock:
            return replace(self._snapshot)
