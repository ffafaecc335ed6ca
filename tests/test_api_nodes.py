"""Tests for the /nodes API endpoint.

Most tests build the app with ``start_poller=False`` and write to
``app.state.store`` directly.  ``TestLifespan`` runs the real poller against a
``respx``-mocked source page.
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from nodewatch.api.app import create_app
from nodewatch.config import settings


_UPDATED = datetime(2026, 10, 19, 8, 30, 0, tzinfo=timezone(timedelta(hours=8)))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def client():
    """Return a TestClient whose lifespan has created an empty store."""
    app = create_app(source_url="https://nodes.example.com/", start_poller=False)
    with TestClient(app, raise_server_exceptions=True) as c:
        yield c


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestListNodes:
    def test_before_first_poll(self, client):
        resp = client.get("/nodes")
        assert resp.status_code == 200
        assert resp.json() == {
            "count": 0,
            "threshold_m": settings.threshold_mbps,
            "updated_at": "",
            "last_error": "",
            "nodes": [],
        }

    def test_after_successful_poll(self, client):
        nodes = ["1.1.1.1 带宽:250M", "3.3.3.3 带宽:0.5G"]
        client.app.state.store.set(nodes, _UPDATED)

        data = client.get("/nodes").json()
        assert data["count"] == 2
        assert data["threshold_m"] == settings.threshold_mbps
        assert data["updated_at"] == "2026-10-19T08:30:00+08:00"
        assert datetime.fromisoformat(data["updated_at"]) == _UPDATED
        assert data["last_error"] == ""
        assert data["nodes"] == nodes

    def test_after_failed_poll_keeps_nodes_and_reports_error(self, client):
        store = client.app.state.store
        store.set(["1.1.1.1 带宽:250M"], _UPDATED)
        store.record_error("fetch failed: timed out", _UPDATED + timedelta(minutes=30))

        data = client.get("/nodes").json()
        assert data["count"] == 1
        assert data["nodes"] == ["1.1.1.1 带宽:250M"]
        assert data["last_error"] == "fetch failed: timed out"
        assert data["updated_at"] == "2026-10-19T09:00:00+08:00"

    def test_poller_configured_from_arguments(self, client):
        poller = client.app.state.poller
        assert poller.source_url == "https://nodes.example.com/"
        assert poller.threshold_mbps == settings.threshold_mbps


class TestLifespan:
    def test_poller_runs_and_stops_with_the_app(self):
        source = "https://nodes.example.com/cloudflare.html"
        app = create_app(source_url=source)

        with respx.mock:
            respx.get(source).mock(
                return_value=httpx.Response(200, text="node-b 带宽:250M\nnode-a 带宽:120M\n")
            )
            with TestClient(app) as c:
                deadline = time.monotonic() + 5
                while c.app.state.store.snapshot().updated_at is None:
                    assert time.monotonic() < deadline, "first poll never committed"
                    time.sleep(0.01)
                data = c.get("/nodes").json()
                poller = c.app.state.poller

        assert data["nodes"] == ["node-b 带宽:250M"]
        assert data["last_error"] == ""
        assert poller._thread is None
