"""nodewatch CLI — runs the poller and serves the node list over HTTP.

Usage:
    nodewatch [SOURCE]
    python cli/main.py [SOURCE]

SOURCE overrides the page to poll (default: ``NODEWATCH_SOURCE_URL`` or the
built-in listing URL).  Everything else is configured through environment
variables or ``.env``; see ``nodewatch/config.py``.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from nodewatch.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer
import uvicorn

from nodewatch.api.app import create_app
from nodewatch.config import settings
from nodewatch.log import setup_logging

app = typer.Typer(
    name="nodewatch",
    help="Poll a relay listing page and serve the nodes above the bandwidth threshold.",
    add_completion=False,
)


@app.command()
def serve(
    source: Optional[str] = typer.Argument(
        None, help="Page to poll instead of the configured source URL."
    ),
) -> None:
    """Start the background poller and the read API."""
    setup_logging(settings.log_level)
    url = source or settings.source_url

    typer.echo(f"[nodewatch] Source    : {url}")
    typer.echo(f"[nodewatch] Threshold : {settings.threshold_mbps:g}M")
    typer.echo(f"[nodewatch] Listening : http://{settings.api_host}:{settings.api_port}/nodes")

    uvicorn.run(
        create_app(source_url=url),
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
