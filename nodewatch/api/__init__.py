"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from nodewatch.api import app

    uvicorn nodewatch.api:app
"""

from nodewatch.api.app import app, create_app

__all__ = ["app", "create_app"]
