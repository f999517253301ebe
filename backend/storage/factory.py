# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Backend selection and the FastAPI dependency that hands routes the storage.

The backend is chosen once, at application start, from the presence of
DATABASE_URL.  Routes never branch on the backend type; they only see the
:class:`storage.base.Storage` contract via ``Depends(get_storage)``.
"""

from fastapi import Request

from core.logger import logger
from storage.base import Storage
from storage.memory import MemStorage


def build_storage(app_settings) -> Storage:
    """Return the SQL backend when a DATABASE_URL is configured, else the in-memory one."""
    if app_settings.database_url:
        # Lazy import: storage.sql pulls in core.security, which imports this module
        from database import make_engine  # noqa: E402
        from storage.sql import SqlStorage  # noqa: E402

        logger.info("Using SQL storage backend")
        return SqlStorage(
            make_engine(app_settings.database_url),
            auto_create_tables=app_settings.auto_create_tables,
        )

    logger.warning("DATABASE_URL not set – using in-memory storage, content will not survive a restart")
    return MemStorage()


def get_storage(request: Request) -> Storage:
    """
    FastAPI dependency.  Returns the storage instance attached to the app by
    ``main.create_app``.  Use with Depends(get_storage).
    """
    return request.app.state.storage
