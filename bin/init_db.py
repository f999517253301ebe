# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Bootstrap script – creates the default admin account and settings row.

The API does the same on every startup, so this is only needed when the
schema is managed with alembic and the data should exist before the first
request:
    alembic upgrade head
    python bin/init_db.py

Reads DATABASE_URL, FIRST_ADMIN_USERNAME and FIRST_ADMIN_PASSWORD from
etc/app.conf.  Running it again is harmless; existing rows are kept.
"""

import sys
import os

# ---------------------------------------------------------------------------
# Path setup so backend modules are importable
# ---------------------------------------------------------------------------
# bin/init_db.py  →  ../  →  project root
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_BACKEND_DIR  = os.path.join(_PROJECT_ROOT, "backend")
if _BACKEND_DIR not in sys.path:
    sys.path.insert(0, _BACKEND_DIR)

from core.config import settings           # noqa: E402
from storage.factory import build_storage  # noqa: E402


def init_db():
    if not settings.database_url:
        print("[init_db] DATABASE_URL not set in etc/app.conf – the in-memory store needs no bootstrap.")
        return

    storage = build_storage(settings)
    storage.initialize_database(settings.first_admin_username, settings.first_admin_password)
    print(f"[init_db] Database ready (admin account '{settings.first_admin_username}' or an existing admin).")


if __name__ == "__main__":
    init_db()
