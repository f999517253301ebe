"""
Shared fixtures for the portfolio backend tests.

The environment is prepared before any application module is imported:
core.config reads it once, at import time.  No test touches a real database
or mail server – the SQL backend runs on in-memory SQLite and contact-form
submissions go to a recording mailer.

sys.path is configured so 'from storage...' style imports resolve whether
pytest is started from the project root or from backend/.
"""
import os
import sys
from pathlib import Path

_backend_dir = Path(__file__).parent.parent        # .../backend/
if str(_backend_dir) not in sys.path:
    sys.path.insert(0, str(_backend_dir))

os.environ["SECRET_KEY"] = "test-secret-key-0123456789abcdef0123456789abcdef"
os.environ["DATABASE_URL"] = ""
os.environ["SMTP_HOST"] = ""
os.environ["FIRST_ADMIN_USERNAME"] = "admin"
os.environ["FIRST_ADMIN_PASSWORD"] = "admin123"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from contact.mailer import Mailer  # noqa: E402
from database import Base, make_engine  # noqa: E402
from main import create_app  # noqa: E402
from storage.memory import MemStorage  # noqa: E402
from storage.sql import SqlStorage  # noqa: E402

ADMIN_CREDENTIALS = {"username": "admin", "password": "admin123"}


class RecordingMailer(Mailer):
    """Keeps every submission instead of sending it; can be told to fail."""

    def __init__(self, fail: bool = False):
        self.sent = []
        self.fail = fail

    def send(self, message) -> None:
        if self.fail:
            raise ConnectionRefusedError("SMTP server unreachable")
        self.sent.append(message)


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------


def make_sql_storage() -> SqlStorage:
    """A SQL backend on a private in-memory SQLite database, tables created."""
    engine = make_engine("sqlite://")
    Base.metadata.create_all(engine)
    return SqlStorage(engine)


@pytest.fixture(params=["memory", "sqlite"])
def storage(request):
    """Both backends – every storage test runs once per backend."""
    if request.param == "memory":
        yield MemStorage()
        return
    store = make_sql_storage()
    yield store
    store._engine.dispose()


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------


@pytest.fixture
def api_storage():
    return MemStorage()


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def client(api_storage, mailer):
    """TestClient over a fresh app; the startup bootstrap has run on entry."""
    app = create_app(storage=api_storage, mailer=mailer)
    with TestClient(app) as c:
        yield c


def login(client, username: str, password: str) -> dict:
    resp = client.post("/api/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['accessToken']}"}


@pytest.fixture
def admin_headers(client):
    return login(client, **ADMIN_CREDENTIALS)
