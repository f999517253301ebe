"""
API smoke test on the SQL backend (in-memory SQLite): login with a hashed
password, content round trip, reorder and the category → skills cascade.
"""
import pytest
from fastapi.testclient import TestClient

from main import create_app

from conftest import ADMIN_CREDENTIALS, RecordingMailer, login, make_sql_storage


@pytest.fixture
def sql_client():
    storage = make_sql_storage()
    with TestClient(create_app(storage=storage, mailer=RecordingMailer())) as c:
        yield c
    storage._engine.dispose()


def test_sql_backend_end_to_end(sql_client):
    headers = login(sql_client, **ADMIN_CREDENTIALS)

    a = sql_client.post("/api/projects", json={"title": "A", "technologies": ["Python"]}, headers=headers).json()
    b = sql_client.post("/api/projects", json={"title": "B"}, headers=headers).json()
    assert a["technologies"] == ["Python"]

    resp = sql_client.post("/api/projects/reorder", json={"projectIds": [b["id"], a["id"]]}, headers=headers)
    assert [p["title"] for p in resp.json()] == ["B", "A"]

    category = sql_client.post("/api/skill-categories", json={"name": "Lang", "icon": "code"},
                               headers=headers).json()
    skill = sql_client.post("/api/skills", json={"name": "Python", "level": 95, "categoryId": category["id"]},
                            headers=headers).json()
    sql_client.delete(f"/api/skill-categories/{category['id']}", headers=headers)
    assert sql_client.get(f"/api/skills/{skill['id']}").status_code == 404

    settings = sql_client.put("/api/settings", json={"appearance": "dark"}, headers=headers).json()
    assert settings["appearance"] == "dark"
    assert settings["updatedAt"] is not None


# ---------------------------------------------------------------------------
# Ids beyond the INTEGER column range
# ---------------------------------------------------------------------------

HUGE_ID = 99999999999999999999


def test_sql_out_of_range_ids_are_not_found(sql_client):
    headers = login(sql_client, **ADMIN_CREDENTIALS)

    assert sql_client.get(f"/api/projects/{HUGE_ID}").json() == {"detail": "Project not found"}
    assert sql_client.put(f"/api/projects/{HUGE_ID}", json={"title": "X"}, headers=headers).status_code == 404
    assert sql_client.delete(f"/api/projects/{HUGE_ID}", headers=headers).status_code == 404
    assert sql_client.get(f"/api/projects/{-HUGE_ID}").status_code == 404


def test_sql_out_of_range_category_id(sql_client):
    headers = login(sql_client, **ADMIN_CREDENTIALS)

    resp = sql_client.post("/api/skills", json={"name": "Go", "level": 50, "categoryId": HUGE_ID},
                           headers=headers)

    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "categoryId"
    assert sql_client.get("/api/skills", params={"categoryId": HUGE_ID}).json() == []


def test_sql_out_of_range_reorder_id(sql_client):
    headers = login(sql_client, **ADMIN_CREDENTIALS)

    resp = sql_client.post("/api/projects/reorder", json={"projectIds": [HUGE_ID]}, headers=headers)

    assert resp.status_code == 404
    assert resp.json() == {"detail": f"Project with ID {HUGE_ID} not found"}


def test_display_order_above_column_range_is_400(sql_client):
    headers = login(sql_client, **ADMIN_CREDENTIALS)

    resp = sql_client.post("/api/projects", json={"title": "Far", "displayOrder": 2 ** 31}, headers=headers)

    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "displayOrder"
