"""
Content API tests – CRUD over every collection, single-row kinds, the
400 / 404 error shapes and the generic 500 for backend failures.

Runs against the in-memory backend; test_api_sql.py repeats a smoke path on
SQLite.
"""
import pytest
from fastapi.testclient import TestClient

from main import create_app
from storage.memory import MemStorage

from conftest import ADMIN_CREDENTIALS, RecordingMailer, login

# (path, valid create body, patch, field to check after the patch)
COLLECTIONS = [
    ("/api/skill-categories", {"name": "Frontend", "icon": "layout"}, {"icon": "monitor"}, "icon"),
    (
        "/api/education",
        {"degree": "MSc", "institution": "Tech University", "courses": ["ML"]},
        {"institution": "Open University"},
        "institution",
    ),
    (
        "/api/experience",
        {"title": "Engineer", "company": "Acme", "responsibilities": ["APIs"]},
        {"company": "Globex"},
        "company",
    ),
    (
        "/api/projects",
        {"title": "Portfolio", "technologies": ["FastAPI"], "demoLink": "https://demo.example"},
        {"featured": True},
        "featured",
    ),
    (
        "/api/open-source",
        {"title": "Typo fix", "link": "https://github.com/x/y", "linkText": "PR #1"},
        {"linkText": "PR #2"},
        "linkText",
    ),
]


# ---------------------------------------------------------------------------
# Generic CRUD
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("path,body,patch,field", COLLECTIONS)
def test_crud_cycle(client, admin_headers, path, body, patch, field):
    resp = client.post(path, json=body, headers=admin_headers)
    assert resp.status_code == 201, resp.text
    created = resp.json()
    item_id = created["id"]
    assert created["displayOrder"] == 0

    assert client.get(f"{path}/{item_id}").json() == created
    assert client.get(path).json() == [created]

    resp = client.put(f"{path}/{item_id}", json=patch, headers=admin_headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()[field] == patch[field]

    resp = client.delete(f"{path}/{item_id}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    resp = client.get(f"{path}/{item_id}")
    assert resp.status_code == 404


@pytest.mark.parametrize(
    "path,label",
    [
        ("/api/projects", "Project"),
        ("/api/education", "Education item"),
        ("/api/skill-categories", "Skill category"),
        ("/api/skills", "Skill"),
    ],
)
def test_unknown_id_is_404(client, admin_headers, path, label):
    assert client.get(f"{path}/9999").json() == {"detail": f"{label} not found"}
    assert client.put(f"{path}/9999", json={}, headers=admin_headers).status_code == 404
    assert client.delete(f"{path}/9999", headers=admin_headers).status_code == 404


def test_non_numeric_id_is_400(client):
    resp = client.get("/api/projects/abc")

    assert resp.status_code == 400
    body = resp.json()
    assert body["detail"] == "Invalid data format"
    assert body["errors"][0]["field"] == "item_id"


def test_invalid_body_lists_fields(client, admin_headers):
    resp = client.post("/api/projects", json={"technologies": "not-a-list"}, headers=admin_headers)

    assert resp.status_code == 400
    fields = {e["field"] for e in resp.json()["errors"]}
    assert {"title", "technologies"} <= fields


def test_update_rejects_null_required_field(client, admin_headers):
    project_id = client.post("/api/projects", json={"title": "Keep"}, headers=admin_headers).json()["id"]

    resp = client.put(f"/api/projects/{project_id}", json={"title": None}, headers=admin_headers)

    assert resp.status_code == 400
    assert client.get(f"/api/projects/{project_id}").json()["title"] == "Keep"


def test_empty_update_returns_row(client, admin_headers):
    created = client.post("/api/projects", json={"title": "Same"}, headers=admin_headers).json()

    resp = client.put(f"/api/projects/{created['id']}", json={}, headers=admin_headers)

    assert resp.status_code == 200
    assert resp.json() == created


def test_list_sorted_by_display_order(client, admin_headers):
    for title, order in (("Late", 2), ("Early", 0), ("Middle", 1)):
        client.post("/api/experience", json={"title": title, "company": "X", "displayOrder": order},
                    headers=admin_headers)

    titles = [e["title"] for e in client.get("/api/experience").json()]

    assert titles == ["Early", "Middle", "Late"]


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------


def _category(client, headers, name):
    return client.post("/api/skill-categories", json={"name": name, "icon": "box"}, headers=headers).json()


def test_skills_filter_by_category(client, admin_headers):
    web = _category(client, admin_headers, "Web")
    data = _category(client, admin_headers, "Data")
    client.post("/api/skills", json={"name": "HTML", "level": 90, "categoryId": web["id"]}, headers=admin_headers)
    client.post("/api/skills", json={"name": "SQL", "level": 85, "categoryId": data["id"]}, headers=admin_headers)

    assert [s["name"] for s in client.get("/api/skills", params={"categoryId": data["id"]}).json()] == ["SQL"]
    assert len(client.get("/api/skills").json()) == 2


def test_skill_with_unknown_category_is_400(client, admin_headers):
    resp = client.post("/api/skills", json={"name": "Go", "level": 70, "categoryId": 321}, headers=admin_headers)

    assert resp.status_code == 400
    body = resp.json()
    assert body["detail"] == "Invalid data format"
    assert body["errors"] == [{"field": "categoryId", "message": "Skill category with ID 321 not found"}]
    assert client.get("/api/skills").json() == []


def test_skill_level_out_of_range_is_400(client, admin_headers):
    web = _category(client, admin_headers, "Web")

    resp = client.post("/api/skills", json={"name": "CSS", "level": 101, "categoryId": web["id"]},
                       headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "level"


def test_deleting_category_deletes_skills(client, admin_headers):
    web = _category(client, admin_headers, "Web")
    skill = client.post("/api/skills", json={"name": "JS", "level": 80, "categoryId": web["id"]},
                        headers=admin_headers).json()

    client.delete(f"/api/skill-categories/{web['id']}", headers=admin_headers)

    assert client.get(f"/api/skills/{skill['id']}").status_code == 404


# ---------------------------------------------------------------------------
# Single-row kinds
# ---------------------------------------------------------------------------


def test_settings_bootstrapped_on_startup(client):
    settings = client.get("/api/settings").json()

    assert settings["id"] is not None
    assert settings["primary"] == "#3b82f6"
    assert settings["variant"] == "professional"
    assert settings["appearance"] == "system"
    assert settings["radius"] == 8
    assert settings["siteTitle"] == "Software Developer Portfolio"


def test_settings_partial_update(client, admin_headers):
    before = client.get("/api/settings").json()

    resp = client.put("/api/settings", json={"primary": "#10b981", "radius": 12}, headers=admin_headers)

    assert resp.status_code == 200, resp.text
    after = resp.json()
    assert after["id"] == before["id"]
    assert after["primary"] == "#10b981"
    assert after["radius"] == 12
    assert after["siteTitle"] == before["siteTitle"]


@pytest.mark.parametrize(
    "patch",
    [{"primary": "blue"}, {"radius": 21}, {"variant": "neon"}, {"appearance": "dim"}, {"siteTitle": ""}],
)
def test_settings_validation(client, admin_headers, patch):
    resp = client.put("/api/settings", json=patch, headers=admin_headers)

    assert resp.status_code == 400


def test_about_defaults_then_upsert(client, admin_headers):
    assert client.get("/api/about").json() == {
        "id": None,
        "journeyText": None,
        "quote": None,
        "expertiseItems": [],
        "traits": [],
    }

    first = client.put(
        "/api/about",
        json={"journeyText": "Hello", "expertiseItems": [{"icon": "db", "title": "Data"}]},
        headers=admin_headers,
    ).json()
    second = client.put("/api/about", json={"traits": ["calm"]}, headers=admin_headers).json()

    assert first["id"] is not None
    assert second["id"] == first["id"]
    assert second["journeyText"] == "Hello"
    assert second["expertiseItems"] == [{"icon": "db", "title": "Data", "description": None}]
    assert second["traits"] == ["calm"]


def test_contact_info_upsert(client, admin_headers):
    resp = client.put("/api/contact-info", json={"email": "me@example.com", "github": "https://github.com/me"},
                      headers=admin_headers)

    assert resp.status_code == 200
    info = client.get("/api/contact-info").json()
    assert info["email"] == "me@example.com"
    assert info["phone"] is None


def test_singletons_have_no_item_routes(client):
    assert client.get("/api/settings/1").status_code == 404


# ---------------------------------------------------------------------------
# Backend failures
# ---------------------------------------------------------------------------


class BrokenStorage(MemStorage):
    """Works through startup, then fails every read once ``broken`` is set."""

    broken = False

    def _select(self, kind, filters):
        if self.broken:
            raise ConnectionError("database at 10.0.0.5:3306 unreachable")
        return super()._select(kind, filters)


def test_backend_failure_is_generic_500():
    storage = BrokenStorage()
    with TestClient(create_app(storage=storage, mailer=RecordingMailer())) as c:
        storage.broken = True

        resp = c.get("/api/projects")

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to fetch projects"}
    assert "10.0.0.5" not in resp.text


def test_backend_failure_on_write_is_generic_500():
    storage = BrokenStorage()
    with TestClient(create_app(storage=storage, mailer=RecordingMailer())) as c:
        headers = login(c, **ADMIN_CREDENTIALS)
        storage.broken = True

        resp = c.put("/api/settings", json={"radius": 4}, headers=headers)

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to update settings"}
