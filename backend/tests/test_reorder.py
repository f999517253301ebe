"""
Project reordering – storage level on both backends, then over HTTP.
"""
import pytest

from content.kinds import EntityKind
from storage.base import ReferenceNotFoundError


def _projects(storage, *titles):
    return [storage.create_item(EntityKind.PROJECTS, {"title": t}) for t in titles]


def test_reorder_assigns_positions(storage):
    p1, p2, p3 = _projects(storage, "One", "Two", "Three")

    result = storage.reorder_items(EntityKind.PROJECTS, [p3.id, p1.id, p2.id])

    assert [p.id for p in result] == [p3.id, p1.id, p2.id]
    assert [p.display_order for p in result] == [0, 1, 2]
    assert storage.list_items(EntityKind.PROJECTS) == result


def test_reorder_unknown_id_changes_nothing(storage):
    p1, p2 = _projects(storage, "One", "Two")
    storage.update_item(EntityKind.PROJECTS, p1.id, {"display_order": 5})
    before = storage.list_items(EntityKind.PROJECTS)

    with pytest.raises(ReferenceNotFoundError) as excinfo:
        storage.reorder_items(EntityKind.PROJECTS, [p2.id, 999, p1.id])

    assert str(excinfo.value) == "Project with ID 999 not found"
    assert storage.list_items(EntityKind.PROJECTS) == before


def test_reorder_leaves_unlisted_rows_alone(storage):
    p1, p2, p3 = _projects(storage, "One", "Two", "Three")
    storage.update_item(EntityKind.PROJECTS, p3.id, {"display_order": 7})

    storage.reorder_items(EntityKind.PROJECTS, [p2.id, p1.id])

    assert storage.get_item(EntityKind.PROJECTS, p3.id).display_order == 7
    assert [p.id for p in storage.list_items(EntityKind.PROJECTS)] == [p2.id, p1.id, p3.id]


def test_reorder_empty_list_is_noop(storage):
    p1, p2 = _projects(storage, "One", "Two")

    result = storage.reorder_items(EntityKind.PROJECTS, [])

    assert [p.id for p in result] == [p1.id, p2.id]


def test_reorder_rejects_unordered_kind(storage):
    with pytest.raises(ValueError):
        storage.reorder_items(EntityKind.SKILLS, [])


# ---------------------------------------------------------------------------
# POST /api/projects/reorder
# ---------------------------------------------------------------------------


def test_reorder_endpoint(client, admin_headers):
    ids = []
    for title in ("Alpha", "Beta", "Gamma"):
        resp = client.post("/api/projects", json={"title": title}, headers=admin_headers)
        ids.append(resp.json()["id"])

    resp = client.post(
        "/api/projects/reorder",
        json={"projectIds": [ids[2], ids[0], ids[1]]},
        headers=admin_headers,
    )

    assert resp.status_code == 200, resp.text
    assert [p["title"] for p in resp.json()] == ["Gamma", "Alpha", "Beta"]
    assert [p["displayOrder"] for p in resp.json()] == [0, 1, 2]
    assert [p["title"] for p in client.get("/api/projects").json()] == ["Gamma", "Alpha", "Beta"]


def test_reorder_endpoint_unknown_id(client, admin_headers):
    resp = client.post("/api/projects", json={"title": "Solo"}, headers=admin_headers)
    solo_id = resp.json()["id"]

    resp = client.post(
        "/api/projects/reorder",
        json={"projectIds": [404040, solo_id]},
        headers=admin_headers,
    )

    assert resp.status_code == 404
    assert resp.json()["detail"] == "Project with ID 404040 not found"
    assert client.get(f"/api/projects/{solo_id}").json()["displayOrder"] == 0


def test_reorder_endpoint_requires_array(client, admin_headers):
    resp = client.post("/api/projects/reorder", json={"projectIds": "1,2"}, headers=admin_headers)

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid data format"


def test_reorder_endpoint_requires_admin(client):
    resp = client.post("/api/projects/reorder", json={"projectIds": []})

    assert resp.status_code == 401
