import pytest
from fastapi.testclient import TestClient

from tracker_api.main import app
from tracker_api.resources import RESOURCES

client = TestClient(app)

TOPIC_KEYS = ["aspnetcore", "csharp", "designpattern", "entityframework", "oop", "azure"]


def _create(key, **fields):
    body = {"title": "Untitled", "category": "General", **fields}
    r = client.post(f"/api/{key}", json=body)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_assigns_id_and_defaults():
    r = client.post("/api/csharp", json={"id": 999, "title": "Boxing", "category": "Fundamentals"})
    assert r.status_code == 201
    body = r.json()
    assert body["id"] is not None and body["id"] != 999
    assert body["created_at"] is not None
    assert body["last_reviewed_at"] is None
    assert body["is_favorite"] is False
    assert body["status"] == "Learning"
    assert body["tags"] == []
    assert r.headers["Location"] == f"/api/csharp/{body['id']}"


def test_create_then_get_round_trips_fields():
    sent = {
        "title": "LINQ Basics",
        "category": "LINQ",
        "difficulty": "Medium",
        "status": "Reviewed",
        "notes": "deferred execution",
        "tags": ["LINQ", "Collections"],
        "dot_net_version": "3.5",
    }
    created = _create("csharp", **sent)
    fetched = client.get(f"/api/csharp/{created['id']}")
    assert fetched.status_code == 200
    got = fetched.json()
    for field, value in sent.items():
        assert got[field] == value
    assert got["created_at"] == created["created_at"]


def test_get_missing_returns_404():
    r = client.get("/api/aspnetcore/12345")
    assert r.status_code == 404
    assert r.json()["code"] == "NOT_FOUND"


def test_list_orders_favorites_then_category_then_title():
    _create("designpattern", title="Zeta", category="Async")
    _create("designpattern", title="alpha", category="Async")
    _create("designpattern", title="Beta", category="Fundamentals", is_favorite=True)
    _create("designpattern", title="Alpha", category="Async")
    _create("designpattern", title="Gamma", category="Basics")
    _create("designpattern", title="Omega", category="async")
    rows = client.get("/api/designpattern").json()
    assert [(r["category"], r["title"]) for r in rows] == [
        ("Fundamentals", "Beta"),
        ("Async", "Alpha"),
        ("Async", "Zeta"),
        ("Async", "alpha"),
        ("Basics", "Gamma"),
        ("async", "Omega"),
    ]


def test_list_filters_are_conjunctive():
    _create("oop", title="SRP", category="SOLID Principles", status="Mastered")
    _create("oop", title="OCP", category="SOLID Principles", status="Learning")
    _create("oop", title="Encapsulation", category="Four Pillars", status="Mastered")
    rows = client.get("/api/oop", params={"category": "SOLID Principles", "status": "Mastered"}).json()
    assert [r["title"] for r in rows] == ["SRP"]
    # empty values are ignored, unknown values match nothing
    assert len(client.get("/api/oop", params={"category": ""}).json()) == 3
    assert client.get("/api/oop", params={"status": "Forgotten"}).json() == []


def test_update_replaces_row_and_stamps_review_time():
    created = _create("entityframework", title="Migrations", notes="old notes", ef_version="EF Core 7")
    body = {"id": created["id"], "title": "Migrations", "category": "Schema", "status": "Reviewed"}
    r = client.put(f"/api/entityframework/{created['id']}", json=body)
    assert r.status_code == 204
    assert r.content == b""
    got = client.get(f"/api/entityframework/{created['id']}").json()
    assert got["category"] == "Schema"
    assert got["status"] == "Reviewed"
    # full replace: omitted optional fields are cleared
    assert got["notes"] is None
    assert got["ef_version"] is None
    assert got["created_at"] == created["created_at"]
    assert got["last_reviewed_at"] is not None
    assert got["row_version"] == created["row_version"] + 1


def test_update_id_mismatch_is_rejected_without_change():
    created = _create("csharp", title="Generics")
    body = {"id": created["id"] + 1, "title": "Renamed"}
    r = client.put(f"/api/csharp/{created['id']}", json=body)
    assert r.status_code == 400
    # missing body id is a mismatch too
    r2 = client.put(f"/api/csharp/{created['id']}", json={"title": "Renamed"})
    assert r2.status_code == 400
    got = client.get(f"/api/csharp/{created['id']}").json()
    assert got["title"] == "Generics"
    assert got["last_reviewed_at"] is None


def test_update_missing_returns_404():
    r = client.put("/api/azure/4242", json={"id": 4242, "title": "Ghost"})
    assert r.status_code == 404


def test_update_with_stale_row_version_conflicts():
    created = _create("aspnetcore", title="Middleware Pipeline")
    item_id = created["id"]
    first = {"id": item_id, "title": "Middleware", "row_version": created["row_version"]}
    assert client.put(f"/api/aspnetcore/{item_id}", json=first).status_code == 204
    stale = {"id": item_id, "title": "Lost update", "row_version": created["row_version"]}
    r = client.put(f"/api/aspnetcore/{item_id}", json=stale)
    assert r.status_code == 409
    assert r.json()["code"] == "CONFLICT"
    assert client.get(f"/api/aspnetcore/{item_id}").json()["title"] == "Middleware"


def test_delete_missing_leaves_table_untouched():
    _create("oop", title="Inheritance")
    r = client.delete("/api/oop/777")
    assert r.status_code == 404
    assert len(client.get("/api/oop").json()) == 1


def test_delete_removes_row():
    created = _create("oop", title="Polymorphism")
    r = client.delete(f"/api/oop/{created['id']}")
    assert r.status_code == 204
    assert client.get(f"/api/oop/{created['id']}").status_code == 404


def test_toggle_favorite_is_its_own_inverse():
    created = _create("csharp", title="Delegates")
    item_id = created["id"]
    r1 = client.post(f"/api/csharp/{item_id}/favorite")
    assert r1.status_code == 200
    assert r1.json()["is_favorite"] is True
    r2 = client.post(f"/api/csharp/{item_id}/favorite")
    assert r2.status_code == 200
    assert r2.json()["is_favorite"] is False
    assert client.post("/api/csharp/9999/favorite").status_code == 404


def test_clear_reports_count_and_empties_table():
    for title in ("A", "B", "C"):
        _create("azure", title=title)
    before = len(client.get("/api/azure").json())
    r = client.delete("/api/azure/clear")
    assert r.status_code == 200
    assert r.json()["deleted"] == before
    assert client.get("/api/azure").json() == []
    # clearing an empty table is a visible no-op
    assert client.delete("/api/azure/clear").json()["deleted"] == 0


@pytest.mark.parametrize("key", TOPIC_KEYS)
def test_seed_replaces_existing_rows(key):
    _create(key, title="Hand written")
    expected = len(RESOURCES[key].seed())
    r = client.post(f"/api/{key}/seed")
    assert r.status_code == 200
    assert r.json()["created"] == expected
    rows = client.get(f"/api/{key}").json()
    assert len(rows) == expected
    assert "Hand written" not in [row["title"] for row in rows]
    # seeding again replaces rather than appends
    client.post(f"/api/{key}/seed")
    assert len(client.get(f"/api/{key}").json()) == expected


def test_categories_are_distinct_and_sorted():
    _create("csharp", title="a", category="LINQ")
    _create("csharp", title="b", category="Async")
    _create("csharp", title="c", category="LINQ")
    _create("csharp", title="d", category="async")
    r = client.get("/api/csharp/categories")
    assert r.status_code == 200
    assert r.json() == ["Async", "LINQ", "async"]


def test_resources_are_independent():
    _create("csharp", title="Only here")
    assert client.get("/api/aspnetcore").json() == []
