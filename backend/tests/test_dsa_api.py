from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from tracker_api.main import app
from tracker_api import seed_data

client = TestClient(app)


def _utc(text):
    value = datetime.fromisoformat(text.replace("Z", "+00:00"))
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _create(**fields):
    body = {"title": "Untitled", "category": "Array", "difficulty": "Easy", **fields}
    r = client.post("/api/dsa", json=body)
    assert r.status_code == 201, r.text
    return r.json()


def _attempt(item_id, **fields):
    return client.post(f"/api/dsa/{item_id}/attempt", json=fields)


def test_create_defaults():
    body = _create(title="Two Sum", leetcode_number=1, tags=["Hash Table"])
    assert body["status"] == "NotStarted"
    assert body["attempt_count"] == 1
    assert body["created_at"] is not None
    assert body["last_attempted_at"] is None
    assert body["next_review_date"] is None
    assert body["leetcode_number"] == 1


def test_list_orders_favorites_then_most_recent_attempt():
    first = _create(title="Two Sum")
    second = _create(title="3Sum")
    third = _create(title="Coin Change")
    fav = _create(title="Word Break", is_favorite=True)
    assert _attempt(first["id"], solved_optimally=True).status_code == 200
    rows = client.get("/api/dsa").json()
    assert [r["id"] for r in rows] == [fav["id"], first["id"], third["id"], second["id"]]


def test_filters_are_conjunctive():
    _create(title="Two Sum", difficulty="Easy", category="Array")
    hard = _create(title="Trapping Rain Water", difficulty="Hard", category="Array", is_favorite=True)
    _create(title="Merge K Sorted Lists", difficulty="Hard", category="Linked List")
    rows = client.get("/api/dsa", params={"difficulty": "Hard", "category": "Array"}).json()
    assert [r["id"] for r in rows] == [hard["id"]]
    favs = client.get("/api/dsa", params={"favorite": "true"}).json()
    assert [r["id"] for r in favs] == [hard["id"]]


def test_attempt_counts_and_schedules_next_review():
    created = _create(title="Maximum Subarray", notes="kadane")
    before = datetime.now(timezone.utc)
    r = _attempt(created["id"], time_taken_minutes=25, solved_optimally=True, status="Solved")
    assert r.status_code == 200
    body = r.json()
    assert body["attempt_count"] == 2
    assert body["time_taken_minutes"] == 25
    assert body["solved_optimally"] is True
    assert body["status"] == "Solved"
    assert body["notes"] == "kadane"
    assert body["last_attempted_at"] is not None
    # second attempt, solved optimally: three days out
    due = _utc(body["next_review_date"])
    assert before + timedelta(days=3) - timedelta(minutes=1) <= due <= before + timedelta(days=3, minutes=1)

    again = _attempt(created["id"], solved_optimally=False, notes="forgot the reset").json()
    assert again["attempt_count"] == 3
    assert again["notes"] == "forgot the reset"
    assert again["status"] == "Solved"
    # third attempt halves the seven day step
    due = _utc(again["next_review_date"])
    assert before + timedelta(days=3) - timedelta(minutes=1) <= due <= before + timedelta(days=3, minutes=2)


def test_attempt_missing_and_invalid():
    assert _attempt(999).status_code == 404
    created = _create()
    assert _attempt(created["id"], time_taken_minutes=-5).status_code == 422


def test_needs_review_lists_overdue_earliest_first():
    later = _create(title="Climbing Stairs", next_review_date="2020-06-01T00:00:00Z")
    earlier = _create(title="House Robber", next_review_date="2020-01-01T00:00:00")
    _create(title="Coin Change", next_review_date="2999-01-01T00:00:00Z")
    _create(title="Word Break")
    rows = client.get("/api/dsa/needs-review").json()
    assert [r["id"] for r in rows] == [earlier["id"], later["id"]]

    # an attempt pushes the review date into the future
    _attempt(earlier["id"], solved_optimally=True)
    rows = client.get("/api/dsa/needs-review").json()
    assert [r["id"] for r in rows] == [later["id"]]


def test_update_stamps_last_attempted_at():
    created = _create(title="Valid Anagram")
    body = {"id": created["id"], "title": "Valid Anagram", "status": "InProgress"}
    assert client.put(f"/api/dsa/{created['id']}", json=body).status_code == 204
    got = client.get(f"/api/dsa/{created['id']}").json()
    assert got["status"] == "InProgress"
    assert got["last_attempted_at"] is not None
    assert got["created_at"] == created["created_at"]


def test_favorites_view_and_categories():
    _create(title="Invert Binary Tree", category="Tree", is_favorite=True)
    _create(title="Two Sum", category="Array", is_favorite=True)
    _create(title="Same Tree", category="Tree")
    favs = client.get("/api/dsa/favorites").json()
    assert [(r["category"], r["title"]) for r in favs] == [("Array", "Two Sum"), ("Tree", "Invert Binary Tree")]
    assert client.get("/api/dsa/categories").json() == ["Array", "Tree"]


def test_seed_only_into_empty_table():
    r = client.post("/api/dsa/seed")
    assert r.status_code == 200
    assert r.json()["created"] == len(seed_data.dsa_problems())
    assert client.post("/api/dsa/seed").status_code == 409


def test_dsa_has_no_clear():
    _create()
    assert client.delete("/api/dsa/clear").status_code != 200
    assert len(client.get("/api/dsa").json()) == 1
