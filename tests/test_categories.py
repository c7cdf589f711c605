# File: tests/test_categories.py

from app.db.init_db import DEFAULT_CATEGORIES
from app.models.category import Category


def _names(categories):
    return [c["name"] for c in categories]


def test_first_listing_copies_templates(client, auth_headers, db):
    resp = client.get("/categories", headers=auth_headers)
    assert resp.status_code == 200
    categories = resp.json()

    expected = [name for name, _, _ in sorted(DEFAULT_CATEGORIES, key=lambda c: c[2])]
    assert _names(categories) == expected
    assert all(c["is_default"] is False for c in categories)

    user_id = client.get("/auth/user", headers=auth_headers).json()["user"]["id"]
    assert {c["user_id"] for c in categories} == {user_id}

    # Templates stay untouched
    templates = db.query(Category).filter(Category.is_default.is_(True)).all()
    assert len(templates) == len(DEFAULT_CATEGORIES)
    assert all(t.user_id is None for t in templates)


def test_listing_is_idempotent(client, auth_headers):
    first = client.get("/categories", headers=auth_headers).json()
    second = client.get("/categories", headers=auth_headers).json()
    assert first == second
    assert len(second) == len(DEFAULT_CATEGORIES)


def test_listing_orders_by_priority_then_id(client, auth_headers):
    client.get("/categories", headers=auth_headers)
    client.post("/categories", json={"name": "Pets", "priority": 1}, headers=auth_headers)
    client.post("/categories", json={"name": "Coffee", "priority": 0}, headers=auth_headers)

    names = _names(client.get("/categories", headers=auth_headers).json())
    assert names[:3] == ["Coffee", "Food", "Pets"]


def test_bootstrap_does_not_rerun_once_user_has_categories(client, auth_headers):
    client.post("/categories", json={"name": "Only mine"}, headers=auth_headers)
    categories = client.get("/categories", headers=auth_headers).json()
    assert _names(categories) == ["Only mine"]


def test_create_category_defaults(client, auth_headers):
    resp = client.post("/categories", json={"name": "Books"}, headers=auth_headers)
    assert resp.status_code == 201
    body = resp.json()
    assert body["name"] == "Books"
    assert body["icon"] is None
    assert body["priority"] == 0
    assert body["is_default"] is False


def test_update_category(client, auth_headers):
    created = client.post("/categories", json={"name": "Books"}, headers=auth_headers).json()
    resp = client.put(
        f"/categories/{created['id']}",
        json={"name": "Novels", "icon": "📖", "priority": 4},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert (body["name"], body["icon"], body["priority"]) == ("Novels", "📖", 4)


def test_update_category_keeps_omitted_fields(client, auth_headers):
    created = client.post(
        "/categories", json={"name": "Books", "icon": "📚", "priority": 3}, headers=auth_headers
    ).json()
    resp = client.put(f"/categories/{created['id']}", json={"priority": 9}, headers=auth_headers)
    assert resp.json()["name"] == "Books"
    assert resp.json()["icon"] == "📚"
    assert resp.json()["priority"] == 9


def test_delete_category(client, auth_headers):
    created = client.post("/categories", json={"name": "Books"}, headers=auth_headers).json()
    resp = client.delete(f"/categories/{created['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Category deleted"
    assert resp.json()["deleted"]["id"] == created["id"]

    again = client.delete(f"/categories/{created['id']}", headers=auth_headers)
    assert again.status_code == 404


def test_other_users_category_is_not_found(client, auth_headers, other_headers, db):
    created = client.post("/categories", json={"name": "Books"}, headers=auth_headers).json()

    resp = client.put(
        f"/categories/{created['id']}",
        json={"name": "Hijacked", "user_id": "mallory"},
        headers=other_headers,
    )
    assert resp.status_code == 404
    assert client.delete(f"/categories/{created['id']}", headers=other_headers).status_code == 404

    row = db.get(Category, created["id"])
    assert row is not None
    assert row.name == "Books"


def test_templates_cannot_be_edited(client, auth_headers, db):
    template = db.query(Category).filter(Category.is_default.is_(True)).first()
    resp = client.put(f"/categories/{template.id}", json={"name": "Mine now"}, headers=auth_headers)
    assert resp.status_code == 404


def test_update_missing_category(client, auth_headers):
    resp = client.put("/categories/99999", json={"name": "x"}, headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Category not found"


def test_restore_adds_only_missing_defaults(client, auth_headers):
    categories = client.get("/categories", headers=auth_headers).json()
    transport = next(c for c in categories if c["name"] == "Transport")
    client.delete(f"/categories/{transport['id']}", headers=auth_headers)

    resp = client.post("/categories/restore-all", headers=auth_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Added 1 categories"
    assert _names(body["categories"]) == ["Transport"]

    names = _names(client.get("/categories", headers=auth_headers).json())
    assert names.count("Food") == 1
    assert names.count("Transport") == 1


def test_restore_when_nothing_is_missing(client, auth_headers):
    client.get("/categories", headers=auth_headers)
    resp = client.post("/categories/restore-all", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"message": "All default categories are already present"}


def test_restore_name_match_is_case_sensitive(client, auth_headers):
    client.post("/categories", json={"name": "food"}, headers=auth_headers)
    body = client.post("/categories/restore-all", headers=auth_headers).json()
    assert "Food" in _names(body["categories"])
    assert len(body["categories"]) == len(DEFAULT_CATEGORIES)
