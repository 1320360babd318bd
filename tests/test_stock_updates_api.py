# tests/test_stock_updates_api.py
import uuid

from tests.factories import auth_headers, make_item, make_user


def _post(client, headers, item_id, old, new, **extra):
    return client.post("/api/stock-updates/", headers=headers, json={
        "item_id": str(item_id), "old_quantity": old, "new_quantity": new, **extra})


def test_adjust_stock_over_http(client, auth_db, db):
    user = make_user(auth_db, name="Asha")
    item = make_item(db, user.id)
    headers = auth_headers(user)

    r = _post(client, headers, item.id, 2.0, 1.5, notes="Used for dinner")
    assert r.status_code == 201
    su = r.json()["data"]
    assert su["old_quantity"] == 2.0
    assert su["new_quantity"] == 1.5
    assert su["updated_by"] == "Asha"
    assert su["item"]["name"] == "Toor Dal"

    r = client.get(f"/api/items/{item.id}", headers=headers)
    assert r.json()["data"]["quantity"] == 1.5


def test_stale_adjustment_over_http(client, auth_db, db):
    user = make_user(auth_db)
    item = make_item(db, user.id)
    headers = auth_headers(user)

    assert _post(client, headers, item.id, 2.0, 1.5).status_code == 201

    r = _post(client, headers, item.id, 2.0, 1.0)
    assert r.status_code == 422
    assert r.json()["status_code"] == "3103"

    r = client.get(f"/api/items/{item.id}/stock-updates", headers=headers)
    assert r.json()["data"]["total_results"] == 1


def test_adjustment_errors(client, auth_db, db):
    owner = make_user(auth_db)
    item = make_item(db, owner.id)

    r = _post(client, auth_headers(owner), uuid.uuid4(), 1.0, 0.5)
    assert r.status_code == 404

    r = _post(client, auth_headers(make_user(auth_db)), item.id, 2.0, 1.0)
    assert r.status_code == 403

    r = _post(client, auth_headers(owner), item.id, 2.0, -3)
    assert r.status_code == 422


def test_list_and_get_stock_updates(client, auth_db, db):
    user = make_user(auth_db)
    dal = make_item(db, user.id)
    rice = make_item(db, user.id, name="Basmati Rice", category="rice")
    headers = auth_headers(user)
    _post(client, headers, dal.id, 2.0, 1.0)
    created = _post(client, headers, rice.id, 2.0, 3.0).json()["data"]

    r = client.get("/api/stock-updates/", headers=headers)
    assert r.status_code == 200
    assert r.json()["data"]["total_results"] == 2

    r = client.get(f"/api/stock-updates/?item_id={rice.id}", headers=headers)
    assert [s["id"] for s in r.json()["data"]["results"]] == [created["id"]]

    r = client.get(f"/api/stock-updates/{created['id']}", headers=headers)
    assert r.status_code == 200
    assert r.json()["data"]["new_quantity"] == 3.0

    r = client.get(f"/api/stock-updates/{created['id']}", headers=auth_headers(make_user(auth_db)))
    assert r.status_code == 403


def test_bad_date_range(client, auth_db):
    r = client.get(
        "/api/stock-updates/?start_date=2024-02-01T00:00:00&end_date=2024-01-01T00:00:00",
        headers=auth_headers(make_user(auth_db)))
    assert r.status_code == 422


def test_item_history_not_found_before_forbidden(client, auth_db):
    r = client.get(f"/api/items/{uuid.uuid4()}/stock-updates",
                   headers=auth_headers(make_user(auth_db)))
    assert r.status_code == 404
