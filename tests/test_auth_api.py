# tests/test_auth_api.py
from tests.factories import auth_headers, make_user


def test_register_login_and_me(auth_client):
    r = auth_client.post("/api/auth/register", json={
        "name": "Asha", "email": "Asha@Example.com", "password": "secret123"})
    assert r.status_code == 201
    registered = r.json()["data"]
    assert registered["user"]["role"] == "user"
    assert registered["token_type"] == "bearer"

    r = auth_client.post("/api/auth/login", json={
        "email": "asha@example.com", "password": "secret123"})
    assert r.status_code == 200
    token = r.json()["data"]["access_token"]

    r = auth_client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Asha"


def test_register_duplicate_email(auth_client, auth_db):
    make_user(auth_db, email="asha@example.com")

    r = auth_client.post("/api/auth/register", json={
        "name": "Asha", "email": "asha@example.com", "password": "secret123"})
    assert r.status_code == 422
    assert r.json()["status_code"] == "2007"


def test_register_short_password(auth_client):
    r = auth_client.post("/api/auth/register", json={
        "name": "Asha", "email": "asha@example.com", "password": "short"})
    assert r.status_code == 422


def test_login_wrong_password(auth_client, auth_db):
    make_user(auth_db, email="asha@example.com")

    r = auth_client.post("/api/auth/login", json={
        "email": "asha@example.com", "password": "wrong-password"})
    assert r.status_code == 401
    assert r.json()["status"] == "Failure"


def test_login_inactive_user(auth_client, auth_db):
    make_user(auth_db, email="asha@example.com", status="inactive")

    r = auth_client.post("/api/auth/login", json={
        "email": "asha@example.com", "password": "secret123"})
    assert r.status_code == 403


def test_user_admin_routes(auth_client, auth_db):
    admin = make_user(auth_db, role="admin")
    user = make_user(auth_db)

    r = auth_client.get("/api/users/", headers=auth_headers(user))
    assert r.status_code == 403

    r = auth_client.get("/api/users/", headers=auth_headers(admin))
    assert r.status_code == 200
    assert r.json()["data"]["total_results"] == 2

    r = auth_client.patch(f"/api/users/{user.id}/status", json={"status": "inactive"},
                          headers=auth_headers(admin))
    assert r.status_code == 200
    assert r.json()["data"]["status"] == "inactive"

    # the issued token stops working once the account is deactivated
    r = auth_client.get("/api/auth/me", headers=auth_headers(user))
    assert r.status_code == 403


def test_health(auth_client, client):
    assert auth_client.get("/api/auth/health").status_code == 200
    assert client.get("/api/pantry/health").status_code == 200
