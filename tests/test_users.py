"""
Tests for login and the admin-only user routes.
"""

import pytest

from conftest import ADMIN, USER, assert_envelope


def test_login(client, backends):
    response = client.post("/v1/login", json={"username": "admin", "password": "secret"})
    assert response.status_code == 201
    assert assert_envelope(response)["data"] == {"token": "admin-token"}


def test_login_wrong_password(client):
    response = client.post("/v1/login", json={"username": "admin", "password": "guess"})
    assert response.status_code == 401
    assert assert_envelope(response) == {"error": "invalid username or password"}


def test_login_missing_password(client, backends):
    response = client.post("/v1/login", json={"username": "admin"})
    assert response.status_code == 400
    assert backends.calls == []


def test_login_auth_backend_down(client, backends):
    backends.unreachable.add("AuthService")
    response = client.post("/v1/login", json={"username": "admin", "password": "secret"})
    assert response.status_code == 500


@pytest.mark.parametrize(
    "method, url, kwargs",
    [
        ("post", "/v1/user", {"json": {"username": "x", "password": "y", "user_type": "user"}}),
        ("get", "/v1/user", {}),
        ("get", "/v1/user/u1", {}),
        ("put", "/v1/user", {"json": {"id": "u1", "password": "y"}}),
        ("delete", "/v1/user/u1", {}),
    ],
)
def test_user_routes_require_admin(client, backends, method, url, kwargs):
    response = getattr(client, method)(url, headers=USER, **kwargs)
    assert response.status_code == 401
    assert response.json() == {"error": "Permission Denied"}
    assert backends.calls == ["AuthService/HasAccess"]


def test_create_user(client, backends):
    payload = {"username": "carol", "password": "pw", "user_type": "user"}
    response = client.post("/v1/user", json=payload, headers=ADMIN)
    assert response.status_code == 201
    data = assert_envelope(response)["data"]
    assert data["username"] == "carol"
    assert "password" not in data
    assert backends.requests["CreateUser"] == payload


def test_get_user(client, backends):
    response = client.get("/v1/user/u1", headers=ADMIN)
    assert response.status_code == 200
    assert assert_envelope(response)["data"]["username"] == "admin"
    assert backends.requests["GetUserByID"] == {"id": "u1"}


def test_get_missing_user(client):
    response = client.get("/v1/user/nope", headers=ADMIN)
    assert response.status_code == 404


def test_list_users(client, backends):
    response = client.get("/v1/user", headers=ADMIN)
    assert response.status_code == 200
    assert assert_envelope(response)["data"]["count"] == 1
    assert backends.requests["GetUserList"] == {"offset": 0, "limit": 10, "search": ""}


def test_update_user(client, backends):
    response = client.put("/v1/user", json={"id": "u1", "password": "new"}, headers=ADMIN)
    assert response.status_code == 200
    assert backends.requests["UpdateUser"] == {"id": "u1", "password": "new"}


def test_update_missing_user(client):
    response = client.put("/v1/user", json={"id": "nope", "password": "new"}, headers=ADMIN)
    assert response.status_code == 404


def test_delete_user(client, backends):
    response = client.delete("/v1/user/u1", headers=ADMIN)
    assert response.status_code == 200
    assert "u1" not in backends.store["users"]


def test_delete_missing_user(client):
    response = client.delete("/v1/user/nope", headers=ADMIN)
    assert response.status_code == 400
