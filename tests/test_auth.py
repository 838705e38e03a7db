import time

import pytest
from fastapi.testclient import TestClient

from bragawork import __version__
from bragawork.core import session_store

ADMIN_CREDENTIALS = {"username": "admin", "password": "admin123"}

PROTECTED_ENDPOINTS = [
    ("get", "/api/get-quotes", None),
    ("post", "/api/update-quote", {"id": 1, "status": "completed"}),
    ("post", "/api/delete-quote", {"id": 1}),
    ("post", "/api/save-project", {"title": "X"}),
    ("post", "/api/delete-project", {"id": 1}),
    ("get", "/api/list-images", None),
    ("post", "/api/logout", None),
    ("get", "/api/me", None),
]


def call(client: TestClient, method: str, path: str, body, headers=None):
    if method == "get":
        return client.get(path, headers=headers)
    return client.post(path, json=body, headers=headers)


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["version"] == __version__


def test_login(client: TestClient):
    response = client.post("/api/login", json=ADMIN_CREDENTIALS)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert len(data["token"]) == 64
    assert data["user"]["username"] == "admin"
    assert data["user"]["fullName"] == "Administrador BragaWork"
    assert "password_hash" not in data["user"]
    assert response.headers["Cache-Control"].startswith("no-store")


def test_me_returns_current_admin(client: TestClient, auth_headers):
    me = client.get("/api/me", headers=auth_headers).json()
    assert me["success"] is True
    assert me["user"]["email"] == "admin@bragawork.com"


@pytest.mark.parametrize("body", [
    {"username": "admin", "password": "errada"},
    {"username": "ninguem", "password": "admin123"},
])
def test_login_wrong_credentials(client: TestClient, body):
    response = client.post("/api/login", json=body)
    assert response.status_code == 200
    assert response.json() == {"success": False, "message": "Usuário ou senha incorretos."}


@pytest.mark.parametrize("body", [{}, {"username": "admin"}, {"password": "admin123"}])
def test_login_missing_fields(client: TestClient, body):
    data = client.post("/api/login", json=body).json()
    assert data["success"] is False
    assert data["message"] == "Usuário e senha são obrigatórios."


@pytest.mark.parametrize("method,path,body", PROTECTED_ENDPOINTS)
def test_protected_endpoints_require_token(client: TestClient, method, path, body):
    response = call(client, method, path, body)
    assert response.status_code == 401
    assert response.json()["success"] is False


@pytest.mark.parametrize("method,path,body", PROTECTED_ENDPOINTS)
def test_protected_endpoints_reject_unknown_token(client: TestClient, method, path, body):
    headers = {"Authorization": "Bearer " + "0" * 64}
    response = call(client, method, path, body, headers)
    assert response.status_code == 401
    assert response.json()["success"] is False


def test_token_works_on_protected_endpoint(client: TestClient, auth_headers):
    response = client.get("/api/get-quotes", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_expired_token_is_rejected(client: TestClient, auth_headers, monkeypatch):
    later = time.time() + 24 * 3600 + 1
    monkeypatch.setattr(session_store, "_clock", lambda: later)

    response = client.get("/api/get-quotes", headers=auth_headers)
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Sessão expirada. Faça login novamente."}
    assert len(session_store) == 0


def test_logout_revokes_token(client: TestClient, auth_headers):
    response = client.post("/api/logout", headers=auth_headers)
    assert response.json()["success"] is True

    response = client.get("/api/get-quotes", headers=auth_headers)
    assert response.status_code == 401


def test_security_headers(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def last_login(run_sql) -> object:
    return run_sql("SELECT last_login FROM admin_users WHERE username = :u", {"u": "admin"})[0]["last_login"]


def test_login_touches_last_login(client: TestClient, run_sql):
    assert last_login(run_sql) is None

    client.post("/api/login", json={"username": "admin", "password": "errada"})
    assert last_login(run_sql) is None

    assert client.post("/api/login", json=ADMIN_CREDENTIALS).json()["success"] is True
    assert last_login(run_sql) is not None


def test_inactive_admin_cannot_login(client: TestClient, run_sql):
    run_sql("UPDATE admin_users SET is_active = :active WHERE username = :u", {"active": False, "u": "admin"})

    data = client.post("/api/login", json=ADMIN_CREDENTIALS).json()
    assert data == {"success": False, "message": "Usuário ou senha incorretos."}
    assert len(session_store) == 0
    assert last_login(run_sql) is None
