"""
Tests for authentication endpoints
"""
import json

from fastapi import status

from smartbizflow.core.security import decode_token
from smartbizflow.db.seed import ADMIN_PASSWORD, EMPLOYEE_PASSWORD


def test_auth_login_success(client, seeded_store):
    """Test successful login returns 200, a token and the user"""
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "admin@smartbizflow.com", "password": ADMIN_PASSWORD}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["token_type"] == "bearer"
    assert decode_token(data["access_token"])["sub"] == "admin-001"
    assert data["user"]["email"] == "admin@smartbizflow.com"
    assert data["user"]["role"] == "ADMIN"
    assert "password" not in data["user"]

    assert seeded_store.get_by_id("users", "admin-001")["lastLogin"]
    logins = seeded_store.list("auditLogs", {"action": "LOGIN"})
    assert len(logins) == 1
    assert logins[0]["userId"] == "admin-001"


def test_auth_login_email_is_case_insensitive(client):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "John.Doe@SmartBizFlow.com", "password": EMPLOYEE_PASSWORD}
    )
    assert response.status_code == status.HTTP_200_OK


def test_auth_login_wrong_password(client, seeded_store):
    """Test login with wrong password returns 401 and leaves no trace"""
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "admin@smartbizflow.com", "password": "wrongpassword"}
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    data = response.json()
    assert data["error"] is True
    assert "detail" in data
    assert seeded_store.count("auditLogs") == 0


def test_auth_login_unknown_email(client):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "nobody@smartbizflow.com", "password": "whatever1"}
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_auth_login_inactive_account(client, seeded_store):
    seeded_store.update("users", "emp-003", {"isActive": False})
    response = client.post(
        "/api/v1/auth/login",
        json={"email": "mike.wilson@smartbizflow.com", "password": EMPLOYEE_PASSWORD}
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_login_succeeds_when_bookkeeping_write_fails(client, seeded_store, monkeypatch):
    """lastLogin and the LOGIN audit entry are best effort"""
    def failing_write(*args, **kwargs):
        raise OSError("disk full")

    before = seeded_store.path.read_text(encoding="utf-8")
    monkeypatch.setattr(seeded_store, "_write_file", failing_write)

    response = client.post(
        "/api/v1/auth/login",
        json={"email": "admin@smartbizflow.com", "password": ADMIN_PASSWORD}
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["access_token"]
    assert seeded_store.get_by_id("users", "admin-001").get("lastLogin") is None
    assert json.loads(before) == json.loads(seeded_store.path.read_text(encoding="utf-8"))


def test_protected_route_requires_token(client):
    response = client.get("/api/v1/employees")
    assert response.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN)


def test_protected_route_rejects_bad_token(client):
    response = client.get("/api/v1/employees", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_users_me(client, hr_headers):
    response = client.get("/api/v1/users/me", headers=hr_headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["email"] == "hr@smartbizflow.com"


def test_admin_creates_user(client, admin_headers, seeded_store):
    response = client.post(
        "/api/v1/users",
        json={"email": "New.Person@co.com", "password": "welcome123", "role": "MANAGER"},
        headers=admin_headers,
    )
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["email"] == "new.person@co.com"
    assert data["id"].startswith("user-")

    stored = seeded_store.get_by_id("users", data["id"])
    assert stored["password"].startswith("$2b$")

    login = client.post("/api/v1/auth/login", json={"email": "new.person@co.com", "password": "welcome123"})
    assert login.status_code == status.HTTP_200_OK


def test_duplicate_user_email_rejected(client, admin_headers):
    response = client.post(
        "/api/v1/users",
        json={"email": "hr@smartbizflow.com", "password": "welcome123"},
        headers=admin_headers,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_hr_cannot_create_user(client, hr_headers):
    response = client.post(
        "/api/v1/users",
        json={"email": "x@co.com", "password": "welcome123"},
        headers=hr_headers,
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN
