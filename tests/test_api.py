"""Auth and application-level API tests."""

import inspect

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from ideaflow.api.dependencies import get_idea_service
from ideaflow.main import app


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "IdeaFlow API"


def test_unknown_endpoint(client):
    """Unknown paths get a JSON 404."""
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.json()["detail"] == "Endpoint not found"


def test_register_user(register):
    """Test user registration."""
    response = register(email="newuser@example.com", password="password123")
    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User created successfully"
    assert data["token"]
    assert data["user"]["email"] == "newuser@example.com"
    assert "password_hash" not in data["user"]


def test_register_duplicate_email(register, auth_headers):
    """Test registration with duplicate email fails."""
    response = register(email=auth_headers.email, password="password123")
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "conflict"
    assert "already exists" in body["detail"]


def test_register_short_password(register):
    """Passwords shorter than six characters are rejected."""
    response = register(email="short@example.com", password="abc12")
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_register_six_character_password(register):
    response = register(email="six@example.com", password="abc123")
    assert response.status_code == 201


def test_register_missing_fields(client):
    """Missing fields are a 400, not FastAPI's default 422."""
    response = client.post("/api/auth/register", json={"email": "nopass@example.com"})
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "validation_error"
    assert "password" in body["detail"]


def test_register_invalid_email(register):
    response = register(email="not-an-email", password="password123")
    assert response.status_code == 400


def test_login(client, auth_headers):
    """Test user login."""
    response = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "testpass123"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert data["user"]["id"] == auth_headers.user_id
    assert data["token"]


def test_login_wrong_password_and_unknown_email_look_the_same(client, auth_headers):
    """Login failures do not reveal whether the email exists."""
    wrong_password = client.post(
        "/api/auth/login", json={"email": auth_headers.email, "password": "wrongpass"}
    )
    unknown_email = client.post(
        "/api/auth/login", json={"email": "ghost@example.com", "password": "testpass123"}
    )
    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["error"] == "invalid_credentials"


def test_login_empty_fields(client):
    response = client.post(
        "/api/auth/login", json={"email": "someone@example.com", "password": ""}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Email and password are required"


def test_login_malformed_email(client):
    response = client.post("/api/auth/login", json={"email": "", "password": "testpass123"})
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_login_with_mixed_case_email_as_registered(client, register):
    """Logging in with the exact address used at signup works and migrates."""
    client.post("/api/ideas", headers={"X-Session-ID": "s1"}, json={"content": "Launch v2"})
    assert register(email="Founder@Example.COM", password="password123").status_code == 201

    response = client.post(
        "/api/auth/login",
        headers={"X-Session-ID": "s1"},
        json={"email": "Founder@Example.COM", "password": "password123"},
    )
    assert response.status_code == 200

    token_headers = {"Authorization": f"Bearer {response.json()['token']}"}
    ideas = client.get("/api/ideas", headers=token_headers).json()
    assert [idea["content"] for idea in ideas] == ["Launch v2"]


def test_get_profile(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/api/auth/profile", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"id": auth_headers.user_id, "email": auth_headers.email}


def test_profile_requires_bearer(client, session_headers):
    """A session ID is not enough to read a profile."""
    response = client.get("/api/auth/profile", headers=session_headers)
    assert response.status_code == 401
    assert response.json()["error"] == "authentication_required"
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_profile_with_invalid_token(client):
    response = client.get("/api/auth/profile", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401


def test_storage_failure_is_internal_error(client, session_headers):
    """Storage errors map to a generic 500."""

    class BrokenService:
        def list(self, owner):
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    app.dependency_overrides[get_idea_service] = lambda: BrokenService()
    response = client.get("/api/ideas", headers=session_headers)

    assert response.status_code == 500
    body = response.json()
    assert body["detail"] == "Internal server error"
    assert body["error"] == "internal_error"


def test_unexpected_failure_is_internal_error(client, session_headers):
    class BrokenService:
        def list(self, owner):
            raise RuntimeError("boom")

    app.dependency_overrides[get_idea_service] = lambda: BrokenService()
    with TestClient(app, raise_server_exceptions=False) as raw_client:
        response = raw_client.get("/api/ideas", headers=session_headers)

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal server error"


def test_profile_ignores_session_header(client, auth_headers):
    """An oversized session header does not break a bearer-only route."""
    headers = {**auth_headers, "X-Session-ID": "s" * 256}
    response = client.get("/api/auth/profile", headers=headers)
    assert response.status_code == 200
    assert response.json()["id"] == auth_headers.user_id


def test_api_routes_run_in_threadpool():
    """Routes doing blocking DB and bcrypt work are plain functions."""
    api_routes = [route for route in app.routes if route.path.startswith("/api")]
    assert api_routes
    for route in api_routes:
        assert not inspect.iscoroutinefunction(route.endpoint), route.path
