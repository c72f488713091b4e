"""Tests for the mock login flow and bearer token handling."""
import pytest
from datetime import timedelta

from localstyle.core.roles import StaffRole
from localstyle.core.security import create_access_token
from conftest import make_user


class TestLogin:
    """Tests for POST /auth/login."""

    def test_any_credentials_accepted(self, client):
        """Test that non-blank credentials log in as a brand owner."""
        response = client.post("/api/v1/auth/login", json={"username": "sarah", "password": "anything"})

        assert response.status_code == 200
        data = response.json()
        assert data["user"] == {
            "id": "user_001",
            "email": "sarah@localstyle.com",
            "name": "Sarah",
            "role": "brand_owner",
        }
        assert data["tokens"]["accessToken"]
        assert data["tokens"]["refreshToken"]

    @pytest.mark.parametrize("body", [
        {"username": "", "password": "secret"},
        {"username": "sarah", "password": "   "},
        {"username": "sarah"},
    ])
    def test_blank_credentials_rejected(self, client, body):
        """Test that missing or blank credentials are a validation error."""
        response = client.post("/api/v1/auth/login", json=body)
        assert response.status_code == 422
        assert response.json()["error"] == "Validation failed"


class TestTokens:
    """Tests for /auth/me, /auth/refresh and /auth/logout."""

    def test_me_returns_token_user(self, client):
        """Test that the access token carries the user."""
        tokens = client.post("/api/v1/auth/login", json={"username": "marcus", "password": "x"}).json()["tokens"]
        response = client.get(
            "/api/v1/auth/me",
            headers={"Authorization": f"Bearer {tokens['accessToken']}"}
        )
        assert response.status_code == 200
        assert response.json()["email"] == "marcus@localstyle.com"

    def test_me_requires_token(self, client):
        """Test 401 without credentials."""
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 401
        assert response.json()["error"] == "Not authenticated"

    def test_malformed_token_rejected(self, client):
        """Test 401 for a token with a bad signature."""
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer invalid-token"})
        assert response.status_code == 401

    def test_expired_token_rejected(self, client):
        """Test 401 for an expired access token."""
        token = create_access_token(make_user(StaffRole.ADMIN), expires_delta=timedelta(seconds=-1))
        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_refresh_issues_new_pair(self, client, refresh_token):
        """Test exchanging a refresh token."""
        response = client.post("/api/v1/auth/refresh", json={"refreshToken": refresh_token})
        assert response.status_code == 200
        tokens = response.json()["tokens"]
        me = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {tokens['accessToken']}"})
        assert me.json()["role"] == "brand_owner"

    def test_access_token_cannot_refresh(self, client):
        """Test that token types are not interchangeable."""
        token = create_access_token(make_user(StaffRole.ADMIN))
        response = client.post("/api/v1/auth/refresh", json={"refreshToken": token})
        assert response.status_code == 401

    def test_refresh_token_cannot_authenticate(self, client, refresh_token):
        """Test that a refresh token is not accepted as a bearer token."""
        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {refresh_token}"})
        assert response.status_code == 401

    def test_logout(self, client, auth_headers):
        """Test that logout succeeds with or without a token."""
        assert client.post("/api/v1/auth/logout", headers=auth_headers()).status_code == 200
        assert client.post("/api/v1/auth/logout").json() == {"message": "Logged out successfully"}


class TestPublicEndpoints:
    """Tests for health, brand and role catalogue."""

    def test_health(self, client):
        """Test the health check."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert "X-Process-Time" in response.headers
        assert response.headers["X-Request-ID"]

    def test_request_id_is_echoed(self, client):
        """Test that a caller-supplied request id is returned."""
        response = client.get("/health", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    def test_brand(self, client):
        """Test the static brand profile."""
        data = client.get("/api/v1/brand").json()
        assert data["name"] == "Nova Style"
        assert data["contactInfo"]["website"] == "https://www.novastyle.com"

    def test_roles_catalogue(self, client):
        """Test the role catalogue."""
        roles = client.get("/api/v1/roles").json()
        assert [r["role"] for r in roles] == ["admin", "brand_owner", "branch_manager", "staff"]
        staff = roles[3]
        assert staff["displayName"] == "Staff Member"
        assert staff["rank"] == 1
        assert staff["assignableRoles"] == []
        assert len(roles[0]["permissions"]) == 26

    def test_unknown_route(self, client):
        """Test the JSON error body for unknown paths."""
        response = client.get("/api/v1/nowhere")
        assert response.status_code == 404
        assert response.json()["path"] == "/api/v1/nowhere"
