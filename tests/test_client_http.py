"""Tests for the API client's error mapping and auth flow."""
import json
import pytest
import requests
from unittest.mock import Mock

from localstyle.client.http import ApiClient, build_http_session
from localstyle.client.session import AuthSession
from localstyle.error_handlers import (
    AppException,
    ConflictError,
    InviteExpiredError,
    PermissionDeniedError,
    ResourceNotFoundError,
    SessionExpiredError,
    TransientError,
    ValidationError,
)
from localstyle.schemas.auth import AuthResponse, AuthTokens
from conftest import make_user


def make_response(status_code, body=None, url="http://api.test/api/v1/x"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.reason = "Reason"
    response._content = json.dumps(body).encode() if body is not None else b""
    return response


def error_body(message, details=None):
    return {"error": message, "details": details or {}, "path": "/api/v1/x"}


@pytest.fixture
def http():
    return Mock(spec=requests.Session)


@pytest.fixture
def session():
    session = AuthSession()
    session.save(AuthResponse(
        user=make_user(),
        tokens=AuthTokens(access_token="access-1", refresh_token="refresh-1")
    ))
    return session


@pytest.fixture
def api(http, session):
    return ApiClient(base_url="http://api.test/api/v1/", session=session, timeout=2, http=http)


class TestRequests:
    """Tests for request construction."""

    def test_sends_bearer_and_timeout(self, api, http):
        """Test the headers, url and timeout of a GET."""
        http.request.return_value = make_response(200, {"ok": True})

        assert api.get("products", params={"page": 2}) == {"ok": True}

        http.request.assert_called_once_with(
            "GET",
            "http://api.test/api/v1/products",
            params={"page": 2},
            json=None,
            headers={"Authorization": "Bearer access-1"},
            timeout=2,
        )

    def test_empty_body(self, api, http):
        """Test that an empty success body decodes to None."""
        http.request.return_value = make_response(204)
        assert api.delete("products/prod_001") is None

    def test_retry_configuration(self):
        """Test that only idempotent methods retry gateway failures."""
        retry = build_http_session(max_retries=2, backoff_factor=0.1).get_adapter("https://api.test").max_retries
        assert retry.total == 2
        assert retry.backoff_factor == 0.1
        assert 503 in retry.status_forcelist
        assert "GET" in retry.allowed_methods
        assert "POST" not in retry.allowed_methods


class TestErrorMapping:
    """Tests for mapping error responses onto exceptions."""

    def test_unauthorized_clears_session(self, api, http, session):
        """Test that a 401 ends the stored session."""
        http.request.return_value = make_response(401, error_body("Not authenticated"))

        with pytest.raises(SessionExpiredError):
            api.get("auth/me")
        assert not session.is_authenticated
        assert session.auth_header() == {}

    def test_not_found(self, api, http):
        """Test 404 mapping keeps the resource details."""
        http.request.return_value = make_response(
            404, error_body("missing", {"resource": "Product", "identifier": "prod_999"})
        )
        with pytest.raises(ResourceNotFoundError) as exc_info:
            api.get("products/prod_999")
        assert exc_info.value.details == {"resource": "Product", "identifier": "prod_999"}

    def test_conflict(self, api, http):
        """Test 409 mapping keeps the reason."""
        http.request.return_value = make_response(
            409, error_body("Category has subcategories", {"reason": "has_children"})
        )
        with pytest.raises(ConflictError) as exc_info:
            api.delete("categories/1")
        assert exc_info.value.reason == "has_children"
        assert exc_info.value.message == "Category has subcategories"

    def test_gone(self, api, http):
        """Test 410 mapping for expired invites."""
        http.request.return_value = make_response(
            410, error_body("Invite has expired", {"invite_id": "invite_002", "expires_at": "2024-02-01"})
        )
        with pytest.raises(InviteExpiredError) as exc_info:
            api.put("staff/invites/invite_002", json={"status": "accepted"})
        assert exc_info.value.status_code == 410

    def test_forbidden(self, api, http):
        """Test 403 mapping."""
        http.request.return_value = make_response(
            403, error_body("denied", {"actor_role": "brand_owner", "target_role": "admin"})
        )
        with pytest.raises(PermissionDeniedError):
            api.post("staff", json={})

    @pytest.mark.parametrize("code", [400, 422])
    def test_validation(self, api, http, code):
        """Test 400/422 mapping keeps field errors."""
        errors = [{"field": "body -> name", "message": "Field required", "type": "missing"}]
        http.request.return_value = make_response(
            code, error_body("Validation failed", {"validation_errors": errors})
        )
        with pytest.raises(ValidationError) as exc_info:
            api.post("categories", json={})
        assert exc_info.value.details["validation_errors"] == errors

    def test_server_error_is_transient(self, api, http):
        """Test 5xx mapping."""
        http.request.return_value = make_response(503, {"error": "Service unavailable"})
        with pytest.raises(TransientError):
            api.get("products")

    def test_non_json_error_body(self, api, http):
        """Test that an unexpected status with a text body still raises."""
        response = make_response(418)
        response._content = b"teapot"
        http.request.return_value = response
        with pytest.raises(AppException) as exc_info:
            api.get("products")
        assert exc_info.value.status_code == 418

    @pytest.mark.parametrize("error", [
        requests.ConnectionError("refused"),
        requests.exceptions.RetryError("too many 503s"),
    ])
    def test_network_failures_are_transient(self, api, http, session, error):
        """Test that connection failures keep the session."""
        http.request.side_effect = error
        with pytest.raises(TransientError):
            api.get("products")
        assert session.is_authenticated

    def test_timeout_clears_session(self, api, http, session):
        """Test that a timeout tears down the session and is transient."""
        http.request.side_effect = requests.Timeout("read timed out")
        with pytest.raises(TransientError):
            api.get("products")
        assert not session.is_authenticated
        assert session.access_token is None


class TestAuthFlow:
    """Tests for login, refresh and logout."""

    def test_login_saves_session(self, http):
        """Test that login persists user and tokens."""
        user = make_user()
        http.request.return_value = make_response(200, {
            "user": user.model_dump(mode="json", by_alias=True),
            "tokens": {"accessToken": "a", "refreshToken": "r"},
        })
        api = ApiClient(base_url="http://api.test/api/v1", http=http)

        assert api.login("sarah", "secret") == user
        assert api.session.is_authenticated
        assert http.request.call_args.kwargs["json"] == {"username": "sarah", "password": "secret"}

    def test_refresh_swaps_tokens(self, api, http, session):
        """Test token refresh."""
        http.request.return_value = make_response(200, {"tokens": {"accessToken": "a2", "refreshToken": "r2"}})
        api.refresh()
        assert session.access_token == "a2"
        assert http.request.call_args.kwargs["json"] == {"refreshToken": "refresh-1"}

    def test_refresh_without_session(self, http):
        """Test that refresh needs a stored refresh token."""
        with pytest.raises(SessionExpiredError):
            ApiClient(base_url="http://api.test", http=http).refresh()
        http.request.assert_not_called()

    def test_logout_clears_even_on_failure(self, api, http, session):
        """Test that the local session is dropped when the API is unreachable."""
        http.request.side_effect = requests.ConnectionError("down")
        with pytest.raises(TransientError):
            api.logout()
        assert not session.is_authenticated
