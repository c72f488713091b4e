"""
HTTP client for the brand admin API.

Wraps a ``requests.Session`` with a fixed timeout, bearer auth from the
``AuthSession`` and retry with exponential backoff. Error responses are
mapped back onto the application exception types:

- 401 clears the stored session and raises ``SessionExpiredError``
- a timeout (after retries) also clears the session, then raises ``TransientError``
- connection failures (after retries) raise ``TransientError`` and keep the session
- 404, 409, 410, 403 and 400/422 raise their matching errors
"""
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from localstyle.client.session import AuthSession
from localstyle.core.config import settings
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
from localstyle.logging_config import get_logger
from localstyle.models.user import AuthUser
from localstyle.schemas.auth import AuthResponse, TokenResponse

logger = get_logger("client.http")

RETRY_STATUSES = (502, 503, 504)
IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS", "PUT", "DELETE"})


def build_http_session(max_retries: int, backoff_factor: float) -> requests.Session:
    """``requests.Session`` retrying connection errors and gateway failures on idempotent methods."""
    retry = Retry(
        total=max_retries,
        connect=max_retries,
        read=max_retries,
        status=max_retries,
        backoff_factor=backoff_factor,
        status_forcelist=RETRY_STATUSES,
        allowed_methods=IDEMPOTENT_METHODS,
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    http = requests.Session()
    http.mount("http://", adapter)
    http.mount("https://", adapter)
    return http


class ApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[AuthSession] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        backoff_factor: Optional[float] = None,
        http: Optional[requests.Session] = None
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.session = session if session is not None else AuthSession()
        self.timeout = timeout or settings.client_timeout_seconds
        self.http = http or build_http_session(
            settings.client_max_retries if max_retries is None else max_retries,
            settings.client_backoff_factor if backoff_factor is None else backoff_factor,
        )

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Any = None
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        Raises:
            SessionExpiredError: On 401; the session has been cleared
            TransientError: On timeout (session cleared), connection failure or 5xx
            AppException: The matching subclass for any other error status
        """
        try:
            response = self.http.request(
                method,
                self.url(path),
                params=params,
                json=json,
                headers=self.session.auth_header(),
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            logger.warning(f"{method} {path} timed out after {self.timeout}s; clearing session")
            self.session.clear()
            raise TransientError(f"Request to {path} timed out", original_error=str(e))
        except (requests.ConnectionError, requests.exceptions.RetryError) as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise TransientError(f"Could not reach the API for {path}", original_error=str(e))

        return self._handle_response(response)

    def _handle_response(self, response: requests.Response) -> Any:
        if response.ok:
            return response.json() if response.content else None

        code = response.status_code
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        message = body.get("error") or response.reason or f"HTTP {code}"
        details = body.get("details") or {}

        if code == 401:
            logger.warning("API rejected the session credentials; clearing session")
            self.session.clear()
            raise SessionExpiredError()
        if code == 404:
            raise ResourceNotFoundError(
                details.get("resource", "Resource"),
                details.get("identifier", response.url)
            )
        if code == 410:
            raise InviteExpiredError(details.get("invite_id", ""), details.get("expires_at", ""))
        if code == 409:
            raise ConflictError(message, reason=details.get("reason", "conflict"), details=details)
        if code == 403:
            raise PermissionDeniedError(details.get("actor_role", ""), details.get("target_role", ""))
        if code in (400, 422):
            raise ValidationError(message, errors=details.get("validation_errors", []))
        if code >= 500:
            raise TransientError(message, original_error=f"HTTP {code}")
        raise AppException(message, status_code=code, details=details)

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    # Auth

    def login(self, username: str, password: str) -> AuthUser:
        """Log in and persist the returned user and tokens."""
        auth = AuthResponse.model_validate(
            self.post("auth/login", json={"username": username, "password": password})
        )
        self.session.save(auth)
        return auth.user

    def refresh(self) -> None:
        """Exchange the refresh token for a new token pair."""
        if not self.session.refresh_token:
            raise SessionExpiredError()
        response = TokenResponse.model_validate(
            self.post("auth/refresh", json={"refreshToken": self.session.refresh_token})
        )
        self.session.update_tokens(response.tokens)

    def logout(self) -> None:
        """Tell the API, then drop the local session even if the call failed."""
        try:
            self.post("auth/logout")
        finally:
            self.session.clear()
