"""
Client-side auth session.

The session is all-or-nothing: user, access token and refresh token are
saved, loaded and cleared together. If any of them is missing or the stored
user cannot be parsed, everything is discarded.
"""
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from localstyle.client.storage import FileStorage, KeyValueStorage, MemoryStorage
from localstyle.core.config import settings
from localstyle.logging_config import get_logger
from localstyle.models.user import AuthUser
from localstyle.schemas.auth import AuthResponse, AuthTokens

logger = get_logger("client.session")

ACCESS_TOKEN_KEY = "accessToken"
REFRESH_TOKEN_KEY = "refreshToken"
USER_KEY = "user"
SESSION_KEYS = (ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, USER_KEY)


def default_storage() -> KeyValueStorage:
    """File storage when SESSION_FILE is configured, otherwise in-memory."""
    if settings.session_file:
        return FileStorage(settings.session_file)
    return MemoryStorage()


class AuthSession:
    def __init__(self, storage: Optional[KeyValueStorage] = None):
        self.storage = storage if storage is not None else default_storage()
        self.user: Optional[AuthUser] = None
        self.access_token: Optional[str] = None
        self.refresh_token: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user and self.access_token and self.refresh_token)

    def save(self, auth: AuthResponse) -> None:
        """Adopt a login response and persist it."""
        self.user = auth.user
        self.access_token = auth.tokens.access_token
        self.refresh_token = auth.tokens.refresh_token
        self.storage.set(ACCESS_TOKEN_KEY, self.access_token)
        self.storage.set(REFRESH_TOKEN_KEY, self.refresh_token)
        self.storage.set(USER_KEY, self.user.model_dump_json(by_alias=True))
        logger.info(f"Session saved for {self.user.email}")

    def load(self) -> bool:
        """
        Restore the session from storage.

        Returns:
            True when a complete, valid session was restored
        """
        values = {key: self.storage.get(key) for key in SESSION_KEYS}
        if not all(values.values()):
            if any(values.values()):
                logger.warning("Discarding incomplete stored session")
            self.clear()
            return False

        try:
            user = AuthUser.model_validate_json(values[USER_KEY])
        except PydanticValidationError:
            logger.warning("Discarding stored session with an unreadable user")
            self.clear()
            return False

        self.user = user
        self.access_token = values[ACCESS_TOKEN_KEY]
        self.refresh_token = values[REFRESH_TOKEN_KEY]
        return True

    def clear(self) -> None:
        for key in SESSION_KEYS:
            self.storage.remove(key)
        self.user = None
        self.access_token = None
        self.refresh_token = None

    def update_tokens(self, tokens: AuthTokens) -> None:
        """Swap in a refreshed token pair, keeping the user."""
        self.access_token = tokens.access_token
        self.refresh_token = tokens.refresh_token
        self.storage.set(ACCESS_TOKEN_KEY, self.access_token)
        self.storage.set(REFRESH_TOKEN_KEY, self.refresh_token)

    def auth_header(self) -> dict[str, str]:
        if not self.access_token:
            return {}
        return {"Authorization": f"Bearer {self.access_token}"}
