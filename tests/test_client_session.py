"""Tests for the client auth session and its storage backends."""
import json
import pytest

from localstyle.client.session import ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, USER_KEY, AuthSession, default_storage
from localstyle.client.storage import FileStorage, MemoryStorage
from localstyle.core.config import settings
from localstyle.schemas.auth import AuthResponse, AuthTokens
from conftest import make_user


@pytest.fixture
def auth_response():
    return AuthResponse(
        user=make_user(),
        tokens=AuthTokens(access_token="access-1", refresh_token="refresh-1")
    )


@pytest.fixture(params=["memory", "file"])
def storage(request, tmp_path):
    if request.param == "memory":
        return MemoryStorage()
    return FileStorage(tmp_path / "session.json")


class TestAuthSession:
    """Tests for save/load/clear of the stored session."""

    def test_save_then_load(self, storage, auth_response):
        """Test that a saved session is restored by a new session object."""
        AuthSession(storage).save(auth_response)

        restored = AuthSession(storage)
        assert restored.load() is True
        assert restored.is_authenticated
        assert restored.user == auth_response.user
        assert restored.auth_header() == {"Authorization": "Bearer access-1"}

    def test_user_stored_with_camel_case_keys(self, auth_response):
        """Test the stored user payload shape."""
        storage = MemoryStorage()
        AuthSession(storage).save(auth_response)
        assert json.loads(storage.get(USER_KEY))["role"] == "brand_owner"

    def test_empty_storage(self, storage):
        """Test that nothing stored means not authenticated."""
        session = AuthSession(storage)
        assert session.load() is False
        assert not session.is_authenticated
        assert session.auth_header() == {}

    @pytest.mark.parametrize("missing", [ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, USER_KEY])
    def test_incomplete_session_cleared(self, storage, auth_response, missing):
        """Test that a partial session is discarded entirely."""
        AuthSession(storage).save(auth_response)
        storage.remove(missing)

        session = AuthSession(storage)
        assert session.load() is False
        assert all(storage.get(key) is None for key in (ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY, USER_KEY))

    def test_corrupt_user_clears_everything(self, storage, auth_response):
        """Test that an unparseable user drops the tokens too."""
        AuthSession(storage).save(auth_response)
        storage.set(USER_KEY, "{not json")

        session = AuthSession(storage)
        assert session.load() is False
        assert storage.get(ACCESS_TOKEN_KEY) is None
        assert storage.get(REFRESH_TOKEN_KEY) is None

    def test_update_tokens_keeps_user(self, storage, auth_response):
        """Test the refresh path."""
        session = AuthSession(storage)
        session.save(auth_response)
        session.update_tokens(AuthTokens(access_token="access-2", refresh_token="refresh-2"))

        restored = AuthSession(storage)
        assert restored.load()
        assert restored.access_token == "access-2"
        assert restored.user.email == auth_response.user.email

    def test_clear(self, storage, auth_response):
        """Test logout state."""
        session = AuthSession(storage)
        session.save(auth_response)
        session.clear()
        assert not session.is_authenticated
        assert AuthSession(storage).load() is False


class TestFileStorage:
    """Tests for the JSON file backend."""

    def test_unreadable_file_reads_as_empty(self, tmp_path):
        """Test that a corrupt file does not raise."""
        path = tmp_path / "session.json"
        path.write_text("not json", encoding="utf-8")
        assert FileStorage(path).get(ACCESS_TOKEN_KEY) is None

    def test_creates_parent_directories(self, tmp_path):
        """Test writes into a missing directory."""
        storage = FileStorage(tmp_path / "nested" / "dir" / "session.json")
        storage.set("key", "value")
        assert storage.get("key") == "value"
        storage.remove("key")
        assert storage.get("key") is None

    def test_default_storage_follows_settings(self, tmp_path, monkeypatch):
        """Test that SESSION_FILE selects the file backend."""
        monkeypatch.setattr(settings, "session_file", None)
        assert isinstance(default_storage(), MemoryStorage)

        monkeypatch.setattr(settings, "session_file", str(tmp_path / "session.json"))
        storage = default_storage()
        assert isinstance(storage, FileStorage)
        assert storage.path == tmp_path / "session.json"
