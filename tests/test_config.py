# Tests for config.py
# Created: 2026-10-19

import pytest
from pydantic import ValidationError

from deezer_oauth.config import DEFAULT_AUTH_URL, DEFAULT_TOKEN_URL, Settings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("DEEZER_AUTH_URL", raising=False)
    monkeypatch.delenv("DEEZER_TOKEN_URL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.auth_url == DEFAULT_AUTH_URL
        assert settings.token_url == DEFAULT_TOKEN_URL
        assert settings.auth_url.startswith("https://connect.deezer.com/")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("DEEZER_TOKEN_URL", "http://localhost:9999/token")
        settings = Settings(_env_file=None)
        assert settings.token_url == "http://localhost:9999/token"
        assert settings.auth_url == DEFAULT_AUTH_URL

    def test_dotenv_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("DEEZER_AUTH_URL=http://localhost:9999/auth\n")
        settings = Settings(_env_file=env_file)
        assert settings.auth_url == "http://localhost:9999/auth"

    def test_kwargs(self):
        settings = Settings(auth_url="http://a", token_url="http://t")
        assert settings.auth_url == "http://a"
        assert settings.token_url == "http://t"

    @pytest.mark.parametrize("field", ["auth_url", "token_url"])
    def test_empty_url_rejected(self, field):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: ""})

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
