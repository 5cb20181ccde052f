"""Tests for client configuration."""

import pytest
from dailymotion_sdk.config import (
    PRIVATE_API_BASE_URL,
    PUBLIC_API_BASE_URL,
    ApiKeyType,
    DailymotionOptions,
    DailymotionSettings,
    oauth_base_url,
)

PREFIX = "DMTEST_"


class TestDailymotionOptions:
    """Tests for DailymotionOptions."""

    def test_defaults(self) -> None:
        options = DailymotionOptions()
        assert options.api_key_type == ApiKeyType.PUBLIC
        assert options.api_base_url == PUBLIC_API_BASE_URL
        assert options.max_retries == 3
        assert not options.has_user_credentials
        options.validate()

    def test_private_key_type_selects_partner_host(self) -> None:
        options = DailymotionOptions(
            api_key_type=ApiKeyType.PRIVATE,
            public_api_key="pub",
            private_api_key="priv",
            private_api_secret="s",
        )
        assert options.api_base_url == PRIVATE_API_BASE_URL
        assert options.api_credentials == ("priv", "s")

    def test_oauth_base_url(self) -> None:
        assert oauth_base_url(ApiKeyType.PUBLIC).endswith("dailymotion.com/oauth")
        assert oauth_base_url(ApiKeyType.PRIVATE).endswith("/oauth/v1")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"timeout": 0},
            {"max_retries": 0},
            {"retry_backoff": -1.0},
            {"request_delay": -0.1},
        ],
    )
    def test_validate_rejects_bad_values(self, overrides: dict) -> None:
        with pytest.raises(ValueError):
            DailymotionOptions(**overrides).validate()


class TestFromEnv:
    """Tests for reading options from environment variables."""

    def test_reads_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(f"{PREFIX}API_KEY_TYPE", "PRIVATE")
        monkeypatch.setenv(f"{PREFIX}PRIVATE_API_KEY", " key ")
        monkeypatch.setenv(f"{PREFIX}PRIVATE_API_SECRET", "secret")
        monkeypatch.setenv(f"{PREFIX}USERNAME", "alice")
        monkeypatch.setenv(f"{PREFIX}PASSWORD", "pw")
        monkeypatch.setenv(f"{PREFIX}SCOPES", "manage_videos, read_insights")
        monkeypatch.setenv(f"{PREFIX}TIMEOUT", "15")

        options = DailymotionOptions.from_env(PREFIX)

        assert options.api_key_type == ApiKeyType.PRIVATE
        assert options.api_credentials == ("key", "secret")
        assert options.has_user_credentials
        assert options.scopes == ("manage_videos", "read_insights")
        assert options.timeout == 15.0

    def test_empty_environment_gives_defaults(self) -> None:
        options = DailymotionOptions.from_env(PREFIX)
        assert options == DailymotionOptions()

    @pytest.mark.parametrize(
        ("name", "value"), [("API_KEY_TYPE", "secret"), ("TIMEOUT", "soon")]
    )
    def test_invalid_values_raise(
        self, monkeypatch: pytest.MonkeyPatch, name: str, value: str
    ) -> None:
        monkeypatch.setenv(f"{PREFIX}{name}", value)
        with pytest.raises(ValueError):
            DailymotionOptions.from_env(PREFIX)

    def test_empty_variables_are_ignored(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(f"{PREFIX}TIMEOUT", "")
        monkeypatch.setenv(f"{PREFIX}SCOPES", "")
        options = DailymotionOptions.from_env(PREFIX)
        assert options.timeout == 60.0
        assert options.scopes == ()

    def test_non_positive_timeout_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(f"{PREFIX}TIMEOUT", "0")
        with pytest.raises(ValueError, match="timeout"):
            DailymotionOptions.from_env(PREFIX)


class TestDailymotionSettings:
    """Tests for the environment settings model."""

    def test_default_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DAILYMOTION_PUBLIC_API_KEY", "from-env")
        settings = DailymotionSettings(_env_file=None)
        assert settings.public_api_key == "from-env"

    def test_scopes_accept_sequences(self) -> None:
        settings = DailymotionSettings(_env_file=None, scopes=["manage_videos"])
        assert settings.to_options().scopes == ("manage_videos",)
