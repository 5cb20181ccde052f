"""Tests for the client facade and factory."""

import dataclasses
from collections.abc import Callable

import dailymotion_sdk
import httpx
import pytest
from dailymotion_sdk import DailymotionClient, create_client
from dailymotion_sdk.config import ApiKeyType, DailymotionOptions
from dailymotion_sdk.exceptions import AuthenticationRequiredError
from dailymotion_sdk.http import DailymotionHttpClient
from dailymotion_sdk.models.enums import AuthState
from dailymotion_sdk.models.fields import VideoField

from conftest import RequestLog, make_jwt

MakeHttp = Callable[..., DailymotionHttpClient]

TOKEN = {"access_token": "access", "expires_in": 3600}


def token_then(body: dict) -> Callable[[httpx.Request], httpx.Response]:
    """Answer OAuth token requests with TOKEN and anything else with body."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/token"):
            return httpx.Response(200, json=TOKEN)
        return httpx.Response(200, json=body)

    return handler


class TestAuthenticate:
    """Tests for picking the grant from configured credentials."""

    def test_uses_client_credentials_without_user(
        self, make_http: MakeHttp, request_log: RequestLog, options: DailymotionOptions
    ) -> None:
        client = DailymotionClient(options, http_client=make_http(token_then({})))

        assert client.authenticate().is_successful

        form = request_log.form()
        assert form["grant_type"] == "client_credentials"
        assert form["client_id"] == "public-key"
        assert client.auth.state == AuthState.APPLICATION

    def test_uses_password_grant_with_user(
        self, make_http: MakeHttp, request_log: RequestLog, options: DailymotionOptions
    ) -> None:
        opts = dataclasses.replace(options, username="alice", password="pw")
        client = DailymotionClient(opts, http_client=make_http(token_then({}), opts))

        client.authenticate()

        form = request_log.form()
        assert form["grant_type"] == "password"
        assert form["username"] == "alice"
        assert client.is_authenticated

    def test_private_key_type(
        self, make_http: MakeHttp, request_log: RequestLog, options: DailymotionOptions
    ) -> None:
        opts = dataclasses.replace(options, api_key_type=ApiKeyType.PRIVATE)
        client = DailymotionClient(opts, http_client=make_http(token_then({}), opts))

        client.authenticate()

        assert request_log.form()["client_id"] == "private-key"
        assert request_log.last.url.host == "partner.api.dailymotion.com"

    def test_revoke_clears_authentication(
        self, make_http: MakeHttp, options: DailymotionOptions
    ) -> None:
        client = DailymotionClient(options, http_client=make_http(token_then({})))
        client.authenticate()
        client.revoke_token()
        assert not client.is_authenticated


class TestFacade:
    """Tests for services reached through the client."""

    def test_get_video(
        self,
        make_http: MakeHttp,
        request_log: RequestLog,
        options: DailymotionOptions,
        video_payload: dict,
    ) -> None:
        with DailymotionClient(
            options, http_client=make_http(token_then(video_payload))
        ) as client:
            video = client.get_video("x8abc12", [VideoField.TITLE])

        assert video is not None
        assert video.title == "Surf session"
        assert request_log.last.url.path == "/video/x8abc12"

    def test_application_token_cannot_reach_me(
        self, make_http: MakeHttp, options: DailymotionOptions
    ) -> None:
        app_token = {"access_token": make_jwt({"aud": "app"}), "expires_in": 60}
        client = DailymotionClient(
            options,
            http_client=make_http(lambda r: httpx.Response(200, json=app_token)),
        )
        client.authenticate()

        with pytest.raises(AuthenticationRequiredError):
            client.mine.get_videos()

    def test_scoped_services(
        self, make_http: MakeHttp, options: DailymotionOptions
    ) -> None:
        client = DailymotionClient(options, http_client=make_http(token_then({})))
        assert client.user("x1").user_id == "x1"
        assert client.playlist("p1").playlist_id == "p1"
        with pytest.raises(ValueError):
            client.user(" ")

    def test_invalid_options_raise(self) -> None:
        with pytest.raises(ValueError):
            DailymotionClient(DailymotionOptions(max_retries=0))


class TestCreateClient:
    """Tests for create_client factory function."""

    def test_creates_client_with_defaults(self) -> None:
        """Should create client with default options."""
        with create_client() as client:
            assert isinstance(client, DailymotionClient)
            assert client.options == DailymotionOptions()

    def test_overrides_replace_option_fields(self) -> None:
        base = DailymotionOptions(public_api_key="a", timeout=5.0)
        with create_client(base, public_api_key="b") as client:
            assert client.options.public_api_key == "b"
            assert client.options.timeout == 5.0

    def test_unknown_override_raises(self) -> None:
        with pytest.raises(TypeError):
            create_client(not_an_option=True)


class TestPublicAPI:
    """Tests for public API exports."""

    def test_all_expected_exports_available(self) -> None:
        """All names in __all__ should be importable."""
        for name in dailymotion_sdk.__all__:
            assert hasattr(dailymotion_sdk, name), name
