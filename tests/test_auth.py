"""Tests for the OAuth token manager."""

from collections.abc import Callable
from datetime import UTC, datetime

import httpx
import pytest
from dailymotion_sdk.auth import TokenManager, revoke_url, token_info_url, token_url
from dailymotion_sdk.config import ApiKeyType
from dailymotion_sdk.http import DailymotionHttpClient
from dailymotion_sdk.models.auth import TokenResponse
from dailymotion_sdk.models.enums import AuthState, OAuthScope

from conftest import RequestLog, make_jwt

MakeHttp = Callable[..., DailymotionHttpClient]

USER_TOKEN = {
    "access_token": "user-access",
    "token_type": "Bearer",
    "expires_in": 36000,
    "refresh_token": "user-refresh",
    "scope": "manage_videos read_insights",
    "uid": "x1user",
}
APP_TOKEN = {"access_token": "app-access", "expires_in": 3600}


def respond(status: int, body: dict) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status, json=body)


class TestEndpoints:
    """Tests for OAuth endpoint selection."""

    @pytest.mark.parametrize(
        ("key_type", "expected"),
        [
            (ApiKeyType.PUBLIC, "https://api.dailymotion.com/oauth/token"),
            (
                ApiKeyType.PRIVATE,
                "https://partner.api.dailymotion.com/oauth/v1/token",
            ),
        ],
    )
    def test_token_url(self, key_type: ApiKeyType, expected: str) -> None:
        assert token_url(key_type) == expected

    def test_info_and_revoke_share_base(self) -> None:
        assert token_info_url(ApiKeyType.PUBLIC).endswith("/oauth/token/info")
        assert revoke_url(ApiKeyType.PRIVATE) == (
            "https://partner.api.dailymotion.com/oauth/v1/revoke"
        )


class TestPasswordGrant:
    """Tests for authenticate_with_password."""

    def test_success(self, make_http: MakeHttp, request_log: RequestLog) -> None:
        http = make_http(respond(200, USER_TOKEN))
        manager = TokenManager(http)

        token = manager.authenticate_with_password(
            "alice", "secret", [OAuthScope.MANAGE_VIDEOS, OAuthScope.MANAGE_VIDEOS]
        )

        assert token.is_successful
        assert token.is_user_authentication
        assert manager.state == AuthState.USER
        assert manager.access_token == "user-access"
        assert http.access_token == "user-access"
        assert str(request_log.last.url) == "https://api.dailymotion.com/oauth/token"
        assert request_log.form() == {
            "grant_type": "password",
            "username": "alice",
            "password": "secret",
            "client_id": "public-key",
            "client_secret": "public-secret",
            "scope": "manage_videos",
        }

    def test_rejected_returns_empty_token(self, make_http: MakeHttp) -> None:
        """A 400 gives a token with an empty access_token and no state change."""
        http = make_http(
            respond(400, {"error": "invalid_grant", "error_description": "Bad"})
        )
        manager = TokenManager(http)

        token = manager.authenticate_with_password("alice", "wrong")

        assert token.access_token == ""
        assert not token.is_successful
        assert manager.state == AuthState.UNAUTHENTICATED
        assert http.access_token is None

    def test_missing_access_token_is_a_failure(self, make_http: MakeHttp) -> None:
        manager = TokenManager(make_http(respond(200, {"token_type": "Bearer"})))
        assert not manager.authenticate_with_password("alice", "pw").is_successful
        assert not manager.is_authenticated

    @pytest.mark.parametrize(("username", "password"), [("", "pw"), ("alice", " ")])
    def test_blank_credentials_raise(
        self, make_http: MakeHttp, username: str, password: str
    ) -> None:
        manager = TokenManager(make_http(respond(200, USER_TOKEN)))
        with pytest.raises(ValueError):
            manager.authenticate_with_password(username, password)

    def test_transport_failure_returns_empty_token(self, make_http: MakeHttp) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        manager = TokenManager(make_http(refuse))
        assert manager.authenticate_with_password("alice", "pw") == (
            TokenResponse.failed()
        )


class TestClientCredentialsGrant:
    """Tests for authenticate_with_client_credentials."""

    def test_public_key(self, make_http: MakeHttp, request_log: RequestLog) -> None:
        http = make_http(respond(200, APP_TOKEN))
        manager = TokenManager(http)

        token = manager.authenticate_with_client_credentials("key", "secret")

        assert token.is_application_authentication
        assert manager.state == AuthState.APPLICATION
        assert request_log.form()["grant_type"] == "client_credentials"
        assert request_log.last.url.host == "api.dailymotion.com"

    def test_private_key_switches_endpoints(
        self, make_http: MakeHttp, request_log: RequestLog
    ) -> None:
        http = make_http(respond(200, APP_TOKEN))
        manager = TokenManager(http)

        manager.authenticate_with_client_credentials(
            "pkey", "psecret", ApiKeyType.PRIVATE
        )

        assert str(request_log.last.url) == (
            "https://partner.api.dailymotion.com/oauth/v1/token"
        )
        assert manager.api_key_type == ApiKeyType.PRIVATE
        assert http.base_url == "https://partner.api.dailymotion.com/rest"

    def test_failure_keeps_previous_token(self, make_http: MakeHttp) -> None:
        responses = iter(
            [httpx.Response(200, json=APP_TOKEN), httpx.Response(401, json={})]
        )
        manager = TokenManager(make_http(lambda r: next(responses)))
        manager.authenticate_with_client_credentials("key", "secret")

        failed = manager.authenticate_with_client_credentials("key", "bad")

        assert not failed.is_successful
        assert manager.access_token == "app-access"
        assert manager.state == AuthState.APPLICATION


class TestAuthorizationCode:
    def test_exchange_code(self, make_http: MakeHttp, request_log: RequestLog) -> None:
        manager = TokenManager(make_http(respond(200, USER_TOKEN)))
        token = manager.exchange_code("the-code", "https://app.example.com/cb")
        assert token.is_successful
        assert manager.state == AuthState.USER
        form = request_log.form()
        assert form["grant_type"] == "authorization_code"
        assert form["code"] == "the-code"
        assert form["redirect_uri"] == "https://app.example.com/cb"

    def test_missing_redirect_uri_raises(self, make_http: MakeHttp) -> None:
        manager = TokenManager(make_http(respond(200, USER_TOKEN)))
        with pytest.raises(ValueError, match="redirect_uri"):
            manager.exchange_code("the-code")


class TestRefresh:
    """Tests for refreshing tokens."""

    def test_keeps_old_refresh_token_when_none_returned(
        self, make_http: MakeHttp, request_log: RequestLog
    ) -> None:
        responses = iter(
            [
                httpx.Response(200, json=USER_TOKEN),
                httpx.Response(200, json={"access_token": "new", "expires_in": 60}),
            ]
        )
        manager = TokenManager(make_http(lambda r: next(responses)))
        manager.authenticate_with_password("alice", "pw")

        token = manager.refresh()

        assert token.access_token == "new"
        assert token.refresh_token == "user-refresh"
        assert manager.state == AuthState.USER
        assert request_log.form()["refresh_token"] == "user-refresh"

    def test_without_refresh_token_raises(self, make_http: MakeHttp) -> None:
        manager = TokenManager(make_http(respond(200, APP_TOKEN)))
        with pytest.raises(ValueError, match="refresh_token"):
            manager.refresh()

    def test_failure_returns_empty_token(self, make_http: MakeHttp) -> None:
        manager = TokenManager(make_http(respond(400, {"error": "invalid_grant"})))
        assert manager.refresh("stale").access_token == ""


class TestValidateAndRevoke:
    """Tests for token introspection and revocation."""

    def test_validate_without_token(self, make_http: MakeHttp) -> None:
        assert TokenManager(make_http(respond(200, {}))).validate_token() is None

    def test_validate_success(
        self, make_http: MakeHttp, request_log: RequestLog
    ) -> None:
        responses = iter(
            [
                httpx.Response(200, json=USER_TOKEN),
                httpx.Response(200, json={"valid": True, "uid": 42}),
            ]
        )
        manager = TokenManager(make_http(lambda r: next(responses)))
        manager.authenticate_with_password("alice", "pw")

        result = manager.validate_token()

        assert result is not None
        assert result.valid is True
        assert result.uid == "42"
        assert str(request_log.last.url).endswith("/oauth/token/info")
        assert request_log.last.headers["Authorization"] == "Bearer user-access"

    def test_validate_failure_returns_none(self, make_http: MakeHttp) -> None:
        responses = iter(
            [httpx.Response(200, json=USER_TOKEN), httpx.Response(401, json={})]
        )
        manager = TokenManager(make_http(lambda r: next(responses)))
        manager.authenticate_with_password("alice", "pw")
        assert manager.validate_token() is None

    @pytest.mark.parametrize(("status", "expected"), [(200, True), (500, False)])
    def test_revoke_always_clears(
        self, make_http: MakeHttp, status: int, expected: bool
    ) -> None:
        responses = iter(
            [httpx.Response(200, json=USER_TOKEN)]
            + [httpx.Response(status, json={})] * 3
        )
        http = make_http(lambda r: next(responses))
        manager = TokenManager(http)
        manager.authenticate_with_password("alice", "pw")

        assert manager.revoke() is expected
        assert manager.state == AuthState.UNAUTHENTICATED
        assert manager.token is None
        assert http.access_token is None

    def test_revoke_without_token(self, make_http: MakeHttp) -> None:
        manager = TokenManager(make_http(respond(200, {})))
        assert manager.revoke() is False


class TestExpiry:
    def test_expires_at_from_expires_in(self, make_http: MakeHttp) -> None:
        manager = TokenManager(make_http(respond(200, USER_TOKEN)))
        before = datetime.now(UTC)
        manager.authenticate_with_password("alice", "pw")
        assert manager.expires_at is not None
        assert (manager.expires_at - before).total_seconds() >= 36000
        assert not manager.is_token_expired

    def test_no_token_is_expired(self, make_http: MakeHttp) -> None:
        assert TokenManager(make_http(respond(200, {}))).is_token_expired


class TestTokenResponse:
    """Tests for TokenResponse helpers."""

    def test_scopes_split(self) -> None:
        token = TokenResponse.model_validate(USER_TOKEN)
        assert token.scopes == ["manage_videos", "read_insights"]

    def test_application_token_has_no_uid(self) -> None:
        token = TokenResponse(access_token=make_jwt({"aud": "x"}))
        assert token.is_application_authentication
        assert not token.is_user_authentication
