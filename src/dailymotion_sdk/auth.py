"""OAuth 2.0 token lifecycle for the Dailymotion API."""

import logging
from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from pydantic import ValidationError

from dailymotion_sdk.config import ApiKeyType, DailymotionOptions, oauth_base_url
from dailymotion_sdk.exceptions import APIError
from dailymotion_sdk.http import ApiResponse, DailymotionHttpClient
from dailymotion_sdk.models.auth import (
    ErrorData,
    TokenResponse,
    TokenValidationResponse,
)
from dailymotion_sdk.models.enums import AuthState, OAuthScope

logger = logging.getLogger(__name__)


def token_url(key_type: ApiKeyType) -> str:
    return f"{oauth_base_url(key_type)}/token"


def token_info_url(key_type: ApiKeyType) -> str:
    return f"{oauth_base_url(key_type)}/token/info"


def revoke_url(key_type: ApiKeyType) -> str:
    return f"{oauth_base_url(key_type)}/revoke"


def _join_scopes(scopes: Iterable[OAuthScope | str] | None) -> str:
    return " ".join(dict.fromkeys(str(s) for s in scopes or [] if str(s).strip()))


def _require(value: str | None, name: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{name} cannot be empty")
    return value


class TokenManager:
    """Runs OAuth grant flows and holds the resulting token.

    The manager is a single mutable cell: each successful grant replaces the
    held token and pushes it to the HTTP client. Instances are independent,
    so several authenticated sessions can coexist. A manager shared between
    threads must have its writes (grants, refresh, revoke) serialized by the
    caller; nothing here locks.

    Grant failures do not raise. They return ``TokenResponse.failed()``,
    whose ``access_token`` is empty, and leave the held state unchanged.

    State transitions:
        UNAUTHENTICATED -> APPLICATION (client credentials)
        UNAUTHENTICATED -> USER (password, authorization code)
        APPLICATION | USER -> same state, new token (refresh)
        any -> UNAUTHENTICATED (revoke, clear)
    """

    def __init__(
        self,
        http_client: DailymotionHttpClient,
        options: DailymotionOptions | None = None,
    ) -> None:
        self._http = http_client
        self._options = options or http_client.options
        self._token: TokenResponse | None = None
        self._state = AuthState.UNAUTHENTICATED
        self._key_type = self._options.api_key_type
        self._client_id = ""
        self._client_secret = ""
        self._expires_at: datetime | None = None

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def token(self) -> TokenResponse | None:
        return self._token

    @property
    def access_token(self) -> str | None:
        return self._token.access_token if self._token else None

    @property
    def refresh_token(self) -> str | None:
        return self._token.refresh_token if self._token else None

    @property
    def api_key_type(self) -> ApiKeyType:
        return self._key_type

    @property
    def expires_at(self) -> datetime | None:
        """When the held token expires, computed from ``expires_in``."""
        return self._expires_at

    @property
    def is_token_expired(self) -> bool:
        """Advisory expiry check; the held token is never dropped on expiry."""
        if self._expires_at is None:
            return self._token is None
        return datetime.now(UTC) >= self._expires_at

    @property
    def is_authenticated(self) -> bool:
        return self._state != AuthState.UNAUTHENTICATED

    def _exchange(
        self, url: str, form: dict[str, str], grant: str
    ) -> TokenResponse | None:
        """POST a grant request and parse the token, or None on failure."""
        try:
            response = self._http.request_absolute("POST", url, data=form)
        except APIError as e:
            logger.error("%s grant failed: %s", grant, e.message)
            return None

        if not response.is_success:
            logger.error(
                "%s grant rejected (%d): %s",
                grant,
                response.status_code,
                self._describe_error(response),
            )
            return None

        try:
            token = TokenResponse.model_validate(response.json() or {})
        except ValidationError as e:
            logger.error("%s grant returned an unreadable token: %s", grant, e)
            return None
        if not token.is_successful:
            logger.error("%s grant returned no access token", grant)
            return None
        return token

    @staticmethod
    def _describe_error(response: ApiResponse) -> str | None:
        data = response.json()
        if isinstance(data, dict):
            try:
                error = ErrorData.model_validate(data)
            except ValidationError:
                return response.error_message
            if error.error_description or error.error:
                return error.error_description or error.error
        return response.error_message

    def _store(
        self,
        token: TokenResponse,
        state: AuthState,
        key_type: ApiKeyType,
        client_id: str,
        client_secret: str,
    ) -> None:
        self._token = token
        self._state = state
        self._key_type = key_type
        self._client_id = client_id
        self._client_secret = client_secret
        self._expires_at = (
            datetime.now(UTC) + timedelta(seconds=token.expires_in)
            if token.expires_in > 0
            else None
        )
        self._http.set_access_token(token.access_token)
        self._http.set_api_key_type(key_type)

    def authenticate_with_password(
        self,
        username: str,
        password: str,
        scopes: Iterable[OAuthScope | str] | None = None,
        api_key: str | None = None,
        api_secret: str | None = None,
    ) -> TokenResponse:
        """Run the password grant against the public token endpoint.

        Args:
            username: Account username or email.
            password: Account password.
            scopes: Requested scopes. Defaults to the configured scopes.
            api_key: Public API key. Defaults to the configured one.
            api_secret: Public API secret. Defaults to the configured one.

        Returns:
            The issued token, or a token with an empty ``access_token`` when
            the exchange fails.

        Raises:
            ValueError: If username or password is empty.
        """
        _require(username, "username")
        _require(password, "password")
        client_id = api_key or self._options.public_api_key
        client_secret = api_secret or self._options.public_api_secret

        form = {
            "grant_type": "password",
            "username": username,
            "password": password,
            "client_id": client_id,
            "client_secret": client_secret,
        }
        scope = _join_scopes(scopes if scopes is not None else self._options.scopes)
        if scope:
            form["scope"] = scope

        logger.debug("Authenticating user %s with password grant", username)
        token = self._exchange(token_url(ApiKeyType.PUBLIC), form, "Password")
        if token is None:
            return TokenResponse.failed()

        self._store(token, AuthState.USER, ApiKeyType.PUBLIC, client_id, client_secret)
        logger.info("Authenticated user %s", username)
        return token

    def authenticate_with_client_credentials(
        self,
        api_key: str,
        api_secret: str,
        api_key_type: ApiKeyType = ApiKeyType.PUBLIC,
        scopes: Iterable[OAuthScope | str] | None = None,
    ) -> TokenResponse:
        """Run the client-credentials grant.

        Public keys use ``api.dailymotion.com/oauth/token``; private keys use
        ``partner.api.dailymotion.com/oauth/v1/token``. The HTTP client is
        switched to the matching API host on success.

        Returns:
            The issued application token, or a token with an empty
            ``access_token`` when the exchange fails.

        Raises:
            ValueError: If api_key or api_secret is empty.
        """
        _require(api_key, "api_key")
        _require(api_secret, "api_secret")

        form = {
            "grant_type": "client_credentials",
            "client_id": api_key,
            "client_secret": api_secret,
        }
        scope = _join_scopes(scopes if scopes is not None else self._options.scopes)
        if scope:
            form["scope"] = scope

        logger.debug("Authenticating with client credentials (%s key)", api_key_type)
        token = self._exchange(token_url(api_key_type), form, "Client credentials")
        if token is None:
            return TokenResponse.failed()

        self._store(token, AuthState.APPLICATION, api_key_type, api_key, api_secret)
        logger.info("Authenticated application with %s API key", api_key_type)
        return token

    def exchange_code(
        self, authorization_code: str, redirect_uri: str | None = None
    ) -> TokenResponse:
        """Exchange an authorization code for a user token.

        Args:
            authorization_code: Code returned to the redirect URI.
            redirect_uri: Redirect URI used in the authorize step. Defaults
                to the configured one.

        Raises:
            ValueError: If the code or redirect URI is empty.
        """
        _require(authorization_code, "authorization_code")
        redirect = _require(
            redirect_uri or self._options.redirect_uri, "redirect_uri"
        )
        client_id = self._options.public_api_key
        client_secret = self._options.public_api_secret

        form = {
            "grant_type": "authorization_code",
            "code": authorization_code,
            "redirect_uri": redirect,
            "client_id": client_id,
            "client_secret": client_secret,
        }
        token = self._exchange(
            token_url(ApiKeyType.PUBLIC), form, "Authorization code"
        )
        if token is None:
            return TokenResponse.failed()

        self._store(token, AuthState.USER, ApiKeyType.PUBLIC, client_id, client_secret)
        logger.info("Authenticated user from authorization code")
        return token

    def refresh(self, refresh_token: str | None = None) -> TokenResponse:
        """Exchange a refresh token for a new access token.

        The server may omit a new refresh token, in which case the previous
        one is kept. The authentication state is unchanged.

        Raises:
            ValueError: If no refresh token is given or held.
        """
        current = _require(refresh_token or self.refresh_token, "refresh_token")
        client_id = self._client_id or self._options.api_credentials[0]
        client_secret = self._client_secret or self._options.api_credentials[1]

        form = {
            "grant_type": "refresh_token",
            "refresh_token": current,
            "client_id": client_id,
            "client_secret": client_secret,
        }
        token = self._exchange(token_url(self._key_type), form, "Refresh token")
        if token is None:
            return TokenResponse.failed()

        token = token.model_copy(
            update={"refresh_token": token.refresh_token or current}
        )
        state = self._state
        if state == AuthState.UNAUTHENTICATED:
            state = (
                AuthState.USER
                if token.is_user_authentication
                else AuthState.APPLICATION
            )
        self._store(token, state, self._key_type, client_id, client_secret)
        logger.info("Refreshed access token")
        return token

    def validate_token(self) -> TokenValidationResponse | None:
        """Introspect the held token.

        Returns:
            The validation result, or None when no token is held or the
            request fails for any reason.
        """
        access_token = self.access_token
        if not access_token:
            logger.warning("No access token available for validation")
            return None

        try:
            response = self._http.request_absolute(
                "GET", token_info_url(self._key_type), bearer=access_token
            )
        except APIError as e:
            logger.error("Token validation failed: %s", e.message)
            return None

        if not response.is_success:
            logger.error("Token validation rejected: %s", response.error_message)
            return None

        try:
            return TokenValidationResponse.model_validate(response.json() or {})
        except ValidationError as e:
            logger.error("Token validation returned an unreadable body: %s", e)
            return None

    def revoke(self, access_token: str | None = None) -> bool:
        """Revoke a token server-side and drop local state.

        Local state is always cleared, even when the server call fails.

        Args:
            access_token: Token to revoke. Defaults to the held token.

        Returns:
            Whether the server confirmed the revocation.
        """
        target = access_token or self.access_token
        if not target:
            self.clear()
            return False

        form = {
            "token": target,
            "client_id": self._client_id or self._options.api_credentials[0],
            "client_secret": self._client_secret or self._options.api_credentials[1],
        }
        try:
            response = self._http.request_absolute(
                "POST", revoke_url(self._key_type), data=form
            )
            revoked = response.is_success
            if not revoked:
                logger.error("Token revocation rejected: %s", response.error_message)
        except APIError as e:
            logger.error("Token revocation failed: %s", e.message)
            revoked = False
        finally:
            self.clear()

        if revoked:
            logger.info("Revoked access token")
        return revoked

    def clear(self) -> None:
        """Forget the held token and return to UNAUTHENTICATED."""
        self._token = None
        self._state = AuthState.UNAUTHENTICATED
        self._expires_at = None
        self._client_id = ""
        self._client_secret = ""
        self._key_type = self._options.api_key_type
        self._http.clear_access_token()
        self._http.set_api_key_type(self._key_type)
        logger.debug("Cleared stored tokens")
