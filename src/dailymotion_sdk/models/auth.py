"""Models for OAuth token endpoint responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

__all__ = [
    "ErrorData",
    "TokenResponse",
    "TokenValidationResponse",
]


class AuthModel(BaseModel):
    """Base model for OAuth responses."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("uid", mode="before", check_fields=False)
    @classmethod
    def _uid_as_text(cls, value: Any) -> Any:
        # Some endpoints send numeric user ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class TokenResponse(AuthModel):
    """Access token issued by a grant exchange.

    A failed grant is reported as a token whose ``access_token`` is empty
    rather than as an exception; check ``is_successful`` before use.
    """

    access_token: str = ""
    token_type: str = "Bearer"
    expires_in: int = 0
    refresh_token: str | None = None
    scope: str | None = None
    uid: str | None = None
    email_verified: bool | None = None

    @classmethod
    def failed(cls) -> "TokenResponse":
        """Sentinel returned when a grant exchange fails."""
        return cls()

    @property
    def is_successful(self) -> bool:
        return bool(self.access_token)

    @property
    def has_refresh_token(self) -> bool:
        return bool(self.refresh_token)

    @property
    def is_user_authentication(self) -> bool:
        """Token was issued for a user (the response carries a uid)."""
        return bool(self.uid)

    @property
    def is_application_authentication(self) -> bool:
        """Token was issued to the application itself (no uid, no refresh)."""
        return not self.uid and not self.has_refresh_token

    @property
    def scopes(self) -> list[str]:
        """Granted scopes split from the space-separated ``scope`` value."""
        return (self.scope or "").split()


class TokenValidationResponse(AuthModel):
    """Result of introspecting an access token."""

    valid: bool = False
    uid: str | None = None
    scope: str | None = None
    expires_in: int | None = None


class ErrorData(AuthModel):
    """OAuth error body (``{"error": ..., "error_description": ...}``)."""

    error: str | None = None
    error_description: str | None = None
