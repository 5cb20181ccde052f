"""Configuration for dailymotion_sdk."""

from dataclasses import dataclass
from enum import StrEnum
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated, Any

from pydantic import BeforeValidator, Field
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from dailymotion_sdk.models.params import GlobalApiParameters

PUBLIC_API_BASE_URL = "https://api.dailymotion.com"
PRIVATE_API_BASE_URL = "https://partner.api.dailymotion.com/rest"

PUBLIC_OAUTH_BASE_URL = "https://api.dailymotion.com/oauth"
PRIVATE_OAUTH_BASE_URL = "https://partner.api.dailymotion.com/oauth/v1"


def _package_version() -> str:
    try:
        return version("dailymotion-sdk")
    except PackageNotFoundError:
        return "0.0.0"


DEFAULT_USER_AGENT = f"dailymotion-sdk/{_package_version()}"


class ApiKeyType(StrEnum):
    """Kind of API key, which selects the API host."""

    PUBLIC = "public"
    PRIVATE = "private"


def api_base_url(key_type: ApiKeyType) -> str:
    """Return the REST base URL for an API key type."""
    if key_type == ApiKeyType.PRIVATE:
        return PRIVATE_API_BASE_URL
    return PUBLIC_API_BASE_URL


def oauth_base_url(key_type: ApiKeyType) -> str:
    """Return the OAuth base URL for an API key type.

    Public keys authenticate against ``api.dailymotion.com/oauth`` while
    private (partner) keys use ``partner.api.dailymotion.com/oauth/v1``.
    """
    if key_type == ApiKeyType.PRIVATE:
        return PRIVATE_OAUTH_BASE_URL
    return PUBLIC_OAUTH_BASE_URL


@dataclass(frozen=True)
class DailymotionOptions:
    """Client configuration.

    Attributes:
        api_key_type: Which key pair to use for client-credentials auth.
        public_api_key: Public API key.
        public_api_secret: Public API secret.
        private_api_key: Private (partner) API key.
        private_api_secret: Private (partner) API secret.
        username: Account username for the password grant.
        password: Account password for the password grant.
        redirect_uri: Redirect URI registered for the authorization-code grant.
        scopes: Default OAuth scopes requested on authentication.
        timeout: HTTP timeout in seconds.
        max_retries: Attempts for transient failures (transport, 429, 5xx).
        retry_backoff: Linear backoff factor in seconds between attempts.
        request_delay: Minimum delay in seconds between consecutive requests.
        user_agent: User-Agent header sent with every request.
        default_global_params: Global parameters merged into every API call;
            keys already present on a call are kept.
    """

    api_key_type: ApiKeyType = ApiKeyType.PUBLIC
    public_api_key: str = ""
    public_api_secret: str = ""
    private_api_key: str = ""
    private_api_secret: str = ""
    username: str = ""
    password: str = ""
    redirect_uri: str = ""
    scopes: tuple[str, ...] = ()
    timeout: float = 60.0
    max_retries: int = 3
    retry_backoff: float = 0.5
    request_delay: float = 0.0
    user_agent: str = DEFAULT_USER_AGENT
    default_global_params: GlobalApiParameters | None = None

    @property
    def api_base_url(self) -> str:
        """REST base URL for the configured key type."""
        return api_base_url(self.api_key_type)

    @property
    def api_credentials(self) -> tuple[str, str]:
        """Key and secret matching the configured key type."""
        if self.api_key_type == ApiKeyType.PRIVATE:
            return self.private_api_key, self.private_api_secret
        return self.public_api_key, self.public_api_secret

    @property
    def has_user_credentials(self) -> bool:
        """Whether username and password are both configured."""
        return bool(self.username and self.password)

    def validate(self) -> None:
        """Check option values.

        Raises:
            ValueError: If a numeric option is out of range.
        """
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        if self.retry_backoff < 0 or self.request_delay < 0:
            raise ValueError("retry_backoff and request_delay cannot be negative")

    @classmethod
    def from_env(cls, prefix: str = "DAILYMOTION_") -> "DailymotionOptions":
        """Build options from ``<prefix>*`` environment variables.

        See ``DailymotionSettings`` for the variables read.

        Raises:
            ValueError: If a variable has an invalid value.
        """
        options = DailymotionSettings(_env_prefix=prefix).to_options()
        options.validate()
        return options


def _split_scopes(value: Any) -> Any:
    """Accept scopes as a space or comma separated string."""
    if isinstance(value, str):
        return tuple(s for s in value.replace(",", " ").split() if s)
    return value


KeyType = Annotated[
    ApiKeyType,
    BeforeValidator(lambda v: v.lower() if isinstance(v, str) else v),
]
Scopes = Annotated[tuple[str, ...], NoDecode, BeforeValidator(_split_scopes)]


class DailymotionSettings(BaseSettings):
    """Credentials and transport settings read from the environment.

    Variables are named ``DAILYMOTION_<FIELD>``, e.g.
    ``DAILYMOTION_PUBLIC_API_KEY``. Empty variables are ignored.
    """

    model_config = SettingsConfigDict(
        env_prefix="DAILYMOTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    api_key_type: KeyType = Field(
        default=ApiKeyType.PUBLIC, description="API key type (public or private)"
    )
    public_api_key: str = Field(default="", description="Public API key")
    public_api_secret: str = Field(default="", description="Public API secret")
    private_api_key: str = Field(default="", description="Private API key")
    private_api_secret: str = Field(default="", description="Private API secret")
    username: str = Field(default="", description="Username for the password grant")
    password: str = Field(default="", description="Password for the password grant")
    redirect_uri: str = Field(default="", description="Authorization-code redirect")
    scopes: Scopes = Field(default=(), description="Default OAuth scopes")
    timeout: float = Field(default=60.0, description="HTTP timeout in seconds")

    def to_options(self) -> DailymotionOptions:
        return DailymotionOptions(
            api_key_type=self.api_key_type,
            public_api_key=self.public_api_key,
            public_api_secret=self.public_api_secret,
            private_api_key=self.private_api_key,
            private_api_secret=self.private_api_secret,
            username=self.username,
            password=self.password,
            redirect_uri=self.redirect_uri,
            scopes=self.scopes,
            timeout=self.timeout,
        )
