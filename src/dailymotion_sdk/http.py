"""HTTP transport for the Dailymotion API.

Wraps a single ``httpx.Client`` with the API's conventions: base URL per
key type, bearer auth, global parameter merging, retries for transient
failures and a guard against ``/me`` calls under application tokens.
"""

import base64
import json
import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO

import httpx

from dailymotion_sdk.config import (
    PUBLIC_API_BASE_URL,
    ApiKeyType,
    DailymotionOptions,
    api_base_url,
)
from dailymotion_sdk.exceptions import APIError, AuthenticationRequiredError
from dailymotion_sdk.models.params import GlobalApiParameters
from dailymotion_sdk.serialization import parse_json

logger = logging.getLogger(__name__)

# Statuses worth another attempt
_RETRY_STATUSES = frozenset({429, 500, 502, 503, 504})
# Methods that may be replayed after the request reached the server
_IDEMPOTENT_METHODS = frozenset({"GET", "DELETE", "PUT"})


@dataclass(frozen=True)
class ApiResponse:
    """Status and body of a completed request."""

    status_code: int
    text: str
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Parsed body, or None when it is not valid JSON."""
        return parse_json(self.text)

    @property
    def error_message(self) -> str | None:
        """Error text from the API's error envelopes, if present.

        Handles REST errors (``{"error": {"message": ...}}``) and OAuth
        errors (``{"error": ..., "error_description": ...}``).
        """
        if self.is_success:
            return None
        data = self.json()
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if data.get("error_description"):
                return str(data["error_description"])
            if isinstance(error, str) and error:
                return error
        return self.text or f"HTTP {self.status_code}"

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "ApiResponse":
        return cls(
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
        )


def is_client_credentials_token(access_token: str | None) -> bool:
    """Whether a JWT access token was issued by the client-credentials grant.

    Application tokens carry no ``sub`` claim, or carry the organization
    claims ``oid`` and ``our``. Tokens that are not JWTs return False.
    """
    if not access_token:
        return False
    parts = access_token.split(".")
    if len(parts) != 3:
        return False
    payload = parts[1] + "=" * (-len(parts[1]) % 4)
    try:
        claims = json.loads(base64.urlsafe_b64decode(payload))
    except ValueError:
        return False
    if not isinstance(claims, dict):
        return False
    return "sub" not in claims or ("oid" in claims and "our" in claims)


def is_me_endpoint(resource: str) -> bool:
    """Whether a resource path targets the authenticated user (``/me``)."""
    path = resource.lstrip("/").lower()
    return (
        path == "me"
        or path.startswith("me/")
        or "/me/" in path
        or path.endswith("/me")
    )


class DailymotionHttpClient:
    """Synchronous HTTP client for the Dailymotion REST API.

    Holds the current bearer token and API key type. Methods return an
    ``ApiResponse`` for every completed exchange, including error statuses;
    only transport failures that survive all retries raise ``APIError``.
    """

    def __init__(
        self,
        options: DailymotionOptions | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            options: Client configuration. Uses defaults if not provided.
            transport: Optional httpx transport, mainly for tests.
        """
        self._options = options or DailymotionOptions()
        self._transport = transport
        self._http_client: httpx.Client | None = None
        self._access_token: str | None = None
        self._api_key_type = self._options.api_key_type
        self._last_request_at: float | None = None

    @property
    def options(self) -> DailymotionOptions:
        return self._options

    @property
    def base_url(self) -> str:
        return api_base_url(self._api_key_type)

    @property
    def api_key_type(self) -> ApiKeyType:
        return self._api_key_type

    def set_api_key_type(self, key_type: ApiKeyType) -> None:
        """Switch the API host used for relative resources."""
        self._api_key_type = key_type
        logger.debug("Using base URL %s for %s API key", self.base_url, key_type)

    @property
    def access_token(self) -> str | None:
        return self._access_token

    def set_access_token(self, access_token: str | None) -> None:
        self._access_token = access_token or None

    def clear_access_token(self) -> None:
        self._access_token = None

    def is_using_client_credentials(self) -> bool:
        """Whether the held token is an application-level token."""
        return is_client_credentials_token(self._access_token)

    def _get_http_client(self) -> httpx.Client:
        """Get or create the underlying httpx client."""
        if self._http_client is None:
            self._http_client = httpx.Client(
                timeout=self._options.timeout,
                transport=self._transport,
                headers={
                    "User-Agent": self._options.user_agent,
                    "Accept": "application/json",
                },
            )
        return self._http_client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> "DailymotionHttpClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _auth_headers(self) -> dict[str, str]:
        if self._access_token:
            return {"Authorization": f"Bearer {self._access_token}"}
        return {}

    def _merge_params(
        self,
        params: Mapping[str, str] | None,
        global_params: GlobalApiParameters | None,
    ) -> dict[str, str]:
        merged = dict(params or {})
        defaults = self._options.default_global_params
        if defaults is not None:
            for key, value in defaults.to_dict().items():
                merged.setdefault(key, value)
        if global_params is not None:
            merged.update(global_params.to_dict())
        return merged

    def _check_me_guard(self, resource: str, method: str) -> None:
        if is_me_endpoint(resource) and self.is_using_client_credentials():
            logger.warning(
                "Blocked %s %s: /me endpoints need a user token, "
                "not a client credentials token",
                method,
                resource,
            )
            raise AuthenticationRequiredError(
                "/me endpoints require user authentication. Use the password "
                "or authorization code grant, or call /user/{id} instead."
            )

    def _throttle(self) -> None:
        delay = self._options.request_delay
        if delay <= 0 or self._last_request_at is None:
            return
        elapsed = time.monotonic() - self._last_request_at
        if elapsed < delay:
            time.sleep(delay - elapsed)

    def _send(self, method: str, url: str, **kwargs: Any) -> ApiResponse:
        """Send a request, retrying transient failures.

        Raises:
            APIError: If the request cannot be completed after all attempts.
        """
        client = self._get_http_client()
        attempts = max(1, self._options.max_retries)

        for attempt in range(1, attempts + 1):
            self._throttle()
            try:
                response = client.request(method, url, **kwargs)
            except (httpx.ConnectError, httpx.ConnectTimeout) as e:
                # Never reached the server, safe to replay for any method
                if attempt == attempts:
                    raise APIError(f"{method} {url} failed: {e}") from e
                logger.debug(
                    "Attempt %d for %s %s failed: %s", attempt, method, url, e
                )
            except httpx.TransportError as e:
                if method not in _IDEMPOTENT_METHODS or attempt == attempts:
                    raise APIError(f"{method} {url} failed: {e}") from e
                logger.debug(
                    "Attempt %d for %s %s failed: %s", attempt, method, url, e
                )
            else:
                retryable = (
                    response.status_code in _RETRY_STATUSES
                    and method in _IDEMPOTENT_METHODS
                )
                if not retryable or attempt == attempts:
                    result = ApiResponse.from_httpx(response)
                    self._log_result(method, url, result)
                    return result
                logger.debug(
                    "Attempt %d for %s %s returned %d, retrying",
                    attempt,
                    method,
                    url,
                    response.status_code,
                )
            finally:
                self._last_request_at = time.monotonic()
            time.sleep(self._options.retry_backoff * attempt)

        raise APIError(f"{method} {url} failed")  # pragma: no cover

    def _log_result(self, method: str, url: str, result: ApiResponse) -> None:
        if result.is_success:
            logger.debug("%s %s -> %d", method, url, result.status_code)
        else:
            logger.warning(
                "%s %s -> %d: %s", method, url, result.status_code, result.error_message
            )

    def _url(self, resource: str, base_url: str | None = None) -> str:
        return f"{base_url or self.base_url}/{resource.lstrip('/')}"

    def _request(
        self,
        method: str,
        resource: str,
        params: Mapping[str, str] | None,
        global_params: GlobalApiParameters | None,
        base_url: str | None = None,
        query: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        self._check_me_guard(resource, method)
        merged = self._merge_params(params, global_params)
        url = self._url(resource, base_url)
        logger.debug("%s %s", method, url)
        if method in ("GET", "DELETE"):
            return self._send(
                method,
                url,
                params={**merged, **(query or {})},
                headers=self._auth_headers(),
            )
        return self._send(
            method,
            url,
            params=dict(query or {}),
            data=merged,
            headers=self._auth_headers(),
        )

    def get(
        self,
        resource: str,
        params: Mapping[str, str] | None = None,
        global_params: GlobalApiParameters | None = None,
    ) -> ApiResponse:
        """GET a resource with query parameters."""
        return self._request("GET", resource, params, global_params)

    def get_public(
        self,
        resource: str,
        params: Mapping[str, str] | None = None,
        global_params: GlobalApiParameters | None = None,
    ) -> ApiResponse:
        """GET a resource from the public API regardless of key type."""
        return self._request(
            "GET", resource, params, global_params, PUBLIC_API_BASE_URL
        )

    def post(
        self,
        resource: str,
        params: Mapping[str, str] | None = None,
        global_params: GlobalApiParameters | None = None,
        query: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        """POST form parameters to a resource.

        Args:
            resource: Resource path, e.g. ``/video/x123``.
            params: Form body parameters.
            global_params: Per-call global parameters.
            query: Query-string parameters, e.g. ``fields``.
        """
        return self._request("POST", resource, params, global_params, query=query)

    def post_public(
        self,
        resource: str,
        params: Mapping[str, str] | None = None,
        global_params: GlobalApiParameters | None = None,
    ) -> ApiResponse:
        """POST to the public API regardless of key type."""
        return self._request(
            "POST", resource, params, global_params, PUBLIC_API_BASE_URL
        )

    def put(
        self,
        resource: str,
        params: Mapping[str, str] | None = None,
        global_params: GlobalApiParameters | None = None,
    ) -> ApiResponse:
        return self._request("PUT", resource, params, global_params)

    def delete(
        self,
        resource: str,
        params: Mapping[str, str] | None = None,
        global_params: GlobalApiParameters | None = None,
    ) -> ApiResponse:
        return self._request("DELETE", resource, params, global_params)

    def request_absolute(
        self,
        method: str,
        url: str,
        data: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
        bearer: str | None = None,
    ) -> ApiResponse:
        """Send a request to a full URL (OAuth endpoints, progress URLs).

        No global parameters are merged. ``bearer`` overrides the held token
        for this call only.
        """
        headers = {"Authorization": f"Bearer {bearer}"} if bearer else {}
        logger.debug("%s %s", method, url)
        return self._send(
            method.upper(),
            url,
            data=dict(data) if data else None,
            params=params,
            headers=headers,
        )

    def upload_file(
        self,
        upload_url: str,
        file: str | Path | BinaryIO,
        file_name: str | None = None,
    ) -> ApiResponse:
        """POST a file as multipart ``file`` to an upload URL.

        Args:
            upload_url: Upload target returned by ``/file/upload``.
            file: Path to the file, or an open binary stream.
            file_name: Name reported to the server. Defaults to the path's
                name, or ``upload.mp4`` for streams.
        """
        logger.debug("Uploading file to %s", upload_url)
        if isinstance(file, str | Path):
            path = Path(file)
            with path.open("rb") as stream:
                return self._send(
                    "POST",
                    upload_url,
                    files={"file": (file_name or path.name, stream)},
                )
        return self._send(
            "POST", upload_url, files={"file": (file_name or "upload.mp4", file)}
        )
