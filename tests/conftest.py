"""Test fixtures and configuration."""

import base64
import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest
from dailymotion_sdk.config import DailymotionOptions
from dailymotion_sdk.http import ApiResponse, DailymotionHttpClient

Handler = Callable[[httpx.Request], httpx.Response]


def make_jwt(claims: dict[str, Any]) -> str:
    """Build an unsigned JWT carrying the given claims."""

    def part(data: dict[str, Any]) -> str:
        raw = json.dumps(data).encode()
        return base64.urlsafe_b64encode(raw).decode().rstrip("=")

    return f"{part({'alg': 'none'})}.{part(claims)}.signature"


def api_response(status_code: int = 200, body: Any = None) -> ApiResponse:
    """Build an ApiResponse with a JSON body."""
    text = "" if body is None else json.dumps(body)
    return ApiResponse(status_code=status_code, text=text)


class RequestLog:
    """Records requests seen by a mock transport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def form(self, index: int = -1) -> dict[str, str]:
        """Decode the urlencoded body of a recorded request."""
        body = self.requests[index].content.decode()
        return dict(httpx.QueryParams(body))


@pytest.fixture
def options() -> DailymotionOptions:
    """Options with credentials and no waiting between retries."""
    return DailymotionOptions(
        public_api_key="public-key",
        public_api_secret="public-secret",
        private_api_key="private-key",
        private_api_secret="private-secret",
        retry_backoff=0.0,
    )


@pytest.fixture
def request_log() -> RequestLog:
    return RequestLog()


@pytest.fixture
def make_http(
    options: DailymotionOptions, request_log: RequestLog
) -> Callable[..., DailymotionHttpClient]:
    """Factory for an HTTP client answering through a handler function."""

    def factory(
        handler: Handler, opts: DailymotionOptions | None = None
    ) -> DailymotionHttpClient:
        def recording(request: httpx.Request) -> httpx.Response:
            request.read()
            request_log.requests.append(request)
            return handler(request)

        return DailymotionHttpClient(
            opts or options, transport=httpx.MockTransport(recording)
        )

    return factory


@pytest.fixture
def mock_http() -> MagicMock:
    """Service-level HTTP client mock answering 200 with an empty object."""
    http = MagicMock()
    for name in ("get", "get_public", "post", "post_public", "delete"):
        getattr(http, name).return_value = api_response(200, {})
    return http


@pytest.fixture
def video_payload() -> dict[str, Any]:
    """A video object as returned by ``/video/{id}``."""
    return {
        "id": "x8abc12",
        "title": "Surf session",
        "description": "Big waves",
        "duration": 245,
        "views_total": 1234,
        "tags": ["surf", "ocean"],
        "private": False,
        "created_time": 1700000000,
        "aspect_ratio": 1.7777,
        "owner": "x1user",
    }
