"""dailymotion_sdk - Typed client for the Dailymotion REST API.

This library wraps the Dailymotion Platform API: OAuth token handling,
video, user, playlist and channel resources, and file upload. Video
metadata is parsed field-selectively so that a response carries exactly
the fields that were requested.

Designed for use as a library, with a CLI for debugging and development.

Examples:
    Fetch a video with an application token:
    ```python
    from dailymotion_sdk import create_client, VideoField

    with create_client(public_api_key="...", public_api_secret="...") as client:
        client.authenticate()
        video = client.get_video("x8abc12", [VideoField.ID, VideoField.TITLE])
        print(video.title)
    ```

    Search with filters:
    ```python
    from dailymotion_sdk import VideoFilters

    filters = VideoFilters(hd=True, languages=["en"])
    page = client.videos.search_videos_with_filters("cats", filters)
    ```
"""

import dataclasses
from typing import Any

from dailymotion_sdk.auth import TokenManager
from dailymotion_sdk.client import DailymotionClient
from dailymotion_sdk.config import ApiKeyType, DailymotionOptions, DailymotionSettings
from dailymotion_sdk.exceptions import (
    APIError,
    AuthenticationRequiredError,
    DailymotionError,
    UploadError,
)
from dailymotion_sdk.http import ApiResponse, DailymotionHttpClient
from dailymotion_sdk.models import (
    AuthState,
    Channel,
    GlobalApiParameters,
    OAuthScope,
    PlaylistFilters,
    PlaylistSort,
    TokenResponse,
    TokenValidationResponse,
    UserSort,
    VideoCreationParameters,
    VideoField,
    VideoFilters,
    VideoMetadata,
    VideoSort,
    VideoUpdateParameters,
)
from dailymotion_sdk.models.responses import (
    AccountInfo,
    ChannelListResponse,
    ChannelMetadata,
    EchoResponse,
    FileUploadResponse,
    Language,
    LanguageListResponse,
    LocaleInfo,
    PlaylistListResponse,
    PlaylistMetadata,
    RateLimits,
    UploadProgressResponse,
    UploadUrlResponse,
    UserListResponse,
    UserMetadata,
    VideoListResponse,
)
from dailymotion_sdk.serialization import (
    deserialize_metadata,
    normalize,
    serialize_metadata,
)


def create_client(
    options: DailymotionOptions | None = None, **overrides: Any
) -> DailymotionClient:
    """Create a configured Dailymotion client.

    This is the recommended way to create a client for library usage.

    Args:
        options: Base configuration. Uses defaults if not provided.
        **overrides: ``DailymotionOptions`` fields replacing those of
            ``options``, e.g. ``public_api_key="..."``.

    Returns:
        A DailymotionClient owning a fresh HTTP client and token manager.

    Raises:
        TypeError: If an override is not a ``DailymotionOptions`` field.
        ValueError: If the resulting options are invalid.

    Examples:
        From environment variables:
        ```python
        client = create_client(DailymotionOptions.from_env())
        ```

        Private key:
        ```python
        client = create_client(
            api_key_type=ApiKeyType.PRIVATE,
            private_api_key="...",
            private_api_secret="...",
        )
        ```
    """
    resolved = options or DailymotionOptions()
    if overrides:
        resolved = dataclasses.replace(resolved, **overrides)
    return DailymotionClient(resolved)


__all__ = [
    "APIError",
    "AccountInfo",
    "ApiKeyType",
    "ApiResponse",
    "AuthState",
    "AuthenticationRequiredError",
    "Channel",
    "ChannelListResponse",
    "ChannelMetadata",
    "DailymotionClient",
    "DailymotionError",
    "DailymotionHttpClient",
    "DailymotionOptions",
    "DailymotionSettings",
    "EchoResponse",
    "FileUploadResponse",
    "GlobalApiParameters",
    "Language",
    "LanguageListResponse",
    "LocaleInfo",
    "OAuthScope",
    "PlaylistFilters",
    "PlaylistListResponse",
    "PlaylistMetadata",
    "PlaylistSort",
    "RateLimits",
    "TokenManager",
    "TokenResponse",
    "TokenValidationResponse",
    "UploadError",
    "UploadProgressResponse",
    "UploadUrlResponse",
    "UserListResponse",
    "UserMetadata",
    "UserSort",
    "VideoCreationParameters",
    "VideoField",
    "VideoFilters",
    "VideoListResponse",
    "VideoMetadata",
    "VideoSort",
    "VideoUpdateParameters",
    "create_client",
    "deserialize_metadata",
    "normalize",
    "serialize_metadata",
]
