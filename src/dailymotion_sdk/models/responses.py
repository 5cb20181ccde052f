"""Models for Dailymotion REST responses.

Entity models are plain pydantic models. Video lists are the exception:
their items go through the field-selective deserializer so that they
carry exactly the fields that were requested.
"""

import logging
from collections.abc import Iterable
from posixpath import basename
from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dailymotion_sdk.models.fields import VideoField
from dailymotion_sdk.models.metadata import VideoMetadata
from dailymotion_sdk.serialization import deserialize_metadata, parse_json

logger = logging.getLogger(__name__)

__all__ = [
    "AccountInfo",
    "ChannelListResponse",
    "ChannelMetadata",
    "EchoResponse",
    "FileUploadResponse",
    "Language",
    "LanguageListResponse",
    "LocaleInfo",
    "PlaylistListResponse",
    "PlaylistMetadata",
    "RateLimits",
    "UploadProgressResponse",
    "UploadUrlResponse",
    "UserListResponse",
    "UserMetadata",
    "VideoListResponse",
]


class DailymotionModel(BaseModel):
    """Base model for API responses."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class UserMetadata(DailymotionModel):
    """Public user profile."""

    id: str | None = None
    username: str | None = None
    screenname: str | None = None
    description: str | None = None
    avatar_120_url: str | None = None
    avatar_240_url: str | None = None
    avatar_360_url: str | None = None
    avatar_480_url: str | None = None
    avatar_720_url: str | None = None
    created_time: int | None = None
    status: str | None = None
    videos_total: int | None = None
    playlists_total: int | None = None
    followers_total: int | None = None
    following_total: int | None = None
    likes_total: int | None = None
    views_total: int | None = None


class AccountInfo(DailymotionModel):
    """The authenticated account, as returned by ``/me``."""

    id: str | None = None
    created_time: int | None = None
    email: str | None = None
    fullname: str | None = None
    status: str | None = None
    url: str | None = None
    verified: bool = False
    videos_total: int = 0
    views_total: int = 0
    playlists_total: int = 0

    @property
    def email_verified(self) -> bool:
        return self.status != "pending-activation"


class PlaylistMetadata(DailymotionModel):
    """Playlist details."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    item_type: str | None = None
    created_time: int | None = None
    updated_time: int | None = None
    private: bool | None = None
    videos_total: int | None = None
    owner: str | None = None
    thumbnail_60_url: str | None = None
    thumbnail_120_url: str | None = None
    thumbnail_180_url: str | None = None
    thumbnail_240_url: str | None = None
    thumbnail_360_url: str | None = None
    thumbnail_480_url: str | None = None
    thumbnail_720_url: str | None = None
    thumbnail_1080_url: str | None = None
    thumbnail_url: str | None = None


class ChannelMetadata(DailymotionModel):
    """Channel (category) details."""

    id: str | None = None
    name: str | None = None
    description: str | None = None
    avatar_120_url: str | None = None
    avatar_240_url: str | None = None
    avatar_360_url: str | None = None
    avatar_480_url: str | None = None
    avatar_720_url: str | None = None
    created_time: int | None = None
    videos_total: int | None = None
    playlists_total: int | None = None
    subscribers_total: int | None = None


class ListEnvelope(DailymotionModel):
    """Paging fields shared by every list response.

    Items are exposed as ``items``; the wire key is ``list``.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    page: int = 1
    limit: int = 0
    total: int | None = None
    has_more: bool = False
    explicit: bool | None = None


class UserListResponse(ListEnvelope):
    items: list[UserMetadata] = Field(default_factory=list, alias="list")


class PlaylistListResponse(ListEnvelope):
    items: list[PlaylistMetadata] = Field(default_factory=list, alias="list")


class ChannelListResponse(ListEnvelope):
    items: list[ChannelMetadata] = Field(default_factory=list, alias="list")


class VideoListResponse(ListEnvelope):
    """Page of videos.

    Items are ``VideoMetadata`` containers. Use ``from_json`` or
    ``from_data`` so that items are parsed with the requested fields.
    """

    model_config = ConfigDict(
        extra="ignore", frozen=True, populate_by_name=True, arbitrary_types_allowed=True
    )

    items: list[VideoMetadata] = Field(default_factory=list, alias="list")

    @classmethod
    def from_data(
        cls, data: Any, requested_fields: Iterable[VideoField] | None = None
    ) -> "VideoListResponse":
        """Build from a parsed JSON object.

        Non-objects and envelopes with unusable paging values give an empty
        page. A ``list`` value that is not an array gives no items.
        """
        if not isinstance(data, dict):
            return cls()
        fields = list(requested_fields or [])
        items = data.get("list")
        if not isinstance(items, list):
            items = []
        envelope = {k: v for k, v in data.items() if k != "list"}
        try:
            return cls.model_validate(
                {
                    **envelope,
                    "list": [deserialize_metadata(item, fields) for item in items],
                }
            )
        except (ValidationError, TypeError) as e:
            logger.warning("Discarding malformed video list: %s", e)
            return cls()

    @classmethod
    def from_json(
        cls, text: str | bytes, requested_fields: Iterable[VideoField] | None = None
    ) -> "VideoListResponse":
        """Parse a response body; malformed JSON gives an empty page."""
        return cls.from_data(parse_json(text), requested_fields)


class UploadUrlResponse(DailymotionModel):
    """Target for a file upload."""

    upload_url: str
    progress_url: str | None = None

    @property
    def has_progress_url(self) -> bool:
        return bool(self.progress_url)


class FileUploadResponse(DailymotionModel):
    """Result of posting a file to the upload server.

    The upload server reports every value as a string.
    """

    url: str | None = None
    id: str | None = None
    audio_codec: str | None = Field(default=None, alias="acodec")
    bitrate: str | None = None
    dimension: str | None = None
    duration: str | None = None
    format: str | None = None
    hash: str | None = None
    name: str | None = None
    seal: str | None = None
    size: str | None = None
    streamable: str | None = None
    video_codec: str | None = Field(default=None, alias="vcodec")

    @field_validator(
        "bitrate", "dimension", "duration", "size", "streamable", mode="before"
    )
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return "yes" if value else "no"
        if isinstance(value, int | float):
            return str(value)
        return value

    def get_file_id(self) -> str | None:
        """File id, falling back to the URL's file name without ``.mp4``."""
        if self.id:
            return self.id
        if not self.url:
            return None
        file_name = basename(urlparse(self.url).path)
        if not file_name:
            return None
        return file_name.removesuffix(".mp4")

    @property
    def is_streamable(self) -> bool:
        return (self.streamable or "").lower() == "yes"

    @property
    def file_size_bytes(self) -> int | None:
        try:
            return int(self.size) if self.size is not None else None
        except ValueError:
            return None

    @property
    def duration_seconds(self) -> float | None:
        """Duration converted from milliseconds."""
        try:
            return int(self.duration) / 1000.0 if self.duration is not None else None
        except ValueError:
            return None


class UploadProgressResponse(DailymotionModel):
    """Upload progress as reported by the progress URL."""

    status: str | None = None
    progress: int | None = None
    message: str | None = None
    url: str | None = None

    @property
    def is_completed(self) -> bool:
        return (self.status or "").lower() == "completed"

    @property
    def is_failed(self) -> bool:
        return (self.status or "").lower() == "failed"

    @property
    def is_in_progress(self) -> bool:
        return (self.status or "").lower() in {"uploading", "processing"}


class RateLimits(DailymotionModel):
    """API call quota of the current token (``/rate_limits``)."""

    limit: int | None = None
    remaining: int | None = None
    reset: int | None = None
    window: str | None = None


class Language(DailymotionModel):
    code: str | None = None
    name: str | None = None


class LanguageListResponse(ListEnvelope):
    items: list[Language] = Field(default_factory=list, alias="list")


class LocaleInfo(DailymotionModel):
    """Locale detected for the caller (``/locale``)."""

    locale: str | None = None
    country: str | None = None
    language: str | None = None


class EchoResponse(DailymotionModel):
    message: str | None = None
