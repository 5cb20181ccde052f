"""Typed request parameters that flatten into wire dictionaries.

Encoding rules shared by every builder:

- booleans render as ``"true"``/``"false"``
- lists are comma-joined
- datetimes render as unix seconds
- None, blank strings and empty lists are omitted

Values are written literally; query escaping is left to the HTTP layer.
The one exception is ``GlobalApiParameters.context``, a composite value
that is escaped once here and therefore travels double-encoded.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from dailymotion_sdk.models.enums import PlaylistSort, VideoSort
from dailymotion_sdk.models.fields import VideoField

__all__ = [
    "GlobalApiParameters",
    "PlaylistFilters",
    "VideoCreationParameters",
    "VideoFilters",
    "VideoUpdateParameters",
    "encode_value",
]


def encode_value(value: Any) -> str | None:
    """Encode a single parameter value, or None when it should be omitted."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return str(int(value.timestamp()))
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, list | tuple | set | frozenset):
        parts = [encode_value(v) for v in value]
        joined = ",".join(p for p in parts if p)
        return joined or None
    if isinstance(value, str):
        return value if value.strip() else None
    return str(value)


class WireParameters(BaseModel):
    """Option bag whose fields map one-to-one onto wire parameters.

    The wire key is the field alias when one is set, else the field name.
    Subclasses list fields that must not be written in ``_EXCLUDED``.
    """

    model_config = ConfigDict(
        extra="forbid", populate_by_name=True, validate_assignment=True
    )

    _EXCLUDED: ClassVar[frozenset[str]] = frozenset()

    def _encode_field(self, name: str, value: Any) -> str | None:
        return encode_value(value)

    def to_dict(self) -> dict[str, str]:
        """Flatten into a wire dictionary, omitting unset values."""
        result: dict[str, str] = {}
        for name, info in type(self).model_fields.items():
            if name in self._EXCLUDED:
                continue
            encoded = self._encode_field(name, getattr(self, name))
            if encoded is not None:
                result[info.alias or name] = encoded
        return result


class GlobalApiParameters(WireParameters):
    """Parameters accepted by every API call.

    Attributes:
        ams_country: Country used for advertising and geo rules.
        context: Raw embedded query string (``k1=v1&k2=v2``). It is escaped
            as a single value by ``to_dict``; see ``set_context``.
        device_filter: Restrict results to a device class.
        family_filter: Enable or disable the family filter.
        localization: Locale for localized fields.
        thumbnail_ratio: Thumbnail aspect ratio, e.g. ``original`` or ``square``.
    """

    ams_country: str | None = None
    context: str | None = None
    device_filter: str | None = None
    family_filter: bool | None = None
    localization: str | None = None
    thumbnail_ratio: str | None = None

    def _encode_field(self, name: str, value: Any) -> str | None:
        encoded = encode_value(value)
        if name == "context" and encoded is not None:
            return quote(encoded, safe="")
        return encoded

    def set_context(self, values: Mapping[str, str] | None) -> None:
        """Build ``context`` from key/value pairs, unescaped."""
        self.context = _join_context(values) or None

    @staticmethod
    def build_encoded_context(values: Mapping[str, str] | None) -> str:
        """Return the escaped context string for the given pairs."""
        return quote(_join_context(values), safe="")


def _join_context(values: Mapping[str, str] | None) -> str:
    if not values:
        return ""
    return "&".join(f"{k}={v}" for k, v in values.items())


# Boolean filters that are sent through the comma-joined ``flags`` value.
_FLAG_NAMES: dict[str, str] = {
    "three_sixty_degree": "360_degree",
    "advertising_instream_blocked": "advertising_instream_blocked",
    "allowed_in_playlists": "allowed_in_playlists",
    "availability": "availability",
    "exportable": "exportable",
    "featured": "featured",
    "has_game": "has_game",
    "hd": "hd",
    "in_history": "in_history",
    "live": "live",
    "live_offair": "live_offair",
    "live_onair": "live_onair",
    "live_upcoming": "live_upcoming",
    "no_live": "no_live",
    "no_live_recording": "no_live_recording",
    "no_premium": "no_premium",
    "partner": "partner",
    "premium": "premium",
    "ugc": "ugc",
    "ugc_partner": "ugc_partner",
    "verified": "verified",
}


class VideoFilters(WireParameters):
    """Filters for video list endpoints.

    Flag filters (``hd``, ``live``, ``verified``, ...) only take effect when
    True and are merged with ``flags`` into a single de-duplicated value.
    Tri-state filters such as ``private`` are written for both True and
    False.
    """

    _EXCLUDED: ClassVar[frozenset[str]] = frozenset({*_FLAG_NAMES, "flags"})

    # Flags
    three_sixty_degree: bool | None = None
    advertising_instream_blocked: bool | None = None
    allowed_in_playlists: bool | None = None
    availability: bool | None = None
    exportable: bool | None = None
    featured: bool | None = None
    has_game: bool | None = None
    hd: bool | None = None
    in_history: bool | None = None
    live: bool | None = None
    live_offair: bool | None = None
    live_onair: bool | None = None
    live_upcoming: bool | None = None
    no_live: bool | None = None
    no_live_recording: bool | None = None
    no_premium: bool | None = None
    partner: bool | None = None
    premium: bool | None = None
    ugc: bool | None = None
    ugc_partner: bool | None = None
    verified: bool | None = None
    flags: list[str] | None = None

    # Plain filters
    channel: str | None = None
    country: str | None = None
    created_after: datetime | None = None
    created_before: datetime | None = None
    exclude_channel_ids: list[str] | None = None
    exclude_ids: list[str] | None = None
    explicit: bool | None = None
    ids: list[str] | None = None
    is_created_for_kids: bool | None = None
    languages: list[str] | None = None
    list_name: str | None = Field(default=None, alias="list")
    longer_than: int | None = None
    mode: str | None = None
    no_genre: str | None = Field(default=None, alias="nogenre")
    owners: list[str] | None = None
    password_protected: bool | None = None
    private: bool | None = None
    related_videos_algorithm: str | None = None
    search: str | None = None
    shorter_than: int | None = None
    sort: VideoSort | str | None = None
    tags: list[str] | None = None
    timeframe: int | None = None
    unpublished: bool | None = None
    page: int | None = None
    limit: int | None = None

    def collect_flags(self) -> list[str]:
        """Flag names to send, in declaration order, without duplicates."""
        names = [wire for name, wire in _FLAG_NAMES.items() if getattr(self, name)]
        names.extend(f for f in self.flags or [] if f and f.strip())
        return list(dict.fromkeys(names))

    def to_dict(self) -> dict[str, str]:
        result: dict[str, str] = {}
        flags = self.collect_flags()
        if flags:
            result["flags"] = ",".join(flags)
        result.update(super().to_dict())
        return result


class VideoUpdateParameters(WireParameters):
    """Writable video properties; every field is optional.

    ``fields`` is not part of the body. It selects the fields returned in
    the response and is sent as the ``fields`` query parameter.
    """

    _EXCLUDED: ClassVar[frozenset[str]] = frozenset({"fields"})

    title: str | None = None
    url: str | None = None
    description: str | None = None
    channel: str | None = None
    tags: list[str] | None = None
    private: bool | None = None
    published: bool | None = None
    is_created_for_kids: bool | None = None
    mode: str | None = None
    language: str | None = None
    country: str | None = None
    advertising_custom_target: str | None = None
    advertising_instream_blocked: bool | None = None
    ai_chapter_generation_required: bool | None = None
    stream_altered_with_ai: bool | None = None
    allow_embed: bool | None = None
    allowed_in_playlists: bool | None = None
    content_provider_id: str | None = None
    custom_classification: list[str] | None = None
    publish_date: datetime | None = None
    expiry_date: datetime | None = None
    expiry_date_availability: bool | None = None
    expiry_date_deletion: bool | None = None
    publish_date_keep_private: bool | None = None
    explicit: bool | None = None
    geoblocking: list[str] | None = None
    geoloc: list[float] | None = None
    hashtags: list[str] | None = None
    end_time: datetime | None = None
    live_ad_break_launch: int | None = None
    live_auto_record: bool | None = None
    live_backup_video: str | None = None
    start_time: datetime | None = None
    password: str | None = None
    player_next_video: str | None = None
    record_status: str | None = None
    soundtrack_isrc: str | None = None
    soundtrack_popularity: int | None = None
    thumbnail_url: str | None = None
    password_protected: bool | None = None
    audience_url: str | None = None
    fields: list[VideoField] | None = None

    def _encode_field(self, name: str, value: Any) -> str | None:
        if name == "geoloc":
            # Only a latitude/longitude pair is meaningful.
            if value is None or len(value) != 2:
                return None
            return f"[{_format_number(value[0])},{_format_number(value[1])}]"
        return encode_value(value)


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


class VideoCreationParameters(VideoUpdateParameters):
    """Parameters for creating a video from an uploaded file URL.

    ``url`` and ``title`` are required; call ``validate_required`` before
    sending.
    """

    def validate_required(self) -> None:
        """Raise ValueError when ``url`` or ``title`` is missing or blank."""
        for name in ("url", "title"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValueError(f"{name} cannot be empty")


class PlaylistFilters(WireParameters):
    """Filters for playlist list endpoints."""

    ids: list[str] | None = None
    owner: str | None = None
    private: bool | None = None
    search: str | None = None
    sort: PlaylistSort | None = None
    verified: bool | None = None
