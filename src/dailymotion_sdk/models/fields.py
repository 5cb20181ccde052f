"""Registry of Dailymotion video fields.

Each ``VideoField`` member's value is the wire name used in the ``fields``
query parameter and in response bodies. Lookups are constant-time in both
directions: the enum maps symbolic name to wire name and ``from_wire_name``
resolves the reverse through a table built at import time.
"""

from collections.abc import Iterable
from enum import StrEnum

__all__ = [
    "RESTRICTED_FIELDS",
    "VideoField",
    "filter_restricted",
    "from_wire_name",
    "is_restricted",
    "join_fields",
    "restricted_fields",
    "to_wire_names",
    "wire_name",
]


class VideoField(StrEnum):
    """Fields of the remote video object."""

    ADVERTISING_CUSTOM_TARGET = "advertising_custom_target"
    ADVERTISING_INSTREAM_BLOCKED = "advertising_instream_blocked"
    AI_CHAPTER_GENERATION_REQUIRED = "ai_chapter_generation_required"
    ALLOW_EMBED = "allow_embed"
    ALLOWED_IN_PLAYLISTS = "allowed_in_playlists"
    ASPECT_RATIO = "aspect_ratio"
    AUDIENCE = "audience"
    AUDIENCE_TOTAL = "audience_total"
    AUDIENCE_URL = "audience_url"
    AVAILABLE_FORMATS = "available_formats"
    CHANNEL = "channel"
    CHECKSUM = "checksum"
    CLAIM_RULE_BLOCKED_COUNTRIES = "claim_rule_blocked_countries"
    CLAIM_RULE_MONETIZED_COUNTRIES = "claim_rule_monetized_countries"
    CLAIM_RULE_TRACKED_COUNTRIES = "claim_rule_tracked_countries"
    CONTENT_PROVIDER = "content_provider"
    CONTENT_PROVIDER_ID = "content_provider_id"
    COUNTRY = "country"
    CUSTOM_CLASSIFICATION = "custom_classification"
    CREATED_TIME = "created_time"
    DESCRIPTION = "description"
    DURATION = "duration"
    EMBED_HTML = "embed_html"
    EMBED_URL = "embed_url"
    END_TIME = "end_time"
    EXPIRY_DATE = "expiry_date"
    EXPIRY_DATE_AVAILABILITY = "expiry_date_availability"
    EXPIRY_DATE_DELETION = "expiry_date_deletion"
    EXPLICIT = "explicit"
    FILMSTRIP_60_URL = "filmstrip_60_url"
    FIRST_FRAME_60_URL = "first_frame_60_url"
    FIRST_FRAME_120_URL = "first_frame_120_url"
    FIRST_FRAME_180_URL = "first_frame_180_url"
    FIRST_FRAME_240_URL = "first_frame_240_url"
    FIRST_FRAME_360_URL = "first_frame_360_url"
    FIRST_FRAME_480_URL = "first_frame_480_url"
    FIRST_FRAME_720_URL = "first_frame_720_url"
    FIRST_FRAME_1080_URL = "first_frame_1080_url"
    GEOBLOCKING = "geoblocking"
    GEOLOC = "geoloc"
    HASHTAGS = "hashtags"
    HEIGHT = "height"
    ID = "id"
    IS_CREATED_FOR_KIDS = "is_created_for_kids"
    PRIVATE = "private"
    ITEM_TYPE = "item_type"
    LANGUAGE = "language"
    LIKED_AT = "liked_at"
    LIKES_TOTAL = "likes_total"
    LIVE_AD_BREAK_END_TIME = "live_ad_break_end_time"
    LIVE_AD_BREAK_LAUNCH = "live_ad_break_launch"
    LIVE_AD_BREAK_REMAINING = "live_ad_break_remaining"
    LIVE_AIRING_TIME = "live_airing_time"
    LIVE_AUDIO_BITRATE = "live_audio_bitrate"
    LIVE_AUTO_RECORD = "live_auto_record"
    LIVE_BACKUP_VIDEO = "live_backup_video"
    LIVE_INGESTS = "live_ingests"
    LIVE_PUBLISH_SRT_URL = "live_publish_srt_url"
    LIVE_PUBLISH_URL = "live_publish_url"
    LOG_EXTERNAL_VIEW_URLS = "log_external_view_urls"
    LOG_VIEW_URL = "log_view_url"
    LOG_VIEW_URLS = "log_view_urls"
    MODE = "mode"
    ONAIR = "onair"
    OWNER = "owner"
    PARTNER = "partner"
    PASSWORD = "password"
    PASSWORD_PROTECTED = "password_protected"
    PLAYER_NEXT_VIDEO = "player_next_video"
    PLAYER_NEXT_VIDEOS = "player_next_videos"
    PREVIEW_240P_URL = "preview_240p_url"
    PREVIEW_360P_URL = "preview_360p_url"
    PREVIEW_480P_URL = "preview_480p_url"
    PRIVATE_ID = "private_id"
    PUBLISH_DATE = "publish_date"
    PUBLISH_DATE_KEEP_PRIVATE = "publish_date_keep_private"
    PUBLISHED = "published"
    PUBLISHING_PROGRESS = "publishing_progress"
    ENCODING_PROGRESS = "encoding_progress"
    RECORD_END_TIME = "record_end_time"
    RECORD_START_TIME = "record_start_time"
    RECORD_STATUS = "record_status"
    RECURRENCE = "recurrence"
    SEEKER_URL = "seeker_url"
    SOUNDTRACK_ISRC = "soundtrack_isrc"
    SOUNDTRACK_POPULARITY = "soundtrack_popularity"
    SPRITE_320X_URL = "sprite_320x_url"
    SPRITE_URL = "sprite_url"
    START_TIME = "start_time"
    STATUS = "status"
    STREAM_ALTERED_WITH_AI = "stream_altered_with_ai"
    STREAM_AUDIO_URL = "stream_audio_url"
    STREAM_H264_HD1080_URL = "stream_h264_hd1080_url"
    STREAM_H264_HD_URL = "stream_h264_hd_url"
    STREAM_H264_HQ_URL = "stream_h264_hq_url"
    STREAM_H264_L1_URL = "stream_h264_l1_url"
    STREAM_H264_L2_URL = "stream_h264_l2_url"
    STREAM_H264_LD_URL = "stream_h264_ld_url"
    STREAM_H264_QHD_URL = "stream_h264_qhd_url"
    STREAM_H264_UHD_URL = "stream_h264_uhd_url"
    STREAM_H264_URL = "stream_h264_url"
    STREAM_HLS_URL = "stream_hls_url"
    STREAM_LIVE_HLS_URL = "stream_live_hls_url"
    STREAM_LIVE_RTMP_URL = "stream_live_rtmp_url"
    STREAM_LIVE_SMOOTH_URL = "stream_live_smooth_url"
    STREAM_SOURCE_URL = "stream_source_url"
    STUDIO = "studio"
    TAGS = "tags"
    THUMBNAIL_60_URL = "thumbnail_60_url"
    THUMBNAIL_62_URL = "thumbnail_62_url"
    THUMBNAIL_120_URL = "thumbnail_120_url"
    THUMBNAIL_180_URL = "thumbnail_180_url"
    THUMBNAIL_240_URL = "thumbnail_240_url"
    THUMBNAIL_360_URL = "thumbnail_360_url"
    THUMBNAIL_480_URL = "thumbnail_480_url"
    THUMBNAIL_720_URL = "thumbnail_720_url"
    THUMBNAIL_1080_URL = "thumbnail_1080_url"
    THUMBNAIL_URL = "thumbnail_url"
    TINY_URL = "tiny_url"
    TITLE = "title"
    UPDATED_TIME = "updated_time"
    UPLOADED_TIME = "uploaded_time"
    URL = "url"
    VERIFIED = "verified"
    VIEWS_LAST_DAY = "views_last_day"
    VIEWS_LAST_HOUR = "views_last_hour"
    VIEWS_LAST_MONTH = "views_last_month"
    VIEWS_LAST_WEEK = "views_last_week"
    VIEWS_TOTAL = "views_total"
    WIDTH = "width"
    NAME = "name"
    AI_SUBTITLE_LANGUAGES = "ai_subtitle_languages"
    MEDIA_TYPE = "media_type"


# Fields the API refuses in list endpoints; they need a per-video fetch.
RESTRICTED_FIELDS: frozenset[VideoField] = frozenset(
    {VideoField.STREAM_HLS_URL, VideoField.STREAM_LIVE_HLS_URL}
)

_BY_WIRE_NAME: dict[str, VideoField] = {f.value: f for f in VideoField}


def wire_name(field: VideoField | str) -> str:
    """Return the wire name for a field.

    Registered fields map to their wire name. Anything else falls back to
    its lowercased name, so ad-hoc strings can still be requested.
    """
    if isinstance(field, VideoField):
        return field.value
    registered = _BY_WIRE_NAME.get(str(field).lower())
    return registered.value if registered else str(field).lower()


def from_wire_name(name: str) -> VideoField | None:
    """Resolve a wire name back to its registered field."""
    return _BY_WIRE_NAME.get(name)


def is_restricted(field: VideoField) -> bool:
    """Whether the field is forbidden in list endpoints."""
    return field in RESTRICTED_FIELDS


def filter_restricted(fields: Iterable[VideoField]) -> list[VideoField]:
    """Return the fields with restricted ones removed, order preserved."""
    return [f for f in fields if f not in RESTRICTED_FIELDS]


def restricted_fields(fields: Iterable[VideoField]) -> list[VideoField]:
    """Return only the restricted fields, order preserved."""
    return [f for f in fields if f in RESTRICTED_FIELDS]


def to_wire_names(fields: Iterable[VideoField | str]) -> list[str]:
    """Map fields to wire names, dropping duplicates."""
    return list(dict.fromkeys(wire_name(f) for f in fields))


def join_fields(fields: Iterable[VideoField | str]) -> str:
    """Render fields as the comma-separated ``fields`` query value."""
    return ",".join(to_wire_names(fields))
