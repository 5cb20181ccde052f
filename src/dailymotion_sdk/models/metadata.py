"""Dynamic, field-indexed video metadata container."""

from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any

from dailymotion_sdk.models.fields import VideoField, wire_name

__all__ = ["VideoMetadata"]

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _to_float(value: Any) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _to_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


def _to_str(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return str(value)
    return None


def _to_list(value: Any) -> list[Any] | None:
    if isinstance(value, list | tuple):
        return list(value)
    return None


_CONVERTERS = {
    str: _to_str,
    int: _to_int,
    float: _to_float,
    bool: _to_bool,
    list: _to_list,
}


def _convert(value: Any, as_type: type) -> Any:
    converter = _CONVERTERS.get(as_type)
    if converter is not None:
        return converter(value)
    return value if isinstance(value, as_type) else None


class VideoMetadata:
    """Key/value store of video fields.

    Values are normalized JSON values (str, int, float, bool, list, dict)
    or None. A field stored as None is distinct from a missing field in
    storage, but neither counts as having a value.

    Typed reads are lossy but safe: ``get(field, int)`` converts when it
    can and returns None otherwise. Callers should treat every read as
    optional.
    """

    def __init__(self, values: Mapping[VideoField, Any] | None = None) -> None:
        self._data: dict[VideoField, Any] = {}
        for field, value in (values or {}).items():
            self.set(field, value)

    def set(self, field: VideoField, value: Any) -> None:
        """Store a value, replacing any previous one."""
        self._data[field] = value

    def get(self, field: VideoField, as_type: type | None = None) -> Any:
        """Read a field value.

        Args:
            field: Field to read.
            as_type: Optional target type. One of ``str``, ``int``, ``float``,
                ``bool`` or ``list`` triggers a best-effort conversion; other
                types act as an isinstance filter.

        Returns:
            The (converted) value, or None when the field is missing, null
            or not convertible.
        """
        value = self._data.get(field)
        if value is None or as_type is None:
            return value
        return _convert(value, as_type)

    def has_value(self, field: VideoField) -> bool:
        """Whether the field is present and not None."""
        return self._data.get(field) is not None

    def available_fields(self) -> list[VideoField]:
        """Fields holding a non-None value, in insertion order."""
        return [f for f, v in self._data.items() if v is not None]

    def subset(self, fields: Iterable[VideoField]) -> "VideoMetadata":
        """Copy the requested fields that have values into a new container."""
        result = VideoMetadata()
        for field in fields:
            if self.has_value(field):
                result.set(field, self._data[field])
        return result

    def to_wire_dict(self) -> dict[str, Any]:
        """Export stored values keyed by wire name."""
        return {wire_name(f): v for f, v in self._data.items()}

    @property
    def raw(self) -> Mapping[VideoField, Any]:
        """Read-only view of the underlying storage."""
        return MappingProxyType(self._data)

    @classmethod
    def from_json(
        cls, text: str | bytes, requested_fields: Iterable[VideoField] | None = None
    ) -> "VideoMetadata":
        """Parse an API response body.

        Malformed JSON or a non-object root yields an empty container.
        """
        from dailymotion_sdk.serialization import metadata_from_json

        return metadata_from_json(text, requested_fields)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        requested_fields: Iterable[VideoField] | None = None,
    ) -> "VideoMetadata":
        """Build a container from an already-parsed JSON object."""
        from dailymotion_sdk.serialization import deserialize_metadata

        return deserialize_metadata(data, requested_fields)

    def __len__(self) -> int:
        return len(self.available_fields())

    def __contains__(self, field: object) -> bool:
        return isinstance(field, VideoField) and self.has_value(field)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VideoMetadata):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        fields = ", ".join(f.value for f in self.available_fields())
        return f"VideoMetadata({fields})"

    # Convenience accessors

    @property
    def id(self) -> str | None:
        return self.get(VideoField.ID, str)

    @property
    def title(self) -> str | None:
        return self.get(VideoField.TITLE, str)

    @property
    def description(self) -> str | None:
        return self.get(VideoField.DESCRIPTION, str)

    @property
    def name(self) -> str | None:
        return self.get(VideoField.NAME, str)

    @property
    def duration(self) -> int | None:
        """Duration in seconds."""
        return self.get(VideoField.DURATION, int)

    @property
    def url(self) -> str | None:
        return self.get(VideoField.URL, str)

    @property
    def embed_url(self) -> str | None:
        return self.get(VideoField.EMBED_URL, str)

    @property
    def embed_html(self) -> str | None:
        return self.get(VideoField.EMBED_HTML, str)

    @property
    def thumbnail_url(self) -> str | None:
        return self.get(VideoField.THUMBNAIL_URL, str)

    @property
    def stream_hls_url(self) -> str | None:
        return self.get(VideoField.STREAM_HLS_URL, str)

    @property
    def created_time(self) -> int | None:
        """Creation time as a unix timestamp."""
        return self.get(VideoField.CREATED_TIME, int)

    @property
    def updated_time(self) -> int | None:
        return self.get(VideoField.UPDATED_TIME, int)

    @property
    def uploaded_time(self) -> int | None:
        return self.get(VideoField.UPLOADED_TIME, int)

    @property
    def created_at(self) -> datetime | None:
        """Creation time as an aware UTC datetime."""
        timestamp = self.created_time
        if timestamp is None:
            return None
        return datetime.fromtimestamp(timestamp, tz=UTC)

    @property
    def views_total(self) -> int | None:
        return self.get(VideoField.VIEWS_TOTAL, int)

    @property
    def likes_total(self) -> int | None:
        return self.get(VideoField.LIKES_TOTAL, int)

    @property
    def published(self) -> bool | None:
        return self.get(VideoField.PUBLISHED, bool)

    @property
    def is_private(self) -> bool | None:
        return self.get(VideoField.PRIVATE, bool)

    @property
    def private_id(self) -> str | None:
        return self.get(VideoField.PRIVATE_ID, str)

    @property
    def explicit(self) -> bool | None:
        return self.get(VideoField.EXPLICIT, bool)

    @property
    def allow_embed(self) -> bool | None:
        return self.get(VideoField.ALLOW_EMBED, bool)

    @property
    def status(self) -> str | None:
        """Processing status, e.g. ``published`` or ``processing``."""
        return self.get(VideoField.STATUS, str)

    @property
    def encoding_progress(self) -> int | None:
        return self.get(VideoField.ENCODING_PROGRESS, int)

    @property
    def channel(self) -> str | None:
        return self.get(VideoField.CHANNEL, str)

    @property
    def owner(self) -> str | None:
        """Owner id, or the raw value when the API expanded it."""
        return self.get(VideoField.OWNER, str)

    @property
    def language(self) -> str | None:
        return self.get(VideoField.LANGUAGE, str)

    @property
    def country(self) -> str | None:
        return self.get(VideoField.COUNTRY, str)

    @property
    def mode(self) -> str | None:
        return self.get(VideoField.MODE, str)

    @property
    def media_type(self) -> str | None:
        return self.get(VideoField.MEDIA_TYPE, str)

    @property
    def item_type(self) -> str | None:
        return self.get(VideoField.ITEM_TYPE, str)

    @property
    def width(self) -> int | None:
        return self.get(VideoField.WIDTH, int)

    @property
    def height(self) -> int | None:
        return self.get(VideoField.HEIGHT, int)

    @property
    def aspect_ratio(self) -> float | None:
        return self.get(VideoField.ASPECT_RATIO, float)

    @property
    def tags(self) -> list[str]:
        """Tags, empty when absent."""
        return [str(t) for t in self.get(VideoField.TAGS, list) or []]

    @property
    def hashtags(self) -> list[str]:
        return [str(t) for t in self.get(VideoField.HASHTAGS, list) or []]

    @property
    def geoloc(self) -> list[float] | None:
        """Latitude and longitude, when set."""
        values = self.get(VideoField.GEOLOC, list)
        if not values:
            return None
        coords = [_to_float(v) for v in values]
        if any(c is None for c in coords):
            return None
        return coords  # type: ignore[return-value]
