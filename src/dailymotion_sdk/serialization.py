"""JSON normalization and field-selective (de)serialization.

Every value read from or written to the API passes through ``normalize``,
so containers always hold the same canonical shapes:

- integers that fit in a signed 64-bit range stay ``int``, others ``float``
- arrays become homogeneous lists typed by their first element
- objects become ``dict`` with normalized values

Reading (``deserialize_metadata``) and writing (``serialize_metadata``)
share this single pipeline.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from dailymotion_sdk.models.fields import VideoField, from_wire_name, wire_name
from dailymotion_sdk.models.metadata import VideoMetadata

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def _as_text(value: Any) -> str:
    """String form of a normalized value, JSON-rendered for non-strings."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


def _coerce_int(value: Any) -> int | str:
    if isinstance(value, bool):
        return _as_text(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer() and _fits_int64(int(value)):
        return int(value)
    if isinstance(value, str):
        try:
            parsed = int(value)
        except ValueError:
            return value
        return parsed if _fits_int64(parsed) else value
    return _as_text(value)


def _coerce_float(value: Any) -> float | str:
    if isinstance(value, bool):
        return _as_text(value)
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return _as_text(value)


def _normalize_array(items: Iterable[Any]) -> list[Any]:
    values = [normalize(item) for item in items]
    if not values:
        return []

    # The first element picks the list kind; the rest are coerced to it,
    # keeping their string form when coercion fails.
    first = values[0]
    if isinstance(first, str):
        return [_as_text(v) for v in values]
    if isinstance(first, bool):
        return [_as_text(v) for v in values]
    if isinstance(first, int):
        return [_coerce_int(v) for v in values]
    if isinstance(first, float):
        return [_coerce_float(v) for v in values]
    return [_as_text(v) for v in values]


def normalize(value: Any) -> Any:
    """Convert a parsed JSON value into its canonical representation.

    Total over the JSON value space. Values outside it (for example a
    caller-stored datetime) are stored as their string form.
    """
    if value is None or isinstance(value, bool | str | float):
        return value
    if isinstance(value, int):
        return value if _fits_int64(value) else float(value)
    if isinstance(value, Mapping):
        return {str(k): normalize(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return _normalize_array(value)
    return str(value)


def parse_json(text: str | bytes | None) -> Any:
    """Parse JSON text, returning None when it is malformed."""
    if text is None:
        return None
    try:
        return json.loads(text)
    except (ValueError, TypeError) as e:
        logger.debug("Ignoring malformed JSON payload: %s", e)
        return None


def _resolve_fields(
    requested_fields: Iterable[VideoField | str] | None,
) -> list[VideoField]:
    if not requested_fields:
        return list(VideoField)
    resolved: list[VideoField] = []
    for field in requested_fields:
        registered = from_wire_name(wire_name(field))
        if registered is not None:
            resolved.append(registered)
    return resolved


def deserialize_metadata(
    data: Any, requested_fields: Iterable[VideoField | str] | None = None
) -> VideoMetadata:
    """Populate a container from a parsed JSON object.

    When ``requested_fields`` is non-empty only those fields are extracted;
    other keys present in ``data`` are ignored. Otherwise every registered
    field found in ``data`` is extracted. Missing fields are simply absent.

    Args:
        data: Parsed JSON value. Anything other than an object yields an
            empty container.
        requested_fields: Fields asked for in the outbound request.

    Returns:
        The populated container.
    """
    metadata = VideoMetadata()
    if not isinstance(data, Mapping):
        return metadata

    for field in _resolve_fields(requested_fields):
        name = field.value
        if name in data:
            metadata.set(field, normalize(data[name]))
    return metadata


def metadata_from_json(
    text: str | bytes, requested_fields: Iterable[VideoField | str] | None = None
) -> VideoMetadata:
    """Parse a response body into a container, empty on malformed input."""
    return deserialize_metadata(parse_json(text), requested_fields)


def serialize_metadata(metadata: VideoMetadata) -> dict[str, Any]:
    """Export the container's available fields keyed by wire name."""
    return {
        wire_name(field): normalize(metadata.get(field))
        for field in metadata.available_fields()
    }


def dumps_metadata(metadata: VideoMetadata) -> str:
    """Serialize the container to a compact JSON object string."""
    return json.dumps(serialize_metadata(metadata), separators=(",", ":"))
