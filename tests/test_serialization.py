"""Tests for JSON normalization and field-selective (de)serialization."""

import json
from typing import Any

import pytest
from dailymotion_sdk.models.fields import VideoField
from dailymotion_sdk.models.metadata import VideoMetadata
from dailymotion_sdk.serialization import (
    INT64_MAX,
    deserialize_metadata,
    dumps_metadata,
    metadata_from_json,
    normalize,
    parse_json,
    serialize_metadata,
)


class TestNormalizeScalars:
    """Tests for scalar normalization."""

    @pytest.mark.parametrize(
        "value",
        [None, True, False, "text", "", 0, -5, 1.5, INT64_MAX],
        ids=["null", "true", "false", "str", "empty", "zero", "neg", "float", "max"],
    )
    def test_scalars_are_kept(self, value: Any) -> None:
        assert normalize(value) == value
        assert type(normalize(value)) is type(value)

    def test_integer_beyond_int64_becomes_float(self) -> None:
        result = normalize(INT64_MAX + 1)
        assert isinstance(result, float)
        assert result == float(INT64_MAX + 1)

    def test_booleans_are_not_numbers(self) -> None:
        assert normalize(True) is True

    def test_float_stays_float(self) -> None:
        assert isinstance(normalize(2.0), float)


class TestNormalizeArrays:
    """Tests for homogeneous array normalization."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ([], []),
            (["a", "b"], ["a", "b"]),
            (["a", 1, True, None], ["a", "1", "true", "null"]),
            ([1, 2, 3], [1, 2, 3]),
            ([1, "2"], [1, 2]),
            ([1, "a"], [1, "a"]),
            ([1, 2.0], [1, 2]),
            ([1.5, 2], [1.5, 2.0]),
            ([1.5, "x"], [1.5, "x"]),
            ([True, 1], ["true", "1"]),
            ([{"a": 1}, "b"], ['{"a":1}', "b"]),
        ],
        ids=[
            "empty",
            "strings",
            "string_first",
            "ints",
            "int_from_string",
            "int_keeps_unconvertible",
            "int_from_integral_float",
            "float_first",
            "float_keeps_unconvertible",
            "bool_first",
            "object_first",
        ],
    )
    def test_array_typed_by_first_element(
        self, value: list[Any], expected: list[Any]
    ) -> None:
        assert normalize(value) == expected

    def test_int_array_keeps_int_types(self) -> None:
        result = normalize([1, 2.0])
        assert all(type(v) is int for v in result)

    def test_nested_arrays_render_as_text(self) -> None:
        assert normalize([[1, 2], [3]]) == ["[1,2]", "[3]"]


class TestNormalizeObjects:
    """Tests for object normalization."""

    def test_object_values_are_normalized(self) -> None:
        value = {"a": [1, "2"], "b": {"c": INT64_MAX + 1}}
        result = normalize(value)
        assert result["a"] == [1, 2]
        assert isinstance(result["b"]["c"], float)

    def test_idempotent(self) -> None:
        value = {"tags": ["a", 1], "n": [1, "x"], "f": 1.5}
        once = normalize(value)
        assert normalize(once) == once


class TestParseJson:
    """Tests for tolerant JSON parsing."""

    @pytest.mark.parametrize("text", ["{", "not json", "", None])
    def test_malformed_returns_none(self, text: str | None) -> None:
        assert parse_json(text) is None

    def test_valid(self) -> None:
        assert parse_json('{"a": 1}') == {"a": 1}


class TestDeserializeMetadata:
    """Tests for field-selective extraction."""

    def test_requested_fields_restrict_extraction(self) -> None:
        """Keys that were not requested are ignored."""
        data = {"title": "x", "description": "y"}
        metadata = deserialize_metadata(data, [VideoField.TITLE])
        assert metadata.available_fields() == [VideoField.TITLE]
        assert metadata.title == "x"
        assert not metadata.has_value(VideoField.DESCRIPTION)

    def test_no_requested_fields_extracts_every_registered_field(
        self, video_payload: dict[str, Any]
    ) -> None:
        data = {**video_payload, "not_a_field": 1}
        metadata = deserialize_metadata(data)
        assert set(metadata.to_wire_dict()) == set(video_payload)

    def test_missing_requested_field_is_absent(self) -> None:
        metadata = deserialize_metadata({"id": "x1"}, [VideoField.ID, VideoField.TITLE])
        assert metadata.available_fields() == [VideoField.ID]
        assert VideoField.TITLE not in metadata.raw

    def test_null_value_is_stored(self) -> None:
        metadata = deserialize_metadata({"title": None}, [VideoField.TITLE])
        assert VideoField.TITLE in metadata.raw
        assert not metadata.has_value(VideoField.TITLE)

    @pytest.mark.parametrize("data", [None, [], "text", 42])
    def test_non_object_gives_empty_container(self, data: Any) -> None:
        assert len(deserialize_metadata(data, [VideoField.ID])) == 0

    def test_values_are_normalized(self) -> None:
        metadata = deserialize_metadata({"tags": ["a", 1]}, [VideoField.TAGS])
        assert metadata.get(VideoField.TAGS) == ["a", "1"]

    def test_from_json_malformed_gives_empty_container(self) -> None:
        assert len(metadata_from_json("{oops", [VideoField.ID])) == 0

    def test_from_json_delegates(self) -> None:
        metadata = VideoMetadata.from_json('{"id": "x1", "duration": 3}')
        assert metadata.id == "x1"
        assert metadata.duration == 3


class TestSerializeMetadata:
    """Tests for exporting containers."""

    def test_exports_available_fields_only(self) -> None:
        metadata = VideoMetadata(
            {VideoField.TITLE: "x", VideoField.DURATION: 42, VideoField.ID: None}
        )
        assert serialize_metadata(metadata) == {"title": "x", "duration": 42}

    def test_dumps_is_compact_json(self) -> None:
        metadata = VideoMetadata({VideoField.TAGS: ["a", "b"]})
        assert dumps_metadata(metadata) == '{"tags":["a","b"]}'

    def test_read_write_read_is_stable(self, video_payload: dict[str, Any]) -> None:
        first = deserialize_metadata(video_payload)
        second = metadata_from_json(dumps_metadata(first))
        assert second == first
        assert json.loads(dumps_metadata(second)) == serialize_metadata(first)
