"""Tests for response models."""

import json

import pytest
from dailymotion_sdk.models.fields import VideoField
from dailymotion_sdk.models.responses import (
    AccountInfo,
    FileUploadResponse,
    PlaylistListResponse,
    UploadProgressResponse,
    UploadUrlResponse,
    UserListResponse,
    VideoListResponse,
)


class TestVideoListResponse:
    """Tests for parsing video pages."""

    def test_from_json_applies_requested_fields(self) -> None:
        text = json.dumps(
            {
                "page": 2,
                "limit": 2,
                "total": 10,
                "has_more": True,
                "list": [
                    {"id": "x1", "title": "One", "duration": 10},
                    {"id": "x2", "title": "Two", "duration": 20},
                ],
            }
        )

        page = VideoListResponse.from_json(text, [VideoField.ID, VideoField.TITLE])

        assert page.page == 2
        assert page.has_more is True
        assert [v.id for v in page.items] == ["x1", "x2"]
        assert all(not v.has_value(VideoField.DURATION) for v in page.items)

    @pytest.mark.parametrize("text", ["{", "[]", '"text"'])
    def test_malformed_gives_empty_page(self, text: str) -> None:
        page = VideoListResponse.from_json(text)
        assert page.items == []
        assert page.page == 1

    def test_missing_list_gives_no_items(self) -> None:
        assert VideoListResponse.from_json('{"page": 3}').items == []

    @pytest.mark.parametrize(
        "text",
        [
            '{"page": null, "list": [{"id": "x1"}]}',
            '{"limit": null, "list": []}',
            '{"has_more": null, "list": [{"id": "x1"}]}',
            '{"page": "first"}',
        ],
    )
    def test_unusable_envelope_gives_empty_page(self, text: str) -> None:
        page = VideoListResponse.from_json(text, [VideoField.ID])
        assert page.items == []
        assert page.page == 1

    @pytest.mark.parametrize("items", [5, "x1", {"id": "x1"}, None])
    def test_non_array_list_gives_no_items(self, items: object) -> None:
        page = VideoListResponse.from_data({"page": 2, "list": items})
        assert page.items == []
        assert page.page == 2


class TestListEnvelopes:
    """Tests for entity list models."""

    def test_wire_list_key_maps_to_items(self) -> None:
        users = UserListResponse.model_validate(
            {"list": [{"id": "u1", "screenname": "Alice"}], "has_more": False}
        )
        assert users.items[0].screenname == "Alice"

    def test_unknown_keys_are_ignored(self) -> None:
        playlists = PlaylistListResponse.model_validate(
            {"list": [{"id": "p1", "unknown": 1}], "extra": True}
        )
        assert playlists.items[0].id == "p1"


class TestUploadModels:
    """Tests for upload related models."""

    def test_upload_url(self) -> None:
        target = UploadUrlResponse(upload_url="https://u")
        assert not target.has_progress_url

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ({"id": "abc", "url": "https://h/files/other.mp4"}, "abc"),
            ({"url": "https://h/files/def.mp4?seal=1"}, "def"),
            ({"url": "https://h/"}, None),
            ({}, None),
        ],
    )
    def test_file_id(self, data: dict, expected: str | None) -> None:
        assert FileUploadResponse.model_validate(data).get_file_id() == expected

    def test_values_are_strings(self) -> None:
        result = FileUploadResponse.model_validate(
            {"size": 2048, "duration": 1500, "streamable": True, "vcodec": "H264"}
        )
        assert result.size == "2048"
        assert result.file_size_bytes == 2048
        assert result.duration_seconds == 1.5
        assert result.is_streamable
        assert result.video_codec == "H264"

    def test_unparseable_numbers(self) -> None:
        result = FileUploadResponse(size="big", duration="long")
        assert result.file_size_bytes is None
        assert result.duration_seconds is None

    @pytest.mark.parametrize(
        ("status", "completed", "failed", "in_progress"),
        [
            ("completed", True, False, False),
            ("FAILED", False, True, False),
            ("uploading", False, False, True),
            (None, False, False, False),
        ],
    )
    def test_progress_states(
        self, status: str | None, completed: bool, failed: bool, in_progress: bool
    ) -> None:
        progress = UploadProgressResponse(status=status)
        assert progress.is_completed is completed
        assert progress.is_failed is failed
        assert progress.is_in_progress is in_progress


class TestAccountInfo:
    def test_email_verified(self) -> None:
        assert AccountInfo(status="active").email_verified
        assert not AccountInfo(status="pending-activation").email_verified
