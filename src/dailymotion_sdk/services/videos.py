"""Video resource operations."""

import logging
from collections.abc import Sequence

from dailymotion_sdk.models.enums import Channel, VideoSort
from dailymotion_sdk.models.fields import VideoField
from dailymotion_sdk.models.metadata import VideoMetadata
from dailymotion_sdk.models.params import (
    GlobalApiParameters,
    VideoCreationParameters,
    VideoFilters,
    VideoUpdateParameters,
)
from dailymotion_sdk.models.responses import (
    AccountInfo,
    UploadUrlResponse,
    VideoListResponse,
)
from dailymotion_sdk.services.base import (
    BaseService,
    fields_params,
    require_id,
    video_list_params,
)
from dailymotion_sdk.services.files import FileService

logger = logging.getLogger(__name__)


class VideosService(BaseService):
    """Read, create, update and delete videos.

    List calls never request restricted fields (``stream_hls_url`` and
    ``stream_live_hls_url``); they are dropped from the outbound request
    with a warning but still used to parse the response, so they simply
    come back absent. Fetch a single video to read them.
    """

    def get_video(
        self,
        video_id: str,
        fields: Sequence[VideoField] | None = None,
        global_params: GlobalApiParameters | None = None,
    ) -> VideoMetadata | None:
        """Fetch one video.

        Args:
            video_id: Video id, e.g. ``x8abc12``.
            fields: Fields to request and extract. All registered fields are
                extracted from the response when omitted.
            global_params: Per-call global parameters.

        Returns:
            The video metadata, or None if the request fails.

        Raises:
            ValueError: If video_id is empty.
        """
        video_id = require_id(video_id, "video_id")
        response = self._http.get(
            f"/video/{video_id}", fields_params(fields), global_params
        )
        return self._parse_video(response, fields, f"get video {video_id}")

    def get_videos(
        self,
        filters: VideoFilters | None = None,
        fields: Sequence[VideoField] | None = None,
        sort: VideoSort = VideoSort.RECENT,
    ) -> VideoListResponse:
        """List videos matching filters.

        Returns:
            A page of videos; empty if the request fails.
        """
        params = video_list_params(fields, filters)
        params.setdefault("sort", str(sort))
        response = self._http.get_public("/videos", params)
        return self._parse_videos(response, fields, "list videos")

    def search_videos_with_filters(
        self,
        query: str,
        filters: VideoFilters | None = None,
        fields: Sequence[VideoField] | None = None,
        sort: VideoSort = VideoSort.RELEVANCE,
    ) -> VideoListResponse:
        """Full-text search combined with filters.

        Raises:
            ValueError: If query is blank.
        """
        query = require_id(query, "query")
        params = video_list_params(fields, filters)
        params["search"] = query
        params.setdefault("sort", str(sort))
        response = self._http.get_public("/videos", params)
        return self._parse_videos(response, fields, f"search videos for {query!r}")

    def get_channel_videos_with_filters(
        self,
        channel: Channel | str,
        filters: VideoFilters | None = None,
        fields: Sequence[VideoField] | None = None,
        sort: VideoSort = VideoSort.RECENT,
    ) -> VideoListResponse:
        """List videos of a channel (category)."""
        channel_id = require_id(str(channel), "channel").lower()
        params = video_list_params(fields, filters)
        params.setdefault("sort", str(sort))
        response = self._http.get_public(f"/channel/{channel_id}/videos", params)
        return self._parse_videos(response, fields, f"list {channel_id} videos")

    def get_user_videos_with_filters(
        self,
        user_id: str,
        filters: VideoFilters | None = None,
        fields: Sequence[VideoField] | None = None,
        sort: VideoSort = VideoSort.RECENT,
    ) -> VideoListResponse:
        """List videos uploaded by a user."""
        user_id = require_id(user_id, "user_id")
        params = video_list_params(fields, filters)
        params.setdefault("sort", str(sort))
        response = self._http.get_public(f"/user/{user_id}/videos", params)
        return self._parse_videos(response, fields, f"list videos of {user_id}")

    def _current_user_id(self) -> str | None:
        response = self._http.get("/me")
        account = self._parse_model(response, AccountInfo, "get current user")
        return account.id if account else None

    def create_video(self, params: VideoCreationParameters) -> VideoMetadata | None:
        """Publish an uploaded file as a video of the authenticated user.

        Resolves the user id through ``/me`` and posts to
        ``/user/{id}/videos``. ``params.fields`` selects the fields returned.

        Returns:
            The created video, or None if the user id cannot be resolved or
            the creation fails.

        Raises:
            ValueError: If url or title is missing.
            AuthenticationRequiredError: If the held token is an application
                token.
        """
        params.validate_required()
        user_id = self._current_user_id()
        if not user_id:
            logger.error("Cannot create video: user id unavailable from /me")
            return None

        response = self._http.post(
            f"/user/{user_id}/videos",
            params.to_dict(),
            query=fields_params(params.fields),
        )
        return self._parse_video(response, params.fields, "create video")

    def create_video_from_file(
        self,
        url: str,
        title: str,
        description: str | None = None,
        tags: list[str] | None = None,
        channel: Channel | str | None = None,
        private: bool | None = None,
        published: bool | None = True,
        is_created_for_kids: bool | None = None,
    ) -> VideoMetadata | None:
        """Shortcut for ``create_video`` with the common properties.

        Raises:
            ValueError: If url or title is blank.
        """
        params = VideoCreationParameters(
            url=url,
            title=title,
            description=description,
            tags=tags,
            channel=str(channel) if channel is not None else None,
            private=private,
            published=published,
            is_created_for_kids=is_created_for_kids,
        )
        return self.create_video(params)

    def update_video(
        self, video_id: str, params: VideoUpdateParameters
    ) -> VideoMetadata | None:
        """Update writable properties of a video.

        Returns:
            The updated video (fields per ``params.fields``), or None on failure.

        Raises:
            ValueError: If video_id is empty or no property is set.
        """
        video_id = require_id(video_id, "video_id")
        body = params.to_dict()
        if not body:
            raise ValueError("no video properties to update")
        response = self._http.post(
            f"/video/{video_id}", body, query=fields_params(params.fields)
        )
        return self._parse_video(response, params.fields, f"update video {video_id}")

    def update_video_fields(
        self,
        video_id: str,
        title: str | None = None,
        description: str | None = None,
        tags: list[str] | None = None,
        channel: Channel | str | None = None,
        private: bool | None = None,
        published: bool | None = None,
    ) -> VideoMetadata | None:
        """Update the common text and visibility properties of a video."""
        params = VideoUpdateParameters(
            title=title,
            description=description,
            tags=tags,
            channel=str(channel) if channel is not None else None,
            private=private,
            published=published,
        )
        return self.update_video(video_id, params)

    def update_embed_settings(
        self,
        video_id: str,
        allow_embed: bool | None = None,
        allowed_in_playlists: bool | None = None,
    ) -> VideoMetadata | None:
        """Change where a video may be embedded or listed."""
        params = VideoUpdateParameters(
            allow_embed=allow_embed, allowed_in_playlists=allowed_in_playlists
        )
        return self.update_video(video_id, params)

    def delete_video(self, video_id: str) -> bool:
        """Delete a video. Returns whether the API confirmed it."""
        video_id = require_id(video_id, "video_id")
        response = self._http.delete(f"/video/{video_id}")
        return self._check(response, f"delete video {video_id}")

    def get_upload_url(self) -> UploadUrlResponse | None:
        """Request an upload target for a new file. Same as ``FileService``."""
        return FileService(self._http).get_upload_url()
