"""Operations on the authenticated account (``/me``).

Every call here needs a user-level token. With an application token the
HTTP client raises ``AuthenticationRequiredError`` before sending.
"""

import logging
from collections.abc import Sequence

from dailymotion_sdk.models.enums import PlaylistSort, UserSort, VideoSort
from dailymotion_sdk.models.fields import VideoField
from dailymotion_sdk.models.metadata import VideoMetadata
from dailymotion_sdk.models.params import VideoCreationParameters, VideoFilters
from dailymotion_sdk.models.responses import (
    AccountInfo,
    PlaylistListResponse,
    RateLimits,
    UserListResponse,
    VideoListResponse,
)
from dailymotion_sdk.services.base import (
    BaseService,
    fields_params,
    paging_params,
    require_id,
    video_list_params,
)

logger = logging.getLogger(__name__)


class MineService(BaseService):
    """The authenticated user's account, content and social graph."""

    def get_user_info(self) -> AccountInfo | None:
        response = self._http.get("/me")
        return self._parse_model(response, AccountInfo, "get account info")

    def get_user_id(self) -> str | None:
        info = self.get_user_info()
        return info.id if info else None

    def get_videos(
        self,
        filters: VideoFilters | None = None,
        fields: Sequence[VideoField] | None = None,
        sort: VideoSort = VideoSort.RECENT,
    ) -> VideoListResponse:
        """List the account's own videos.

        Restricted fields are handled as for any video list: removed from
        the request with a warning.
        """
        params = video_list_params(fields, filters)
        params["sort"] = str(sort)
        response = self._http.get("/me/videos", params)
        return self._parse_videos(response, fields, "list my videos")

    def search_videos(
        self, query: str, limit: int = 10, page: int = 1
    ) -> VideoListResponse:
        query = require_id(query, "query")
        params = {"search": query} | paging_params(limit, page, VideoSort.RELEVANCE)
        response = self._http.get("/me/videos", params)
        return self._parse_videos(response, None, f"search my videos for {query!r}")

    def get_playlists(
        self,
        limit: int = 10,
        page: int = 1,
        sort: PlaylistSort = PlaylistSort.RECENT,
    ) -> PlaylistListResponse:
        response = self._http.get("/me/playlists", paging_params(limit, page, sort))
        return self._parse_list(response, PlaylistListResponse, "list my playlists")

    def get_followers(
        self, limit: int = 10, page: int = 1, sort: UserSort = UserSort.RECENT
    ) -> UserListResponse:
        response = self._http.get("/me/followers", paging_params(limit, page, sort))
        return self._parse_list(response, UserListResponse, "list my followers")

    def get_following(
        self, limit: int = 10, page: int = 1, sort: UserSort = UserSort.RECENT
    ) -> UserListResponse:
        response = self._http.get("/me/following", paging_params(limit, page, sort))
        return self._parse_list(response, UserListResponse, "list who I follow")

    def follow_user(self, user_id: str) -> bool:
        user_id = require_id(user_id, "user_id")
        response = self._http.post("/me/following", {"user_id": user_id})
        return self._check(response, f"follow user {user_id}")

    def unfollow_user(self, user_id: str) -> bool:
        user_id = require_id(user_id, "user_id")
        response = self._http.delete(f"/me/following/{user_id}")
        return self._check(response, f"unfollow user {user_id}")

    def _video_list(
        self,
        resource: str,
        limit: int,
        page: int,
        fields: Sequence[VideoField] | None,
        sort: VideoSort | None = None,
    ) -> VideoListResponse:
        params = paging_params(limit, page, sort) | fields_params(fields)
        response = self._http.get(resource, params)
        return self._parse_videos(response, fields, f"list {resource}")

    def get_favorites(
        self,
        limit: int = 10,
        page: int = 1,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        return self._video_list("/me/favorites", limit, page, fields, VideoSort.RECENT)

    def get_history(
        self,
        limit: int = 10,
        page: int = 1,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        return self._video_list("/me/history", limit, page, fields)

    def get_watch_later(
        self,
        limit: int = 10,
        page: int = 1,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        return self._video_list("/me/watchlater", limit, page, fields)

    def get_likes(
        self,
        limit: int = 10,
        page: int = 1,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        return self._video_list("/me/likes", limit, page, fields)

    def _add(self, collection: str, video_id: str) -> bool:
        video_id = require_id(video_id, "video_id")
        response = self._http.post(f"/me/{collection}", {"video_id": video_id})
        return self._check(response, f"add video {video_id} to {collection}")

    def _remove(self, collection: str, video_id: str) -> bool:
        video_id = require_id(video_id, "video_id")
        response = self._http.delete(f"/me/{collection}/{video_id}")
        return self._check(response, f"remove video {video_id} from {collection}")

    def _has(self, collection: str, video_id: str) -> bool:
        video_id = require_id(video_id, "video_id")
        return self._contains(
            f"/me/{collection}/{video_id}",
            f"look up video {video_id} in {collection}",
        )

    def add_to_favorites(self, video_id: str) -> bool:
        return self._add("favorites", video_id)

    def remove_from_favorites(self, video_id: str) -> bool:
        return self._remove("favorites", video_id)

    def is_favorite(self, video_id: str) -> bool:
        return self._has("favorites", video_id)

    def add_to_watch_later(self, video_id: str) -> bool:
        return self._add("watchlater", video_id)

    def remove_from_watch_later(self, video_id: str) -> bool:
        return self._remove("watchlater", video_id)

    def is_in_watch_later(self, video_id: str) -> bool:
        return self._has("watchlater", video_id)

    def add_to_history(self, video_id: str) -> bool:
        return self._add("history", video_id)

    def remove_from_history(self, video_id: str) -> bool:
        return self._remove("history", video_id)

    def is_in_history(self, video_id: str) -> bool:
        return self._has("history", video_id)

    def clear_history(self) -> bool:
        """Remove every video from the watch history."""
        return self._check(self._http.delete("/me/history"), "clear history")

    def like_video(self, video_id: str) -> bool:
        return self._add("likes", video_id)

    def unlike_video(self, video_id: str) -> bool:
        return self._remove("likes", video_id)

    def is_liked(self, video_id: str) -> bool:
        return self._has("likes", video_id)

    def get_rate_limits(self) -> RateLimits | None:
        """Read the call quota left for the current token."""
        response = self._http.get("/rate_limits")
        return self._parse_model(response, RateLimits, "get rate limits")

    def logout(self) -> bool:
        """End the server-side session of the current token.

        The local token is left untouched; use ``TokenManager.revoke``
        to drop it as well.
        """
        return self._check(self._http.get_public("/logout"), "log out")

    def create_video(
        self,
        url: str,
        title: str,
        description: str | None = None,
        channel: str | None = None,
        tags: list[str] | None = None,
        private: bool = False,
        published: bool = True,
        is_created_for_kids: bool = False,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoMetadata | None:
        """Publish an uploaded file directly under ``/me/videos``.

        Args:
            url: File URL returned by the upload server.
            title: Video title.

        Returns:
            The created video, or None on failure.

        Raises:
            ValueError: If url or title is blank.
        """
        params = VideoCreationParameters(
            url=url,
            title=title,
            description=description,
            channel=channel,
            tags=tags,
            private=private,
            published=published,
            is_created_for_kids=is_created_for_kids,
            fields=list(fields) if fields else None,
        )
        params.validate_required()
        response = self._http.post(
            "/me/videos", params.to_dict(), query=fields_params(params.fields)
        )
        return self._parse_video(response, params.fields, "create video")
