"""Operations scoped to one user."""

import logging
from collections.abc import Sequence

from dailymotion_sdk.models.enums import PlaylistSort, UserSort, VideoSort
from dailymotion_sdk.models.fields import VideoField
from dailymotion_sdk.models.responses import (
    PlaylistListResponse,
    UserListResponse,
    UserMetadata,
    VideoListResponse,
)
from dailymotion_sdk.services.base import (
    ApiClientProtocol,
    BaseService,
    fields_params,
    paging_params,
    require_id,
)

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Read a user's profile, content and social graph.

    Args:
        http: HTTP client.
        user_id: User id or username.

    Raises:
        ValueError: If user_id is empty.
    """

    def __init__(self, http: ApiClientProtocol, user_id: str) -> None:
        super().__init__(http)
        self.user_id = require_id(user_id, "user_id")

    @property
    def _path(self) -> str:
        return f"/user/{self.user_id}"

    def get_metadata(self) -> UserMetadata | None:
        response = self._http.get_public(self._path)
        return self._parse_model(response, UserMetadata, f"get user {self.user_id}")

    def get_videos(
        self,
        limit: int = 10,
        page: int = 1,
        sort: VideoSort = VideoSort.RECENT,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        params = paging_params(limit, page, sort) | fields_params(fields)
        response = self._http.get_public(f"{self._path}/videos", params)
        return self._parse_videos(response, fields, f"list videos of {self.user_id}")

    def search_videos(
        self,
        query: str,
        limit: int = 10,
        page: int = 1,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        """Search within the user's uploads."""
        query = require_id(query, "query")
        params = paging_params(limit, page, VideoSort.RELEVANCE)
        params |= fields_params(fields) | {"search": query}
        response = self._http.get_public(f"{self._path}/videos", params)
        return self._parse_videos(
            response, fields, f"search videos of {self.user_id}"
        )

    def get_playlists(
        self, limit: int = 10, page: int = 1, sort: PlaylistSort | None = None
    ) -> PlaylistListResponse:
        response = self._http.get(
            f"{self._path}/playlists", paging_params(limit, page, sort)
        )
        return self._parse_list(
            response, PlaylistListResponse, f"list playlists of {self.user_id}"
        )

    def _users(self, relation: str, limit: int, page: int) -> UserListResponse:
        response = self._http.get(
            f"{self._path}/{relation}", paging_params(limit, page)
        )
        return self._parse_list(
            response, UserListResponse, f"list {relation} of {self.user_id}"
        )

    def get_followers(self, limit: int = 10, page: int = 1) -> UserListResponse:
        return self._users("followers", limit, page)

    def get_following(self, limit: int = 10, page: int = 1) -> UserListResponse:
        return self._users("following", limit, page)

    def get_features(
        self, limit: int = 10, page: int = 1, sort: UserSort | None = None
    ) -> UserListResponse:
        """Users featured by this user."""
        response = self._http.get(
            f"{self._path}/features", paging_params(limit, page, sort)
        )
        return self._parse_list(
            response, UserListResponse, f"list features of {self.user_id}"
        )

    def get_likes(
        self,
        limit: int = 10,
        page: int = 1,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        """Videos liked by this user."""
        params = paging_params(limit, page) | fields_params(fields)
        response = self._http.get(f"{self._path}/likes", params)
        return self._parse_videos(response, fields, f"list likes of {self.user_id}")
