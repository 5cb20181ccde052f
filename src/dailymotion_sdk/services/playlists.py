"""Playlist operations."""

import logging
from collections.abc import Iterable, Sequence

from dailymotion_sdk.models.fields import VideoField
from dailymotion_sdk.models.params import PlaylistFilters, encode_value
from dailymotion_sdk.models.responses import (
    PlaylistListResponse,
    PlaylistMetadata,
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


def _playlist_body(
    name: str | None, description: str | None, private: bool | None
) -> dict[str, str]:
    body = {"name": name, "description": description, "private": private}
    return {
        key: encoded
        for key, value in body.items()
        if (encoded := encode_value(value)) is not None
    }


class PlaylistService(BaseService):
    """Operations on a single playlist.

    Raises:
        ValueError: If playlist_id is empty.
    """

    def __init__(self, http: ApiClientProtocol, playlist_id: str) -> None:
        super().__init__(http)
        self.playlist_id = require_id(playlist_id, "playlist_id")

    @property
    def _path(self) -> str:
        return f"/playlist/{self.playlist_id}"

    def get_metadata(self) -> PlaylistMetadata | None:
        response = self._http.get(self._path)
        return self._parse_model(
            response, PlaylistMetadata, f"get playlist {self.playlist_id}"
        )

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        private: bool | None = None,
    ) -> PlaylistMetadata | None:
        """Change name, description or visibility.

        Raises:
            ValueError: If nothing is given to update.
        """
        body = _playlist_body(name, description, private)
        if not body:
            raise ValueError("no playlist properties to update")
        response = self._http.post(self._path, body)
        return self._parse_model(
            response, PlaylistMetadata, f"update playlist {self.playlist_id}"
        )

    def delete(self) -> bool:
        response = self._http.delete(self._path)
        return self._check(response, f"delete playlist {self.playlist_id}")

    def get_videos(
        self,
        limit: int = 10,
        page: int = 1,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        params = paging_params(limit, page) | fields_params(fields)
        response = self._http.get(f"{self._path}/videos", params)
        return self._parse_videos(
            response, fields, f"list videos of playlist {self.playlist_id}"
        )

    def add_video(self, video_id: str) -> bool:
        video_id = require_id(video_id, "video_id")
        response = self._http.post(f"{self._path}/videos/{video_id}")
        return self._check(
            response, f"add video {video_id} to playlist {self.playlist_id}"
        )

    def add_videos(self, video_ids: Iterable[str]) -> bool:
        """Add several videos in one call.

        Raises:
            ValueError: If no video id is given.
        """
        ids = [require_id(v, "video_id") for v in video_ids]
        if not ids:
            raise ValueError("video_ids cannot be empty")
        body = {"video_ids": ",".join(ids)}
        response = self._http.post(f"{self._path}/videos", body)
        return self._check(response, f"add videos to playlist {self.playlist_id}")

    def remove_video(self, video_id: str) -> bool:
        video_id = require_id(video_id, "video_id")
        response = self._http.delete(f"{self._path}/videos/{video_id}")
        return self._check(
            response, f"remove video {video_id} from playlist {self.playlist_id}"
        )

    def contains_video(self, video_id: str) -> bool:
        """Whether the video is in the playlist.

        The API answers with an empty list when it is not.
        """
        video_id = require_id(video_id, "video_id")
        return self._contains(
            f"{self._path}/videos/{video_id}",
            f"look up video {video_id} in playlist {self.playlist_id}",
        )


class PlaylistsService(BaseService):
    """Create and look up playlists."""

    def create_playlist(
        self, name: str, description: str | None = None, private: bool = False
    ) -> PlaylistMetadata | None:
        """Create a playlist owned by the authenticated user.

        Raises:
            ValueError: If name is empty.
        """
        name = require_id(name, "name")
        response = self._http.post(
            "/me/playlists", _playlist_body(name, description, private)
        )
        return self._parse_model(
            response, PlaylistMetadata, f"create playlist {name!r}"
        )

    def get_playlist(self, playlist_id: str) -> PlaylistMetadata | None:
        return PlaylistService(self._http, playlist_id).get_metadata()

    def get_playlists(
        self,
        filters: PlaylistFilters | None = None,
        limit: int = 10,
        page: int = 1,
    ) -> PlaylistListResponse:
        params = paging_params(limit, page)
        if filters is not None:
            params |= filters.to_dict()
        response = self._http.get("/playlists", params)
        return self._parse_list(response, PlaylistListResponse, "list playlists")
