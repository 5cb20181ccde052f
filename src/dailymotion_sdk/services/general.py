"""Site-wide search and discovery."""

import logging
from collections.abc import Sequence

from dailymotion_sdk.models.enums import PlaylistSort, UserSort, VideoSort
from dailymotion_sdk.models.fields import VideoField
from dailymotion_sdk.models.responses import (
    EchoResponse,
    LanguageListResponse,
    LocaleInfo,
    PlaylistListResponse,
    UserListResponse,
    VideoListResponse,
)
from dailymotion_sdk.services.base import (
    BaseService,
    fields_params,
    paging_params,
    require_id,
)

logger = logging.getLogger(__name__)


class GeneralService(BaseService):
    """Catalogue-wide search plus the API's reference and diagnostic calls."""

    def search_videos(
        self,
        query: str,
        limit: int = 10,
        page: int = 1,
        sort: VideoSort = VideoSort.RELEVANCE,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        """Full-text video search.

        Args:
            query: Search terms, sent literally.
            limit: Page size, 1 to 100.
            page: Page number, starting at 1.
            sort: Result order.
            fields: Fields to request and extract.

        Raises:
            ValueError: If query is blank or paging is out of range.
        """
        query = require_id(query, "query")
        params = {"search": query} | paging_params(limit, page, sort)
        params |= fields_params(fields)
        response = self._http.get_public("/videos", params)
        return self._parse_videos(response, fields, f"search videos for {query!r}")

    def search_users(
        self,
        query: str,
        limit: int = 10,
        page: int = 1,
        sort: UserSort = UserSort.RELEVANCE,
    ) -> UserListResponse:
        query = require_id(query, "query")
        params = {"search": query} | paging_params(limit, page, sort)
        response = self._http.get_public("/users", params)
        return self._parse_list(
            response, UserListResponse, f"search users for {query!r}"
        )

    def search_playlists(
        self,
        query: str,
        limit: int = 10,
        page: int = 1,
        sort: PlaylistSort = PlaylistSort.RELEVANCE,
    ) -> PlaylistListResponse:
        query = require_id(query, "query")
        params = {"search": query} | paging_params(limit, page, sort)
        response = self._http.get("/playlists", params)
        return self._parse_list(
            response, PlaylistListResponse, f"search playlists for {query!r}"
        )

    def get_trending_videos(
        self,
        limit: int = 10,
        page: int = 1,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        params = paging_params(limit, page, VideoSort.TRENDING)
        params |= fields_params(fields)
        response = self._http.get_public("/videos", params)
        return self._parse_videos(response, fields, "list trending videos")

    def get_featured_videos(
        self,
        limit: int = 10,
        page: int = 1,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        params = {"flags": "featured"} | paging_params(limit, page)
        params |= fields_params(fields)
        response = self._http.get_public("/videos", params)
        return self._parse_videos(response, fields, "list featured videos")

    def get_languages(self) -> LanguageListResponse:
        """List the languages the API knows, as ISO 639 code and name."""
        response = self._http.get_public("/languages")
        return self._parse_list(response, LanguageListResponse, "list languages")

    def detect_locale(self) -> LocaleInfo | None:
        """Detect the caller's locale from the request's origin."""
        response = self._http.get_public("/locale")
        return self._parse_model(response, LocaleInfo, "detect locale")

    def echo(self, message: str) -> EchoResponse | None:
        """Send a message that the API returns unchanged.

        Useful to check connectivity and credentials.

        Raises:
            ValueError: If message is blank.
        """
        message = require_id(message, "message")
        response = self._http.get_public("/echo", {"message": message})
        return self._parse_model(response, EchoResponse, "echo")
