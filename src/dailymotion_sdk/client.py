"""High-level Dailymotion API client."""

import logging
from collections.abc import Iterable, Sequence

from dailymotion_sdk.auth import TokenManager
from dailymotion_sdk.config import ApiKeyType, DailymotionOptions
from dailymotion_sdk.http import DailymotionHttpClient
from dailymotion_sdk.models.auth import TokenResponse, TokenValidationResponse
from dailymotion_sdk.models.enums import Channel, OAuthScope, VideoSort
from dailymotion_sdk.models.fields import VideoField
from dailymotion_sdk.models.metadata import VideoMetadata
from dailymotion_sdk.models.params import GlobalApiParameters
from dailymotion_sdk.models.responses import (
    PlaylistMetadata,
    UserListResponse,
    UserMetadata,
    VideoListResponse,
)
from dailymotion_sdk.services import (
    ChannelsService,
    FileService,
    GeneralService,
    MineService,
    PlaylistService,
    PlaylistsService,
    UserService,
    VideosService,
)

logger = logging.getLogger(__name__)


class DailymotionClient:
    """Entry point bundling authentication and resource services.

    One client owns one HTTP connection pool and one token manager. Services
    share both, so authenticating once applies to every service.

    Examples:
        ```python
        with DailymotionClient(options) as client:
            client.authenticate()
            video = client.get_video("x8abc12", [VideoField.ID, VideoField.TITLE])
        ```
    """

    def __init__(
        self,
        options: DailymotionOptions | None = None,
        http_client: DailymotionHttpClient | None = None,
        token_manager: TokenManager | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            options: Client configuration. Uses defaults if not provided.
            http_client: Optional HTTP client. Creates one if not provided.
            token_manager: Optional token manager. Creates one bound to the
                HTTP client if not provided.

        Raises:
            ValueError: If the options are invalid.
        """
        self._options = options or DailymotionOptions()
        self._options.validate()
        self._http = http_client or DailymotionHttpClient(self._options)
        self._auth = token_manager or TokenManager(self._http, self._options)

        self._videos = VideosService(self._http)
        self._channels = ChannelsService(self._http)
        self._general = GeneralService(self._http)
        self._mine = MineService(self._http)
        self._playlists = PlaylistsService(self._http)
        self._files = FileService(self._http)

    @property
    def options(self) -> DailymotionOptions:
        return self._options

    @property
    def auth(self) -> TokenManager:
        return self._auth

    @property
    def http(self) -> DailymotionHttpClient:
        return self._http

    @property
    def videos(self) -> VideosService:
        return self._videos

    @property
    def channels(self) -> ChannelsService:
        return self._channels

    @property
    def general(self) -> GeneralService:
        return self._general

    @property
    def mine(self) -> MineService:
        return self._mine

    @property
    def playlists(self) -> PlaylistsService:
        return self._playlists

    @property
    def files(self) -> FileService:
        return self._files

    def user(self, user_id: str) -> UserService:
        """Service scoped to one user."""
        return UserService(self._http, user_id)

    def playlist(self, playlist_id: str) -> PlaylistService:
        """Service scoped to one playlist."""
        return PlaylistService(self._http, playlist_id)

    # Authentication

    def authenticate(
        self, scopes: Iterable[OAuthScope | str] | None = None
    ) -> TokenResponse:
        """Authenticate with whatever credentials the options carry.

        Uses the password grant when a username and password are configured,
        otherwise the client-credentials grant with the configured key type.

        Raises:
            ValueError: If the needed credentials are not configured.
        """
        if self._options.has_user_credentials:
            return self._auth.authenticate_with_password(
                self._options.username, self._options.password, scopes
            )
        api_key, api_secret = self._options.api_credentials
        return self._auth.authenticate_with_client_credentials(
            api_key, api_secret, self._options.api_key_type, scopes
        )

    def authenticate_with_password(
        self,
        username: str,
        password: str,
        scopes: Iterable[OAuthScope | str] | None = None,
    ) -> TokenResponse:
        return self._auth.authenticate_with_password(username, password, scopes)

    def authenticate_with_client_credentials(
        self,
        api_key: str,
        api_secret: str,
        api_key_type: ApiKeyType = ApiKeyType.PUBLIC,
        scopes: Iterable[OAuthScope | str] | None = None,
    ) -> TokenResponse:
        return self._auth.authenticate_with_client_credentials(
            api_key, api_secret, api_key_type, scopes
        )

    def refresh_token(self, refresh_token: str | None = None) -> TokenResponse:
        return self._auth.refresh(refresh_token)

    def validate_token(self) -> TokenValidationResponse | None:
        return self._auth.validate_token()

    def revoke_token(self) -> bool:
        return self._auth.revoke()

    @property
    def is_authenticated(self) -> bool:
        return self._auth.is_authenticated

    # Convenience

    def get_video(
        self,
        video_id: str,
        fields: Sequence[VideoField] | None = None,
        global_params: GlobalApiParameters | None = None,
    ) -> VideoMetadata | None:
        return self._videos.get_video(video_id, fields, global_params)

    def get_user(self, user_id: str) -> UserMetadata | None:
        return self.user(user_id).get_metadata()

    def get_playlist(self, playlist_id: str) -> PlaylistMetadata | None:
        return self.playlist(playlist_id).get_metadata()

    def search_videos(
        self,
        query: str,
        limit: int = 10,
        page: int = 1,
        sort: VideoSort = VideoSort.RELEVANCE,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        """Search videos.

        Raises:
            ValueError: If query is blank, limit is outside 1..100 or page
                is below 1.
        """
        return self._general.search_videos(query, limit, page, sort, fields)

    def search_users(
        self, query: str, limit: int = 10, page: int = 1
    ) -> UserListResponse:
        return self._general.search_users(query, limit, page)

    def get_trending_videos(
        self,
        limit: int = 10,
        page: int = 1,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        return self._general.get_trending_videos(limit, page, fields)

    def get_channel_videos(
        self,
        channel: Channel | str,
        limit: int = 10,
        page: int = 1,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        return self._channels.get_channel_videos(
            channel, limit, page, VideoSort.RECENT, fields
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()

    def __enter__(self) -> "DailymotionClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
