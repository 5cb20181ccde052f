"""Resource services built on the HTTP client."""

from dailymotion_sdk.services.base import ApiClientProtocol, BaseService
from dailymotion_sdk.services.channels import ChannelsService
from dailymotion_sdk.services.files import FileService
from dailymotion_sdk.services.general import GeneralService
from dailymotion_sdk.services.mine import MineService
from dailymotion_sdk.services.playlists import PlaylistService, PlaylistsService
from dailymotion_sdk.services.users import UserService
from dailymotion_sdk.services.videos import VideosService

__all__ = [
    "ApiClientProtocol",
    "BaseService",
    "ChannelsService",
    "FileService",
    "GeneralService",
    "MineService",
    "PlaylistService",
    "PlaylistsService",
    "UserService",
    "VideosService",
]
