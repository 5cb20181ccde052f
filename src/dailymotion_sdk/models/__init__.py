"""Data models for dailymotion_sdk.

Public API:
    VideoField - Registry of video metadata fields and their wire names
    VideoMetadata - Container holding whichever video fields were returned
    VideoFilters, VideoCreationParameters, VideoUpdateParameters,
    PlaylistFilters, GlobalApiParameters - Request parameter builders
    TokenResponse, TokenValidationResponse - OAuth results

Not re-exported here (import from the module):
    responses.py - Response envelopes, which depend on the serializer
"""

from dailymotion_sdk.models.auth import TokenResponse, TokenValidationResponse
from dailymotion_sdk.models.enums import (
    AuthState,
    Channel,
    OAuthScope,
    PlaylistSort,
    UserSort,
    VideoSort,
)
from dailymotion_sdk.models.fields import VideoField
from dailymotion_sdk.models.metadata import VideoMetadata
from dailymotion_sdk.models.params import (
    GlobalApiParameters,
    PlaylistFilters,
    VideoCreationParameters,
    VideoFilters,
    VideoUpdateParameters,
)

__all__ = [
    "AuthState",
    "Channel",
    "GlobalApiParameters",
    "OAuthScope",
    "PlaylistFilters",
    "PlaylistSort",
    "TokenResponse",
    "TokenValidationResponse",
    "UserSort",
    "VideoCreationParameters",
    "VideoField",
    "VideoFilters",
    "VideoMetadata",
    "VideoSort",
    "VideoUpdateParameters",
]
