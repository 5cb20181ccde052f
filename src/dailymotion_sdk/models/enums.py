"""Enumerations for Dailymotion API values.

Member values are the literal strings the API expects on the wire.
"""

from enum import StrEnum


class OAuthScope(StrEnum):
    """OAuth 2.0 permission scopes."""

    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    EMAIL = "email"
    USERINFO = "userinfo"
    FEED = "feed"
    MANAGE_VIDEOS = "manage_videos"
    UPLOAD_VIDEOS = "upload_videos"
    READ_VIDEOS = "read_videos"
    EDIT_VIDEOS = "edit_videos"
    DELETE_VIDEOS = "delete_videos"
    MANAGE_COMMENTS = "manage_comments"
    MANAGE_PLAYLISTS = "manage_playlists"
    MANAGE_TILES = "manage_tiles"
    MANAGE_SUBSCRIPTIONS = "manage_subscriptions"
    MANAGE_FRIENDS = "manage_friends"
    MANAGE_FAVORITES = "manage_favorites"
    MANAGE_LIKES = "manage_likes"
    MANAGE_GROUPS = "manage_groups"
    MANAGE_RECORDS = "manage_records"
    MANAGE_SUBTITLES = "manage_subtitles"
    MANAGE_FEATURES = "manage_features"
    MANAGE_HISTORY = "manage_history"
    IFTTT = "ifttt"
    READ_INSIGHTS = "read_insights"
    MANAGE_CLAIM_RULES = "manage_claim_rules"
    DELEGATE_ACCOUNT_MANAGEMENT = "delegate_account_management"
    MANAGE_ANALYTICS = "manage_analytics"
    MANAGE_PLAYER = "manage_player"
    MANAGE_PLAYERS = "manage_players"
    MANAGE_USER_SETTINGS = "manage_user_settings"
    MANAGE_COLLECTIONS = "manage_collections"
    MANAGE_APP_CONNECTIONS = "manage_app_connections"
    MANAGE_APPLICATIONS = "manage_applications"
    MANAGE_DOMAINS = "manage_domains"
    MANAGE_PODCASTS = "manage_podcasts"

    @property
    def requires_private_key(self) -> bool:
        """Whether the scope is only granted to private (partner) keys."""
        return self in PRIVATE_KEY_SCOPES


PRIVATE_KEY_SCOPES = frozenset(
    {
        OAuthScope.MANAGE_VIDEOS,
        OAuthScope.MANAGE_PLAYLISTS,
        OAuthScope.MANAGE_PODCASTS,
        OAuthScope.UPLOAD_VIDEOS,
        OAuthScope.READ_VIDEOS,
        OAuthScope.EDIT_VIDEOS,
        OAuthScope.DELETE_VIDEOS,
        OAuthScope.MANAGE_PLAYERS,
    }
)
PUBLIC_KEY_SCOPES = frozenset(set(OAuthScope) - PRIVATE_KEY_SCOPES)


class VideoSort(StrEnum):
    """Sort orders for video lists."""

    RECENT = "recent"
    VISITED = "visited"
    VISITED_HOUR = "visited-hour"
    VISITED_TODAY = "visited-today"
    VISITED_WEEK = "visited-week"
    VISITED_MONTH = "visited-month"
    RELEVANCE = "relevance"
    RANDOM = "random"
    TRENDING = "trending"
    OLD = "old"
    LIVE_AUDIENCE = "live-audience"
    LEAST_VISITED = "least-visited"
    LIVE_AIRING_TIME = "live-airing-time"
    ID_ASC = "id-asc"


class UserSort(StrEnum):
    """Sort orders for user lists."""

    RECENT = "recent"
    RELEVANCE = "relevance"
    POPULAR = "popular"
    ACTIVITY = "activity"


class PlaylistSort(StrEnum):
    """Sort orders for playlist lists."""

    RECENT = "recent"
    RELEVANCE = "relevance"
    ALPHA = "alpha"
    MOST = "most"
    LEAST = "least"
    ALPHAAZ = "alphaaz"
    ALPHAZA = "alphaza"
    CHANGED = "changed"


class Channel(StrEnum):
    """Video categories (called channels by the API)."""

    ANIMALS = "animals"
    CREATION = "creation"
    AUTO = "auto"
    SCHOOL = "school"
    PEOPLE = "people"
    FUN = "fun"
    VIDEOGAMES = "videogames"
    TECH = "tech"
    KIDS = "kids"
    LIFESTYLE = "lifestyle"
    SHORTFILMS = "shortfilms"
    MUSIC = "music"
    NEWS = "news"
    SPORT = "sport"
    TV = "tv"
    TRAVEL = "travel"
    WEBCAM = "webcam"


class AuthState(StrEnum):
    """Authentication state held by a token manager."""

    UNAUTHENTICATED = "unauthenticated"
    APPLICATION = "application"
    USER = "user"
