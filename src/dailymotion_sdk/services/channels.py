"""Channel (category) operations."""

import logging
from collections.abc import Sequence

from dailymotion_sdk.models.enums import Channel, VideoSort
from dailymotion_sdk.models.fields import VideoField
from dailymotion_sdk.models.responses import (
    ChannelListResponse,
    ChannelMetadata,
    VideoListResponse,
)
from dailymotion_sdk.services.base import (
    BaseService,
    fields_params,
    paging_params,
    require_id,
)

logger = logging.getLogger(__name__)


class ChannelsService(BaseService):
    """Browse the fixed set of Dailymotion channels."""

    def get_channels(self, limit: int = 100, page: int = 1) -> ChannelListResponse:
        response = self._http.get_public("/channels", paging_params(limit, page))
        return self._parse_list(response, ChannelListResponse, "list channels")

    def get_channel(self, channel: Channel | str) -> ChannelMetadata | None:
        channel_id = require_id(str(channel), "channel")
        response = self._http.get_public(f"/channel/{channel_id}")
        return self._parse_model(
            response, ChannelMetadata, f"get channel {channel_id}"
        )

    def get_channel_videos(
        self,
        channel: Channel | str,
        limit: int = 10,
        page: int = 1,
        sort: VideoSort = VideoSort.RECENT,
        fields: Sequence[VideoField] | None = None,
    ) -> VideoListResponse:
        channel_id = require_id(str(channel), "channel")
        params = paging_params(limit, page, sort) | fields_params(fields)
        response = self._http.get_public(f"/channel/{channel_id}/videos", params)
        return self._parse_videos(response, fields, f"list {channel_id} videos")
