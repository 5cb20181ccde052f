"""Shared plumbing for resource services."""

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from dailymotion_sdk.http import ApiResponse
from dailymotion_sdk.models.enums import PlaylistSort, UserSort, VideoSort
from dailymotion_sdk.models.fields import (
    VideoField,
    filter_restricted,
    join_fields,
    restricted_fields,
    to_wire_names,
)
from dailymotion_sdk.models.metadata import VideoMetadata
from dailymotion_sdk.models.params import GlobalApiParameters, VideoFilters
from dailymotion_sdk.models.responses import VideoListResponse
from dailymotion_sdk.serialization import deserialize_metadata

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

MAX_PAGE_SIZE = 100


class ApiClientProtocol(Protocol):
    """Protocol for the HTTP client used by services.

    This protocol enables dependency injection and testing.
    ``DailymotionHttpClient`` implements it.
    """

    def get(
        self,
        resource: str,
        params: dict[str, str] | None = None,
        global_params: GlobalApiParameters | None = None,
    ) -> ApiResponse: ...

    def get_public(
        self,
        resource: str,
        params: dict[str, str] | None = None,
        global_params: GlobalApiParameters | None = None,
    ) -> ApiResponse: ...

    def post(
        self,
        resource: str,
        params: dict[str, str] | None = None,
        global_params: GlobalApiParameters | None = None,
        query: dict[str, str] | None = None,
    ) -> ApiResponse: ...

    def post_public(
        self,
        resource: str,
        params: dict[str, str] | None = None,
        global_params: GlobalApiParameters | None = None,
    ) -> ApiResponse: ...

    def delete(
        self,
        resource: str,
        params: dict[str, str] | None = None,
        global_params: GlobalApiParameters | None = None,
    ) -> ApiResponse: ...

    def request_absolute(
        self,
        method: str,
        url: str,
        data: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        bearer: str | None = None,
    ) -> ApiResponse: ...

    def upload_file(
        self, upload_url: str, file: Any, file_name: str | None = None
    ) -> ApiResponse: ...


def require_id(value: str | None, name: str) -> str:
    """Return the stripped id, raising ValueError when it is blank."""
    if not value or not value.strip():
        raise ValueError(f"{name} cannot be empty")
    return value.strip()


def paging_params(
    limit: int,
    page: int,
    sort: VideoSort | UserSort | PlaylistSort | None = None,
) -> dict[str, str]:
    """Validate and render ``limit``/``page``/``sort`` parameters.

    Raises:
        ValueError: If limit is outside 1..100 or page is below 1.
    """
    if not 1 <= limit <= MAX_PAGE_SIZE:
        raise ValueError(f"limit must be between 1 and {MAX_PAGE_SIZE}")
    if page < 1:
        raise ValueError("page must be at least 1")
    params = {"limit": str(limit), "page": str(page)}
    if sort is not None:
        params["sort"] = str(sort)
    return params


def fields_params(fields: Iterable[VideoField] | None) -> dict[str, str]:
    """Render the ``fields`` query parameter, empty when no fields are given."""
    joined = join_fields(fields or [])
    return {"fields": joined} if joined else {}


def video_list_params(
    fields: Sequence[VideoField] | None, filters: VideoFilters | None
) -> dict[str, str]:
    """Build list-endpoint parameters from fields and filters.

    Restricted fields cannot be requested from list endpoints. They are
    removed from ``fields`` with a warning.
    """
    params: dict[str, str] = {}
    if fields:
        restricted = restricted_fields(fields)
        if restricted:
            logger.warning(
                "Fields %s cannot be requested from list endpoints and were "
                "removed; fetch videos individually to read them",
                ", ".join(to_wire_names(restricted)),
            )
        params.update(fields_params(filter_restricted(fields)))
    if filters is not None:
        params.update(filters.to_dict())
    return params


class BaseService:
    """Base class holding the HTTP client and response parsing helpers.

    Failed responses are logged and reported as None or an empty result.
    """

    def __init__(self, http: ApiClientProtocol) -> None:
        self._http = http

    def _check(self, response: ApiResponse, action: str) -> bool:
        if response.is_success:
            return True
        logger.warning(
            "Failed to %s (%d): %s",
            action,
            response.status_code,
            response.error_message,
        )
        return False

    def _parse_model(
        self, response: ApiResponse, model: type[ModelT], action: str
    ) -> ModelT | None:
        if not self._check(response, action):
            return None
        data = response.json()
        if not isinstance(data, dict):
            logger.warning("Failed to %s: response is not a JSON object", action)
            return None
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning("Failed to %s: unexpected response shape: %s", action, e)
            return None

    def _parse_list(
        self, response: ApiResponse, model: type[ModelT], action: str
    ) -> ModelT:
        parsed = self._parse_model(response, model, action)
        return parsed if parsed is not None else model()

    def _parse_video(
        self,
        response: ApiResponse,
        fields: Iterable[VideoField] | None,
        action: str,
    ) -> VideoMetadata | None:
        if not self._check(response, action):
            return None
        return deserialize_metadata(response.json(), list(fields or []))

    def _contains(self, resource: str, action: str) -> bool:
        """Whether a membership lookup found the item.

        The API answers such lookups with a list that is empty when the item
        is absent.
        """
        response = self._http.get(resource)
        if not self._check(response, action):
            return False
        data = response.json()
        return isinstance(data, dict) and bool(data.get("list"))

    def _parse_videos(
        self,
        response: ApiResponse,
        fields: Iterable[VideoField] | None,
        action: str,
    ) -> VideoListResponse:
        if not self._check(response, action):
            return VideoListResponse()
        return VideoListResponse.from_data(response.json(), list(fields or []))
