"""File upload to the Dailymotion upload servers."""

import logging
from pathlib import Path
from typing import BinaryIO

from pydantic import ValidationError

from dailymotion_sdk.exceptions import APIError, UploadError
from dailymotion_sdk.models.responses import (
    FileUploadResponse,
    UploadProgressResponse,
    UploadUrlResponse,
)
from dailymotion_sdk.services.base import BaseService, require_id

logger = logging.getLogger(__name__)


class FileService(BaseService):
    """Upload video files.

    Uploading is two steps: ask ``/file/upload`` for a target URL, then
    post the file there as multipart form data. The returned file URL is
    what ``create_video`` expects.
    """

    def get_upload_url(self) -> UploadUrlResponse | None:
        response = self._http.get_public("/file/upload")
        return self._parse_model(response, UploadUrlResponse, "get upload URL")

    def upload(
        self, file: str | Path | BinaryIO, file_name: str | None = None
    ) -> FileUploadResponse:
        """Upload a file and return the upload server's description of it.

        Args:
            file: Path to a local file, or an open binary stream.
            file_name: Name reported to the server.

        Returns:
            The uploaded file details; ``url`` is used to create the video.

        Raises:
            ValueError: If file_name is given but blank.
            UploadError: If no upload URL is obtained or the upload fails.
        """
        if file_name is not None:
            file_name = require_id(file_name, "file_name")
        if isinstance(file, str | Path) and not Path(file).is_file():
            raise UploadError(f"File not found: {file}")

        target = self.get_upload_url()
        if target is None:
            raise UploadError("Failed to get upload URL")
        logger.debug("Uploading to %s", target.upload_url)

        try:
            response = self._http.upload_file(target.upload_url, file, file_name)
        except (APIError, OSError) as e:
            raise UploadError(f"File upload failed: {e}") from e

        if not response.is_success:
            raise UploadError(
                f"File upload failed ({response.status_code}): "
                f"{response.error_message}"
            )

        data = response.json()
        if not isinstance(data, dict):
            raise UploadError("Upload server returned an unreadable response")
        try:
            result = FileUploadResponse.model_validate(data)
        except ValidationError as e:
            raise UploadError(f"Unexpected upload response: {e}") from e

        logger.info("Uploaded file %s", result.get_file_id())
        return result

    def get_upload_progress(self, progress_url: str) -> UploadProgressResponse | None:
        """Poll a progress URL returned with the upload target.

        Raises:
            ValueError: If progress_url is empty.
        """
        progress_url = require_id(progress_url, "progress_url")
        try:
            response = self._http.request_absolute("GET", progress_url)
        except APIError as e:
            logger.warning("Failed to check upload progress: %s", e.message)
            return None
        return self._parse_model(
            response, UploadProgressResponse, "check upload progress"
        )
