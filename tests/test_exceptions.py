"""Tests for exceptions."""

from dailymotion_sdk.exceptions import (
    APIError,
    AuthenticationRequiredError,
    DailymotionError,
    UploadError,
)


class TestExceptionStatusCodes:
    """Tests for HTTP status codes on exceptions."""

    def test_base_error_status_code(self) -> None:
        """DailymotionError should have 500 status code."""
        error = DailymotionError("test")
        assert error.status_code == 500

    def test_api_error_status_code(self) -> None:
        """APIError should have 502 status code."""
        error = APIError("upstream failure")
        assert error.status_code == 502

    def test_authentication_required_status_code(self) -> None:
        """AuthenticationRequiredError should have 401 status code."""
        error = AuthenticationRequiredError("user token required")
        assert error.status_code == 401

    def test_upload_error_status_code(self) -> None:
        """UploadError should have 502 status code."""
        error = UploadError("upload failed")
        assert error.status_code == 502


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    def test_all_exceptions_inherit_from_base(self) -> None:
        """All custom exceptions should inherit from DailymotionError."""
        assert issubclass(APIError, DailymotionError)
        assert issubclass(AuthenticationRequiredError, DailymotionError)
        assert issubclass(UploadError, DailymotionError)

    def test_catch_all_with_base_class(self) -> None:
        """Should be able to catch all errors with DailymotionError."""
        errors = [
            APIError("test"),
            AuthenticationRequiredError("test"),
            UploadError("test"),
        ]

        for error in errors:
            try:
                raise error
            except DailymotionError as e:
                assert e.message == "test"

    def test_str_is_message(self) -> None:
        assert str(UploadError("File not found: a.mp4")) == "File not found: a.mp4"
