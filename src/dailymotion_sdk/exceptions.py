"""Custom exceptions for dailymotion_sdk.

All exceptions include an HTTP status_code attribute for easy
integration with web frameworks.

Only structural problems raise. Caller mistakes (missing ids or required
parameters) raise ``ValueError`` at the call boundary, and remote-data
irregularities are reported through empty results instead of exceptions.
"""


class DailymotionError(Exception):
    """Base exception for dailymotion_sdk.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class APIError(DailymotionError):
    """Dailymotion API error.

    Raised when a request cannot be completed, e.g. the transport keeps
    failing after every retry.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)


class AuthenticationRequiredError(DailymotionError):
    """The call needs a user-level access token.

    Raised before sending when a ``/me`` endpoint is called while the held
    token is an application-level (client credentials) token.
    """

    status_code: int = 401  # Unauthorized


class UploadError(DailymotionError):
    """Failed to upload a file.

    Raised when obtaining an upload URL or posting the file fails.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)
