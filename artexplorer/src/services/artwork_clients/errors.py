"""Errors raised by artwork API clients."""


class ArtworkAPIError(Exception):
    """Base class for artwork API client errors."""

    pass


class APITimeoutError(ArtworkAPIError, TimeoutError):
    """The request exceeded its time bound."""

    pass


class HttpError(ArtworkAPIError):
    """The API answered with a non-success status code."""

    def __init__(self, status: int, reason: str = "", url: str = ""):
        self.status = status
        self.reason = reason
        self.url = url
        message = f"HTTP error! status: {status}"
        if reason:
            message += f" - {reason}"
        super().__init__(message)


class NetworkError(ArtworkAPIError, ConnectionError):
    """Transport-level failure (DNS, refused connection, SSL, ...)."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class DecodeError(ArtworkAPIError, ValueError):
    """The response body was not valid JSON."""

    pass
