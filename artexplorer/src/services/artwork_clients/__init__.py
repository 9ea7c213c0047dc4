"""Artwork API clients and their error types."""

from .base_client import ArtworkAPIClient, Envelope
from .aic_api_client import AICAPIClient
from .errors import (
    ArtworkAPIError,
    APITimeoutError,
    HttpError,
    NetworkError,
    DecodeError,
)

__all__ = [
    "ArtworkAPIClient",
    "Envelope",
    "AICAPIClient",
    "ArtworkAPIError",
    "APITimeoutError",
    "HttpError",
    "NetworkError",
    "DecodeError",
]
