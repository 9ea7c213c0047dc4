"""Client for the Art Institute of Chicago API (https://api.artic.edu/docs/).

The AIC asks clients to throttle to roughly one request per second. The client
does not enforce this; callers that loop over pages should sleep between calls.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Optional

import requests

from artexplorer.src.config import config
from artexplorer.src.constants.aic import DEFAULT_IMAGE_SIZE, IMAGE_SIZES
from artexplorer.src.services.artwork_clients.base_client import (
    ArtworkAPIClient,
    Envelope,
)
from artexplorer.src.services.artwork_clients.errors import (
    APITimeoutError,
    ArtworkAPIError,
    DecodeError,
    HttpError,
    NetworkError,
)
from artexplorer.src.utils.session_config import get_configured_session

logger = logging.getLogger(__name__)

# Substrings of transport error messages that deserve a clearer message.
# (substring, error class, message shown to the caller)
TRANSPORT_ERROR_HINTS = [
    (
        "timed out",
        APITimeoutError,
        "Network timeout. The Art Institute API may be temporarily unavailable.",
    ),
    (
        "failed to resolve",
        NetworkError,
        "Could not resolve the Art Institute API host. Please check your internet connection.",
    ),
    (
        "name or service not known",
        NetworkError,
        "Could not resolve the Art Institute API host. Please check your internet connection.",
    ),
    (
        "certificate verify failed",
        NetworkError,
        "Secure connection to the Art Institute API could not be established.",
    ),
    (
        "connection refused",
        NetworkError,
        "The Art Institute API refused the connection. It may be temporarily unavailable.",
    ),
]


def classify_transport_error(error: Exception, action: str) -> ArtworkAPIError:
    """
    Map a transport exception to a caller-facing error.

    The original exception is kept on the returned error (NetworkError.cause)
    and should be chained with `raise ... from error`.
    """
    if isinstance(error, requests.Timeout):
        return APITimeoutError(
            "API request timed out. Please check your internet connection and try again."
        )

    error_msg = str(error).lower()
    for substring, error_class, message in TRANSPORT_ERROR_HINTS:
        if substring in error_msg:
            if error_class is NetworkError:
                return NetworkError(message, cause=error)
            return error_class(message)

    return NetworkError(f"Failed to {action}: {error}", cause=error)


class AICAPIClient(ArtworkAPIClient):
    def __init__(
        self,
        http_session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        iiif_base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        connection_test_timeout: Optional[float] = None,
    ):
        self.http_session = http_session or get_configured_session()
        self.base_url = (base_url or config.aic_api_base).rstrip("/")
        self.iiif_base_url = (iiif_base_url or config.aic_iiif_base).rstrip("/")
        self.timeout = timeout or config.request_timeout
        self.connection_test_timeout = (
            connection_test_timeout or config.connection_test_timeout
        )

    @property
    def artworks_url(self) -> str:
        return f"{self.base_url}/artworks"

    def test_connection(self) -> bool:
        logger.info("Testing API connectivity...")
        try:
            response = self._send(
                self.artworks_url, {"limit": 1}, self.connection_test_timeout
            )
        except requests.Timeout:
            logger.warning(
                f"API connection timed out after {self.connection_test_timeout} seconds"
            )
            return False
        except Exception as e:
            # The check reports a boolean; every failure counts as "not reachable"
            logger.warning(f"API connection failed: {e}")
            return False

        if response.ok:
            logger.info("API connection successful")
            return True

        logger.warning(f"API returned status: {response.status_code}")
        return False

    def fetch_artworks(
        self,
        limit: int = 10,
        page: int = 1,
        fields: str | list[str] | None = None,
    ) -> Envelope:
        """
        Fetch one page of artworks from the listing endpoint.

        Args:
            limit: Number of artworks per page
            page: 1-based page number, forwarded to the API as is
            fields: Comma-separated field names, or a list of them

        Returns:
            The decoded JSON envelope ({"data": [...], "pagination": {...}, ...})

        Raises:
            HttpError, APITimeoutError, NetworkError, DecodeError
        """
        params: dict[str, Any] = {"limit": limit, "page": page}
        if fields:
            if not isinstance(fields, str):
                fields = ",".join(fields)
            params["fields"] = fields

        data = self._get_json(self.artworks_url, params, action="fetch artworks")

        if isinstance(data, dict) and isinstance(data.get("data"), list):
            logger.debug(f"Retrieved {len(data['data'])} artworks")
            logger.debug(f"Pagination info: {data.get('pagination')}")
        return data

    def fetch_artwork_by_id(self, artwork_id: int) -> Envelope:
        """Fetch a single artwork, e.g. 129884 (Starry Night and the Astronauts)."""
        url = f"{self.artworks_url}/{artwork_id}"
        data = self._get_json(url, None, action=f"fetch artwork {artwork_id}")

        artwork = data.get("data") if isinstance(data, dict) else None
        if isinstance(artwork, dict):
            logger.debug(
                f"Retrieved artwork: {artwork.get('title') or 'Unknown Title'} "
                f"({artwork.get('artist_display') or 'Unknown Artist'})"
            )
        return data

    def search_artworks(self, query: str, limit: int = 10) -> Envelope:
        """Full-text search. The query is percent-encoded by requests."""
        url = f"{self.artworks_url}/search"
        params = {"q": query, "limit": limit}
        data = self._get_json(url, params, action=f'search for "{query}"')

        if isinstance(data, dict) and isinstance(data.get("data"), list):
            logger.debug(f'Found {len(data["data"])} search results for "{query}"')
        return data

    def get_image_url(
        self, image_id: str | None, size: str = DEFAULT_IMAGE_SIZE
    ) -> str | None:
        """
        Construct the IIIF image URL for an artwork image.

        The size is inserted verbatim; IMAGE_SIZES lists the ones the service serves.
        Example: https://www.artic.edu/iiif/2/<image_id>/full/843,/0/default.jpg
        """
        if not image_id:
            logger.warning("No image_id provided to get_image_url")
            return None
        if size not in IMAGE_SIZES:
            logger.debug(f"Image size {size!r} is not one of {IMAGE_SIZES}")
        return f"{self.iiif_base_url}/{image_id}/full/{size},/0/default.jpg"

    def _send(
        self, url: str, params: dict[str, Any] | None, timeout: float
    ) -> requests.Response:
        """
        GET `url` with `timeout` seconds for the whole exchange, body included.

        requests applies its timeout per socket operation only, so the request runs
        in a worker thread and the caller stops waiting at the deadline. A request
        that overruns is abandoned to finish in the background.
        """

        def send() -> requests.Response:
            response = self.http_session.get(url, params=params, timeout=timeout)
            _ = response.content  # read the body before the deadline
            return response

        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(send)
        try:
            return future.result(timeout=timeout)
        except FutureTimeoutError as e:
            raise requests.Timeout(f"Request to {url} exceeded {timeout} seconds") from e
        finally:
            executor.shutdown(wait=False)

    def _get_json(
        self, url: str, params: dict[str, Any] | None, action: str
    ) -> Envelope:
        """Single GET attempt bounded by self.timeout, decoded as JSON."""
        logger.info(f"Fetching from: {url} params={params}")
        try:
            response = self._send(url, params, self.timeout)
        except requests.RequestException as e:
            error = classify_transport_error(e, action)
            logger.error(f"Failed to {action}: {error} ({e})")
            raise error from e

        if not response.ok:
            logger.error(
                f"Failed to {action}: status {response.status_code} {response.reason}"
            )
            raise HttpError(response.status_code, response.reason, url)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Failed to {action}: response is not valid JSON")
            raise DecodeError(f"Invalid JSON in response from {url}: {e}") from e
