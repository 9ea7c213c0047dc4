"""
Caller-side gallery population on top of an artwork API client.

Functions here combine several client calls. Failures of single detail
fetches are tolerated: the successful subset is returned (best-effort
aggregation). Failures of the primary listing or search call propagate.
"""

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Optional

from pydantic import ValidationError

from artexplorer.src.constants.aic import CARD_FIELDS
from artexplorer.src.models import ArtworkSummary
from artexplorer.src.services.artwork_clients import ArtworkAPIClient, ArtworkAPIError
from artexplorer.src.utils.artwork_formatting import (
    build_card_context,
    build_detail_context,
)

logger = logging.getLogger(__name__)

FEATURED_COUNT = 12
FEATURED_MIN_WITH_IMAGES = 8
FALLBACK_PAGE = 2
FALLBACK_LIMIT = 20
SEARCH_LIMIT = 20
MAX_SEARCH_DETAILS = 12
RANDOM_MAX_PAGE = 100
MAX_CONCURRENT_REQUESTS = 4


def _payload(envelope: Any) -> Any:
    """The envelope's "data" member, or None when the body is not a JSON object."""
    return envelope.get("data") if isinstance(envelope, dict) else None


def _valid_artworks(items: list[Any]) -> list[dict[str, Any]]:
    """Keep only items that look like artworks (have an integer id)."""
    artworks = []
    for item in items:
        try:
            ArtworkSummary.model_validate(item)
        except ValidationError as e:
            logger.warning(f"Skipping malformed artwork: {e}")
            continue
        artworks.append(item)
    return artworks


def _with_images(items: list[Any]) -> list[dict[str, Any]]:
    return [artwork for artwork in _valid_artworks(items) if artwork.get("image_id")]


def load_featured_artworks(
    client: ArtworkAPIClient,
    count: int = FEATURED_COUNT,
    min_with_images: int = FEATURED_MIN_WITH_IMAGES,
) -> list[dict[str, Any]]:
    """
    Return up to `count` card contexts of artworks that have an image.

    If the first page yields fewer than `min_with_images` artworks with images,
    a second page is fetched to top up the gallery.
    """
    data = client.fetch_artworks(limit=count, fields=CARD_FIELDS)
    items = _payload(data) or []
    if not items:
        logger.info("No artworks found for the featured gallery")
        return []

    artworks = _with_images(items)[:count]

    if len(artworks) < min_with_images:
        logger.info("Getting additional artworks with images...")
        try:
            additional = client.fetch_artworks(
                limit=FALLBACK_LIMIT, page=FALLBACK_PAGE, fields=CARD_FIELDS
            )
        except ArtworkAPIError as e:
            logger.warning(f"Could not top up featured artworks: {e}")
        else:
            more = _with_images(_payload(additional) or [])
            artworks.extend(more[: count - len(artworks)])

    return [build_card_context(artwork, client) for artwork in artworks]


def _fetch_detail_or_none(
    client: ArtworkAPIClient, artwork_id: int
) -> Optional[dict[str, Any]]:
    try:
        artwork = _payload(client.fetch_artwork_by_id(artwork_id))
    except ArtworkAPIError as e:
        logger.error(f"Error fetching artwork {artwork_id}: {e}")
        return None
    return artwork if isinstance(artwork, dict) else None


def fetch_artworks_by_ids(
    client: ArtworkAPIClient,
    artwork_ids: list[int],
    max_workers: int = MAX_CONCURRENT_REQUESTS,
) -> list[dict[str, Any]]:
    """
    Fetch several artworks concurrently, preserving the order of `artwork_ids`.

    Artworks that could not be fetched are left out.

    The workers share the client and its requests.Session. The session's urllib3
    connection pool is thread-safe and the client only sends GETs without
    cookies, so no per-thread session state is touched.
    """
    if not artwork_ids:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(partial(_fetch_detail_or_none, client), artwork_ids))
    return [artwork for artwork in results if artwork is not None]


def search_with_details(
    client: ArtworkAPIClient,
    query: str,
    limit: int = SEARCH_LIMIT,
    max_details: int = MAX_SEARCH_DETAILS,
) -> list[dict[str, Any]]:
    """
    Search artworks and return card contexts built from the full artwork records.

    The search endpoint only returns a few fields per hit, so each of the first
    `max_details` hits is fetched by id.
    """
    query = query.strip()
    if not query:
        raise ValueError("Please enter a search term")

    results = client.search_artworks(query, limit)
    hits = _valid_artworks(_payload(results) or [])
    artwork_ids = [hit["id"] for hit in hits[:max_details]]

    artworks = fetch_artworks_by_ids(client, artwork_ids)
    logger.info(
        f'Search "{query}": {len(hits)} hits, {len(artworks)} artworks with details'
    )
    return [build_card_context(artwork, client) for artwork in artworks]


def get_random_artwork(
    client: ArtworkAPIClient,
    rng: Optional[random.Random] = None,
    max_page: int = RANDOM_MAX_PAGE,
) -> Optional[dict[str, Any]]:
    """Pick a random listing page (1..max_page) and return its artwork's detail context."""
    rng = rng or random.Random()
    page = rng.randint(1, max_page)
    logger.info(f"Getting random artwork from page {page}")

    data = client.fetch_artworks(limit=1, page=page)
    items = _valid_artworks(_payload(data) or [])
    if not items:
        return None

    artwork = _payload(client.fetch_artwork_by_id(items[0]["id"]))
    if not isinstance(artwork, dict) or not artwork:
        return None
    return build_detail_context(artwork, client)
