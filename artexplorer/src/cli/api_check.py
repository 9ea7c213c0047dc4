"""
Smoke run of every AIC client operation against the live API.

Usage: artexplorer-check  (or python -m artexplorer.src.cli.api_check)
"""

import logging
import sys
import time

from artexplorer.src.config import config
from artexplorer.src.constants.aic import (
    RECOMMENDED_SECONDS_BETWEEN_REQUESTS,
    SAMPLE_ARTWORK_ID,
)
from artexplorer.src.services.artwork_clients import ArtworkAPIClient, ArtworkAPIError
from artexplorer.src.services.service_factory import get_artwork_client

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 50


def run_checks(
    client: ArtworkAPIClient, pause: float = RECOMMENDED_SECONDS_BETWEEN_REQUESTS
) -> dict:
    if not client.test_connection():
        print("API connectivity issues detected. You may experience errors.")
        print("  - Check your internet connection")
        print("  - The Art Institute API may be temporarily unavailable")
        print(SEPARATOR)

    print("Test 1: Fetching 10 artworks...")
    artworks = client.fetch_artworks()
    items = artworks.get("data") or []
    if items:
        first = items[0]
        print(f"  First artwork: \"{first.get('title')}\" by {first.get('artist_display')}")
        if first.get("image_id"):
            print(f"  Image URL: {client.get_image_url(first['image_id'])}")
    print(SEPARATOR)
    time.sleep(pause)

    print(f"Test 2: Fetching artwork by ID ({SAMPLE_ARTWORK_ID})...")
    specific = client.fetch_artwork_by_id(SAMPLE_ARTWORK_ID)
    artwork = specific.get("data") or {}
    if artwork:
        print(f"  Title: \"{artwork.get('title')}\"")
        print(f"  Artist: {artwork.get('artist_display')}")
        print(f"  Date: {artwork.get('date_display')}")
        if artwork.get("image_id"):
            print(f"  Large image URL: {client.get_image_url(artwork['image_id'], '1686')}")
    print(SEPARATOR)
    time.sleep(pause)

    print('Test 3: Searching for "monet" artworks...')
    search_results = client.search_artworks("monet")
    hits = search_results.get("data") or []
    for index, hit in enumerate(hits[:3], start=1):
        print(f"  {index}. \"{hit.get('title')}\" (ID: {hit.get('id')})")
    print(SEPARATOR)

    summary = {
        "artworks": len(items),
        "artwork_by_id": bool(artwork),
        "search_results": len(hits),
    }
    print("Summary:")
    print(f"  General artworks: {summary['artworks']} retrieved")
    print(f"  Specific artwork: {'Retrieved' if summary['artwork_by_id'] else 'Failed'}")
    print(f"  Search results: {summary['search_results']} found")
    return summary


def main() -> int:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    client = get_artwork_client()
    try:
        run_checks(client)
    except ArtworkAPIError as e:
        logger.error(f"API check failed: {e}")
        return 1
    print("All API checks completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
