"""Helper functions to format AIC artworks for display."""

import re
from typing import Any

from artexplorer.src.constants.aic import CARD_IMAGE_SIZE, DETAIL_IMAGE_SIZE
from artexplorer.src.services.artwork_clients import ArtworkAPIClient

MAX_DESCRIPTION_LENGTH = 500
HTML_TAG_PATTERN = re.compile(r"<[^>]*>")


def clean_description(description: str | None) -> str:
    """
    Strip HTML tags and cut the text at MAX_DESCRIPTION_LENGTH characters.

    "..." is appended when the cleaned text had to be cut.
    """
    if not description:
        return ""
    text = HTML_TAG_PATTERN.sub("", description)
    if len(text) > MAX_DESCRIPTION_LENGTH:
        return text[:MAX_DESCRIPTION_LENGTH] + "..."
    return text


def build_card_context(
    artwork: dict[str, Any],
    client: ArtworkAPIClient,
    image_size: str = CARD_IMAGE_SIZE,
) -> dict[str, Any]:
    """
    Make an artwork ready for display as a gallery card.
    """
    image_id = artwork.get("image_id")
    return {
        "id": artwork.get("id"),
        "title": artwork.get("title") or "Untitled",
        "artist": artwork.get("artist_display") or "Unknown Artist",
        "image_url": client.get_image_url(image_id, image_size) if image_id else None,
    }


def build_detail_context(
    artwork: dict[str, Any],
    client: ArtworkAPIClient,
    image_size: str = DETAIL_IMAGE_SIZE,
) -> dict[str, Any]:
    context = build_card_context(artwork, client, image_size)
    context["date"] = artwork.get("date_display") or "Date unknown"
    context["description"] = clean_description(
        artwork.get("description") or artwork.get("short_description")
    )
    return context
