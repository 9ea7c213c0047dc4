ARTIC_API_BASE = "https://api.artic.edu/api/v1"
IIIF_BASE = "https://www.artic.edu/iiif/2"  # IIIF Image API (image-tile service)

# Seconds
DATA_REQUEST_TIMEOUT = 10
CONNECTION_TEST_TIMEOUT = 5

# Sizes the IIIF service is known to serve. Not enforced by get_image_url.
IMAGE_SIZES = ("200", "400", "843", "1686", "full")
DEFAULT_IMAGE_SIZE = "843"
CARD_IMAGE_SIZE = "400"
DETAIL_IMAGE_SIZE = "1686"

# Fields a gallery card or detail view needs.
# Requesting only these keeps responses small for the AIC servers.
CARD_FIELDS = [
    "id",
    "title",
    "artist_display",
    "date_display",
    "image_id",
]

# AIC asks clients to stay around one request per second
RECOMMENDED_SECONDS_BETWEEN_REQUESTS = 1

# Used by the CLI smoke run (Starry Night and the Astronauts)
SAMPLE_ARTWORK_ID = 129884
