from abc import ABC, abstractmethod
from typing import Any

Envelope = dict[str, Any]


class ArtworkAPIClient(ABC):
    """Abstract base class for artwork API clients.

    Callers depend on this interface so a fake client can be injected in tests.
    """

    @abstractmethod
    def test_connection(self) -> bool:
        """Return True if the API answers a minimal request successfully. Never raises."""
        pass

    @abstractmethod
    def fetch_artworks(
        self, limit: int = 10, page: int = 1, fields: str | list[str] | None = None
    ) -> Envelope:
        """Fetch one page of the artwork listing."""
        pass

    @abstractmethod
    def fetch_artwork_by_id(self, artwork_id: int) -> Envelope:
        """Fetch a single artwork."""
        pass

    @abstractmethod
    def search_artworks(self, query: str, limit: int = 10) -> Envelope:
        """Full-text search over artworks."""
        pass

    @abstractmethod
    def get_image_url(self, image_id: str | None, size: str = "843") -> str | None:
        """Construct the image URL for an image id, or None if there is no id."""
        pass
