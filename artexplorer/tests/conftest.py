"""
Pytest configuration for artexplorer tests.
"""

import json
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from unittest.mock import Mock
from urllib.parse import parse_qs, urlparse

import pytest

from artexplorer.src.services.artwork_clients import ArtworkAPIClient, HttpError

IIIF_TEST_BASE = "https://iiif.test/iiif/2"


def make_artwork(artwork_id: int, with_image: bool = True, **extra) -> dict[str, Any]:
    artwork = {
        "id": artwork_id,
        "title": f"Artwork {artwork_id}",
        "artist_display": f"Artist {artwork_id}",
        "date_display": "1890",
        "image_id": f"image-{artwork_id}" if with_image else None,
    }
    artwork.update(extra)
    return artwork


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects."""

    def _make_response(status: int = 200, json_data: Any = None, reason: str = "OK"):
        response = Mock()
        response.status_code = status
        response.ok = status < 400
        response.reason = reason
        response.json.return_value = json_data
        return response

    return _make_response


@pytest.fixture
def mock_session(make_response):
    session = Mock()
    session.get.return_value = make_response(200, {"data": []})
    return session


class FakeArtworkClient(ArtworkAPIClient):
    """In-memory client keyed by artwork id, for testing callers of the client."""

    def __init__(self, artworks: list[dict[str, Any]], failing_ids=()):
        self.artworks = artworks
        self.failing_ids = set(failing_ids)
        self.calls: list[tuple] = []

    def test_connection(self) -> bool:
        return True

    def fetch_artworks(self, limit=10, page=1, fields=None):
        self.calls.append(("fetch_artworks", limit, page, fields))
        start = (page - 1) * limit
        return {
            "data": self.artworks[start : start + limit],
            "pagination": {"total": len(self.artworks), "limit": limit, "current_page": page},
        }

    def fetch_artwork_by_id(self, artwork_id):
        self.calls.append(("fetch_artwork_by_id", artwork_id))
        if artwork_id in self.failing_ids:
            raise HttpError(500, "Internal Server Error")
        for artwork in self.artworks:
            if artwork["id"] == artwork_id:
                return {"data": dict(artwork, description="<p>Full record</p>")}
        raise HttpError(404, "Not Found")

    def search_artworks(self, query, limit=10):
        self.calls.append(("search_artworks", query, limit))
        hits = [
            {"id": artwork["id"], "title": artwork["title"]}
            for artwork in self.artworks
            if query.lower() in (artwork.get("title") or "").lower()
        ]
        return {"data": hits[:limit], "pagination": {"total": len(hits)}}

    def get_image_url(self, image_id, size="843"):
        if not image_id:
            return None
        return f"{IIIF_TEST_BASE}/{image_id}/full/{size},/0/default.jpg"


@pytest.fixture
def fake_client_factory():
    return FakeArtworkClient


# Local AIC-like HTTP server used to exercise the real requests transport.

PAGINATED_DATASET = [make_artwork(i) for i in range(1, 101)]


class AICTestHandler(BaseHTTPRequestHandler):
    def log_message(self, format, *args):
        pass

    def _send_json(self, status: int, payload: Any):
        body = json.dumps(payload).encode()
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _send_raw(self, body: bytes, trickle_delay: float = 0):
        """Send `body` with status 200, one byte every `trickle_delay` seconds if set."""
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if not trickle_delay:
            self.wfile.write(body)
            return
        try:
            for byte in body:
                self.wfile.write(bytes([byte]))
                time.sleep(trickle_delay)
        except (BrokenPipeError, ConnectionResetError):
            pass

    def do_GET(self):
        server = self.server
        server.request_paths.append(self.path)
        if server.delay:
            time.sleep(server.delay)
        if server.raw_body is not None:
            self._send_raw(server.raw_body, server.trickle_delay)
            return
        if server.status_override:
            self._send_json(server.status_override, {"error": "forced"})
            return

        parsed = urlparse(self.path)
        query = parse_qs(parsed.query)
        path = parsed.path

        if path == "/api/v1/artworks":
            limit = int(query.get("limit", ["12"])[0])
            page = int(query.get("page", ["1"])[0])
            start = (page - 1) * limit
            self._send_json(
                200,
                {
                    "pagination": {
                        "total": len(PAGINATED_DATASET),
                        "limit": limit,
                        "offset": start,
                        "current_page": page,
                    },
                    "data": PAGINATED_DATASET[start : start + limit],
                },
            )
        elif path == "/api/v1/artworks/search":
            text = query.get("q", [""])[0].lower()
            limit = int(query.get("limit", ["10"])[0])
            hits = [a for a in PAGINATED_DATASET if text in a["title"].lower()]
            self._send_json(200, {"data": hits[:limit], "pagination": {"total": len(hits)}})
        elif path.startswith("/api/v1/artworks/"):
            artwork_id = int(path.rsplit("/", 1)[1])
            for artwork in PAGINATED_DATASET:
                if artwork["id"] == artwork_id:
                    self._send_json(200, {"data": artwork})
                    return
            self._send_json(404, {"status": 404, "error": "itemNotFound"})
        else:
            self._send_json(404, {"error": "unknown path"})


@pytest.fixture
def aic_test_server():
    server = ThreadingHTTPServer(("127.0.0.1", 0), AICTestHandler)
    server.request_paths = []
    server.delay = 0
    server.status_override = None
    server.raw_body = None
    server.trickle_delay = 0
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    server.base_url = f"http://127.0.0.1:{server.server_address[1]}/api/v1"
    yield server
    server.shutdown()
    server.server_close()
