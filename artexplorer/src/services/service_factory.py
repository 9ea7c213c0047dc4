from artexplorer.src.services.artwork_clients import AICAPIClient, ArtworkAPIClient
from artexplorer.src.utils.session_config import get_configured_session


def get_artwork_client() -> ArtworkAPIClient:
    return AICAPIClient(http_session=get_configured_session())
