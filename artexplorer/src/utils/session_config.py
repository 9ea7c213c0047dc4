import requests
from requests.adapters import HTTPAdapter

from artexplorer.src.config import config


def get_configured_session() -> requests.Session:
    """
    Return a requests.Session that asks for JSON and never retries.

    Every client call is a single attempt; retry and backoff are left to callers.
    """
    session = requests.Session()
    session.headers.update(
        {"Accept": "application/json", "User-Agent": config.user_agent}
    )
    adapter = HTTPAdapter(max_retries=0)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session
