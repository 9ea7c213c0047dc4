import os
from pathlib import Path
import dotenv
from pydantic import BaseModel

from artexplorer.src.constants.aic import (
    ARTIC_API_BASE,
    IIIF_BASE,
    DATA_REQUEST_TIMEOUT,
    CONNECTION_TEST_TIMEOUT,
)


class Config(BaseModel):
    aic_api_base: str = ARTIC_API_BASE
    aic_iiif_base: str = IIIF_BASE
    request_timeout: float = DATA_REQUEST_TIMEOUT
    connection_test_timeout: float = CONNECTION_TEST_TIMEOUT
    user_agent: str = "artexplorer/0.1"
    log_level: str = "INFO"


def create_config():
    # .env files are optional; every setting has a default
    env_files = [".env.dev", ".env.prod"]
    for env_file in env_files:
        if Path(env_file).exists():
            dotenv.load_dotenv(env_file)
            break

    aic_api_base = os.getenv("AIC_API_BASE", ARTIC_API_BASE).rstrip("/")
    aic_iiif_base = os.getenv("AIC_IIIF_BASE", IIIF_BASE).rstrip("/")
    request_timeout = float(os.getenv("AIC_REQUEST_TIMEOUT", str(DATA_REQUEST_TIMEOUT)))
    connection_test_timeout = float(
        os.getenv("AIC_CONNECTION_TEST_TIMEOUT", str(CONNECTION_TEST_TIMEOUT))
    )
    user_agent = os.getenv("AIC_USER_AGENT", "artexplorer/0.1")
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    if not aic_api_base:
        raise ValueError("AIC_API_BASE is empty")
    if not aic_iiif_base:
        raise ValueError("AIC_IIIF_BASE is empty")
    if request_timeout <= 0:
        raise ValueError("AIC_REQUEST_TIMEOUT must be positive")
    if connection_test_timeout <= 0:
        raise ValueError("AIC_CONNECTION_TEST_TIMEOUT must be positive")

    return Config(
        aic_api_base=aic_api_base,
        aic_iiif_base=aic_iiif_base,
        request_timeout=request_timeout,
        connection_test_timeout=connection_test_timeout,
        user_agent=user_agent,
        log_level=log_level,
    )


config = create_config()

if __name__ == "__main__":
    config = create_config()
    print(config)
