"""Client configuration settings."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Client settings loaded from environment variables (``TRADEME_*``)."""

    # Consumer credentials issued by Trade Me for the application
    consumer_key: str = ""
    consumer_secret: str = ""

    # Final access token, once the OAuth handshake has been completed
    oauth_token: str = ""
    oauth_token_secret: str = ""

    # API endpoints
    base_domain: str = "trademe.co.nz"
    sandbox: bool = False

    # Request timeout (seconds), enforced by httpx
    timeout: float = 30.0

    class Config:
        env_prefix = "TRADEME_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


SANDBOX_DOMAIN = "tmsandbox.co.nz"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
