"""Configuration management for the imgflip client."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .constants import IMGFLIP_API_BASE_URL


class Settings(BaseModel):
    """Client settings.

    Every field has a usable default, so the clients can be built without any
    environment configuration at all.
    """

    log_level: str = Field(default="INFO", description="Logging level")

    # Imgflip API
    api_base_url: str = Field(
        default=IMGFLIP_API_BASE_URL, description="Imgflip API base URL"
    )
    timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds (None keeps the httpx default)",
    )
    user_agent: str | None = Field(
        default=None, description="Override for the User-Agent header"
    )

    # Account credentials for /caption_image
    username: str | None = Field(default=None, description="Imgflip account username")
    password: str | None = Field(
        default=None, description="Imgflip account password", repr=False
    )

    @property
    def has_credentials(self) -> bool:
        """Check whether both account credentials are configured."""
        return bool(self.username) and bool(self.password)


def load_settings() -> Settings:
    """Load settings from environment variables (and a .env file if present)."""
    load_dotenv()

    timeout_str = os.getenv("IMGFLIP_TIMEOUT")

    return Settings(
        log_level=os.getenv("IMGFLIP_LOG_LEVEL", "INFO").upper(),
        api_base_url=os.getenv("IMGFLIP_API_BASE_URL", IMGFLIP_API_BASE_URL),
        timeout=float(timeout_str) if timeout_str else None,
        user_agent=os.getenv("IMGFLIP_USER_AGENT"),
        username=os.getenv("IMGFLIP_USERNAME"),
        password=os.getenv("IMGFLIP_PASSWORD"),
    )
