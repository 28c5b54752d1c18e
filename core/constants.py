"""Constants shared by the core configuration and the imgflip client."""

from typing import Final

IMGFLIP_API_BASE_URL: Final[str] = "https://api.imgflip.com"
