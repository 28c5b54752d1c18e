"""Async clients for api.imgflip.com."""

from types import TracebackType
from typing import Any

import httpx

from core.config import Settings
from core.log import get_logger
from .constants import (
    CAPTION_IMAGE_PATH,
    DEFAULT_USER_AGENT,
    FORM_CONTENT_TYPE,
    GET_MEMES_PATH,
    IMGFLIP_API_BASE_URL,
)
from .encoding import encode_form
from .envelope import decode_envelope
from .exceptions import ImgflipTimeoutError, ImgflipTransportError
from .models import (
    CaptionImageResponse,
    CaptionRequest,
    MemeTemplate,
    MemeTemplatesData,
)

logger = get_logger(__name__)


class ImgflipClient:
    """Client for api.imgflip.com that obtains blank meme templates.

    The client owns a pooled ``httpx.AsyncClient`` that is shared by all calls,
    including concurrent ones, so reuse one instance instead of creating one
    per request. Close it with ``aclose()`` or use it as an async context
    manager.

    Example:
        >>> async with ImgflipClient() as client:
        ...     templates = await client.list_templates()
    """

    def __init__(
        self,
        base_url: str = IMGFLIP_API_BASE_URL,
        timeout: float | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL for the imgflip API
            timeout: Request timeout in seconds, None keeps the httpx default
            user_agent: User-Agent header sent with every request
        """
        self.base_url = base_url.rstrip("/")

        client_kwargs: dict[str, Any] = {}
        if timeout is not None:
            client_kwargs["timeout"] = httpx.Timeout(timeout)

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"User-Agent": user_agent},
            **client_kwargs,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImgflipClient":
        """Create an anonymous client from settings."""
        return cls(
            base_url=settings.api_base_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent or DEFAULT_USER_AGENT,
        )

    async def __aenter__(self) -> "ImgflipClient":
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit; closes the connection pool."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self.client.aclose()

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a single request and reject non-2xx responses.

        Raises:
            ImgflipTimeoutError: If the request times out
            ImgflipTransportError: On connection errors or non-2xx status
        """
        logger.debug(f"{method} {self.base_url}{path}")

        try:
            response = await self.client.request(method, path, **kwargs)
            response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"HTTP error on {method} {path}: {status_code}")
            raise ImgflipTransportError(
                f"HTTP {status_code}: {e}", status_code=status_code
            ) from e

        except httpx.TimeoutException as e:
            logger.error(f"Timeout on {method} {path}")
            raise ImgflipTimeoutError(f"Timeout on {method} {path}") from e

        except httpx.RequestError as e:
            logger.error(f"Request error on {method} {path}: {e}")
            raise ImgflipTransportError(f"Request failed: {e}") from e

    async def list_templates(self) -> list[MemeTemplate]:
        """Call the /get_memes endpoint to list popular meme templates.

        Returns:
            Meme templates in the order the API lists them

        Raises:
            ImgflipTransportError: On connection errors or non-2xx status
            ImgflipDecodeError: If the response matches neither envelope shape
            ImgflipAPIError: If the API reports a failure
        """
        response = await self._send("GET", GET_MEMES_PATH)
        data = decode_envelope(response.content, MemeTemplatesData)

        logger.info(f"Fetched {len(data.memes)} meme templates")
        return data.memes


class ImgflipAccountClient(ImgflipClient):
    """Client for api.imgflip.com that can also caption meme templates.

    Captioning requires an imgflip account. The credentials are sent as plain
    form fields alongside every caption request.
    """

    def __init__(
        self,
        username: str,
        password: str,
        base_url: str = IMGFLIP_API_BASE_URL,
        timeout: float | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        super().__init__(base_url=base_url, timeout=timeout, user_agent=user_agent)
        self.username = username
        self._password = password

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImgflipAccountClient":
        """Create an account client from settings.

        Raises:
            ValueError: If the settings carry no username/password pair
        """
        if not settings.has_credentials:
            raise ValueError("IMGFLIP_USERNAME and IMGFLIP_PASSWORD must be set")

        return cls(
            username=settings.username or "",
            password=settings.password or "",
            base_url=settings.api_base_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent or DEFAULT_USER_AGENT,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}"
            f"(username={self.username!r}, base_url={self.base_url!r})"
        )

    async def caption_image(self, request: CaptionRequest) -> CaptionImageResponse:
        """Call the /caption_image endpoint to caption a meme template.

        Args:
            request: Top/bottom or caption boxes request

        Returns:
            URLs of the generated image and its page

        Raises:
            ImgflipEncodeError: If the request cannot be form-encoded
            ImgflipTransportError: On connection errors or non-2xx status
            ImgflipDecodeError: If the response matches neither envelope shape
            ImgflipAPIError: If the API reports a failure
        """
        body = encode_form(request, username=self.username, password=self._password)

        logger.info(f"Captioning template {request.template_id}")
        response = await self._send(
            "POST",
            CAPTION_IMAGE_PATH,
            content=body,
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )
        result = decode_envelope(response.content, CaptionImageResponse)

        logger.info(f"Captioned template {request.template_id}: {result.url}")
        return result
