"""Success/failure envelope decoding shared by every imgflip endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from core.log import get_logger
from .constants import ERROR_MALFORMED_ENVELOPE
from .exceptions import ImgflipAPIError, ImgflipDecodeError

T = TypeVar("T")

logger = get_logger(__name__)


class SuccessResponse(BaseModel, Generic[T]):
    """Envelope of a successful call: ``{"success": ..., "data": <T>}``."""

    model_config = ConfigDict(strict=True)

    success: bool
    data: T


class FailureResponse(BaseModel):
    """Envelope of a failed call: ``{"success": ..., "error_message": "..."}``."""

    model_config = ConfigDict(strict=True)

    success: bool
    error_message: str


def parse_envelope(
    body: str | bytes, payload_type: type[T]
) -> SuccessResponse[T] | FailureResponse:
    """Parse a response body into whichever envelope shape it matches.

    The shapes are told apart by their fields (``data`` or ``error_message``).
    The ``success`` flag is required by both shapes but never consulted, so a
    body like ``{"success": true, "error_message": "x"}`` is still a failure.

    Args:
        body: Raw JSON response body
        payload_type: Type of the ``data`` field of the success shape

    Returns:
        The parsed SuccessResponse or FailureResponse

    Raises:
        ImgflipDecodeError: If the body matches neither shape
    """
    try:
        success_model = SuccessResponse[payload_type]  # type: ignore[valid-type]
        return success_model.model_validate_json(body)
    except ValidationError as success_error:
        try:
            return FailureResponse.model_validate_json(body)
        except ValidationError:
            logger.debug(f"Success shape mismatch: {success_error}")
            raise ImgflipDecodeError(
                ERROR_MALFORMED_ENVELOPE.format(success_error)
            ) from success_error


def decode_envelope(body: str | bytes, payload_type: type[T]) -> T:
    """Decode a response body and unwrap its payload.

    Raises:
        ImgflipAPIError: If the body is a failure envelope
        ImgflipDecodeError: If the body matches neither shape
    """
    response = parse_envelope(body, payload_type)
    if isinstance(response, FailureResponse):
        logger.warning(f"Imgflip API error: {response.error_message}")
        raise ImgflipAPIError(response.error_message)
    return response.data
