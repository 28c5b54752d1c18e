"""Typed async client for the imgflip meme API."""

from .client import ImgflipAccountClient, ImgflipClient
from .encoding import encode_form
from .envelope import FailureResponse, SuccessResponse, decode_envelope
from .exceptions import (
    ImgflipAPIError,
    ImgflipDecodeError,
    ImgflipEncodeError,
    ImgflipError,
    ImgflipTimeoutError,
    ImgflipTransportError,
)
from .models import (
    CaptionBox,
    CaptionBoxBuilder,
    CaptionBoxesRequest,
    CaptionBoxesRequestBuilder,
    CaptionFont,
    CaptionImageResponse,
    CaptionRequest,
    MemeTemplate,
    TopBottomCaptionRequest,
    TopBottomCaptionRequestBuilder,
)

__all__ = [
    "ImgflipClient",
    "ImgflipAccountClient",
    "encode_form",
    "decode_envelope",
    "SuccessResponse",
    "FailureResponse",
    "ImgflipError",
    "ImgflipTransportError",
    "ImgflipTimeoutError",
    "ImgflipEncodeError",
    "ImgflipDecodeError",
    "ImgflipAPIError",
    "MemeTemplate",
    "CaptionFont",
    "CaptionBox",
    "CaptionBoxBuilder",
    "CaptionBoxesRequest",
    "CaptionBoxesRequestBuilder",
    "TopBottomCaptionRequest",
    "TopBottomCaptionRequestBuilder",
    "CaptionRequest",
    "CaptionImageResponse",
]
