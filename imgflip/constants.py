"""Constants for the imgflip client."""

from typing import Final

from core.constants import IMGFLIP_API_BASE_URL

GET_MEMES_PATH: Final[str] = "/get_memes"
CAPTION_IMAGE_PATH: Final[str] = "/caption_image"

FORM_CONTENT_TYPE: Final[str] = "application/x-www-form-urlencoded"
DEFAULT_USER_AGENT: Final[str] = "imgflip-client/0.1.0"

# Error messages
ERROR_MALFORMED_ENVELOPE = "Response matched neither success nor failure shape: {}"
ERROR_UNSUPPORTED_FORM_VALUE = "Cannot form-encode value of type {} at '{}'"
ERROR_FORM_KEY_COLLISION = "Form field '{}' is set by both request and credentials"
ERROR_UNENCODABLE_TEXT = "Form field text cannot be encoded: {}"
