"""Custom exceptions for the imgflip client."""


class ImgflipError(Exception):
    """Base exception for imgflip-related errors."""

    pass


class ImgflipTransportError(ImgflipError):
    """Raised on connection failures and non-2xx HTTP responses."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ImgflipTimeoutError(ImgflipTransportError):
    """Raised when a request times out."""

    pass


class ImgflipEncodeError(ImgflipError):
    """Raised when a request cannot be form-encoded."""

    pass


class ImgflipDecodeError(ImgflipError):
    """Raised when a response body matches neither envelope shape."""

    pass


class ImgflipAPIError(ImgflipError):
    """Raised when the API answers with a failure envelope.

    The server's ``error_message`` is kept verbatim in ``message``.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
