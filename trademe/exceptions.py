"""Errors raised by the Trade Me client."""

from typing import Optional


class TradeMeError(Exception):
    """Base class for every error raised by this package."""


class ClientException(TradeMeError):
    """Raised before any request is sent, when required parameters are missing."""


class RequestException(TradeMeError):
    """Raised when a request fails in transport or returns a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text
