"""Client library for the Trade Me marketplace API."""

from trademe.api import Request, TokenPair, TradeMeClient
from trademe.config import Settings, get_settings
from trademe.exceptions import ClientException, RequestException, TradeMeError

__all__ = [
    "ClientException",
    "Request",
    "RequestException",
    "Settings",
    "TokenPair",
    "TradeMeClient",
    "TradeMeError",
    "get_settings",
]
