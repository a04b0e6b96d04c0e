"""Trade Me API clients."""

from trademe.api.client import TradeMeClient
from trademe.api.oauth import TokenPair
from trademe.api.request import Request

__all__ = [
    "Request",
    "TokenPair",
    "TradeMeClient",
]
