"""OAuth 1.0 PLAINTEXT signing helpers for the Trade Me API.

Trade Me signs requests with the PLAINTEXT method: the signature is the
consumer secret and the token secret joined by ``&``, sent as-is over TLS.
Docs: https://developer.trademe.co.nz/api-overview/authentication
"""

from __future__ import annotations

import hashlib
import secrets
import time
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import quote

SIGNATURE_METHOD = "PLAINTEXT"
OAUTH_VERSION = "1.0"
NONCE_LENGTH = 10


@dataclass(frozen=True)
class TokenPair:
    token: str
    token_secret: str

    @classmethod
    def from_response(cls, parsed: Mapping[str, str]) -> "TokenPair":
        """Build a pair from a parsed token endpoint response."""
        return cls(
            token=parsed["oauth_token"],
            token_secret=parsed["oauth_token_secret"],
        )


def generate_nonce() -> str:
    """Generate a 10 character nonce from the clock and random bytes."""
    seed = f"{time.time_ns()}:{secrets.token_hex(16)}"
    return hashlib.sha1(seed.encode()).hexdigest()[:NONCE_LENGTH]


def _text(value: Optional[str]) -> str:
    # A missing credential is signed as empty, never as "None"
    return "" if value is None else str(value)


def plaintext_signature(consumer_secret: Optional[str], token_secret: Optional[str] = "") -> str:
    return f"{_text(consumer_secret)}&{_text(token_secret)}"


def _timestamp_and_nonce(
    timestamp: Optional[int], nonce: Optional[str]
) -> tuple[str, str]:
    if timestamp is None:
        timestamp = int(time.time())
    if nonce is None:
        nonce = generate_nonce()
    return str(timestamp), nonce


def temporary_token_fields(
    consumer_key: str,
    consumer_secret: str,
    timestamp: Optional[int] = None,
    nonce: Optional[str] = None,
) -> dict[str, str]:
    """Fields for the request-token call (no token yet)."""
    timestamp_value, nonce = _timestamp_and_nonce(timestamp, nonce)
    return {
        "oauth_consumer_key": _text(consumer_key),
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_timestamp": timestamp_value,
        "oauth_nonce": nonce,
        "oauth_version": OAUTH_VERSION,
        "oauth_signature": plaintext_signature(consumer_secret),
    }


def final_token_fields(
    consumer_key: str,
    consumer_secret: str,
    token: str,
    token_secret: str,
    timestamp: Optional[int] = None,
    nonce: Optional[str] = None,
) -> dict[str, str]:
    """Fields for exchanging the temporary token for the final one."""
    timestamp_value, nonce = _timestamp_and_nonce(timestamp, nonce)
    return {
        "oauth_consumer_key": _text(consumer_key),
        "oauth_token": _text(token),
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_timestamp": timestamp_value,
        "oauth_nonce": nonce,
        "oauth_token_secret": _text(token_secret),
        "oauth_version": OAUTH_VERSION,
        "oauth_signature": plaintext_signature(consumer_secret, token_secret),
    }


def access_fields(
    consumer_key: str,
    consumer_secret: str,
    token: str,
    token_secret: str,
    timestamp: Optional[int] = None,
    nonce: Optional[str] = None,
) -> dict[str, str]:
    """Fields for ordinary API calls made with a final access token."""
    timestamp_value, nonce = _timestamp_and_nonce(timestamp, nonce)
    return {
        "oauth_consumer_key": _text(consumer_key),
        "oauth_token": _text(token),
        "oauth_signature_method": SIGNATURE_METHOD,
        "oauth_timestamp": timestamp_value,
        "oauth_nonce": nonce,
        "oauth_version": OAUTH_VERSION,
        "oauth_signature": plaintext_signature(consumer_secret, token_secret),
    }


def build_authorization_header(fields: Mapping[str, str]) -> tuple[str, str]:
    """
    Format OAuth fields as an ``Authorization`` header.

    Values are percent-encoded with nothing left safe, so ``&`` becomes
    ``%26``. Field order follows the mapping's insertion order.

    Returns:
        Header name and value
    """
    pairs = [f'{key}="{quote(str(value), safe="")}"' for key, value in fields.items()]
    return "Authorization", "OAuth " + ", ".join(pairs)
