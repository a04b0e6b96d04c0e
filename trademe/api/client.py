"""Trade Me API client: selling operations and the OAuth handshake.

The OAuth flow is driven by the caller; the client keeps no state between
steps:

    client = TradeMeClient({"consumer_key": ..., "consumer_secret": ...})

    # Step 1: ask for a temporary token/secret
    temp = client.get_temporary_access_tokens()

    # Step 2: send the user to authorize, they come back with a verifier
    url = client.get_access_token_verifier_url(temp["oauth_token"])

    # Step 3: exchange the temporary token and verifier for the final token
    final = client.get_final_access_tokens({
        "temp_token": temp["oauth_token"],
        "temp_token_secret": temp["oauth_token_secret"],
        "token_verifier": verifier,
    })

The final token and secret have to be stored by the caller.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, NoReturn, Optional, Sequence
from urllib.parse import parse_qsl, quote_plus

from trademe.api.oauth import (
    build_authorization_header,
    final_token_fields,
    temporary_token_fields,
)
from trademe.api.request import Request
from trademe.exceptions import ClientException, RequestException
from trademe.validation import validate_required

logger = logging.getLogger(__name__)

SELL_ITEM_REQUIRED_KEYS = (
    "Category",
    "Title",
    "Description",
    "Duration",
    "BuyNowPrice",
    "StartPrice",
    "PaymentMethods",
    "Pickup",
    "ShippingOptions",
)

FINAL_TOKENS_REQUIRED_KEYS = ("temp_token", "temp_token_secret", "token_verifier")


def _sell_item_failed(required_keys: list[str]) -> NoReturn:
    raise ClientException(
        "In order to sell an item, you must specify the following: "
        f"{', '.join(required_keys)}."
    )


def _final_tokens_failed(required_keys: list[str]) -> NoReturn:
    raise ClientException(
        "To get the final access tokens, specify the following: "
        f"{', '.join(required_keys)}."
    )


def _parse_token_response(response: str) -> dict[str, str]:
    """Parse a URL-encoded token response, which must carry the token and secret."""
    parsed = dict(parse_qsl(response, keep_blank_values=True))
    if not parsed.get("oauth_token") or not parsed.get("oauth_token_secret"):
        logger.error(f"Unexpected token response: {response!r}")
        raise RequestException(
            "Expected a URL-encoded response with oauth_token and oauth_token_secret",
            response_text=response,
        )
    return parsed


class TradeMeClient:
    """Client for the Trade Me selling API and OAuth handshake."""

    SCOPE_READ = "MyTradeMeRead"
    SCOPE_WRITE = "MyTradeMeWrite"

    def __init__(
        self,
        request_options: Optional[Mapping[str, Any]] = None,
        request: Optional[Request] = None,
    ):
        self.request = request or Request(**dict(request_options or {}))

    def sell_item(self, params: Mapping[str, Any]) -> str:
        """
        List an item for sale.

        Args:
            params: Listing fields; all of ``SELL_ITEM_REQUIRED_KEYS`` must be present

        Returns:
            Raw response body

        Raises:
            ClientException: A required field is missing (nothing is sent)
            RequestException: The request failed
        """
        validate_required(SELL_ITEM_REQUIRED_KEYS, params, _sell_item_failed)

        return self.api("POST", "Selling.json", params)

    def list_selling_items(
        self, params: Optional[Mapping[str, Any]] = None, filter: str = "All"
    ) -> str:
        """List the member's items for sale, narrowed by ``filter`` (e.g. ``Closed``)."""
        return self.api("GET", f"SellingItems/{filter}.json", params or {})

    def api(self, method: str, uri: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """General purpose method for sending API requests."""
        return self.request.api(method, uri, params)

    def get_temporary_access_tokens(
        self, scopes: Sequence[str] = (SCOPE_READ, SCOPE_WRITE)
    ) -> dict[str, str]:
        """
        Get temporary access tokens (step 1 of the handshake).

        Args:
            scopes: Scopes that the token has access to

        Returns:
            Parsed response, including ``oauth_token`` and ``oauth_token_secret``
        """
        uri = f"/RequestToken?scope={','.join(scopes)}"

        header, value = build_authorization_header(
            temporary_token_fields(
                self.request.get_option("consumer_key"),
                self.request.get_option("consumer_secret"),
            )
        )

        logger.info(f"Requesting temporary access tokens for scopes: {', '.join(scopes)}")
        response = self.request.oauth("POST", uri, {}, {header: value})

        return _parse_token_response(response)

    def get_access_token_verifier_url(self, temp_access_token: str) -> str:
        """
        Build the URL the user authorizes the application at (step 2).

        Once the user allows access they are redirected to the callback
        address with ``oauth_token`` and ``oauth_verifier`` in the query string.
        No request is sent.
        """
        return (
            f"https://secure.{self.request.get_base_domain()}"
            f"/Oauth/Authorize?oauth_token={quote_plus(temp_access_token)}"
        )

    def get_final_access_tokens(self, config: Mapping[str, str]) -> dict[str, str]:
        """
        Exchange the temporary tokens and verifier for final access tokens (step 3).

        Args:
            config: ``temp_token``, ``temp_token_secret`` and ``token_verifier``

        Returns:
            Parsed response, including ``oauth_token`` and ``oauth_token_secret``

        Raises:
            ClientException: A required key is missing (nothing is sent)
            RequestException: The request failed
        """
        validate_required(FINAL_TOKENS_REQUIRED_KEYS, config, _final_tokens_failed)

        uri = f"/AccessToken?oauth_verifier={quote_plus(config['token_verifier'])}"

        header, value = build_authorization_header(
            final_token_fields(
                self.request.get_option("consumer_key"),
                self.request.get_option("consumer_secret"),
                config["temp_token"],
                config["temp_token_secret"],
            )
        )

        logger.info("Exchanging temporary tokens for final access tokens")
        response = self.request.oauth("POST", uri, {}, {header: value})

        return _parse_token_response(response)
