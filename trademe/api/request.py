"""Request dispatcher for the Trade Me API."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from trademe.api.oauth import access_fields, build_authorization_header
from trademe.config import SANDBOX_DOMAIN, Settings, get_settings
from trademe.exceptions import RequestException

logger = logging.getLogger(__name__)


class Request:
    """Sends requests to the Trade Me API and OAuth endpoints.

    Holds the client configuration and the underlying ``httpx.Client``. A
    pre-built client can be injected (e.g. one with a mock transport); it is
    then left open for its owner to close.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.Client] = None,
        **options: Any,
    ):
        if settings is None:
            settings = Settings(**options) if options else get_settings()
        elif options:
            settings = Settings(**{**settings.model_dump(), **options})
        self.settings = settings

        self._owns_http_client = http_client is None
        self._http = http_client or httpx.Client(timeout=settings.timeout)

    def get_option(self, name: str) -> Any:
        """Look up a configuration value by name."""
        if name not in Settings.model_fields:
            raise KeyError(f"Unknown option: {name}")
        return getattr(self.settings, name)

    def get_base_domain(self) -> str:
        if self.settings.sandbox:
            return SANDBOX_DOMAIN
        return self.settings.base_domain

    @property
    def api_base_url(self) -> str:
        return f"https://api.{self.get_base_domain()}/v1/"

    @property
    def oauth_base_url(self) -> str:
        return f"https://secure.{self.get_base_domain()}/Oauth"

    def api(self, method: str, uri: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """
        Send a request to the REST API.

        GET requests carry ``params`` in the query string, other methods send
        them as a JSON body. Requests are signed with the configured access
        token when one is set.

        Returns:
            Raw response body
        """
        headers = {}
        if self.settings.oauth_token:
            name, value = build_authorization_header(
                access_fields(
                    self.settings.consumer_key,
                    self.settings.consumer_secret,
                    self.settings.oauth_token,
                    self.settings.oauth_token_secret,
                )
            )
            headers[name] = value

        url = self.api_base_url + uri.lstrip("/")
        return self._send(method, url, params, headers)

    def oauth(
        self,
        method: str,
        uri: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Send a request to the OAuth endpoints with the given headers."""
        url = self.oauth_base_url + "/" + uri.lstrip("/")
        return self._send(method, url, params, dict(headers or {}))

    def _send(
        self,
        method: str,
        url: str,
        params: Optional[Mapping[str, Any]],
        headers: dict[str, str],
    ) -> str:
        method = method.upper()
        params = dict(params or {})

        kwargs: dict[str, Any] = {"headers": headers}
        if method == "GET":
            if params:
                kwargs["params"] = params
        elif params:
            kwargs["json"] = params

        logger.debug(f"Trade Me request: {method} {url}")

        try:
            response = self._http.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"Trade Me API error: {status} - {e.response.text}")
            raise RequestException(
                f"{method} {url} failed with status {status}",
                status_code=status,
                response_text=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Trade Me request failed: {method} {url}: {e}")
            raise RequestException(f"{method} {url} failed: {e}") from e

        return response.text

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "Request":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
