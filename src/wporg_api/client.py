"""Synchronous client for the WordPress.org API."""

from __future__ import annotations

import json
import logging
from types import MappingProxyType
from typing import Any, Mapping
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from ._version import __version__
from .exceptions import (
    WpOrgApiDecodeError,
    WpOrgApiHTTPError,
    WpOrgApiNetworkError,
    WpOrgApiTimeoutError,
    WpOrgApiValidationError,
)
from .models import CoreChecksumsResponse, PluginChecksumsResponse, VersionCheckResponse
from .request_options import RequestOptions, validate_timeout

logger = logging.getLogger(__name__)

API_ROOT = "https://api.wordpress.org"
DOWNLOADS_ROOT = "https://downloads.wordpress.org"

CORE_CHECKSUMS_ENDPOINT = f"{API_ROOT}/core/checksums/1.0/"
PLUGIN_CHECKSUMS_ENDPOINT = f"{DOWNLOADS_ROOT}/plugin-checksums/"
SALT_ENDPOINT = f"{API_ROOT}/secret-key/1.1/salt/"
VERSION_CHECK_ENDPOINT = f"{API_ROOT}/core/version-check/1.7/"

DEFAULT_TIMEOUT = 30.0
DEFAULT_LOCALE = "en_US"

# Options httpx accepts on each request; everything else configures the client.
REQUEST_OPTION_KEYS = frozenset({"timeout", "follow_redirects", "auth", "extensions"})

_UNSAFE_SEGMENT_CHARS = ("/", "?", "#", "\\", "\x00")


def _path_segment(value: str, name: str) -> str:
    value = str(value)
    if not value:
        raise WpOrgApiValidationError(f"{name} must not be empty")
    if any(char in value for char in _UNSAFE_SEGMENT_CHARS):
        raise WpOrgApiValidationError(f"Invalid characters in {name}: {value!r}")
    return value


def _split_options(options: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    client_options: dict[str, Any] = {}
    request_options: dict[str, Any] = {}
    for key, value in options.items():
        if key == "halt_on_error":
            continue
        if key in REQUEST_OPTION_KEYS:
            request_options[key] = value
        else:
            client_options[key] = value
    return client_options, request_options


class WpOrgApiClient:
    """Client for the public WordPress.org API.

    ``options`` is a mapping of transport options forwarded to httpx for every
    request. Per-request keys (``timeout``, ``follow_redirects``, ``auth``,
    ``extensions``) are passed to each call; the rest (``proxy``,
    ``verify``, ``cert``, ``trust_env``...) configure the underlying
    ``httpx.Client``. ``halt_on_error`` is always off: transport failures are
    raised as :class:`~wporg_api.exceptions.WpOrgApiError` subclasses.

    Query methods return ``None`` when the service answers with valid JSON of
    an unexpected shape, and raise when the request itself fails.
    """

    user_agent = f"wporg-api-python/{__version__}"

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        httpx_client: httpx.Client | None = None,
    ) -> None:
        self.options = MappingProxyType(dict(options or {}))
        client_options, request_options = _split_options(self.options)
        request_options.setdefault("timeout", DEFAULT_TIMEOUT)
        validate_timeout(request_options["timeout"])
        self._request_options = MappingProxyType(request_options)
        self._default_headers = {"User-Agent": self.user_agent}
        if httpx_client is None:
            httpx_client = httpx.Client(**client_options)
        elif client_options:
            logger.debug(
                "Ignoring client options %s: an httpx client was supplied",
                ", ".join(sorted(client_options)),
            )
        self._httpx = httpx_client

    def __enter__(self) -> "WpOrgApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._httpx.close()

    def get_core_checksums(
        self,
        version: str,
        locale: str = DEFAULT_LOCALE,
        *,
        options: RequestOptions | None = None,
    ) -> dict[str, str] | None:
        """Get the checksums for a WordPress core release.

        Returns a mapping of file path to md5 checksum, or ``None`` when the
        response does not carry a ``checksums`` object.
        """
        url = f"{CORE_CHECKSUMS_ENDPOINT}?{urlencode({'version': version, 'locale': locale})}"
        response = self._json_get_request(url, options=options)
        try:
            parsed = CoreChecksumsResponse.model_validate(response)
        except ValidationError as exc:
            logger.debug("Unexpected core checksums payload from %s: %s", url, exc)
            return None
        return parsed.checksums

    def get_download_offer(
        self,
        locale: str = DEFAULT_LOCALE,
        *,
        options: RequestOptions | None = None,
    ) -> dict[str, Any] | None:
        """Get the first update offer for ``locale``.

        Only the first entry of ``offers`` is considered. ``None`` is returned
        when there is no offer or its locale does not match.
        """
        url = f"{VERSION_CHECK_ENDPOINT}?{urlencode({'locale': locale})}"
        response = self._json_get_request(url, options=options)
        try:
            parsed = VersionCheckResponse.model_validate(response)
        except ValidationError as exc:
            logger.debug("Unexpected version check payload from %s: %s", url, exc)
            return None

        if not parsed.offers:
            logger.debug("No offers returned from %s", url)
            return None

        offer = parsed.offers[0]
        if not isinstance(offer, dict) or "locale" not in offer or offer["locale"] != locale:
            logger.debug("First offer from %s does not match locale %s", url, locale)
            return None
        return offer

    def get_plugin_checksums(
        self,
        plugin: str,
        version: str,
        *,
        options: RequestOptions | None = None,
    ) -> dict[str, Any] | list[Any] | None:
        """Get the per-file checksums for a plugin release.

        ``plugin`` and ``version`` are inserted into the URL path as given,
        without encoding, so they must be plain slugs and version strings.
        """
        url = (
            f"{PLUGIN_CHECKSUMS_ENDPOINT}{_path_segment(plugin, 'plugin')}"
            f"/{_path_segment(version, 'version')}.json"
        )
        response = self._json_get_request(url, options=options)
        try:
            parsed = PluginChecksumsResponse.model_validate(response)
        except ValidationError as exc:
            logger.debug("Unexpected plugin checksums payload from %s: %s", url, exc)
            return None
        return parsed.files

    def get_salts(self, *, options: RequestOptions | None = None) -> str:
        """Get a block of ``define()`` statements with freshly generated salts."""
        return self._get_request(SALT_ENDPOINT, options=options)

    def _json_get_request(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        options: RequestOptions | None = None,
    ) -> Any:
        merged_headers = {"Accept": "application/json"}
        if headers:
            merged_headers.update(headers)

        body = self._get_request(url, merged_headers, options)

        try:
            return json.loads(body)
        except json.JSONDecodeError as exc:
            raise WpOrgApiDecodeError(
                f"Failed to decode JSON: {exc.msg}", url=url, body=body, cause=exc
            ) from exc

    def _get_request(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        options: RequestOptions | None = None,
    ) -> str:
        request_options = dict(self._request_options)
        merged_headers = dict(self._default_headers)
        if headers:
            merged_headers.update(headers)
        if options is not None:
            request_options.update(options.as_transport_options())
            if options.headers:
                merged_headers.update(options.headers)

        logger.debug("GET %s", url)
        try:
            response = self._httpx.get(url, headers=merged_headers, **request_options)
        except httpx.TimeoutException as exc:
            raise WpOrgApiTimeoutError(f"Request to {url} timed out", url=url, cause=exc) from exc
        except httpx.RequestError as exc:
            raise WpOrgApiNetworkError(
                f"Couldn't fetch response from {url} ({exc}).", url=url, cause=exc
            ) from exc

        logger.debug("GET %s -> %s", url, response.status_code)
        if not 200 <= response.status_code < 300:
            raise WpOrgApiHTTPError(
                f"Couldn't fetch response from {url} (HTTP code {response.status_code}).",
                url=url,
                status_code=response.status_code,
                body=response.text,
            )
        return response.text.strip()
