"""Exceptions raised by the WordPress.org API client."""

from __future__ import annotations


class WpOrgApiError(Exception):
    """Base exception for all WordPress.org API client failures."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        body: object = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.body = body
        self.cause = cause


class WpOrgApiValidationError(WpOrgApiError):
    """Raised when caller input cannot be turned into a valid request."""


class WpOrgApiHTTPError(WpOrgApiError):
    """Raised when a response falls outside the 2xx range."""


class WpOrgApiNetworkError(WpOrgApiError):
    """Raised for transport-level failures like DNS and TCP errors."""


class WpOrgApiTimeoutError(WpOrgApiNetworkError):
    """Raised when a request exceeds the configured timeout."""


class WpOrgApiDecodeError(WpOrgApiError):
    """Raised when a response body is not valid JSON."""
