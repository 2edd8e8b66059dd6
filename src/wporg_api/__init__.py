"""Python client for the WordPress.org API."""

from ._version import __version__

from .client import (
    API_ROOT,
    CORE_CHECKSUMS_ENDPOINT,
    DOWNLOADS_ROOT,
    PLUGIN_CHECKSUMS_ENDPOINT,
    SALT_ENDPOINT,
    VERSION_CHECK_ENDPOINT,
    WpOrgApiClient,
)
from .exceptions import (
    WpOrgApiDecodeError,
    WpOrgApiError,
    WpOrgApiHTTPError,
    WpOrgApiNetworkError,
    WpOrgApiTimeoutError,
    WpOrgApiValidationError,
)
from .models import Offer
from .request_options import RequestOptions
from .salts import parse_salts

__all__ = [
    "API_ROOT",
    "CORE_CHECKSUMS_ENDPOINT",
    "DOWNLOADS_ROOT",
    "Offer",
    "PLUGIN_CHECKSUMS_ENDPOINT",
    "RequestOptions",
    "SALT_ENDPOINT",
    "VERSION_CHECK_ENDPOINT",
    "WpOrgApiClient",
    "WpOrgApiDecodeError",
    "WpOrgApiError",
    "WpOrgApiHTTPError",
    "WpOrgApiNetworkError",
    "WpOrgApiTimeoutError",
    "WpOrgApiValidationError",
    "__version__",
    "parse_salts",
]
