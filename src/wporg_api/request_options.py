"""Per-request overrides for the WordPress.org API client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .exceptions import WpOrgApiValidationError


def validate_timeout(timeout: Any) -> Any:
    """Reject non-positive numeric timeouts; ``None`` and ``httpx.Timeout`` pass through."""
    if isinstance(timeout, (int, float)) and timeout <= 0:
        raise WpOrgApiValidationError("timeout must be greater than 0")
    return timeout


@dataclass(frozen=True)
class RequestOptions:
    timeout: float | None = None
    headers: Mapping[str, str] | None = None
    follow_redirects: bool | None = None

    def as_transport_options(self) -> dict[str, Any]:
        """Return the non-empty fields as keyword arguments for httpx."""
        options: dict[str, Any] = {}
        if self.timeout is not None:
            options["timeout"] = float(validate_timeout(self.timeout))
        if self.follow_redirects is not None:
            options["follow_redirects"] = self.follow_redirects
        return options
