"""Response models for the WordPress.org API endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class WpOrgModel(BaseModel):
    model_config = ConfigDict(extra="allow", strict=True)


class CoreChecksumsResponse(WpOrgModel):
    checksums: dict[str, Any]


class VersionCheckResponse(WpOrgModel):
    offers: list[Any]


class PluginChecksumsResponse(WpOrgModel):
    files: dict[str, Any] | list[Any]


class Offer(BaseModel):
    """A single update offer from the version-check endpoint."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    response: str | None = None
    download: str | None = None
    locale: str | None = None
    packages: dict[str, Any] | None = None
    current: str | None = None
    version: str | None = None
    php_version: str | None = None
    mysql_version: str | None = None
    new_bundled: str | None = None
    partial_version: str | bool | None = None
