"""Command line access to the WordPress.org API."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from wporg_api.client import DEFAULT_LOCALE, WpOrgApiClient
from wporg_api.exceptions import WpOrgApiError
from wporg_api.models import Offer
from wporg_api.salts import parse_salts

logger = logging.getLogger(__name__)

OFFER_SUMMARY_FIELDS = {"version", "locale", "download", "php_version", "mysql_version"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wporg-api")
    parser.add_argument("--timeout", type=float, default=None, help="request timeout in seconds")
    parser.add_argument("--proxy", default=None, help="proxy URL for all requests")
    parser.add_argument("--insecure", action="store_true", help="skip TLS certificate verification")
    parser.add_argument("-v", "--verbose", action="store_true")

    commands = parser.add_subparsers(dest="command", required=True)

    core = commands.add_parser("core-checksums", help="checksums for a WordPress release")
    core.add_argument("version")
    core.add_argument("--locale", default=DEFAULT_LOCALE)

    plugin = commands.add_parser("plugin-checksums", help="checksums for a plugin release")
    plugin.add_argument("plugin")
    plugin.add_argument("version")

    offer = commands.add_parser("offer", help="current download offer for a locale")
    offer.add_argument("--locale", default=DEFAULT_LOCALE)
    offer.add_argument("--full", action="store_true", help="print every offer field")

    salts = commands.add_parser("salts", help="freshly generated wp-config.php salts")
    salts.add_argument("--format", choices=("php", "json"), default="php")

    return parser


def _client_options(args: argparse.Namespace) -> dict[str, Any]:
    options: dict[str, Any] = {}
    if args.timeout is not None:
        options["timeout"] = args.timeout
    if args.proxy:
        options["proxy"] = args.proxy
    if args.insecure:
        options["verify"] = False
    return options


def _build_client(args: argparse.Namespace) -> WpOrgApiClient:
    return WpOrgApiClient(_client_options(args))


def _run(client: WpOrgApiClient, args: argparse.Namespace) -> Any:
    if args.command == "core-checksums":
        return client.get_core_checksums(args.version, args.locale)
    if args.command == "plugin-checksums":
        return client.get_plugin_checksums(args.plugin, args.version)
    if args.command == "offer":
        offer = client.get_download_offer(args.locale)
        if offer is None or args.full:
            return offer
        return Offer.model_validate(offer).model_dump(include=OFFER_SUMMARY_FIELDS, exclude_none=True)
    salts = client.get_salts()
    if args.format == "json":
        return parse_salts(salts)
    return salts


def _main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        with _build_client(args) as client:
            result = _run(client, args)
    except (WpOrgApiError, ValueError) as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if result is None:
        print(f"Error: unexpected response for {args.command}", file=sys.stderr)
        return 1

    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, indent=2))
    return 0


def main() -> None:
    raise SystemExit(_main())
