#!/usr/bin/env python3
"""Smoke test: call every public method on WpOrgApiClient against the live API."""

from __future__ import annotations

import sys

from wporg_api import WpOrgApiClient, WpOrgApiError, parse_salts

passed: list[str] = []
failed: list[tuple[str, str]] = []


def ok(name: str, result: object = None) -> None:
    tag = type(result).__name__ if result is not None else "None"
    print(f"  PASS  {name}  -> {tag}")
    passed.append(name)


def fail(name: str, reason: str) -> None:
    print(f"  FAIL  {name}  -> {reason[:200]}")
    failed.append((name, reason))


def run(name: str, fn, *, allow_none: bool = False):
    """Run fn(), record pass/fail."""
    try:
        result = fn()
    except WpOrgApiError as e:
        fail(name, str(e))
        return None
    if result is None and not allow_none:
        fail(name, "unexpected response shape")
        return None
    ok(name, result)
    return result


def main() -> int:
    with WpOrgApiClient({"timeout": 20.0}) as api:
        offer = run("get_download_offer", api.get_download_offer)
        version = offer["current"] if offer else "6.4.2"
        run("get_core_checksums", lambda: api.get_core_checksums(version))
        run("get_plugin_checksums", lambda: api.get_plugin_checksums("akismet", "5.3"))
        salts = run("get_salts", api.get_salts)
        if salts:
            run("parse_salts", lambda: parse_salts(salts))

    print(f"\n{len(passed)} passed, {len(failed)} failed")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
