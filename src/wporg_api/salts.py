"""Parsing helpers for the secret-key salt block."""

from __future__ import annotations

import re

_DEFINE_RE = re.compile(
    r"""^define\(\s*'(?P<name>[A-Za-z_][A-Za-z0-9_]*)'\s*,\s*'(?P<value>(?:[^'\\]|\\.)*)'\s*\);$"""
)
_ESCAPE_RE = re.compile(r"\\([\\'])")


def parse_salts(text: str) -> dict[str, str]:
    """Parse ``define( 'NAME', 'value' );`` lines into an ordered mapping.

    Values are single-quoted PHP strings, so only ``\\'`` and ``\\\\`` are
    unescaped. Blank lines are skipped; anything else is rejected.
    """
    salts: dict[str, str] = {}
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        match = _DEFINE_RE.match(line)
        if match is None:
            raise ValueError(f"Unrecognized salt definition on line {lineno}: {line!r}")
        salts[match.group("name")] = _ESCAPE_RE.sub(r"\1", match.group("value"))
    return salts
