"""Utility helpers for the image request rewriter."""

from __future__ import annotations

import re
from typing import Optional, Tuple

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")
_DIM_RE = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}

REMOTE_SCHEMES = frozenset({"http", "https"})


def uri_scheme(uri: str) -> Optional[str]:
    """Return the scheme of ``uri`` exactly as written, or ``None``."""
    match = _SCHEME_RE.match(uri or "")
    if not match:
        return None
    return match.group(1)


def is_remote_uri(uri: str) -> bool:
    # Case-sensitive: "HTTP://..." is not treated as remote.
    return uri_scheme(uri) in REMOTE_SCHEMES


def parse_size(value: str) -> Tuple[int, int]:
    match = _DIM_RE.match(value or "")
    if not match:
        raise ValueError(f"Invalid size '{value}', expected WIDTHxHEIGHT.")
    return int(match.group(1)), int(match.group(2))


def parse_flag(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"Invalid boolean value '{value}'")
