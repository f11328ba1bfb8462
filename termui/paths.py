"""Event path normalisation and prefix matching of handler patterns."""

from __future__ import annotations

import posixpath
from collections.abc import Mapping


def clean_path(path: str) -> str:
    """Absolute, normalised form of ``path``; the empty path becomes ``/``."""
    if not path:
        return "/"
    if not path.startswith("/"):
        path = "/" + path
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def is_path_match(pattern: str, path: str) -> bool:
    """True when ``pattern`` is a non-empty prefix of ``path``."""
    return bool(pattern) and path.startswith(pattern)


def find_match(handlers: Mapping[str, object], path: str) -> str:
    """The longest key of ``handlers`` that matches ``path``, or ``""``."""
    best = ""
    for pattern in handlers:
        if is_path_match(pattern, path) and len(pattern) > len(best):
            best = pattern
    return best