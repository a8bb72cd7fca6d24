"""Path helpers for endpoint definitions."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ..core.exceptions import ParseUrlError

_DOT_SEGMENTS = frozenset({"", ".", ".."})


def segment(value: Any) -> str:
    """Percent-encode a value as one path segment (slashes included).

    Raises:
        ParseUrlError: If the value is empty, ``.`` or ``..``, which URL
            resolution would drop or collapse into the parent path.
    """
    text = str(value)
    if text in _DOT_SEGMENTS:
        raise ParseUrlError(text, reason="not usable as a single path segment")
    return quote(text, safe="")
