"""Icon file loading for hosted applications."""

from __future__ import annotations

import asyncio
import base64
from pathlib import Path

from ..core.exceptions import OpenIconFileError, ReadIconFileError

_MIME_TYPE_PREFIXES = {
    ".svg": "image/svg+xml,",
    ".png": "image/png,",
}


async def icon_from_file(path: str | Path) -> str:
    """Read an icon and encode it as base64, prefixed by its mime type.

    Only ``.svg`` and ``.png`` files get a mime type prefix; other files are
    returned as bare base64.
    """
    path = Path(path)
    try:
        handle = await asyncio.to_thread(open, path, "rb")
    except OSError as exc:
        raise OpenIconFileError(path) from exc

    with handle:
        try:
            icon_data = await asyncio.to_thread(handle.read)
        except OSError as exc:
            raise ReadIconFileError(path) from exc

    prefix = _MIME_TYPE_PREFIXES.get(path.suffix.lower(), "")
    return f"{prefix}{base64.b64encode(icon_data).decode('ascii')}"
