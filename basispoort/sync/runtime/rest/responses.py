"""Error response bodies.

An error response body is kept as a diagnostic payload on
``HttpResponseError``. It is JSON when the body parses as JSON and plain
text otherwise.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class JsonErrorResponse:
    """Error body that parsed as JSON."""

    value: Any

    def __str__(self) -> str:
        return json.dumps(self.value, ensure_ascii=False)


@dataclass(frozen=True)
class PlainErrorResponse:
    """Error body that is not JSON, kept as text."""

    text: str

    def __str__(self) -> str:
        return self.text


ErrorResponse = Union[JsonErrorResponse, PlainErrorResponse]


def decode_error_body(body: bytes) -> ErrorResponse:
    """Decode an error body, falling back to lossy UTF-8 text."""
    try:
        return JsonErrorResponse(json.loads(body))
    except ValueError:
        return PlainErrorResponse(body.decode("utf-8", errors="replace"))
