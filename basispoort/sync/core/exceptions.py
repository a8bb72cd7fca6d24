"""Custom exception hierarchy.

Every error raised by the library derives from ``BasispoortError`` and carries
the context needed to diagnose it (file path, request path, URL, status code,
error body) as attributes. Underlying causes are chained, so ``__cause__``
holds the original ``OSError``, ``ssl.SSLError``, ``aiohttp.ClientError`` or
``pydantic.ValidationError``.

The hierarchy is open: new error kinds may be added over time, so callers
should catch the closest documented base class rather than enumerate leaves.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yarl import URL

    from ..runtime.rest.responses import ErrorResponse


class BasispoortError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidEnvironmentString(BasispoortError, ValueError):
    """String does not name a Basispoort environment."""

    def __init__(self, value: str) -> None:
        super().__init__(f"'{value}' is not a valid environment string")
        self.value = value


# Build time


class BuildError(BasispoortError):
    """REST client could not be built."""

    pass


class OpenIdentityCertFileError(BuildError):
    """Identity certificate file could not be opened."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"failed to open identity certificate file at {path}")
        self.path = str(path)


class ReadIdentityCertFileError(BuildError):
    """Identity certificate file could not be read to the end."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"failed to read identity certificate file at {path}")
        self.path = str(path)


class ParseIdentityCertFileError(BuildError):
    """Identity certificate file is not a usable PEM certificate and key."""

    def __init__(self, path: str | Path, reason: str | None = None) -> None:
        message = f"failed parsing identity certificate file at {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = str(path)
        self.reason = reason


class BuildRequestClientError(BuildError):
    """HTTP client could not be constructed from the given settings."""

    def __init__(self, message: str = "failed building request client") -> None:
        super().__init__(message)


# Request time


class ParseUrlError(BasispoortError):
    """Path could not be resolved to a valid URL."""

    def __init__(self, url: str, reason: str | None = None) -> None:
        message = f"failed to parse URL '{url}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.url = url
        self.reason = reason


class EncodePayloadError(BasispoortError):
    """Request payload could not be serialized to JSON."""

    def __init__(self, url: URL) -> None:
        super().__init__(f"failed to encode payload for {url}")
        self.url = url


class HttpRequestError(BasispoortError):
    """Request could not be sent or no response arrived.

    Covers connection refusal, DNS failures, TLS handshake failures and
    elapsed connect/request timeouts.
    """

    def __init__(self, method: str, url: URL) -> None:
        super().__init__(f"HTTP request error: {method} {url}")
        self.method = method
        self.url = url


class ReceiveResponseBodyError(BasispoortError):
    """Response body could not be read in full."""

    def __init__(self, url: URL) -> None:
        super().__init__(f"failed receiving the response body from {url}")
        self.url = url


class HttpResponseError(BasispoortError):
    """Server answered with a non-2xx status.

    ``error_response`` holds the response body, decoded as JSON where
    possible and as plain text otherwise.
    """

    def __init__(self, url: URL, status: int, error_response: ErrorResponse) -> None:
        super().__init__(f"HTTP response error: status {status} from {url}: {error_response}")
        self.url = url
        self.status = status
        self.error_response = error_response


class DecodeResponseError(BasispoortError):
    """Response body is not valid JSON or does not match the expected type."""

    def __init__(self, url: URL, reason: str | None = None) -> None:
        message = f"failed decoding the server's response from {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.url = url
        self.reason = reason


# Service helpers


class SerializeSearchPredicateError(BasispoortError):
    """Institution search predicate cannot be turned into a query string."""

    pass


class OpenIconFileError(BasispoortError):
    """Icon file could not be opened."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"failed to open icon file at {path}")
        self.path = Path(path)


class ReadIconFileError(BasispoortError):
    """Icon file could not be read to the end."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"failed to read icon file at {path}")
        self.path = Path(path)
