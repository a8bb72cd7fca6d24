"""Authenticated REST client for the Basispoort API."""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Any

import aiohttp
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json
from yarl import URL

from ...core.exceptions import (
    DecodeResponseError,
    EncodePayloadError,
    HttpRequestError,
    HttpResponseError,
    ParseUrlError,
    ReceiveResponseBodyError,
)
from .responses import decode_error_body

logger = logging.getLogger(__name__)

_JSON_HEADERS = {"Content-Type": "application/json"}


@lru_cache(maxsize=128)
def _cached_type_adapter(response_model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_model)


def _type_adapter(response_model: Any) -> TypeAdapter[Any]:
    try:
        hash(response_model)
    except TypeError:
        # Unhashable models (e.g. Annotated with dict metadata) are built uncached.
        return TypeAdapter(response_model)
    return _cached_type_adapter(response_model)


class RestClient:
    """Async REST client bound to one Basispoort environment.

    Instances are built by ``RestClientBuilder``, which attaches the client
    identity, timeouts and minimum TLS version to the session. The client
    holds no per-request state and may be shared between concurrent tasks.

    Each verb performs exactly one request: no retries, no caching. A task
    cancelled while a request is in flight abandons it; for POST, PUT and
    DELETE the caller cannot know whether the server applied the change.

    Paths are resolved against ``base_url``, which always ends in a slash;
    pass paths without a leading slash.
    """

    def __init__(self, session: aiohttp.ClientSession, base_url: URL | str) -> None:
        self._session = session
        self._base_url = URL(base_url)

    @property
    def base_url(self) -> URL:
        """Base URL of the environment this client is bound to."""
        return self._base_url

    @property
    def session(self) -> aiohttp.ClientSession:
        """Underlying authenticated session."""
        return self._session

    def resolve(self, path: str) -> URL:
        """Resolve ``path`` against the base URL.

        Raises:
            ParseUrlError: If the result is not a valid URL, or points away
                from the base URL's scheme, host and port.
        """
        try:
            url = self._base_url.join(URL(path))
            origin = url.origin()
        except (ValueError, TypeError) as exc:
            raise ParseUrlError(path, reason=str(exc)) from exc

        if origin != self._base_url.origin():
            raise ParseUrlError(path, reason=f"resolves outside of {self._base_url.origin()}")
        return url

    async def get(self, path: str, response_model: Any = Any) -> Any:
        """GET ``path`` and decode the response into ``response_model``.

        ``Any`` returns the decoded JSON as is; ``None`` expects no content.
        """
        return await self._request("GET", path, response_model=response_model)

    async def post(self, path: str, payload: Any, response_model: Any = Any) -> Any:
        """POST ``payload`` as JSON to ``path``.

        Not idempotent: a cancelled or failed call may still have been
        applied by the server.
        """
        return await self._request("POST", path, payload=payload, response_model=response_model)

    async def put(self, path: str, payload: Any, response_model: Any = Any) -> Any:
        """PUT ``payload`` as JSON to ``path``.

        A cancelled or failed call may still have been applied by the server.
        """
        return await self._request("PUT", path, payload=payload, response_model=response_model)

    async def delete(self, path: str, response_model: Any = Any) -> Any:
        """DELETE ``path``.

        A cancelled or failed call may still have been applied by the server.
        """
        return await self._request("DELETE", path, response_model=response_model)

    async def close(self) -> None:
        """Close the underlying session."""
        if not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "RestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"RestClient(base_url={str(self._base_url)!r})"

    async def _request(
        self,
        method: str,
        path: str,
        *,
        payload: Any = None,
        response_model: Any = Any,
    ) -> Any:
        url = self.resolve(path)

        data: bytes | None = None
        headers: dict[str, str] | None = None
        if method in ("POST", "PUT"):
            try:
                data = to_json(payload, by_alias=True)
            except PydanticSerializationError as exc:
                raise EncodePayloadError(url) from exc
            headers = _JSON_HEADERS

        logger.debug("Sending request", extra={"method": method, "url": str(url), "payload": data})

        try:
            response = await self._session.request(method, url, data=data, headers=headers)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise HttpRequestError(method, url) from exc

        async with response:
            status = response.status
            logger.debug("Response received", extra={"url": str(url), "status": status})

            try:
                body = await response.read()
            except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
                raise ReceiveResponseBodyError(url) from exc

            if not 200 <= status < 300:
                cause = aiohttp.ClientResponseError(
                    response.request_info,
                    response.history,
                    status=status,
                    message=response.reason or "",
                    headers=response.headers,
                )
                raise HttpResponseError(url, status, decode_error_body(body)) from cause

        return self._decode(url, body, response_model)

    def _decode(self, url: URL, body: bytes, response_model: Any) -> Any:
        # Empty bodies decode as JSON null, so no-content endpoints need no special case.
        # Strict mode rejects wrongly typed values instead of coercing them.
        if not body:
            body = b"null"
        try:
            decoded = _type_adapter(response_model).validate_json(body, strict=True)
        except ValidationError as exc:
            raise DecodeResponseError(url, reason=str(exc)) from exc

        logger.debug(
            "Response decoded",
            extra={"url": str(url), "result_type": repr(response_model)},
        )
        return decoded
