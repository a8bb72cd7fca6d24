"""REST request runner using endpoint specs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .http_client import RestClient


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST" | "PUT" | "DELETE"
    build_path: Callable[[dict[str, Any]], str]
    # None expects an empty body (or JSON null)
    response_model: Any = None


class RestRunner:
    """Run endpoint specs below a fixed service base path."""

    def __init__(self, client: RestClient, base_path: str = "") -> None:
        self._client = client
        self._base_path = base_path

    @property
    def base_path(self) -> str:
        return self._base_path

    def make_path(self, spec: RestEndpointSpec, params: dict[str, Any]) -> str:
        return f"{self._base_path}{spec.build_path(params)}"

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        params: dict[str, Any] | None = None,
        payload: Any = None,
    ) -> Any:
        path = self.make_path(spec, params or {})
        method = spec.method.upper()

        if method == "GET":
            return await self._client.get(path, response_model=spec.response_model)
        if method == "DELETE":
            return await self._client.delete(path, response_model=spec.response_model)
        if method == "POST":
            return await self._client.post(path, payload, response_model=spec.response_model)
        if method == "PUT":
            return await self._client.put(path, payload, response_model=spec.response_model)
        raise ValueError(f"Unsupported HTTP method for endpoint {spec.id}: {spec.method}")
