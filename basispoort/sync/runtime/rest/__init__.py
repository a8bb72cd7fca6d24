"""REST runtime abstractions."""

from .builder import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MIN_TLS_VERSION,
    DEFAULT_TIMEOUT,
    RestClientBuilder,
)
from .http_client import RestClient
from .responses import ErrorResponse, JsonErrorResponse, PlainErrorResponse, decode_error_body
from .runner import RestEndpointSpec, RestRunner

__all__ = [
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_MIN_TLS_VERSION",
    "DEFAULT_TIMEOUT",
    "RestClient",
    "RestClientBuilder",
    "RestEndpointSpec",
    "RestRunner",
    "ErrorResponse",
    "JsonErrorResponse",
    "PlainErrorResponse",
    "decode_error_body",
]
