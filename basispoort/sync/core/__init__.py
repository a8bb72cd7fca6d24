"""Core components."""

from .config import BasispoortSettings
from .enums import ApplicationTag, Environment
from .exceptions import (
    BasispoortError,
    BuildError,
    BuildRequestClientError,
    DecodeResponseError,
    EncodePayloadError,
    HttpRequestError,
    HttpResponseError,
    InvalidEnvironmentString,
    OpenIconFileError,
    OpenIdentityCertFileError,
    ParseIdentityCertFileError,
    ParseUrlError,
    ReadIconFileError,
    ReadIdentityCertFileError,
    ReceiveResponseBodyError,
    SerializeSearchPredicateError,
)

__all__ = [
    "BasispoortSettings",
    "ApplicationTag",
    "Environment",
    "BasispoortError",
    "BuildError",
    "BuildRequestClientError",
    "DecodeResponseError",
    "EncodePayloadError",
    "HttpRequestError",
    "HttpResponseError",
    "InvalidEnvironmentString",
    "OpenIconFileError",
    "OpenIdentityCertFileError",
    "ParseIdentityCertFileError",
    "ParseUrlError",
    "ReadIconFileError",
    "ReadIdentityCertFileError",
    "ReceiveResponseBodyError",
    "SerializeSearchPredicateError",
]
