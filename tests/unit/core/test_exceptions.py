"""Unit tests for the exception hierarchy."""

from pathlib import Path

import pytest
from yarl import URL

from basispoort.sync.core.exceptions import (
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
from basispoort.sync.runtime.rest import JsonErrorResponse, PlainErrorResponse

URL_ = URL("https://test-rest.basispoort.nl/methode")


class TestExceptionHierarchy:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidEnvironmentString("x"),
            OpenIdentityCertFileError("a.pem"),
            ReadIdentityCertFileError("a.pem"),
            ParseIdentityCertFileError("a.pem"),
            BuildRequestClientError(),
            ParseUrlError("x"),
            EncodePayloadError(URL_),
            HttpRequestError("GET", URL_),
            ReceiveResponseBodyError(URL_),
            HttpResponseError(URL_, 500, PlainErrorResponse("")),
            DecodeResponseError(URL_),
            SerializeSearchPredicateError("empty"),
            OpenIconFileError("icon.svg"),
            ReadIconFileError("icon.svg"),
        ],
    )
    def test_all_derive_from_base(self, error):
        """Test every error is a BasispoortError."""
        assert isinstance(error, BasispoortError)

    @pytest.mark.parametrize(
        "error_cls",
        [OpenIdentityCertFileError, ReadIdentityCertFileError, ParseIdentityCertFileError],
    )
    def test_identity_errors_are_build_errors(self, error_cls):
        """Test identity file errors are build errors carrying the path."""
        error = error_cls(Path("/tmp/identity.pem"))
        assert isinstance(error, BuildError)
        assert error.path == "/tmp/identity.pem"
        assert "/tmp/identity.pem" in str(error)

    def test_build_request_client_error(self):
        """Test the default message."""
        assert str(BuildRequestClientError()) == "failed building request client"


class TestExceptionContext:
    """Test errors carry their diagnostic context."""

    def test_parse_identity_reason(self):
        """Test the parse reason is appended to the message."""
        error = ParseIdentityCertFileError("a.pem", reason="no PEM certificate found")
        assert error.reason == "no PEM certificate found"
        assert str(error).endswith(": no PEM certificate found")

    def test_http_request_error(self):
        """Test method and URL are kept."""
        error = HttpRequestError("DELETE", URL_)
        assert error.method == "DELETE"
        assert error.url == URL_
        assert str(error) == f"HTTP request error: DELETE {URL_}"

    def test_http_response_error(self):
        """Test status and error body are kept."""
        body = JsonErrorResponse({"error": "not found"})
        error = HttpResponseError(URL_, 404, body)
        assert error.status == 404
        assert error.error_response is body
        assert '{"error": "not found"}' in str(error)

    def test_decode_response_error(self):
        """Test the decode reason is kept."""
        error = DecodeResponseError(URL_, reason="expected object")
        assert error.url == URL_
        assert error.reason == "expected object"

    def test_icon_errors_keep_path(self):
        """Test icon errors keep the path as Path."""
        assert OpenIconFileError("icon.svg").path == Path("icon.svg")
        assert ReadIconFileError(Path("icon.png")).path == Path("icon.png")
