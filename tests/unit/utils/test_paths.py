"""Unit tests for path helpers."""

import pytest

from basispoort.sync.core import ParseUrlError
from basispoort.sync.utils import segment


class TestSegment:
    """Test segment()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("abc123", "abc123"),
            ("a/b c", "a%2Fb%20c"),
            (42, "42"),
            ("...", "..."),
            ("a..b", "a..b"),
        ],
    )
    def test_encodes_single_segment(self, value, expected):
        """Test values are percent-encoded as one segment."""
        assert segment(value) == expected

    @pytest.mark.parametrize("value", ["", ".", ".."])
    def test_rejects_dot_and_empty_segments(self, value):
        """Test values that resolution would drop or collapse are rejected."""
        with pytest.raises(ParseUrlError) as exc_info:
            segment(value)

        assert exc_info.value.url == value
