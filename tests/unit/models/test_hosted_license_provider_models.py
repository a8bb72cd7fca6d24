"""Unit tests for hosted license provider models."""

import base64
from pathlib import Path

import pytest
from pydantic import ValidationError

from basispoort.sync.core import ApplicationTag, ParseUrlError
from basispoort.sync.models import (
    BulkRequest,
    MethodDetails,
    MethodDetailsList,
    ProductDetails,
    UserChainId,
    UserChainIdList,
    UserIdList,
)

ASSETS = Path(__file__).resolve().parents[2] / "assets"


class TestMethodDetails:
    """Test MethodDetails builders and serialization."""

    def test_new(self):
        """Test new() sets only ID and name."""
        method = MethodDetails.new("m1", "Rekenen")
        assert method.id == "m1"
        assert method.name == "Rekenen"
        assert method.code is None
        assert method.url is None
        assert method.tags == frozenset()

    def test_builders_return_copies(self):
        """Test builders leave the original untouched."""
        method = MethodDetails.new("m1", "Rekenen")
        updated = method.with_code("REK").with_icon("image/png,AAAA")

        assert updated.code == "REK"
        assert updated.icon == "image/png,AAAA"
        assert method.code is None
        assert method.icon is None

    def test_frozen(self):
        """Test models are immutable."""
        method = MethodDetails.new("m1", "Rekenen")
        with pytest.raises(ValidationError):
            method.name = "Taal"

    def test_with_url(self):
        """Test URLs are validated."""
        method = MethodDetails.new("m1", "Rekenen").with_url("https://example.com/start")
        assert method.url == "https://example.com/start"

    @pytest.mark.parametrize("url", ["not a url", "/relative/path", "ftp://example.com/x"])
    def test_with_url_rejects_invalid(self, url):
        """Test non-absolute or non-http URLs are rejected."""
        with pytest.raises(ParseUrlError):
            MethodDetails.new("m1", "Rekenen").with_url(url)

    def test_with_icon_url(self):
        """Test icon URLs are validated."""
        method = MethodDetails.new("m1", "Rekenen").with_icon_url("https://example.com/icon.png")
        assert method.icon_url == "https://example.com/icon.png"

        with pytest.raises(ParseUrlError):
            method.with_icon_url("icon.png")

    def test_tags(self):
        """Test tag builders accumulate."""
        method = MethodDetails.new("m1", "Rekenen").into_teacher_application()
        assert method.tags == {ApplicationTag.TEACHER_APPLICATION}

        method = method.into_test_application().into_test_application()
        assert method.tags == {
            ApplicationTag.TEACHER_APPLICATION,
            ApplicationTag.TEST_APPLICATION,
        }

    def test_serializes_by_alias(self):
        """Test wire names are used when dumping by alias."""
        method = MethodDetails.new("m1", "Rekenen").with_icon_url("https://example.com/i.png")
        dumped = method.model_dump(by_alias=True, mode="json")

        assert dumped["naam"] == "Rekenen"
        assert dumped["iconUrl"] == "https://example.com/i.png"
        assert "name" not in dumped

    def test_decodes_wire_names(self):
        """Test wire names decode, including tags."""
        method = MethodDetails.model_validate_json(
            '{"id": "m1", "naam": "Rekenen", "url": "https://example.com",'
            ' "tags": ["toetsApplicatie"]}'
        )
        assert method.name == "Rekenen"
        assert method.tags == {ApplicationTag.TEST_APPLICATION}

    def test_empty_id_rejected(self):
        """Test IDs must not be empty."""
        with pytest.raises(ValidationError):
            MethodDetails.new("", "Rekenen")

    @pytest.mark.asyncio
    async def test_with_icon_from_file(self):
        """Test icons can be loaded from file."""
        path = ASSETS / "icon_application.svg"
        method = await MethodDetails.new("m1", "Rekenen").with_icon_from_file(path)

        expected = base64.b64encode(path.read_bytes()).decode("ascii")
        assert method.icon == f"image/svg+xml,{expected}"


class TestProductDetails:
    """Test ProductDetails."""

    def test_new_requires_valid_url(self):
        """Test products require an absolute URL."""
        product = ProductDetails.new("p1", "Groep 3", "https://example.com/p1")
        assert product.url == "https://example.com/p1"

        with pytest.raises(ParseUrlError):
            ProductDetails.new("p1", "Groep 3", "p1")

    def test_builders_keep_type(self):
        """Test shared builders return products."""
        product = ProductDetails.new("p1", "Groep 3", "https://example.com/p1")
        assert isinstance(product.into_teacher_application(), ProductDetails)


class TestListModels:
    """Test list wrapper models."""

    def test_method_list_decodes(self):
        """Test method lists decode from the wire name."""
        methods = MethodDetailsList.model_validate_json(
            '{"methodes": [{"id": "m1", "naam": "Rekenen"}]}'
        )
        assert [m.id for m in methods.methods] == ["m1"]

    def test_method_list_defaults_empty(self):
        """Test missing lists decode as empty."""
        assert MethodDetailsList.model_validate({}).methods == []

    def test_user_id_list(self):
        """Test user ID lists use the wire name."""
        users = UserIdList(users=[1, 2, 3])
        assert users.model_dump(by_alias=True) == {"gebruikers": [1, 2, 3]}

    def test_user_chain_id_list(self):
        """Test chain ID lists use the wire names."""
        user = UserChainId(institution_id=5, chain_id="https://ketenid.nl/x")
        users = UserChainIdList(users=[user])
        assert users.model_dump(by_alias=True) == {
            "gebruikers": [{"instellingId": 5, "eckId": "https://ketenid.nl/x"}]
        }

    def test_bulk_request(self):
        """Test bulk requests use the wire names."""
        request = BulkRequest(method_ids=["m1"], product_ids=["p1"], user_ids=[1])
        assert request.model_dump(by_alias=True) == {
            "methodes": ["m1"],
            "producten": ["p1"],
            "gebruikers": [1],
            "gebruikerEckIds": [],
        }
