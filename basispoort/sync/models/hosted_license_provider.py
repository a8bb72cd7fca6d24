"""Hosted license provider ("Hosted Lika") data models.

Field names are English; the Dutch wire names are kept as aliases and used
for serialization. Models are immutable: the ``with_*`` and ``into_*``
helpers return updated copies.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from yarl import URL

from ..core.enums import ApplicationTag
from ..core.exceptions import ParseUrlError
from ..utils.icons import icon_from_file

BasispoortId = int

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


def _parse_url(value: str) -> str:
    try:
        url = URL(value)
    except (ValueError, TypeError) as exc:
        raise ParseUrlError(value, reason=str(exc)) from exc
    if not url.is_absolute() or url.scheme not in ("http", "https"):
        raise ParseUrlError(value, reason="expected an absolute http(s) URL")
    return str(url)


class _ApplicationDetails(BaseModel):
    """Fields and builders shared by methods and products."""

    id: str = Field(..., min_length=1)
    code: str | None = None
    name: str = Field(..., alias="naam")
    icon: str | None = None
    icon_url: str | None = Field(default=None, alias="iconUrl")
    tags: frozenset[ApplicationTag] = frozenset()

    model_config = _MODEL_CONFIG

    def with_code(self, code: str):
        """Return a copy with the provided code."""
        return self.model_copy(update={"code": code})

    def with_icon(self, icon: str):
        """Return a copy with the provided (base64, mime-prefixed) icon."""
        return self.model_copy(update={"icon": icon})

    async def with_icon_from_file(self, path: str | Path):
        """Read the icon from ``path``, then return a copy with that icon."""
        return self.with_icon(await icon_from_file(path))

    def with_icon_url(self, icon_url: str):
        """Return a copy with the provided icon URL."""
        return self.model_copy(update={"icon_url": _parse_url(icon_url)})

    def into_teacher_application(self):
        """Return a copy tagged as teacher application."""
        return self.model_copy(update={"tags": self.tags | {ApplicationTag.TEACHER_APPLICATION}})

    def into_test_application(self):
        """Return a copy tagged as test application."""
        return self.model_copy(update={"tags": self.tags | {ApplicationTag.TEST_APPLICATION}})


class MethodDetails(_ApplicationDetails):
    """A method (top-level hosted application)."""

    url: str | None = None

    @classmethod
    def new(cls, id: str, name: str) -> MethodDetails:
        return cls(id=id, name=name)

    def with_url(self, url: str) -> MethodDetails:
        """Return a copy with the provided launch URL."""
        return self.model_copy(update={"url": _parse_url(url)})


class MethodDetailsList(BaseModel):
    methods: list[MethodDetails] = Field(default_factory=list, alias="methodes")

    model_config = _MODEL_CONFIG


class ProductDetails(_ApplicationDetails):
    """A product below a method. Unlike methods, products require a URL."""

    url: str

    @classmethod
    def new(cls, id: str, name: str, url: str) -> ProductDetails:
        return cls(id=id, name=name, url=_parse_url(url))


class ProductDetailsList(BaseModel):
    products: list[ProductDetails] = Field(default_factory=list, alias="producten")

    model_config = _MODEL_CONFIG


class UserIdList(BaseModel):
    """Basispoort user IDs."""

    users: list[BasispoortId] = Field(default_factory=list, alias="gebruikers")

    model_config = _MODEL_CONFIG


class UserChainId(BaseModel):
    """A user identified by chain ID (ECK ID) within an institution."""

    institution_id: BasispoortId = Field(..., alias="instellingId")
    chain_id: str = Field(..., min_length=1, alias="eckId")

    model_config = _MODEL_CONFIG


class UserChainIdList(BaseModel):
    users: list[UserChainId] = Field(default_factory=list, alias="gebruikers")

    model_config = _MODEL_CONFIG


class BulkRequest(BaseModel):
    """Grant or revoke access to methods and products for many users at once."""

    method_ids: list[str] = Field(default_factory=list, alias="methodes")
    product_ids: list[str] = Field(default_factory=list, alias="producten")
    user_ids: list[BasispoortId] = Field(default_factory=list, alias="gebruikers")
    user_chain_ids: list[UserChainId] = Field(default_factory=list, alias="gebruikerEckIds")

    model_config = _MODEL_CONFIG
