"""Institutions service ("Instellingen V2") data models.

Response models ignore fields they do not know, so additions on the server
side do not break decoding. Dutch wire names are kept as aliases.
"""

from __future__ import annotations

from datetime import datetime
from urllib.parse import quote, urlencode

from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import SerializeSearchPredicateError

BasispoortId = int

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class ResultMetadata(BaseModel):
    mutation_timestamp: datetime | None = Field(default=None, alias="mutationTimestamp")
    generation_timestamp: datetime | None = Field(default=None, alias="generationTimestamp")

    model_config = _MODEL_CONFIG


class InstitutionOverview(BaseModel):
    """Summary of an institution."""

    result_metadata: ResultMetadata | None = Field(default=None, alias="metaResult")
    id: BasispoortId
    name: str | None = Field(default=None, alias="naam")
    brin_code: str | None = Field(default=None, alias="brincode")
    branch_code: str | None = Field(default=None, alias="dependancecode")

    model_config = _MODEL_CONFIG


class InstitutionDetails(BaseModel):
    """Institution details, including address and contact information."""

    result_metadata: ResultMetadata | None = Field(default=None, alias="metaResult")
    id: BasispoortId | None = None
    name: str | None = Field(default=None, alias="naam")
    brin_code: str | None = Field(default=None, alias="brincode")
    branch_code: str | None = Field(default=None, alias="dependancecode")
    street: str | None = Field(default=None, alias="straat")
    house_number: str | None = Field(default=None, alias="huisnummer")
    postal_code: str | None = Field(default=None, alias="postcode")
    city: str | None = Field(default=None, alias="plaats")
    phone_number: str | None = Field(default=None, alias="telefoonnummer")
    email: str | None = None
    website: str | None = None

    model_config = _MODEL_CONFIG


class Group(BaseModel):
    id: str
    name: str | None = Field(default=None, alias="naam")
    year_group: str | None = Field(default=None, alias="jaargroep")

    model_config = _MODEL_CONFIG


class InstitutionGroups(BaseModel):
    result_metadata: ResultMetadata | None = Field(default=None, alias="metaResult")
    groups: list[Group] = Field(default_factory=list, alias="groepen")

    model_config = _MODEL_CONFIG


class Student(BaseModel):
    id: BasispoortId
    chain_id: str | None = Field(default=None, alias="eckId")
    first_name: str | None = Field(default=None, alias="voornaam")
    infix: str | None = Field(default=None, alias="tussenvoegsel")
    last_name: str | None = Field(default=None, alias="achternaam")
    group_ids: list[str] = Field(default_factory=list, alias="groepen")

    model_config = _MODEL_CONFIG


class InstitutionStudents(BaseModel):
    result_metadata: ResultMetadata | None = Field(default=None, alias="metaResult")
    students: list[Student] = Field(default_factory=list, alias="leerlingen")

    model_config = _MODEL_CONFIG


class StaffMember(BaseModel):
    id: BasispoortId
    chain_id: str | None = Field(default=None, alias="eckId")
    first_name: str | None = Field(default=None, alias="voornaam")
    infix: str | None = Field(default=None, alias="tussenvoegsel")
    last_name: str | None = Field(default=None, alias="achternaam")
    email: str | None = None
    group_ids: list[str] = Field(default_factory=list, alias="groepen")

    model_config = _MODEL_CONFIG


class InstitutionStaff(BaseModel):
    result_metadata: ResultMetadata | None = Field(default=None, alias="metaResult")
    staff: list[StaffMember] = Field(default_factory=list, alias="staf")

    model_config = _MODEL_CONFIG


class SynchronizationPermission(BaseModel):
    """Whether the publisher may synchronize this institution's data.

    Unknown fields are kept, as the permission payload varies per status.
    """

    institution_id: BasispoortId | None = Field(default=None, alias="instellingId")
    status: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")


class InstitutionSearchResult(BaseModel):
    id: BasispoortId
    name: str | None = Field(default=None, alias="naam")
    brin_code: str | None = Field(default=None, alias="brincode")
    branch_code: str | None = Field(default=None, alias="dependancecode")
    city: str | None = Field(default=None, alias="plaats")

    model_config = _MODEL_CONFIG


class InstitutionsSearchPredicate(BaseModel):
    """Search predicate for the NAW ("name, address, city") search.

    Example:
        >>> InstitutionsSearchPredicate().with_brin_code("00AA").to_query()
        'brincode=00AA'
    """

    brin_code: str | None = Field(default=None, alias="brincode")
    branch_code: str | None = Field(default=None, alias="dependancecode")
    name: str | None = Field(default=None, alias="naam")
    postal_code: str | None = Field(default=None, alias="postcode")
    city: str | None = Field(default=None, alias="plaats")

    model_config = _MODEL_CONFIG

    def with_brin_code(self, brin_code: str) -> InstitutionsSearchPredicate:
        return self.model_copy(update={"brin_code": brin_code})

    def with_branch_code(self, branch_code: str) -> InstitutionsSearchPredicate:
        return self.model_copy(update={"branch_code": branch_code})

    def with_name(self, name: str) -> InstitutionsSearchPredicate:
        return self.model_copy(update={"name": name})

    def with_postal_code(self, postal_code: str) -> InstitutionsSearchPredicate:
        return self.model_copy(update={"postal_code": postal_code})

    def with_city(self, city: str) -> InstitutionsSearchPredicate:
        return self.model_copy(update={"city": city})

    def to_query(self) -> str:
        """Encode the set criteria as a query string.

        Raises:
            SerializeSearchPredicateError: If no criterion is set.
        """
        criteria = self.model_dump(by_alias=True, exclude_none=True)
        if not criteria:
            raise SerializeSearchPredicateError("institution search predicate has no criteria")
        return urlencode(criteria, quote_via=quote)
