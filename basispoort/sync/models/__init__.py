"""Data models for Basispoort services.

Architecture:
    This module exports all Pydantic v2 data models used by the service
    connectors. All models are immutable (frozen=True); builders return
    updated copies instead of mutating.

Design Decisions:
    - English field names, Dutch wire names as aliases
    - Serialization always by alias, decoding accepts both
    - Response models ignore unknown fields

Model Categories:
    - Hosted license provider: MethodDetails, ProductDetails, UserIdList,
      UserChainIdList, BulkRequest
    - Institutions: InstitutionOverview, InstitutionDetails, InstitutionGroups,
      InstitutionStudents, InstitutionStaff, SynchronizationPermission,
      InstitutionSearchResult, InstitutionsSearchPredicate
"""

from .hosted_license_provider import (
    BasispoortId,
    BulkRequest,
    MethodDetails,
    MethodDetailsList,
    ProductDetails,
    ProductDetailsList,
    UserChainId,
    UserChainIdList,
    UserIdList,
)
from .institutions import (
    Group,
    InstitutionDetails,
    InstitutionGroups,
    InstitutionOverview,
    InstitutionSearchResult,
    InstitutionsSearchPredicate,
    InstitutionStaff,
    InstitutionStudents,
    ResultMetadata,
    StaffMember,
    Student,
    SynchronizationPermission,
)

__all__ = [
    "BasispoortId",
    "BulkRequest",
    "MethodDetails",
    "MethodDetailsList",
    "ProductDetails",
    "ProductDetailsList",
    "UserChainId",
    "UserChainIdList",
    "UserIdList",
    "Group",
    "InstitutionDetails",
    "InstitutionGroups",
    "InstitutionOverview",
    "InstitutionSearchResult",
    "InstitutionsSearchPredicate",
    "InstitutionStaff",
    "InstitutionStudents",
    "ResultMetadata",
    "StaffMember",
    "Student",
    "SynchronizationPermission",
]
