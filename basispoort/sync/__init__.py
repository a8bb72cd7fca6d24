"""Basispoort Sync - Async API client for the Basispoort educational SSO service."""

from .connectors import HostedLicenseProviderClient, InstitutionsServiceClient
from .core import (
    ApplicationTag,
    BasispoortError,
    BasispoortSettings,
    BuildError,
    BuildRequestClientError,
    DecodeResponseError,
    EncodePayloadError,
    Environment,
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
from .models import (
    BasispoortId,
    BulkRequest,
    InstitutionDetails,
    InstitutionGroups,
    InstitutionOverview,
    InstitutionSearchResult,
    InstitutionsSearchPredicate,
    InstitutionStaff,
    InstitutionStudents,
    MethodDetails,
    MethodDetailsList,
    ProductDetails,
    ProductDetailsList,
    SynchronizationPermission,
    UserChainId,
    UserChainIdList,
    UserIdList,
)
from .runtime.rest import (
    ErrorResponse,
    JsonErrorResponse,
    PlainErrorResponse,
    RestClient,
    RestClientBuilder,
)

__version__ = "0.5.1"

__all__ = [
    # Transport
    "RestClient",
    "RestClientBuilder",
    "Environment",
    "BasispoortSettings",
    "ErrorResponse",
    "JsonErrorResponse",
    "PlainErrorResponse",
    # Services
    "HostedLicenseProviderClient",
    "InstitutionsServiceClient",
    # Models
    "ApplicationTag",
    "BasispoortId",
    "BulkRequest",
    "MethodDetails",
    "MethodDetailsList",
    "ProductDetails",
    "ProductDetailsList",
    "UserChainId",
    "UserChainIdList",
    "UserIdList",
    "InstitutionDetails",
    "InstitutionGroups",
    "InstitutionOverview",
    "InstitutionSearchResult",
    "InstitutionsSearchPredicate",
    "InstitutionStaff",
    "InstitutionStudents",
    "SynchronizationPermission",
    # Exceptions
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
