"""Per-service connectors built on the shared REST client."""

from .hosted_license_provider import HostedLicenseProviderClient
from .institutions import InstitutionsServiceClient

__all__ = ["HostedLicenseProviderClient", "InstitutionsServiceClient"]
