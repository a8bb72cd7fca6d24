"""Hosted license provider ("Hosted Lika") connector."""

from .client import HostedLicenseProviderClient
from .endpoints import ENDPOINTS, get_endpoint_spec

__all__ = ["HostedLicenseProviderClient", "ENDPOINTS", "get_endpoint_spec"]
