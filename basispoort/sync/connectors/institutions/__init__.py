"""Institutions service ("Instellingen V2") connector."""

from .client import InstitutionsServiceClient
from .endpoints import ENDPOINTS, get_endpoint_spec

__all__ = ["InstitutionsServiceClient", "ENDPOINTS", "get_endpoint_spec"]
