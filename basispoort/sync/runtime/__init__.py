"""Runtime components: the shared REST transport."""

from .rest import RestClient, RestClientBuilder, RestEndpointSpec, RestRunner

__all__ = ["RestClient", "RestClientBuilder", "RestEndpointSpec", "RestRunner"]
