"""Resource definitions exposed by the provider."""

from azdoprovider.resources.service_endpoint import (
    GITHUB_RESOURCE_TYPE,
    ServiceEndpointClient,
    base_schema,
    expand_github_service_endpoint,
    expand_service_endpoint,
    flatten_service_endpoint,
    get_service_endpoint_by_name,
    github_service_endpoint_resource,
)

__all__ = [
    "GITHUB_RESOURCE_TYPE",
    "ServiceEndpointClient",
    "base_schema",
    "expand_github_service_endpoint",
    "expand_service_endpoint",
    "flatten_service_endpoint",
    "get_service_endpoint_by_name",
    "github_service_endpoint_resource",
]
