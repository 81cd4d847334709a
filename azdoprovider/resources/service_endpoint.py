"""Service endpoint resources.

Every service endpoint shares a base schema (project and endpoint name).
The GitHub endpoint adds a protected personal access token whose changes
are detected through the secret memo rather than by comparing plaintext.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from azdoprovider.errors import ServiceEndpointLookupError
from azdoprovider.models.service_endpoint import EndpointAuthorization, ServiceEndpoint
from azdoprovider.observability.logging import get_logger
from azdoprovider.schema import FieldSchema, FieldType, ResourceSchema, make_protected_schema
from azdoprovider.tfsecrets import ResourceData

_logger = get_logger("resources.service_endpoint")

GITHUB_RESOURCE_TYPE = "azuredevops_serviceendpoint_github"
GITHUB_PAT_KEY = "personal_access_token"
GITHUB_PAT_ENV_VAR = "AZDO_GITHUB_SERVICE_CONNECTION_PAT"


class ServiceEndpointClient(Protocol):
    """Subset of the remote service endpoint API used here."""

    def get_service_endpoints_by_names(
        self, project_id: str, endpoint_names: Sequence[str]
    ) -> list[ServiceEndpoint]: ...


def base_schema(type_name: str) -> ResourceSchema:
    """Return a ResourceSchema holding the attributes every service endpoint has."""
    return ResourceSchema(
        type_name=type_name,
        fields={
            "project_id": FieldSchema(type=FieldType.STRING, required=True, force_new=True),
            "service_endpoint_name": FieldSchema(type=FieldType.STRING, required=True),
        },
    )


def github_service_endpoint_resource() -> ResourceSchema:
    resource = base_schema(GITHUB_RESOURCE_TYPE)
    make_protected_schema(
        resource,
        GITHUB_PAT_KEY,
        GITHUB_PAT_ENV_VAR,
        "The GitHub personal access token which should be used.",
    )
    return resource


def _parse_endpoint_id(raw: str) -> UUID | None:
    # An unset id is expected before the endpoint is created.
    try:
        return UUID(raw)
    except ValueError:
        return None


def expand_service_endpoint(d: ResourceData) -> tuple[ServiceEndpoint, str]:
    """Build the base ServiceEndpoint and project ID from resource data."""
    endpoint = ServiceEndpoint(
        id=_parse_endpoint_id(d.id),
        name=d.get("service_endpoint_name"),
        owner="library",
    )
    return endpoint, d.get("project_id")


def expand_github_service_endpoint(d: ResourceData, personal_access_token: str) -> tuple[ServiceEndpoint, str]:
    """Build a GitHub ServiceEndpoint; the token comes from configuration, not state."""
    endpoint, project_id = expand_service_endpoint(d)
    endpoint.type = "github"
    endpoint.url = "http://github.com"
    endpoint.authorization = EndpointAuthorization(
        scheme="PersonalAccessToken",
        parameters={"accessToken": personal_access_token},
    )
    return endpoint, project_id


def flatten_service_endpoint(d: ResourceData, endpoint: ServiceEndpoint, project_id: str) -> None:
    """Reflect a remote ServiceEndpoint into resource data.

    Authorization parameters are never written back; the memo attribute set
    during planning stays the only trace of the secret.
    """
    if endpoint.id is not None:
        d.set_id(str(endpoint.id))
    d.set("service_endpoint_name", endpoint.name)
    d.set("project_id", project_id)


def get_service_endpoint_by_name(
    client: ServiceEndpointClient,
    project_id: str,
    endpoint_name: str,
) -> ServiceEndpoint:
    """Return the first service endpoint called *endpoint_name* in *project_id*.

    Raises:
        ServiceEndpointLookupError: the client call failed or nothing matched.
    """
    try:
        endpoints = client.get_service_endpoints_by_names(project_id, [endpoint_name])
    except Exception as exc:
        _logger.warning(
            "service_endpoint_lookup_failed",
            project_id=project_id,
            endpoint_name=endpoint_name,
            error=str(exc),
        )
        raise ServiceEndpointLookupError(project_id, endpoint_name, str(exc)) from exc

    if not endpoints:
        raise ServiceEndpointLookupError(project_id, endpoint_name, "no endpoint with that name")
    return endpoints[0]
