"""Service endpoint data structures exchanged with the remote API."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID


@dataclass
class EndpointAuthorization:
    """Credentials attached to a service endpoint."""

    scheme: str
    parameters: dict[str, str] = field(default_factory=dict)


@dataclass
class ServiceEndpoint:
    """A service connection as the remote API models it.

    ``id`` is None until the endpoint has been created remotely. Endpoints
    returned by the API never carry secret authorization parameters.
    """

    name: str
    id: UUID | None = None
    owner: str = "library"
    type: str = ""
    url: str = ""
    authorization: EndpointAuthorization | None = None
