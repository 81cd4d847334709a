"""Exception hierarchy for the provider.

Core modules only raise; the reconciliation framework decides how to
surface the message to the user.
"""

from __future__ import annotations


class ProviderError(Exception):
    """Base class for every provider error."""


class HashComputationError(ProviderError):
    """Raised when the one-way hashing primitive fails to produce a memo.

    The message never includes the secret itself.
    """

    def __init__(self, reason: str, cause: Exception | None = None) -> None:
        super().__init__(f"Failed to compute secret memo: {reason}")
        self.reason = reason
        self.cause = cause


class ServiceEndpointLookupError(ProviderError):
    """Raised when a service endpoint cannot be resolved by name."""

    def __init__(self, project_id: str, endpoint_name: str, detail: str) -> None:
        super().__init__(
            f"Error looking up service endpoint given name ({endpoint_name}) "
            f"and project ID ({project_id}): {detail}"
        )
        self.project_id = project_id
        self.endpoint_name = endpoint_name


class ConfigError(ProviderError, ValueError):
    """Raised when environment configuration is invalid."""
