"""Core data structures for the provider."""

from azdoprovider.models.config import LogConfig, MemoConfig, ProviderConfig
from azdoprovider.models.service_endpoint import ServiceEndpoint

__all__ = [
    "LogConfig",
    "MemoConfig",
    "ProviderConfig",
    "ServiceEndpoint",
]
