"""Provider bootstrap.

Wires components in dependency order:
    config → logging → hasher → secret diff suppressor → resource registry

The reconciliation framework drives one pass per resource instance at a time;
nothing here adds locking on top of that guarantee.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from azdoprovider.config import load_config
from azdoprovider.errors import ConfigError
from azdoprovider.models.config import ProviderConfig
from azdoprovider.observability.logging import get_logger, setup_logging
from azdoprovider.resources import GITHUB_RESOURCE_TYPE, github_service_endpoint_resource
from azdoprovider.schema import ResourcePlan, ResourceSchema, plan_resource
from azdoprovider.tfsecrets import ResourceData, SecretDiffSuppressor, set_default_suppressor
from azdoprovider.update_check import BcryptHasher, Hasher

if TYPE_CHECKING:
    import structlog


class Provider:
    """Provider root. Owns configuration, the hasher and the resource registry.

    Args:
        config: Pre-built configuration. Loaded from AZDO_* variables when None.
        hasher: Hashing primitive override, mainly for tests.
    """

    def __init__(self, config: ProviderConfig | None = None, hasher: Hasher | None = None) -> None:
        self.config = config
        self._hasher = hasher
        self.suppressor: SecretDiffSuppressor | None = None
        self.resources: dict[str, ResourceSchema] = {}
        self._configured = False
        self._log: structlog.stdlib.BoundLogger | None = None

    def configure(self) -> None:
        """Load configuration and build every component. Safe to call twice."""
        if self._configured:
            return

        if self.config is None:
            self.config = load_config()

        setup_logging(self.config.log.level)
        self._log = get_logger("provider")

        hasher = self._hasher or BcryptHasher(work_factor=self.config.memo.work_factor)
        self.suppressor = SecretDiffSuppressor(hasher)
        set_default_suppressor(self.suppressor)

        self.resources = {
            GITHUB_RESOURCE_TYPE: github_service_endpoint_resource(),
        }

        self._configured = True
        self._log.info(
            "provider configured",
            version=_provider_version(),
            org_service_url=self.config.org_service_url,
            work_factor=self.config.memo.work_factor,
            resources=sorted(self.resources),
        )

    def resource(self, type_name: str) -> ResourceSchema:
        self.configure()
        try:
            return self.resources[type_name]
        except KeyError:
            raise ConfigError(f"Unsupported resource type: {type_name}") from None

    def plan(self, type_name: str, config: Mapping[str, str], state: ResourceData) -> ResourcePlan:
        """Plan one resource instance. Secret memos in *state* may be refreshed."""
        return plan_resource(self.resource(type_name), config, state)


def _provider_version() -> str:
    from azdoprovider import __version__

    return __version__
