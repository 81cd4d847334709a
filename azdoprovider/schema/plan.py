"""Plan computation: which attributes need a remote update.

This is the consumer side of the diff-suppression hook. Fields declaring a
``diff_suppress`` function are asked whether their apparent change is real;
such hooks may refresh memo attributes in the state as a side effect.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from azdoprovider.errors import ConfigError
from azdoprovider.observability.logging import get_logger, resource_context
from azdoprovider.schema.fields import ResourceSchema
from azdoprovider.tfsecrets import ResourceData

_logger = get_logger("schema.plan")

SENSITIVE_PLACEHOLDER = "(sensitive value)"


@dataclass(frozen=True)
class AttributeDiff:
    """A single attribute that differs from stored state."""

    key: str
    old: str
    new: str
    sensitive: bool = False
    force_new: bool = False

    def render(self) -> str:
        if self.sensitive:
            return f"{self.key}: {SENSITIVE_PLACEHOLDER}"
        return f"{self.key}: {self.old!r} => {self.new!r}"


@dataclass
class ResourcePlan:
    """All attribute diffs for one resource instance."""

    type_name: str
    resource_id: str = ""
    diffs: list[AttributeDiff] = field(default_factory=list)

    @property
    def requires_update(self) -> bool:
        return bool(self.diffs)

    @property
    def force_new(self) -> bool:
        # Replacement only applies to something that already exists.
        return bool(self.resource_id) and any(d.force_new for d in self.diffs)

    def changed_keys(self) -> list[str]:
        return [d.key for d in self.diffs]


def plan_resource(
    resource: ResourceSchema,
    config: Mapping[str, str],
    state: ResourceData,
) -> ResourcePlan:
    """Compare configured values against *state* and return the resulting plan.

    Raises:
        ConfigError: an unknown or computed attribute is configured, or a
            required attribute has no configured or default value.
        HashComputationError: propagated from a secret field's hook.
    """
    for key in config:
        if resource.field_for(key).computed:
            raise ConfigError(f"{resource.type_name}: attribute {key!r} is computed and cannot be set")

    plan = ResourcePlan(type_name=resource.type_name, resource_id=state.id)
    with resource_context(resource.type_name, state.id):
        _plan_fields(resource, config, state, plan)
        _logger.debug("resource_planned", changed=plan.changed_keys())
    return plan


def _plan_fields(
    resource: ResourceSchema,
    config: Mapping[str, str],
    state: ResourceData,
    plan: ResourcePlan,
) -> None:
    for key, schema in resource.fields.items():
        if schema.computed:
            continue

        new = schema.resolve(config.get(key))
        if new is None:
            if schema.required:
                raise ConfigError(f"{resource.type_name}: attribute {key!r} is required")
            continue

        old = state.get(key)
        if schema.diff_suppress is not None:
            if schema.diff_suppress(key, old, new, state):
                continue
        elif old == new:
            continue

        plan.diffs.append(
            AttributeDiff(
                key=key,
                old=old,
                new=new,
                sensitive=schema.sensitive,
                force_new=schema.force_new,
            )
        )
