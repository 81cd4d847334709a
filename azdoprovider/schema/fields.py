"""Resource field schemas and protected secret fields.

A protected field is a required, sensitive string whose apparent diffs are
routed through the secret diff-suppression hook. Alongside it the resource
gets a computed memo field (``<key>_hash``) holding the secret's one-way hash.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum

from azdoprovider.errors import ConfigError
from azdoprovider.tfsecrets import ResourceStateAccessor, diff_suppress_secret_changed, memo_key_for

DiffSuppressFunc = Callable[[str, str, str, ResourceStateAccessor], bool]


class FieldType(StrEnum):
    """Attribute value types."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"


@dataclass
class FieldSchema:
    """Declaration of a single resource attribute."""

    type: FieldType = FieldType.STRING
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    force_new: bool = False
    default: str | None = None
    env_default: str | None = None  # name of an environment variable
    description: str = ""
    diff_suppress: DiffSuppressFunc | None = None

    def resolve(self, configured: str | None) -> str | None:
        """Return the configured value, falling back to the env default then the default."""
        if configured is not None:
            return configured
        if self.env_default:
            env_value = os.environ.get(self.env_default)
            if env_value is not None:
                return env_value
        return self.default


@dataclass
class ResourceSchema:
    """A resource type and its attribute declarations."""

    type_name: str
    fields: dict[str, FieldSchema] = field(default_factory=dict)

    def field_for(self, key: str) -> FieldSchema:
        try:
            return self.fields[key]
        except KeyError:
            raise ConfigError(f"{self.type_name}: unknown attribute {key!r}") from None


def generate_secret_memo_schema(key: str) -> tuple[str, FieldSchema]:
    """Return the memo attribute name and schema paired with secret *key*."""
    return memo_key_for(key), FieldSchema(
        type=FieldType.STRING,
        computed=True,
        sensitive=True,
        description=f"A bcrypt hash of the attribute '{key}'",
    )


def make_protected_schema(resource: ResourceSchema, key: str, env_var: str, description: str) -> None:
    """Add a sensitive, diff-suppressed secret field and its memo field to *resource*."""
    resource.fields[key] = FieldSchema(
        type=FieldType.STRING,
        required=True,
        sensitive=True,
        env_default=env_var,
        description=description,
        diff_suppress=diff_suppress_secret_changed,
    )
    memo_key, memo_schema = generate_secret_memo_schema(key)
    resource.fields[memo_key] = memo_schema


def make_unprotected_schema(resource: ResourceSchema, key: str, env_var: str, description: str) -> None:
    """Add a plain required string field with an environment default to *resource*."""
    resource.fields[key] = FieldSchema(
        type=FieldType.STRING,
        required=True,
        env_default=env_var,
        description=description,
    )
