"""Resource state accessor.

ResourceStateAccessor -- Protocol over one resource instance's attribute bag.
ResourceData          -- In-memory implementation used by the provider.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class ResourceStateAccessor(Protocol):
    """Key-value view of a single resource's stored attributes."""

    def get(self, key: str) -> str:
        """Return the stored value for *key*, or ``""`` when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*."""
        ...


@dataclass
class ResourceData:
    """Attribute bag for one resource instance.

    ``id`` is empty until the resource has been created remotely.
    """

    id: str = ""
    attributes: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str:
        value = self.attributes.get(key)
        return "" if value is None else value

    def set(self, key: str, value: str) -> None:
        self.attributes[key] = value

    def has(self, key: str) -> bool:
        return key in self.attributes

    def set_id(self, resource_id: str) -> None:
        self.id = resource_id
