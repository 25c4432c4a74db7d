"""Host instance snapshots produced from a parsed stylesheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rsmlpy.values import value_to_data


class SnapshotError(ValueError):
    """Raised when a stylesheet's adjacent metadata cannot be read."""


@dataclass(frozen=True, slots=True)
class InstanceRef:
    """Reference to another snapshot by its `snapshot_id`."""

    id: str


@dataclass(slots=True)
class InstanceSnapshot:
    name: str
    class_name: str
    properties: dict[str, Any] = field(default_factory=dict)
    children: list[InstanceSnapshot] = field(default_factory=list)
    snapshot_id: str | None = None
    relevant_paths: list[Path] = field(default_factory=list)

    def find_child(self, name: str) -> InstanceSnapshot | None:
        return next((child for child in self.children if child.name == name), None)

    def to_data(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "class_name": self.class_name,
            "properties": {key: _property_to_data(value) for key, value in sorted(self.properties.items())},
            "children": [child.to_data() for child in self.children],
        }
        if self.snapshot_id is not None:
            data["snapshot_id"] = self.snapshot_id
        return data


def _property_to_data(value: Any) -> Any:
    match value:
        case InstanceRef(ref):
            return {"type": "Ref", "id": ref}
        case dict():
            return {key: _property_to_data(item) for key, item in sorted(value.items())}
        case list():
            return [_property_to_data(item) for item in value]
        case int() if not isinstance(value, bool):
            return value
        case None:
            return None
        case _:
            return value_to_data(value)
