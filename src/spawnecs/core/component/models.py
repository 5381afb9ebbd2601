"""Component models: registry metadata."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ComponentTypeMeta:
    """Metadata for registered component types."""

    component_type_id: int
    type_name: str
