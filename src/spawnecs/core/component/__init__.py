"""Component functionality: registry metadata and the @component decorator."""

from spawnecs.core.component.core import ComponentRegistry, component, get_registry
from spawnecs.core.component.models import ComponentTypeMeta

__all__ = [
    "ComponentTypeMeta",
    "component",
    "get_registry",
    "ComponentRegistry",
]
