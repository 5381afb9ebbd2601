"""Component registry and decorator.

Usage:
    @component
    @dataclass(slots=True)
    class Name:
        value: str

    # Pydantic models work too:
    @component
    class UserData(BaseModel):
        ...
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from dataclasses import is_dataclass
from typing import overload

from spawnecs.core.component.models import ComponentTypeMeta


def _stable_component_type_id(cls: type) -> int:
    """Generate deterministic ID from fully qualified class name.

    Args:
        cls: Component class to generate ID for.

    Returns:
        Deterministic integer ID derived from class name hash.
    """
    fqn = f"{cls.__module__}.{cls.__qualname__}"
    return int(hashlib.sha256(fqn.encode()).hexdigest()[:16], 16)


class ComponentRegistry:
    """Process-local registry mapping component types to deterministic type IDs."""

    def __init__(self) -> None:
        self._by_type: dict[type, ComponentTypeMeta] = {}
        self._by_type_id: dict[int, type] = {}

    def register(self, cls: type) -> ComponentTypeMeta:
        """Register a component type and return its metadata.

        Args:
            cls: Component class to register.

        Returns:
            Component metadata including ID and type name.

        Raises:
            RuntimeError: If component ID collides with another registered type.
        """
        if cls in self._by_type:
            return self._by_type[cls]

        component_type_id = _stable_component_type_id(cls)

        if component_type_id in self._by_type_id:
            existing = self._by_type_id[component_type_id]
            raise RuntimeError(
                f"Component ID collision: {cls} and {existing} hash to {component_type_id}"
            )

        meta = ComponentTypeMeta(
            component_type_id=component_type_id,
            type_name=f"{cls.__module__}.{cls.__qualname__}",
        )
        self._by_type[cls] = meta
        self._by_type_id[component_type_id] = cls
        return meta

    def get_meta(self, cls: type) -> ComponentTypeMeta | None:
        """Get metadata for a registered component type."""
        return self._by_type.get(cls)

    def get_type(self, component_type_id: int) -> type | None:
        """Get component type by its type ID."""
        return self._by_type_id.get(component_type_id)

    def is_registered(self, cls: type) -> bool:
        """Check if a type is registered as a component."""
        return cls in self._by_type


# Module-level registry instance
_registry = ComponentRegistry()


def get_registry() -> ComponentRegistry:
    """Access the global component registry."""
    return _registry


def _is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic."""
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


@overload
def component(cls: type) -> type: ...


@overload
def component(cls: None = None) -> Callable[[type], type]: ...


def component(cls: type | None = None) -> type | Callable[[type], type]:
    """Register a dataclass or Pydantic model as a component type.

    Supports both forms:
        @component                    # bare decorator
        @component()                  # parenthesized

    Args:
        cls: The class to register, or None if called with parentheses.

    Returns:
        Decorated class or decorator function.

    Raises:
        TypeError: If class is neither a dataclass nor Pydantic model.

    Note:
        Apply @component AFTER @dataclass:

        >>> @component
        ... @dataclass(slots=True)
        ... class MyComponent:
        ...     value: int
    """

    def decorator(c: type) -> type:
        if not (is_dataclass(c) or _is_pydantic(c)):
            raise TypeError(
                f"Component {c.__name__} must be a dataclass or Pydantic model. "
                f"Did you forget @dataclass decorator?"
            )
        meta = _registry.register(c)
        c.__component_meta__ = meta  # type: ignore
        return c

    if cls is None:
        return decorator
    return decorator(cls)
