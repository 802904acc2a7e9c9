"""A minimal entity-component store keyed by component type."""

from __future__ import annotations

import itertools
from typing import Iterator


class Registry:
    """Holds entities as integer handles and at most one component per type each.

    Operations on an unknown entity or a missing component raise ``KeyError``;
    adding a component type that is already present raises ``ValueError``.
    """

    def __init__(self):
        self._next_handle = itertools.count()
        self._pools: dict[int, dict[type, object]] = {}

    def create(self) -> int:
        """Create an entity and return its handle."""
        handle = next(self._next_handle)
        self._pools[handle] = {}
        return handle

    def destroy(self, entity: int) -> None:
        """Destroy an entity together with its components."""
        self._components(entity)
        del self._pools[entity]

    def valid(self, entity) -> bool:
        """Whether ``entity`` refers to a live entity."""
        return entity is not None and entity in self._pools

    def emplace(self, entity: int, component):
        """Attach ``component``; its type must not already be attached."""
        components = self._components(entity)
        component_type = type(component)
        if component_type in components:
            raise ValueError(f"entity {entity} already has a {component_type.__name__} component")
        components[component_type] = component
        return component

    def replace(self, entity: int, component):
        """Replace the attached component of the same type as ``component``."""
        components = self._components(entity)
        component_type = type(component)
        if component_type not in components:
            raise KeyError(f"entity {entity} has no {component_type.__name__} component")
        components[component_type] = component
        return component

    def get(self, entity: int, component_type: type):
        """Return the component of ``component_type`` attached to ``entity``."""
        components = self._components(entity)
        try:
            return components[component_type]
        except KeyError:
            raise KeyError(
                f"entity {entity} has no {component_type.__name__} component"
            ) from None

    def has(self, entity, component_type: type) -> bool:
        """Whether ``entity`` is live and has a component of ``component_type``."""
        components = self._pools.get(entity) if entity is not None else None
        return components is not None and component_type in components

    def remove(self, entity: int, component_type: type) -> None:
        """Detach the component of ``component_type`` from ``entity``."""
        self.get(entity, component_type)
        del self._pools[entity][component_type]

    def view(self, *args: type) -> Iterator[tuple]:
        """Yield ``(entity, *components)`` for entities having every given type.

        With no types, every entity is yielded as a one-element tuple. Entities
        destroyed during iteration are skipped.
        """
        for handle, components in list(self._pools.items()):
            if handle not in self._pools:
                continue
            if all(component_type in components for component_type in args):
                yield (handle, *(components[component_type] for component_type in args))

    def entities(self) -> list[int]:
        """Handles of all live entities in creation order."""
        return list(self._pools)

    def clear(self) -> None:
        """Destroy every entity."""
        self._pools.clear()

    def __len__(self) -> int:
        return len(self._pools)

    def _components(self, entity) -> dict[type, object]:
        components = self._pools.get(entity) if entity is not None else None
        if components is None:
            raise KeyError(f"invalid entity: {entity!r}")
        return components