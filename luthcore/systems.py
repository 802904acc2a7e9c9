"""Systems that run over a registry each frame, and the collection that drives them."""

from __future__ import annotations

import abc
from typing import Optional, TypeVar

import numpy as np

from luthcore.components import Parent, Transform, WorldTransform
from luthcore.log import get_logger
from luthcore.registry import Registry

S = TypeVar("S", bound="System")


class System(abc.ABC):
    """Work performed on every matching entity of a registry."""

    @abc.abstractmethod
    def update(self, registry: Registry) -> None:
        """Run the system once over ``registry``."""


class TransformSystem(System):
    """Combines local transforms through the parent chain into world transforms."""

    def update(self, registry: Registry) -> None:
        for handle, _, world_transform in registry.view(Transform, WorldTransform):
            world = np.eye(4)
            current = handle
            while registry.valid(current) and registry.has(current, Transform):
                world = registry.get(current, Transform).matrix() @ world
                if not registry.has(current, Parent):
                    break
                parent = registry.get(current, Parent).parent
                current = parent.handle if parent is not None else None
            world_transform.matrix = world


class Systems:
    """An ordered set of systems sharing one registry."""

    def __init__(self, registry: Optional[Registry] = None):
        self.registry = registry
        self._systems: list[System] = []

    def init(self) -> None:
        """Register the engine's built-in systems."""
        get_logger().info("Initializing Systems...")
        self.add_system(TransformSystem())

    def shutdown(self) -> None:
        """Drop every system and release the registry."""
        self._systems.clear()
        self.registry = None

    def add_system(self, system: System) -> None:
        """Append ``system``; systems run in the order they were added."""
        if not isinstance(system, System):
            raise TypeError(f"expected a System, got {type(system).__name__}")
        self._systems.append(system)

    def get_system(self, system_type: type[S]) -> Optional[S]:
        """The first registered system that is an instance of ``system_type``, or None."""
        return next((s for s in self._systems if isinstance(s, system_type)), None)

    def update(self, system_type: Optional[type] = None) -> None:
        """Run one system type, or every system when no type is given.

        Nothing runs while no registry is set.
        """
        if self.registry is None:
            return
        if system_type is None:
            for system in list(self._systems):
                system.update(self.registry)
            return
        system = self.get_system(system_type)
        if system is not None:
            system.update(self.registry)