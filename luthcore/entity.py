"""A handle to an entity living in a scene."""

from __future__ import annotations

import copy

from luthcore.components import Children, Parent, Tag
from luthcore.log import get_logger


class Entity:
    """A lightweight reference to an entity in a scene; the null entity has no handle."""

    def __init__(self, handle=None, scene=None):
        self.handle = handle
        self.scene = scene
        self.active = True
        self.visible = True

    @property
    def _registry(self):
        if self.scene is None:
            raise ValueError("the null entity has no components")
        return self.scene.registry

    def add_component(self, component):
        """Attach a component whose type is not yet attached, and return it."""
        return self._registry.emplace(self.handle, component)

    def add_or_replace_component(self, component):
        """Attach ``component``, replacing any of the same type, and return it."""
        if not self:
            raise ValueError("invalid entity")
        registry = self._registry
        if registry.has(self.handle, type(component)):
            registry.replace(self.handle, component)
        else:
            registry.emplace(self.handle, component)
        return registry.get(self.handle, type(component))

    def get_component(self, component_type):
        return self._registry.get(self.handle, component_type)

    def remove_component(self, component_type) -> None:
        self._registry.remove(self.handle, component_type)

    def has_component(self, component_type) -> bool:
        return self.scene is not None and self.scene.registry.has(self.handle, component_type)

    def copy_component_if_exists(self, component_type, dest: "Entity") -> None:
        """Give ``dest`` an independent copy of this entity's component, if any."""
        if self.has_component(component_type):
            dest.add_or_replace_component(copy.deepcopy(self.get_component(component_type)))

    def is_valid(self) -> bool:
        return self.scene is not None and self.scene.registry.valid(self.handle)

    @property
    def name(self) -> str:
        if self.has_component(Tag):
            return self.get_component(Tag).tag
        return "Unnamed Entity"

    @name.setter
    def name(self, value: str) -> None:
        self.get_component(Tag).tag = value

    @property
    def parent(self) -> "Entity":
        """The parent entity, or the null entity."""
        if self.has_component(Parent):
            parent = self.get_component(Parent).parent
            if parent is not None:
                return parent
        return Entity()

    @property
    def children(self) -> list["Entity"]:
        """A copy of the list of child entities."""
        if self.has_component(Children):
            return list(self.get_component(Children).children)
        return []

    def set_parent(self, parent) -> None:
        """Move this entity below ``parent``; invalid requests are logged and ignored."""
        if not parent or parent == self or self.is_ancestor_of(parent):
            get_logger().warning("Invalid parenting operation")
            return

        if self.has_component(Parent):
            old_parent = self.get_component(Parent).parent
            if old_parent and old_parent.has_component(Children):
                siblings = old_parent.get_component(Children).children
                siblings[:] = [child for child in siblings if child != self]

        if parent.has_component(Children):
            children = parent.get_component(Children)
        else:
            children = parent.add_component(Children())
        children.children.append(self)

        self.add_or_replace_component(Parent(parent))
        get_logger().info("Reparented %s to %s", self.name, parent.name)

    def remove_parent(self) -> None:
        """Request parenting to the null entity, which is rejected like any invalid parent."""
        self.set_parent(Entity())

    def has_parent(self) -> bool:
        return bool(self.parent)

    def is_descendant_of(self, potential_ancestor: "Entity") -> bool:
        current = self
        while current.has_parent():
            current = current.parent
            if current == potential_ancestor:
                return True
        return False

    def is_ancestor_of(self, potential_descendant: "Entity") -> bool:
        if not self.is_valid() or not potential_descendant.is_valid():
            return False
        current = potential_descendant
        while current.has_parent():
            current = current.parent
            if current == self:
                return True
        return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.handle == other.handle and self.scene is other.scene

    def __hash__(self) -> int:
        return hash((self.handle, id(self.scene)))

    def __bool__(self) -> bool:
        return self.handle is not None and self.scene is not None

    def __copy__(self) -> "Entity":
        return Entity(self.handle, self.scene)

    def __deepcopy__(self, memo) -> "Entity":
        return Entity(self.handle, self.scene)

    def __repr__(self) -> str:
        return f"Entity({self.handle!r})"