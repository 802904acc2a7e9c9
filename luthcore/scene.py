"""A scene: a registry of entities with a parent/child hierarchy."""

from __future__ import annotations

import re
from typing import Iterator

from luthcore.components import (
    ID,
    Animation,
    Camera,
    Children,
    DirectionalLight,
    MeshRenderer,
    Parent,
    PointLight,
    Tag,
    Transform,
    WorldTransform,
)
from luthcore.entity import Entity
from luthcore.log import TRACE, get_logger
from luthcore.registry import Registry

_NUMBERED_NAME = re.compile(r"(.*?)\s\((\d+)\)", re.ASCII)

_COPIED_COMPONENTS = (
    Transform,
    Camera,
    MeshRenderer,
    Animation,
    DirectionalLight,
    PointLight,
)


class Scene:
    """Owns a registry and creates, destroys and duplicates entities."""

    def __init__(self):
        self.registry = Registry()
        get_logger().info("Created new scene")

    def create_entity(self, name: str = "Entity") -> Entity:
        """Create an entity with an ID, a tag and identity transforms."""
        entity = Entity(self.registry.create(), self)
        entity.add_component(ID())
        entity.add_component(Tag(name))
        entity.add_component(Transform())
        entity.add_component(WorldTransform())
        get_logger().log(TRACE, "Created entity: %s", name)
        return entity

    def destroy_entity(self, entity: Entity) -> None:
        """Destroy an entity and, first, all of its descendants."""
        if not entity.is_valid():
            return

        for child in entity.children:
            self.destroy_entity(child)

        if entity.has_component(Parent):
            parent = entity.get_component(Parent).parent
            if parent is not None and parent.is_valid() and parent.has_component(Children):
                siblings = parent.get_component(Children).children
                siblings[:] = [sibling for sibling in siblings if sibling != entity]

        name = entity.name
        self.registry.destroy(entity.handle)
        get_logger().log(TRACE, "Destroyed entity: %s", name)

    def duplicate_entity(self, original: Entity, skip_parent_addition: bool = False) -> Entity:
        """Copy an entity and its whole subtree under a new unique name.

        The copy joins the original's parent unless ``skip_parent_addition``.
        Returns the null entity when ``original`` is not valid.
        """
        if not original.is_valid():
            return Entity()

        duplicate = self.create_entity(self._generate_unique_name(original))
        for component_type in _COPIED_COMPONENTS:
            original.copy_component_if_exists(component_type, duplicate)

        if not skip_parent_addition and original.has_component(Parent):
            parent = original.get_component(Parent).parent
            if parent is not None and parent.is_valid():
                if parent.has_component(Children):
                    parent.get_component(Children).children.append(duplicate)
                else:
                    parent.add_component(Children()).children.append(duplicate)
                duplicate.add_component(Parent(parent))

        has_children = original.has_component(Children)
        if has_children:
            duplicate_children = duplicate.add_component(Children()).children
            for child in original.children:
                duplicated_child = self.duplicate_entity(child, True)
                duplicated_child.add_or_replace_component(Parent(duplicate))
                duplicate_children.append(duplicated_child)

        get_logger().log(
            TRACE,
            "Duplicated %s '%s'",
            "hierarchy" if has_children else "entity",
            original.name,
        )
        return duplicate

    def each_entity(self) -> Iterator[Entity]:
        """Yield every entity in the scene."""
        for handle in self.registry.entities():
            yield Entity(handle, self)

    def entities_with(self, *args: type) -> Iterator[Entity]:
        """Yield entities having every one of the given component types."""
        for handle, *_ in self.registry.view(*args):
            yield Entity(handle, self)

    def _generate_unique_name(self, entity: Entity) -> str:
        if not entity.is_valid():
            return ""

        parent = entity.parent
        siblings = parent.children if parent.is_valid() else []

        name = entity.name
        base = name
        numbers = [0]
        match = _NUMBERED_NAME.fullmatch(name)
        if match:
            base = match.group(1)
            numbers[0] = int(match.group(2))

        for sibling in siblings:
            if sibling == entity:
                continue
            sibling_name = sibling.name
            if sibling_name == base:
                numbers.append(0)
                continue
            sibling_match = _NUMBERED_NAME.fullmatch(sibling_name)
            if sibling_match and sibling_match.group(1) == base:
                numbers.append(int(sibling_match.group(2)))

        return f"{base} ({max(numbers) + 1})"