import numpy as np
import pytest

from luthcore.components import Children, Parent, Tag, Transform
from luthcore.entity import Entity
from luthcore.scene import Scene


@pytest.fixture
def scene():
    return Scene()


def test_null_entity_is_false_and_invalid():
    null = Entity()
    assert not null
    assert not null.is_valid()
    assert not null.has_component(Tag)


def test_null_entity_get_raises():
    with pytest.raises(ValueError):
        Entity().get_component(Tag)


def test_add_get_remove(scene):
    e = scene.create_entity("A")
    e.remove_component(Transform)
    t = e.add_component(Transform())
    assert e.get_component(Transform) is t
    e.remove_component(Transform)
    assert not e.has_component(Transform)


def test_add_existing_raises(scene):
    e = scene.create_entity("A")
    with pytest.raises(ValueError):
        e.add_component(Tag("B"))


def test_get_missing_raises(scene):
    e = scene.create_entity("A")
    with pytest.raises(KeyError):
        e.get_component(Children)


def test_add_or_replace(scene):
    e = scene.create_entity("A")
    new = e.add_or_replace_component(Tag("B"))
    assert e.get_component(Tag) is new
    assert e.name == "B"
    added = e.add_or_replace_component(Children())
    assert e.get_component(Children) is added


def test_copy_component_is_independent(scene):
    a = scene.create_entity("A")
    b = scene.create_entity("B")
    a.get_component(Transform).position[:] = [1.0, 2.0, 3.0]
    a.copy_component_if_exists(Transform, b)
    a.get_component(Transform).position[0] = 9.0
    assert np.allclose(b.get_component(Transform).position, [1.0, 2.0, 3.0])


def test_copy_missing_component_does_nothing(scene):
    a = scene.create_entity("A")
    b = scene.create_entity("B")
    a.copy_component_if_exists(Children, b)
    assert not b.has_component(Children)


def test_name_without_tag(scene):
    e = scene.create_entity("A")
    e.remove_component(Tag)
    assert e.name == "Unnamed Entity"


def test_set_parent_links_both_ways(scene):
    parent = scene.create_entity("P")
    child = scene.create_entity("C")
    child.set_parent(parent)
    assert child.parent == parent
    assert parent.children == [child]
    assert child.has_parent()
    assert child.is_descendant_of(parent)
    assert parent.is_ancestor_of(child)
    assert not child.is_ancestor_of(parent)


def test_reparent_removes_from_old_parent(scene):
    a = scene.create_entity("A")
    b = scene.create_entity("B")
    child = scene.create_entity("C")
    child.set_parent(a)
    child.set_parent(b)
    assert a.children == []
    assert b.children == [child]
    assert child.get_component(Parent).parent == b


def test_parent_to_self_is_ignored(scene):
    e = scene.create_entity("A")
    e.set_parent(e)
    assert not e.has_parent()


def test_parent_to_descendant_is_ignored(scene):
    root = scene.create_entity("R")
    mid = scene.create_entity("M")
    leaf = scene.create_entity("L")
    mid.set_parent(root)
    leaf.set_parent(mid)
    root.set_parent(leaf)
    assert not root.has_parent()
    assert leaf.is_descendant_of(root)


def test_remove_parent_is_rejected_like_null_parent(scene):
    parent = scene.create_entity("P")
    child = scene.create_entity("C")
    child.set_parent(parent)
    child.remove_parent()
    assert child.parent == parent


def test_equality_and_hash(scene):
    e = scene.create_entity("A")
    same = Entity(e.handle, scene)
    assert e == same
    assert hash(e) == hash(same)
    assert e != Entity(e.handle, Scene())
    assert len({e, same}) == 1


def test_invalid_after_destroy(scene):
    e = scene.create_entity("A")
    scene.destroy_entity(e)
    assert bool(e)
    assert not e.is_valid()


def test_active_flag(scene):
    e = scene.create_entity("A")
    assert e.active
    e.active = False
    assert not e.active