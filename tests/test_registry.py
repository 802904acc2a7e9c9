import pytest

from luthcore.registry import Registry


class Position:
    def __init__(self, x=0):
        self.x = x


class Velocity:
    def __init__(self, dx=0):
        self.dx = dx


def test_create_gives_distinct_valid_handles():
    registry = Registry()
    a = registry.create()
    b = registry.create()
    assert a != b
    assert registry.valid(a) and registry.valid(b)
    assert registry.entities() == [a, b]


def test_destroy_invalidates():
    registry = Registry()
    a = registry.create()
    registry.destroy(a)
    assert not registry.valid(a)
    assert registry.entities() == []


def test_destroy_unknown_raises():
    registry = Registry()
    with pytest.raises(KeyError):
        registry.destroy(42)


def test_none_is_never_valid():
    assert Registry().valid(None) is False


def test_emplace_and_get_return_same_object():
    registry = Registry()
    e = registry.create()
    pos = Position(3)
    assert registry.emplace(e, pos) is pos
    assert registry.get(e, Position) is pos
    assert registry.has(e, Position)
    assert not registry.has(e, Velocity)


def test_emplace_twice_raises():
    registry = Registry()
    e = registry.create()
    registry.emplace(e, Position())
    with pytest.raises(ValueError):
        registry.emplace(e, Position())


def test_emplace_on_invalid_entity_raises():
    registry = Registry()
    with pytest.raises(KeyError):
        registry.emplace(7, Position())


def test_replace_swaps_component():
    registry = Registry()
    e = registry.create()
    registry.emplace(e, Position(1))
    new = Position(2)
    registry.replace(e, new)
    assert registry.get(e, Position) is new


def test_replace_missing_raises():
    registry = Registry()
    e = registry.create()
    with pytest.raises(KeyError):
        registry.replace(e, Position())


def test_get_missing_raises():
    registry = Registry()
    e = registry.create()
    with pytest.raises(KeyError):
        registry.get(e, Position)


def test_remove_detaches():
    registry = Registry()
    e = registry.create()
    registry.emplace(e, Position())
    registry.remove(e, Position)
    assert not registry.has(e, Position)
    with pytest.raises(KeyError):
        registry.remove(e, Position)


def test_view_filters_by_all_types():
    registry = Registry()
    a = registry.create()
    b = registry.create()
    pa = registry.emplace(a, Position())
    va = registry.emplace(a, Velocity())
    registry.emplace(b, Position())
    rows = list(registry.view(Position, Velocity))
    assert rows == [(a, pa, va)]


def test_view_without_types_yields_every_entity():
    registry = Registry()
    handles = [registry.create() for _ in range(3)]
    assert [row[0] for row in registry.view()] == handles


def test_view_skips_entities_destroyed_during_iteration():
    registry = Registry()
    a = registry.create()
    b = registry.create()
    seen = []
    for (handle,) in registry.view():
        seen.append(handle)
        if handle == a:
            registry.destroy(b)
    assert seen == [a]


def test_clear_removes_everything():
    registry = Registry()
    e = registry.create()
    registry.emplace(e, Position())
    registry.clear()
    assert len(registry) == 0
    assert not registry.valid(e)