# luthcore

`luthcore` holds the core runtime pieces of a small 3D game engine. It has no
rendering. Its only dependency is numpy.

- **Scenes and entities** (`luthcore.scene`, `luthcore.entity`,
  `luthcore.registry`). Entities carry components and can form parent/child
  hierarchies. Destroying an entity also destroys its descendants, and
  duplicating an entity copies its whole subtree.
- **Components** (`luthcore.components`): `ID`, `Tag`, `Parent`, `Children`,
  `Transform`, `WorldTransform`, `Camera` (with `ProjectionType`),
  `MeshRenderer`, `Animation`, `DirectionalLight` and `PointLight`.
- **Systems** (`luthcore.systems`): the abstract `System` base, a
  `TransformSystem` that works out world matrices through the parent chain,
  and a `Systems` collection that runs the systems over one registry.
- **Events** (`luthcore.events`, `luthcore.eventbus`): event dataclasses with
  `EventCategory` flags, and queued buses that dispatch events to subscribers
  by exact event type.
- **Math** (`luthcore.mathutils`): numpy helpers for translation and scale
  matrices, quaternions `(w, x, y, z)`, perspective and orthographic
  projections with depth in `[0, 1]`, transform composition and
  decomposition, and frustum culling.
- **Utilities**:
  - `luthcore.ids.UUID`: 64-bit identifiers.
  - `luthcore.clock.Clock`: frame timing.
  - `luthcore.threadpool.ThreadPool`: a pool of worker threads.
  - `luthcore.log`: logging setup.
  - `luthcore.types`: float32 constants and `format_vec3` / `format_mat4`.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install .[test]
pytest
```

## Scenes, entities and systems

```python
from luthcore.scene import Scene
from luthcore.components import Transform, WorldTransform
from luthcore.systems import Systems, TransformSystem

scene = Scene()
root = scene.create_entity("Root")
child = scene.create_entity("Child")
child.set_parent(root)

root.get_component(Transform).position[:] = (1.0, 0.0, 0.0)
child.get_component(Transform).position[:] = (0.0, 2.0, 0.0)

duplicate = scene.duplicate_entity(child, False)   # named "Child (1)", also under Root

systems = Systems(scene.registry)
systems.add_system(TransformSystem())
systems.update(TransformSystem)

print(child.get_component(WorldTransform).matrix)
```

### Creating entities

`Scene.create_entity(name="Entity")` gives every new entity four components:

- an `ID` holding a random `UUID`,
- a `Tag` holding the name,
- an identity `Transform`,
- an identity `WorldTransform`.

### Working with components

An `Entity` is a handle into its scene's `Registry`. It has these methods:

- `add_component`, which raises `ValueError` if the entity already has a
  component of that type.
- `add_or_replace_component`.
- `get_component`, which raises `KeyError` if the component is missing.
- `remove_component`.
- `has_component`.
- `copy_component_if_exists`, which gives the target entity a deep copy.

It also has the properties `name`, `parent` and `children`.

### Parenting

`set_parent` logs a warning and does nothing when the request is invalid. A
request is invalid when the new parent is the null entity, is the entity
itself, or is one of its descendants. For that reason `remove_parent`, which
asks for the null entity as parent, is always rejected in the same way.

### Destroying and duplicating

`Scene.destroy_entity` destroys the entity's children first, then takes the
entity out of its parent's child list.

`Scene.duplicate_entity(original, skip_parent_addition=False)` copies these
components if the original has them: `Transform`, `Camera`, `MeshRenderer`,
`Animation`, `DirectionalLight` and `PointLight`. The copy gets a new name of
the form `Base (n)`, where `n` is one more than the highest number used by the
original and by its siblings that share the same base name. Children are
duplicated recursively. Unless `skip_parent_addition` is set, the copy joins
the original's parent.

### Finding entities

- `Scene.each_entity()` yields every entity.
- `Scene.entities_with(*types)` yields the entities that have all of the
  given component types.

### Running systems

`Systems.init()` registers a `TransformSystem`. `Systems.update()` runs every
system in the order it was added, and `Systems.update(SomeSystem)` runs only
the first system of that type. Nothing runs while the registry is `None`,
which is the case after `shutdown()`.

## Events

```python
from luthcore.eventbus import EventBus, BusType
from luthcore.events import WindowResizeEvent

bus = EventBus()
bus.subscribe(BusType.MAIN_THREAD, WindowResizeEvent,
              lambda e: print(e.width, e.height))
bus.enqueue(BusType.MAIN_THREAD, WindowResizeEvent(1280, 720))
bus.process_events(BusType.MAIN_THREAD)
```

Events are dispatched in the order they were queued. Events queued while the
queue is being processed are dispatched in the same call. If a handler sets
`handled` on an event, the handlers after it do not see that event.

These event types are available:

- `WindowResizeEvent`
- `WindowCloseEvent`
- `FileDropEvent`
- `KeyPressedEvent`
- `KeyReleasedEvent`
- `MouseMovedEvent`
- `MouseButtonPressedEvent`
- `MouseButtonReleasedEvent`
- `RenderResizeEvent`

Use `Event.is_in_category` to test an event against an `EventCategory` flag.

## Utilities

### UUID

`UUID()` is random. `UUID(value)` takes any 64-bit value.

`str(uuid)` gives 16 lowercase hexadecimal digits, and `UUID.from_string`
parses them back. It raises `ValueError` if the text is not exactly 16
hexadecimal digits.

### Clock

`Clock` takes an optional timer function in seconds, which defaults to
`time.monotonic`. The first call to `update()` starts the clock. Each later
call sets these attributes and increments `frame_count`:

- `unscaled_delta_time`
- `delta_time`, which is `unscaled_delta_time` multiplied by `time_scale`

`frame_count` wraps at 32 bits. `elapsed()` and `elapsed_ms()` measure time
since the clock started.

### ThreadPool

`ThreadPool(threads=None)` uses the CPU count when `threads` is not given.

- `submit(task)` returns a `concurrent.futures.Future`.
- `wait_for_all()` blocks until every submitted task has finished.
- `shutdown()`, which also runs when leaving a `with` block, finishes the
  queued tasks and joins the workers.

### Logging

`init_logging(log_file="Luth.log")` sets up the `LUTH` logger. It writes to
stdout, in colour when stdout is a terminal, and to a log file that is
truncated at start. Pass `None` to skip the file.

The logger's level is the custom `TRACE` level (5). `get_logger()` returns the
same logger.

## What this package does not do

There is no application loop, window, input handling, rendering, animation
playback or asset loading here. `Camera`, `MeshRenderer`, `Animation` and the
light components only hold data. `Systems.init()` registers only the
`TransformSystem`. The package installs no command-line programs.