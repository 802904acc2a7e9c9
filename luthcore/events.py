"""Engine events: window, input, file drop and render notifications."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

PRESS = 1
RELEASE = 0


class EventCategory(enum.IntFlag):
    """Bit flags grouping events by origin."""

    NONE = 0
    APPLICATION = 1 << 0
    INPUT = 1 << 1
    KEYBOARD = 1 << 2
    MOUSE = 1 << 3
    MOUSE_BUTTON = 1 << 4
    FILE_DROP = 1 << 5
    RENDER = 1 << 6


@dataclass
class Event:
    """Base of all events; handlers set ``handled`` to stop further dispatch."""

    NAME: ClassVar[str] = "Event"
    CATEGORIES: ClassVar[EventCategory] = EventCategory.NONE

    handled: bool = field(default=False, init=False, compare=False)

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def category_flags(self) -> EventCategory:
        return self.CATEGORIES

    def is_in_category(self, category: EventCategory) -> bool:
        """Whether this event belongs to ``category``."""
        return bool(self.category_flags & category)


@dataclass
class WindowResizeEvent(Event):
    """The window changed size."""

    NAME: ClassVar[str] = "WindowResizeEvent"
    CATEGORIES: ClassVar[EventCategory] = EventCategory.APPLICATION

    width: int = 0
    height: int = 0


@dataclass
class WindowCloseEvent(Event):
    """The window was asked to close."""

    NAME: ClassVar[str] = "WindowCloseEvent"
    CATEGORIES: ClassVar[EventCategory] = EventCategory.APPLICATION


@dataclass
class FileDropEvent(Event):
    """Files were dropped onto the window."""

    NAME: ClassVar[str] = "FileDropEvent"
    CATEGORIES: ClassVar[EventCategory] = EventCategory.INPUT | EventCategory.FILE_DROP

    paths: tuple = ()

    def __post_init__(self) -> None:
        self.paths = tuple(Path(p) for p in self.paths)


@dataclass
class KeyEvent(Event):
    """Base of keyboard events."""

    NAME: ClassVar[str] = "KeyEvent"
    CATEGORIES: ClassVar[EventCategory] = EventCategory.KEYBOARD | EventCategory.INPUT

    key_code: int = 0


@dataclass
class KeyPressedEvent(KeyEvent):
    """A key went down, possibly as a repeat."""

    NAME: ClassVar[str] = "KeyPressedEvent"

    repeat_count: int = 0


@dataclass
class KeyReleasedEvent(KeyEvent):
    """A key went up."""

    NAME: ClassVar[str] = "KeyReleasedEvent"


@dataclass
class MouseMovedEvent(Event):
    """The cursor moved."""

    NAME: ClassVar[str] = "MouseMovedEvent"
    CATEGORIES: ClassVar[EventCategory] = EventCategory.MOUSE | EventCategory.INPUT

    x: float = 0.0
    y: float = 0.0


@dataclass
class MouseButtonEvent(Event):
    """Base of mouse button events."""

    NAME: ClassVar[str] = "MouseButtonEvent"
    CATEGORIES: ClassVar[EventCategory] = (
        EventCategory.MOUSE | EventCategory.MOUSE_BUTTON | EventCategory.INPUT
    )

    button: int = 0
    action: int = RELEASE


@dataclass
class MouseButtonPressedEvent(MouseButtonEvent):
    """A mouse button went down."""

    NAME: ClassVar[str] = "MouseButtonPressedEvent"

    action: int = field(default=PRESS, init=False)


@dataclass
class MouseButtonReleasedEvent(MouseButtonEvent):
    """A mouse button went up."""

    NAME: ClassVar[str] = "MouseButtonReleasedEvent"

    action: int = field(default=RELEASE, init=False)


@dataclass
class RenderResizeEvent(Event):
    """The render target changed size."""

    NAME: ClassVar[str] = "RenderResizeEvent"
    CATEGORIES: ClassVar[EventCategory] = EventCategory.RENDER

    width: int = 0
    height: int = 0