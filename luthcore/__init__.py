"""Core runtime for a small game engine: scenes, entities, components, systems, events, math, timing and threads."""

__version__ = "0.1.0"