"""A windowed drawing surface with a named colour palette, a demo board and a movable cursor box."""

__version__ = "0.1.0"
__all__ = ["base", "graphics", "runner", "cli"]