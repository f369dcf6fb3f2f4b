"""A small real-time strategy game prototype: vectors, timers, tiles, 2D and 3D cameras, OBJ loading and an OpenGL renderer."""

__version__ = "0.1.0"