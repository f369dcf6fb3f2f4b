"""A small two-component vector with arithmetic helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vec2:
    """Two-component vector; compound assignments modify the vector in place."""

    x: float = 0
    y: float = 0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if isinstance(scalar, Vec2):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        if isinstance(scalar, Vec2):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def __iadd__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, other: Vec2 | float) -> Vec2:
        if isinstance(other, Vec2):
            self.x *= other.x
            self.y *= other.y
        else:
            self.x *= other
            self.y *= other
        return self

    def __itruediv__(self, scalar: float) -> Vec2:
        if isinstance(scalar, Vec2):
            return NotImplemented
        self.x /= scalar
        self.y /= scalar
        return self

    def increment(self) -> Vec2:
        """Add one to both components in place and return the vector."""
        self.x += 1
        self.y += 1
        return self

    def decrement(self) -> Vec2:
        """Subtract one from both components in place and return the vector."""
        self.x -= 1
        self.y -= 1
        return self

    def length(self) -> float:
        """Euclidean length; truncated to an int when both components are ints."""
        value = math.sqrt(self.length_squared())
        if isinstance(self.x, int) and isinstance(self.y, int):
            return int(value)
        return value

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vec2:
        """Unit vector in the same direction, or the zero vector if length is zero."""
        length = self.length()
        if length != 0:
            return Vec2(self.x / length, self.y / length)
        return Vec2(0, 0)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y