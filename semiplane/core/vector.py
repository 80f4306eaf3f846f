"""Point and vector value types.

``Point`` is an absolute location and ``Vector`` a displacement. They share
a layout but are kept as separate types so that absolute and relative
quantities are not mixed by accident: ``Point - Point`` is a ``Vector``,
``Point + Vector`` is a ``Point`` and ``Point + Point`` is a ``TypeError``.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Tuple

from .constants import EPS
from .errors import DegenerateVectorError

__all__ = ['Point', 'Vector', 'ORIGIN']


@dataclass(frozen=True)
class Vector:
    x: float
    y: float

    def add(self, v: 'Vector') -> 'Vector':
        return Vector(self.x + v.x, self.y + v.y)

    def sub(self, v: 'Vector') -> 'Vector':
        return Vector(self.x - v.x, self.y - v.y)

    def scale(self, k: float) -> 'Vector':
        return Vector(k * self.x, k * self.y)

    def dot(self, v: 'Vector') -> float:
        return self.x * v.x + self.y * v.y

    def cross(self, v: 'Vector') -> float:
        """2D cross product (determinant of the 2x2 matrix [self, v])."""
        return self.x * v.y - self.y * v.x

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def unit(self) -> 'Vector':
        """Return the vector scaled to length 1.

        Raises DegenerateVectorError when the length is below EPS instead of
        producing non-finite components.
        """
        n = self.length()
        if n < EPS:
            raise DegenerateVectorError(f"cannot normalize near-zero vector ({self.x}, {self.y})")
        return self.scale(1.0 / n)

    def perpendicular(self) -> 'Vector':
        """Rotate by +90 degrees: (x, y) -> (-y, x)."""
        return Vector(-self.y, self.x)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other):
        if isinstance(other, Vector):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return self.sub(other)
        return NotImplemented

    def __mul__(self, k):
        if isinstance(k, numbers.Real):
            return self.scale(k)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> 'Vector':
        return Vector(-self.x, -self.y)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @staticmethod
    def origin() -> 'Point':
        return ORIGIN

    def add(self, v: Vector) -> 'Point':
        return Point(self.x + v.x, self.y + v.y)

    def sub(self, p0: 'Point') -> Vector:
        return Vector(self.x - p0.x, self.y - p0.y)

    def to_vec(self) -> Vector:
        """Position vector relative to the origin."""
        return self.sub(ORIGIN)

    def distance_to(self, p: 'Point') -> float:
        return self.sub(p).length()

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other):
        if isinstance(other, Vector):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return self.sub(other)
        if isinstance(other, Vector):
            return self.add(-other)
        return NotImplemented


ORIGIN = Point(0.0, 0.0)
