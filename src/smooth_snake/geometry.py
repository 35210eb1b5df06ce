"""Continuous 2D geometry primitives for the snake polyline."""

from __future__ import annotations

import math
import sys

# Named tolerance kept for reference; comparisons use machine epsilon.
X_EPSILON = 0.00001


class DegenerateVectorError(ValueError):
    """Raised when a zero-length vector would have to be normalized."""


def approximate_eq(a: float, b: float) -> bool:
    """Return True if *a* and *b* differ by less than machine epsilon."""
    return abs(a - b) < sys.float_info.epsilon


def round_half_away(value: float) -> float:
    """Round to the nearest integer, ties away from zero.

    Unlike the built-in :func:`round`, ties never go to the even neighbour.
    """
    magnitude = abs(value)
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1
    return math.copysign(rounded, value)


class Vector:
    """Immutable 2D floating-point vector with approximate equality."""

    __slots__ = ("x", "y")

    def __init__(self, x: float, y: float) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))

    def __setattr__(self, name, value):
        raise AttributeError("Vector is immutable.")

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return approximate_eq(self.x, other.x) and approximate_eq(self.y, other.y)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector({self.x!r}, {self.y!r})"

    def scale(self, value: float) -> Vector:
        """Return the vector multiplied by *value*."""
        return self * value

    def length(self) -> float:
        """Euclidean norm."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector:
        """Return the unit vector with the same heading.

        Raises :class:`DegenerateVectorError` for a zero-length vector.
        """
        length = self.length()
        if length == 0.0:
            raise DegenerateVectorError("Cannot normalize a zero-length vector.")
        return self * (1.0 / length)

    def to_tuple(self) -> tuple[float, float]:
        return self.x, self.y

    def to_dict(self) -> dict:
        """Serialize vector to a dictionary."""
        return {"x": self.x, "y": self.y}


class Segment:
    """A directed straight piece of the polyline from *start* to *end*."""

    __slots__ = ("start", "end")

    def __init__(self, start: Vector, end: Vector) -> None:
        self.start = start
        self.end = end

    def __repr__(self) -> str:
        return f"Segment({self.start!r}, {self.end!r})"

    def vector(self) -> Vector:
        return self.end - self.start

    def length(self) -> float:
        return self.vector().length()

    def is_point_inside(self, point: Vector) -> bool:
        """Check whether *point* lies on the segment, endpoints included.

        A point is inside when the detour through it is no longer than the
        segment itself.
        """
        first = Segment(self.start, point)
        second = Segment(point, self.end)
        return approximate_eq(self.length(), first.length() + second.length())
