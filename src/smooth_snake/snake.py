"""Snake polyline representation and tail erosion."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable

from smooth_snake.geometry import Segment, Vector


class Movement(enum.Enum):
    """Cardinal movement directions with (x_delta, y_delta) values."""

    TOP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    def vector(self) -> Vector:
        """Return the unit vector of this direction."""
        dx, dy = self.value
        return Vector(dx, dy)

    @classmethod
    def from_vector(cls, vector: Vector) -> Movement:
        """Map an axis-aligned unit vector back to its movement."""
        for movement in cls:
            if movement.vector() == vector:
                return movement
        raise ValueError(f"{vector!r} is not an axis-aligned unit vector.")

    @classmethod
    def from_name(cls, name: str) -> Movement:
        """Parse a case-insensitive direction name; ``up`` means TOP."""
        key = name.strip().upper()
        if key == "UP":
            key = "TOP"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


class Snake:
    """A snake represented as an ordered deque of polyline waypoints.

    The tail tip is ``waypoints[0]``; the head is ``waypoints[-1]``.
    Consecutive waypoints form straight segments. Collinear waypoints are
    kept as they are, so the waypoint count grows while moving straight.
    """

    def __init__(self, waypoints: Iterable[Vector]) -> None:
        self.waypoints: deque[Vector] = deque(waypoints)
        if len(self.waypoints) < 2:
            raise ValueError("Snake needs at least 2 waypoints.")

    @classmethod
    def straight(cls, head: Vector, direction: Vector, length: float) -> Snake:
        """Build a two-waypoint snake ending at *head*, *length* cells long."""
        if length <= 0:
            raise ValueError("Snake length must be positive.")
        return cls([head - direction * length, head])

    @property
    def head(self) -> Vector:
        """Return the head waypoint."""
        return self.waypoints[-1]

    @property
    def tail(self) -> Vector:
        """Return the tail tip waypoint."""
        return self.waypoints[0]

    def segments(self) -> list[Segment]:
        """Return the segments between consecutive waypoints, tail first."""
        points = list(self.waypoints)
        return [Segment(a, b) for a, b in zip(points, points[1:])]

    def length(self) -> float:
        """Total arc length of the polyline."""
        return sum(segment.length() for segment in self.segments())

    def erode(self, distance: float) -> bool:
        """Shorten the snake from its tail by *distance* of arc length.

        Whole segments are dropped until the remaining budget fits inside
        one segment, whose start point is then moved along it. Returns
        False if the budget outlasted the body; the tail then collapses onto
        the head, leaving two coincident waypoints.
        """
        remaining = distance
        points = self.waypoints
        while len(points) > 1:
            segment = Segment(points[0], points[1])
            length = segment.length()
            if length >= remaining:
                if remaining > 0:
                    points[0] = points[0] + segment.vector().normalize() * remaining
                return True
            remaining -= length
            points.popleft()
        points.appendleft(points[0])
        return False

    def to_list(self) -> list[Vector]:
        """Return a snapshot of the waypoints, tail to head."""
        return list(self.waypoints)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "waypoints": [list(point.to_tuple()) for point in self.waypoints],
            "length": self.length(),
        }
