"""Food placement on free cells."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from smooth_snake.geometry import Segment, Vector

if TYPE_CHECKING:
    from smooth_snake.grid import Grid

logger = logging.getLogger(__name__)


class BoardFullError(RuntimeError):
    """Raised when every cell centre is covered by the snake."""


class FoodSpawner:
    """Samples food positions on cell centres not covered by the snake.

    Uses an injected NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(self, grid: Grid, rng: np.random.Generator | None = None) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    def free_positions(self, waypoints: Sequence[Vector]) -> list[Vector]:
        """Return every cell centre lying on no snake segment, x-major."""
        points = list(waypoints)
        segments = [Segment(a, b) for a, b in zip(points, points[1:])]

        free: list[Vector] = []
        for x, y in self.grid.cell_centers().tolist():
            center = Vector(x, y)
            if not any(segment.is_point_inside(center) for segment in segments):
                free.append(center)
        return free

    def spawn(self, waypoints: Sequence[Vector]) -> Vector:
        """Pick one free cell centre uniformly at random.

        Raises :class:`BoardFullError` when no free cell is left.
        """
        free = self.free_positions(waypoints)
        if not free:
            logger.warning("No free cells available for food placement.")
            raise BoardFullError(
                f"No free cell on the {self.grid.width}x{self.grid.height} board."
            )
        return free[int(self.rng.integers(len(free)))]


def generate_food_position(
    width: int,
    height: int,
    waypoints: Sequence[Vector],
    rng: np.random.Generator | None = None,
) -> Vector:
    """Sample a food position for a *width* × *height* board."""
    from smooth_snake.grid import Grid

    return FoodSpawner(Grid(width, height), rng=rng).spawn(waypoints)
