"""Grid representation for the continuous snake game."""

from __future__ import annotations

import numpy as np

from smooth_snake.geometry import Vector, round_half_away


class Grid:
    """Rectangular board of unit cells.

    Cell ``(x, y)`` covers ``[x, x+1) × [y, y+1)`` and has its centre at
    ``(x + 0.5, y + 0.5)``. Coordinates use (x, y) ordering, x to the
    right and y downwards.
    """

    def __init__(self, width: int = 20, height: int = 20) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self.width = width
        self.height = height

    def center(self) -> Vector:
        """Return the centre point of the middle cell."""
        return Vector(
            round_half_away(self.width / 2.0) - 0.5,
            round_half_away(self.height / 2.0) - 0.5,
        )

    def cell_centers(self) -> np.ndarray:
        """Return an ``(width * height, 2)`` array of cell centres.

        Rows are ordered x-major: all cells of column 0 first, then column 1.
        """
        xs, ys = np.meshgrid(
            np.arange(self.width), np.arange(self.height), indexing="ij",
        )
        return np.column_stack((xs.ravel(), ys.ravel())).astype(np.float64) + 0.5

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
