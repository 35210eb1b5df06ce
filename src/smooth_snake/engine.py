"""Continuous-motion game engine composing grid, snake, and food logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from smooth_snake.food import BoardFullError, FoodSpawner
from smooth_snake.geometry import Vector, round_half_away
from smooth_snake.grid import Grid
from smooth_snake.snake import Movement, Snake

if TYPE_CHECKING:
    from smooth_snake.config import GameConfig

logger = logging.getLogger(__name__)


class Game:
    """Single-snake game with continuous movement.

    The game owns the grid, the snake polyline, and the food spawner. Each
    call to :meth:`process` advances the snake by ``speed * timespan`` of
    arc length. Turns are only taken once the head crosses a rounded cell
    coordinate, at which point a corner waypoint is inserted on the
    crossing line.
    """

    def __init__(
        self,
        width: int,
        height: int,
        speed: float,
        snake_length: int,
        direction: Vector,
        rng: np.random.Generator | None = None,
    ) -> None:
        if speed < 0:
            raise ValueError("Speed must be non-negative.")
        if snake_length < 1:
            raise ValueError("Snake length must be at least 1.")
        Movement.from_vector(direction)

        self.grid = Grid(width=width, height=height)
        self.speed = speed
        self.score = 0
        self.tick = 0
        self.direction = direction

        self._snake = Snake.straight(self.grid.center(), direction, snake_length)
        self.food_spawner = FoodSpawner(self.grid, rng=rng)
        self.food: Vector | None = self._place_food()

        logger.info(
            "Game created: %dx%d board, speed %.3f, snake length %d.",
            width, height, speed, snake_length,
        )

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @classmethod
    def from_config(cls, config: GameConfig) -> Game:
        """Build a game from a :class:`~smooth_snake.config.GameConfig`."""
        return cls(
            config.width,
            config.height,
            config.speed,
            config.snake_length,
            config.movement.vector(),
            rng=np.random.default_rng(config.seed),
        )

    def snake(self) -> list[Vector]:
        """Return the waypoints, tail to head."""
        return self._snake.to_list()

    def process(self, timespan: float, movement: Movement | None = None) -> None:
        """Advance the game by *timespan* units of time."""
        if timespan < 0:
            raise ValueError("Timespan must be non-negative.")
        self._process_movement(timespan, movement)
        self.tick += 1

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "speed": self.speed,
            "direction": self.direction.to_dict(),
            "food": None if self.food is None else self.food.to_dict(),
            "board_full": self.food is None,
            "grid": self.grid.to_dict(),
            "snake": self._snake.to_dict(),
        }

    def _place_food(self) -> Vector | None:
        try:
            return self.food_spawner.spawn(self._snake.waypoints)
        except BoardFullError:
            logger.warning("Board is full; no food placed.")
            return None

    def _process_movement(self, timespan: float, movement: Movement | None) -> None:
        full_distance = self.speed * timespan
        waypoints = self._snake.waypoints

        # --- tail erosion ---
        eroded = self._snake.erode(full_distance)

        old_head = waypoints.pop()
        new_head = old_head + self.direction * full_distance

        # --- turn ---
        if movement is not None:
            new_direction = movement.vector()
            if new_direction != self.direction and new_direction != -self.direction:
                corner = self._resolve_turn(
                    old_head, new_head, new_direction, full_distance,
                )
                if corner is not None:
                    bend, head = corner
                    self.direction = new_direction
                    logger.debug("Turned %s at %r.", movement.name, bend)
                    self._extend(eroded, bend, head)
                    return
                logger.debug("Turn %s deferred; no cell crossed.", movement.name)

        self._extend(eroded, new_head)

    def _extend(self, eroded: bool, *points: Vector) -> None:
        waypoints = self._snake.waypoints
        if not eroded:
            # The tail ran out of body; it collapses onto the final head.
            logger.warning("Tail erosion exceeds snake length; collapsing tail.")
            waypoints.clear()
            waypoints.extend((points[-1], points[-1]))
            return
        waypoints.extend(points)

    @staticmethod
    def _resolve_turn(
        old_head: Vector,
        new_head: Vector,
        new_direction: Vector,
        full_distance: float,
    ) -> tuple[Vector, Vector] | None:
        """Return the (bend, head) pair of a turn, or None to defer.

        When the straight advance crosses a rounded coordinate on both axes
        the x axis is used.
        """
        old_x_rounded = round_half_away(old_head.x)
        old_y_rounded = round_half_away(old_head.y)
        new_x_rounded = round_half_away(new_head.x)
        new_y_rounded = round_half_away(new_head.y)

        x_changed = old_x_rounded != new_x_rounded
        y_changed = old_y_rounded != new_y_rounded
        if not (x_changed or y_changed):
            return None

        if x_changed:
            old, old_rounded, new_rounded = old_head.x, old_x_rounded, new_x_rounded
        else:
            old, old_rounded, new_rounded = old_head.y, old_y_rounded, new_y_rounded

        if new_rounded > old_rounded:
            edge = old_rounded + 0.5
        else:
            edge = old_rounded - 0.5

        if x_changed:
            bend = Vector(edge, old_head.y)
        else:
            bend = Vector(old_head.x, edge)

        leftover = full_distance - abs(old - edge)
        return bend, bend + new_direction * leftover
