"""Tests for the food placement module."""

import numpy as np
import pytest

from smooth_snake.food import BoardFullError, FoodSpawner, generate_food_position
from smooth_snake.geometry import Segment, Vector
from smooth_snake.grid import Grid

ROW_SNAKE = [Vector(1.5, 4.5), Vector(4.5, 4.5)]
BENT_SNAKE = [Vector(0.5, 0.5), Vector(5.5, 0.5), Vector(5.5, 3.0), Vector(2.5, 3.0)]


def _on_snake(point, waypoints):
    return any(
        Segment(a, b).is_point_inside(point)
        for a, b in zip(waypoints, waypoints[1:])
    )


class TestFreePositions:
    def test_empty_snake_frees_every_cell(self):
        spawner = FoodSpawner(Grid(width=4, height=3))
        assert len(spawner.free_positions([])) == 12

    def test_excludes_snake_cells(self):
        spawner = FoodSpawner(Grid(width=10, height=10))
        free = spawner.free_positions(ROW_SNAKE)
        assert len(free) == 96
        for x in (1.5, 2.5, 3.5, 4.5):
            assert Vector(x, 4.5) not in free

    def test_off_centre_segment_blocks_nothing(self):
        # Segment along y=3.0 runs between cell centres.
        spawner = FoodSpawner(Grid(width=8, height=8))
        free = spawner.free_positions([Vector(2.5, 3.0), Vector(6.5, 3.0)])
        assert len(free) == 64

    def test_bent_snake(self):
        spawner = FoodSpawner(Grid(width=8, height=8))
        free = spawner.free_positions(BENT_SNAKE)
        # Six cells on the top row, two more down column 5.
        assert len(free) == 64 - 8
        assert all(not _on_snake(p, BENT_SNAKE) for p in free)

    def test_x_major_order(self):
        spawner = FoodSpawner(Grid(width=2, height=2))
        assert spawner.free_positions([]) == [
            Vector(0.5, 0.5), Vector(0.5, 1.5), Vector(1.5, 0.5), Vector(1.5, 1.5),
        ]


class TestFoodSpawning:
    def test_food_never_on_snake(self):
        for seed in range(50):
            spawner = FoodSpawner(Grid(8, 8), rng=np.random.default_rng(seed))
            food = spawner.spawn(BENT_SNAKE)
            assert not _on_snake(food, BENT_SNAKE)

    def test_spawn_deterministic(self):
        a = FoodSpawner(Grid(10, 10), rng=np.random.default_rng(42)).spawn(ROW_SNAKE)
        b = FoodSpawner(Grid(10, 10), rng=np.random.default_rng(42)).spawn(ROW_SNAKE)
        assert a == b

    def test_covers_every_cell(self):
        spawner = FoodSpawner(Grid(3, 3), rng=np.random.default_rng(7))
        seen = {spawner.spawn([]).to_tuple() for _ in range(500)}
        assert len(seen) == 9

    def test_only_free_cell_is_chosen(self):
        # 3x1 board, snake covers the first two cells.
        spawner = FoodSpawner(Grid(3, 1), rng=np.random.default_rng(0))
        food = spawner.spawn([Vector(0.5, 0.5), Vector(1.5, 0.5)])
        assert food == Vector(2.5, 0.5)

    def test_board_full(self, caplog):
        spawner = FoodSpawner(Grid(2, 1))
        with caplog.at_level("WARNING"):
            with pytest.raises(BoardFullError, match="2x1"):
                spawner.spawn([Vector(0.5, 0.5), Vector(1.5, 0.5)])
        assert "No free cells" in caplog.text


class TestGenerateFoodPosition:
    def test_matches_spawner(self):
        food = generate_food_position(10, 10, ROW_SNAKE, rng=np.random.default_rng(3))
        spawner = FoodSpawner(Grid(10, 10), rng=np.random.default_rng(3))
        expected = spawner.spawn(ROW_SNAKE)
        assert food == expected

    def test_board_full(self):
        with pytest.raises(BoardFullError):
            generate_food_position(1, 1, [Vector(-2.5, 0.5), Vector(0.5, 0.5)])
