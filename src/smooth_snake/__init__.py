"""Smooth Snake — continuous-motion snake engine."""

from smooth_snake.config import GameConfig
from smooth_snake.engine import Game
from smooth_snake.food import BoardFullError, FoodSpawner, generate_food_position
from smooth_snake.geometry import DegenerateVectorError, Segment, Vector
from smooth_snake.grid import Grid
from smooth_snake.snake import Movement, Snake

__all__ = [
    "BoardFullError",
    "DegenerateVectorError",
    "FoodSpawner",
    "Game",
    "GameConfig",
    "Grid",
    "Movement",
    "Segment",
    "Snake",
    "Vector",
    "generate_food_position",
]
