"""Tests for the game configuration dataclass."""

import json

import pytest

from smooth_snake.config import GameConfig
from smooth_snake.snake import Movement


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.width == 20
        assert cfg.height == 20
        assert cfg.speed == 5.0
        assert cfg.snake_length == 3
        assert cfg.movement is Movement.RIGHT
        assert cfg.seed is None

    def test_custom_values(self):
        cfg = GameConfig(width=8, height=6, speed=1.5, direction="up", seed=3)
        assert cfg.width == 8
        assert cfg.speed == 1.5
        assert cfg.movement is Movement.TOP

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"width": 0}, "at least 1"),
            ({"height": 0}, "at least 1"),
            ({"speed": -2.0}, "non-negative"),
            ({"snake_length": 0}, "snake_length"),
            ({"direction": "sideways"}, "Unknown direction"),
        ],
    )
    def test_validation(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            GameConfig(**kwargs)

    def test_to_dict(self):
        d = GameConfig(seed=5).to_dict()
        assert d == {
            "width": 20,
            "height": 20,
            "speed": 5.0,
            "snake_length": 3,
            "direction": "right",
            "seed": 5,
        }

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(width=15, speed=2.0, direction="left", seed=9)
        path = tmp_path / "nested" / "config.json"
        cfg.save(path)
        assert path.exists()

        loaded = GameConfig.load(path)
        assert loaded == cfg

    def test_saved_file_is_json(self, tmp_path):
        path = tmp_path / "config.json"
        GameConfig().save(path)
        raw = json.loads(path.read_text())
        assert raw["direction"] == "right"
