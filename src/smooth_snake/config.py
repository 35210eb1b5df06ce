"""Game configuration for headless simulation runs."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from smooth_snake.snake import Movement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Parameters needed to construct a :class:`~smooth_snake.engine.Game`.

    Supports JSON serialization for reproducibility.
    """

    width: int = 20
    height: int = 20
    speed: float = 5.0
    snake_length: int = 3
    direction: str = "right"
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must each be at least 1.")
        if self.speed < 0:
            raise ValueError("speed must be non-negative.")
        if self.snake_length < 1:
            raise ValueError("snake_length must be at least 1.")
        Movement.from_name(self.direction)

    @property
    def movement(self) -> Movement:
        return Movement.from_name(self.direction)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
