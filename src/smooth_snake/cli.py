"""CLI simulation driver for Smooth Snake."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from smooth_snake.config import GameConfig
from smooth_snake.engine import Game
from smooth_snake.snake import Movement

logger = logging.getLogger(__name__)


def _parse_turn(text: str) -> tuple[int, Movement]:
    """Parse a ``TICK:DIRECTION`` turn request."""
    tick_text, sep, name = text.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(
            f"Turn must look like TICK:DIRECTION, got {text!r}."
        )
    try:
        return int(tick_text), Movement.from_name(name)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smooth-snake",
        description="Headless continuous-motion snake simulator.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser("simulate", help="Run a headless simulation.")
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--height", type=int, default=None)
    sim_p.add_argument("--speed", type=float, default=None)
    sim_p.add_argument("--snake-length", type=int, default=None)
    sim_p.add_argument(
        "--direction", type=str, default=None,
        choices=["top", "up", "right", "down", "left"],
    )
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--ticks", type=int, default=10)
    sim_p.add_argument("--timespan", type=float, default=0.1)
    sim_p.add_argument(
        "--turn", type=_parse_turn, action="append", default=[],
        metavar="TICK:DIRECTION",
        help="Request a turn on the given tick (repeatable).",
    )
    sim_p.add_argument(
        "--trace", action="store_true",
        help="Print the state after every tick instead of only the last.",
    )

    # --- init-config ---
    init_p = sub.add_parser(
        "init-config", help="Write a default config file.",
    )
    init_p.add_argument("path", help="Destination JSON path.")

    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    for name in ("width", "height", "speed", "snake_length", "direction", "seed"):
        val = getattr(args, name, None)
        if val is not None:
            overrides[name] = val

    if overrides:
        config = replace(config, **overrides)
    return config


def _run_simulate(args: argparse.Namespace) -> int:
    config = _resolve_config(args)
    game = Game.from_config(config)

    turns: dict[int, Movement] = {}
    for tick, movement in args.turn:
        turns[tick] = movement

    for tick in range(args.ticks):
        game.process(args.timespan, turns.get(tick))
        if args.trace:
            print(json.dumps(game.get_state()))  # noqa: T201

    if not args.trace:
        print(json.dumps(game.get_state(), indent=2))  # noqa: T201
    logger.info("Simulated %d ticks.", args.ticks)
    return 0


def _run_init_config(args: argparse.Namespace) -> int:
    GameConfig().save(args.path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``smooth-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "init-config": _run_init_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
