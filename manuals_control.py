# -*- coding: utf-8 -*-
"""
Play the sliding-tile merge game in a Matplotlib window.
"""
import logging
from argparse import ArgumentParser
from pathlib import Path
from typing import Any

from tilemerge.config import GameConfiguration
from tilemerge.controls import decode_key
from tilemerge.envs import GridEngine
from tilemerge.utils.windows import WindowBoard

_logger = logging.getLogger(__name__)


def redraw(window: WindowBoard, engine: GridEngine):
    """
    Redraw the game board.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    engine: GridEngine
        Game engine to draw
    """
    window.show_state(engine.state)


def reset(engine: GridEngine, window: WindowBoard):
    """
    Reset and redraw the game board.
    """
    engine.reset()
    redraw(window, engine)


def step(engine: GridEngine, window: WindowBoard, key: str):
    """
    Apply the move bound to a key.

    Parameters
    ----------
    engine: GridEngine
        The game engine

    window: WindowBoard
        Class to draw the game board

    key: str
        Name of the pressed key
    """
    direction = decode_key(key)
    if direction is None:
        return

    result = engine.step(direction)
    if result.changed:
        redraw(window, engine)
    if result.reached_new_milestone:
        _logger.info("Congratulations! You reached %d!", engine.win_value)
    if engine.over:
        _logger.info("Game over, press backspace to play again.")


def key_handler(engine: GridEngine, window: WindowBoard, event: Any):
    """
    Handle the keyboard.
    """
    _logger.debug("pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(engine, window)
        return None

    step(engine, window, event.key)
    return None


def parse_arguments(argv=None):
    parser = ArgumentParser(description="Play the sliding-tile merge game.")
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--best-score-file", type=Path, default=Path.home() / ".tilemerge" / "best_score.json")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


if __name__ == "__main__":
    args = parse_arguments()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    game = GridEngine.from_config(
        GameConfiguration(size=args.size, best_score_path=args.best_score_file, seed=args.seed)
    )

    window_board = WindowBoard(title=f"{game.win_value} Game", size=game.size)
    window_board.register_key_handler(lambda event: key_handler(game, window_board, event))

    redraw(window_board, game)

    # Blocking event loop
    window_board.show(block=True)
