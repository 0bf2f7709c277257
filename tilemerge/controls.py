# -*- coding: utf-8 -*-
"""
Decode raw user input into move directions.

Keyboard keys and touch swipes are translated here so that the engine only ever sees one of the four
directions. Unknown input decodes to None.
"""
from typing import Optional, Tuple

from tilemerge.core.gamemove import Direction

# ##: Keys accepted for each direction (browser names, Matplotlib names and WASD).
KEY_DIRECTIONS = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

# ##: Minimum swipe length, in pixels, on narrow and wide viewports.
NARROW_SWIPE_DISTANCE = 30
WIDE_SWIPE_DISTANCE = 50
NARROW_VIEWPORT_WIDTH = 768

Point = Tuple[float, float]


def decode_key(key: Optional[str]) -> Optional[Direction]:
    """
    Translate a key name into a direction.

    Parameters
    ----------
    key : str, optional
        Name of the pressed key.

    Returns
    -------
    Direction | None
        The direction, or None for any other key.
    """
    if key is None:
        return None
    return KEY_DIRECTIONS.get(key)


def swipe_threshold(viewport_width: float) -> int:
    """Minimum swipe length for a viewport width."""
    return NARROW_SWIPE_DISTANCE if viewport_width < NARROW_VIEWPORT_WIDTH else WIDE_SWIPE_DISTANCE


def decode_swipe(start: Point, end: Point, min_distance: float = WIDE_SWIPE_DISTANCE) -> Optional[Direction]:
    """
    Translate a swipe into a direction.

    Parameters
    ----------
    start : tuple[float, float]
        Screen position ``(x, y)`` where the touch started; y grows downward.
    end : tuple[float, float]
        Screen position where the touch ended.
    min_distance : float, optional
        Length the dominant component must exceed (default is 50).

    Returns
    -------
    Direction | None
        The direction, or None for a swipe that is too short.

    Notes
    -----
    The dominant axis wins; a tie counts as vertical.
    """
    diff_x = start[0] - end[0]
    diff_y = start[1] - end[1]

    if abs(diff_x) > abs(diff_y):
        if abs(diff_x) <= min_distance:
            return None
        return Direction.LEFT if diff_x > 0 else Direction.RIGHT

    if abs(diff_y) <= min_distance:
        return None
    return Direction.UP if diff_y > 0 else Direction.DOWN
