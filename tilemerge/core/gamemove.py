"""
Game move utilities: the four move directions, how each one is reduced to a left slide, and the
legal move queries.
"""

from enum import Enum

from numpy import ndarray

from tilemerge.core.gameboard import compact_left, compact_right, reverse_rows, transpose


class Direction(str, Enum):
    """
    Direction of a move.

    The value is the lower-case name, so ``Direction('left') is Direction.LEFT``.
    """

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'


# ##>: Order used by the legal move mask.
DIRECTIONS = (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN)


def slide(board: ndarray, direction: Direction, win_value: int | None = None) -> tuple[int, ndarray, bool]:
    """
    Slide and merge the board in a direction.

    Parameters
    ----------
    board : ndarray
        The current structured board. Not modified.
    direction : Direction
        The move direction.
    win_value : int, optional
        Tile value whose creation by a merge must be reported.

    Returns
    -------
    score : int
        The total score obtained from merges.
    updated_board : ndarray
        The board after the move.
    reached : bool
        True if a merge produced ``win_value``.

    Notes
    -----
    Every direction runs the same left compaction:

    - left: compact-left;
    - right: reverse rows, compact-left, reverse rows back;
    - up: transpose, compact-left, transpose back;
    - down: transpose, compact-right, transpose back.
    """
    if direction is Direction.LEFT:
        return compact_left(board, win_value)
    if direction is Direction.RIGHT:
        score, updated, reached = compact_right(board, win_value)
        return score, updated.copy(), reached

    # ##: Vertical moves work on columns.
    compact = compact_left if direction is Direction.UP else compact_right
    score, updated, reached = compact(transpose(board), win_value)
    return score, transpose(updated).copy(), reached


def _can_compact_left(values: ndarray) -> bool:
    """True when some tile sits right of a hole or next to an equal tile on its left."""
    before, after = values[:, :-1], values[:, 1:]
    return bool(((after != 0) & ((before == 0) | (before == after))).any())


def legal_directions_mask(values: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Tell, for each direction, whether a move would change the board.

    Parameters
    ----------
    values : ndarray
        The matrix of tile values (0 for empty).

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Flags in ``DIRECTIONS`` order: left, up, right, down.

    Notes
    -----
    Each direction is checked on the same oriented view ``slide`` compacts, so the answer
    always agrees with an actual move. Nothing is copied or moved.
    """
    return (
        _can_compact_left(values),
        _can_compact_left(transpose(values)),
        _can_compact_left(reverse_rows(values)),
        _can_compact_left(reverse_rows(transpose(values))),
    )


def legal_directions(values: ndarray) -> list[Direction]:
    """Directions that would change the board, in (left, up, right, down) order."""
    mask = legal_directions_mask(values)
    return [direction for direction, legal in zip(DIRECTIONS, mask) if legal]
