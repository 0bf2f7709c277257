"""
Core functionality for the sliding-tile merge game, including board manipulation and game logic.

A board is a square numpy structured array. Each record is one cell holding the tile ``value``
(0 for an empty cell) and the transient ``merged`` flag set on tiles produced by a merge during the
last move. Keeping the flag inside the record lets it travel with the tile through the transpose and
reverse views used to normalize directions.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, array_equal, bool_, dtype, int64, ndarray, zeros
from numpy.random import Generator

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Record layout of one cell.
TILE_DTYPE = dtype([('value', int64), ('merged', bool_)])


def empty_board(size: int) -> ndarray:
    """
    Create an empty square board.

    Parameters
    ----------
    size : int
        The size of the square grid.

    Returns
    -------
    ndarray
        A ``(size, size)`` structured array with every cell empty.
    """
    return zeros((size, size), dtype=TILE_DTYPE)


def board_from_values(values: ndarray) -> ndarray:
    """
    Build a board from a matrix of tile values, with every merge flag cleared.

    Parameters
    ----------
    values : ndarray
        A square integer matrix, 0 for empty cells.

    Returns
    -------
    ndarray
        The corresponding structured board.
    """
    values = array(values, dtype=int64)
    board = zeros(values.shape, dtype=TILE_DTYPE)
    board['value'] = values
    return board


def transpose(board: ndarray) -> ndarray:
    """Swap rows and columns. Applying it twice gives back the original board."""
    return board.T


def reverse_rows(board: ndarray) -> ndarray:
    """Reverse the order of the cells inside every row. Applying it twice gives back the original board."""
    return board[:, ::-1]


def compact_row(row: ndarray, win_value: int | None = None) -> tuple[int, ndarray, bool]:
    """
    Slide the tiles of one row towards index 0 and merge equal neighbours.

    Parameters
    ----------
    row : ndarray
        A 1D structured array representing one row of the board.
    win_value : int, optional
        Tile value whose creation by a merge must be reported.

    Returns
    -------
    score : int
        The sum of the values produced by merges.
    compacted : ndarray
        The new row, padded with empty cells on the right.
    reached : bool
        True if a merge produced ``win_value``.

    Notes
    -----
    - Empty cells are dropped before merging, the relative order of tiles is kept.
    - Merging occurs from index 0 towards the end of the row.
    - A tile produced by a merge cannot merge again in the same call, so
      ``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]`` and ``[2, 2, 2, 0]`` gives ``[4, 2, 0, 0]``.
    """
    tiles = row['value'][row['value'] != 0]
    result = zeros(len(row), dtype=TILE_DTYPE)
    score, reached = 0, False

    # ##: Single pass; a merge consumes both source tiles.
    i, position = 0, 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            merged = int(tiles[i]) * 2
            result[position] = (merged, True)
            score += merged
            reached = reached or merged == win_value
            i += 2
        else:
            result[position] = (tiles[i], False)
            i += 1
        position += 1

    return score, result, reached


def compact_left(board: ndarray, win_value: int | None = None) -> tuple[int, ndarray, bool]:
    """
    Slide the whole board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board, possibly a transposed or reversed view.
    win_value : int, optional
        Tile value whose creation by a merge must be reported.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        A new board after sliding and merging.
    reached : bool
        True if any merge produced ``win_value``.

    Notes
    -----
    - Rows are processed independently.
    - For other directions, transpose or reverse the board before calling this function.
    """
    result = zeros(board.shape, dtype=TILE_DTYPE)
    score, reached = 0, False

    for i, row in enumerate(board):
        row_score, result[i], row_reached = compact_row(row, win_value)
        score += row_score
        reached = reached or row_reached

    return score, result, reached


def compact_right(board: ndarray, win_value: int | None = None) -> tuple[int, ndarray, bool]:
    """Slide the whole board to the right; ``compact_left`` applied to the reversed rows."""
    score, updated, reached = compact_left(reverse_rows(board), win_value)
    return score, reverse_rows(updated), reached


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """Return the ``(row, col)`` coordinates of every empty cell, in row-major order."""
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(board['value'] == 0)]


def fill_cell(board: ndarray, rng: Generator, probs: dict[int, float] | None = None) -> tuple[int, int] | None:
    """
    Place one new tile on a random empty cell.

    Parameters
    ----------
    board : ndarray
        The current board. **Modified in-place.**
    rng : Generator
        Random number generator used for both draws.
    probs : dict[int, float], optional
        Spawn probability of each tile value (default is ``TILE_SPAWN_PROBS``).

    Returns
    -------
    tuple[int, int] | None
        Coordinates of the new tile, or None when the board is full.

    Notes
    -----
    - The cell and the value are drawn independently: the cell uniformly among empty cells,
      the value following ``probs``.
    - A full board is left untouched.
    """
    available = empty_cells(board)
    if not available:
        return None

    probs = probs or TILE_SPAWN_PROBS
    cell = available[int(rng.integers(len(available)))]
    value = int(rng.choice(list(probs), p=list(probs.values())))

    board[cell] = (value, False)
    return cell


def boards_differ(before: ndarray, after: ndarray) -> bool:
    """True when at least one cell changed value or presence; merge flags are ignored."""
    return not array_equal(before['value'], after['value'])


def is_done(values: ndarray) -> bool:
    """
    Check if the game has ended by determining if any moves are possible.

    Parameters
    ----------
    values : ndarray
        The matrix of tile values (0 for empty).

    Returns
    -------
    bool
        True if the game is over (no moves possible), False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no adjacent cells have the same value.
    """
    return bool(
        np_all(values != 0)
        and not np_any(values[:-1] == values[1:])
        and not np_any(values[:, :-1] == values[:, 1:])
    )
