# -*- coding: utf-8 -*-
"""
This module provides the pure board functions of the game.

It includes the tile record layout, the left compaction with its direction normalization,
random tile spawning, the legal move queries and the game over check.
"""

from .gameboard import (
    TILE_DTYPE,
    TILE_SPAWN_PROBS,
    board_from_values,
    boards_differ,
    compact_left,
    compact_right,
    compact_row,
    empty_board,
    empty_cells,
    fill_cell,
    is_done,
    reverse_rows,
    transpose,
)
from .gamemove import DIRECTIONS, Direction, legal_directions, legal_directions_mask, slide

__all__ = [
    "TILE_DTYPE",
    "TILE_SPAWN_PROBS",
    "DIRECTIONS",
    "Direction",
    "board_from_values",
    "boards_differ",
    "compact_left",
    "compact_right",
    "compact_row",
    "empty_board",
    "empty_cells",
    "fill_cell",
    "is_done",
    "legal_directions",
    "legal_directions_mask",
    "reverse_rows",
    "slide",
    "transpose",
]
