# -*- coding: utf-8 -*-
"""
Sliding-tile merge puzzle.

Tiles carrying powers of two slide on a square grid and merge when two equal values collide.
"""

from .config import GameConfiguration
from .core import Direction
from .envs import GameState, GridEngine, MoveResult, Tile

__all__ = ["Direction", "GameConfiguration", "GameState", "GridEngine", "MoveResult", "Tile"]
