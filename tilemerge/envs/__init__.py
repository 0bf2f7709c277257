# -*- coding: utf-8 -*-
"""
Python implementation of the sliding-tile merge game.

This module provides the `GridEngine` class, which owns the game board and applies the rules of the game.
"""

from .gridengine import NO_MOVE, GameState, GridEngine, MoveResult, Tile

__all__ = ["GridEngine", "GameState", "MoveResult", "NO_MOVE", "Tile"]
