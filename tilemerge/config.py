# -*- coding: utf-8 -*-
"""
Game configuration.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from tilemerge.core.gameboard import TILE_SPAWN_PROBS


@dataclass
class GameConfiguration:
    """
    Configuration of one game.

    Attributes
    ----------
    size : int
        The size of the square grid.
    win_value : int
        Tile value that marks the game as won.
    tile_spawn_probs : dict[int, float]
        Probability of each value for a spawned tile.
    initial_tiles : int
        Number of tiles placed by a reset.
    best_score_path : Path, optional
        JSON file keeping the best score. The best score stays in memory when not set.
    seed : int, optional
        Seed of the random number generator.
    """

    size: int = 4
    win_value: int = 2048
    tile_spawn_probs: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))
    initial_tiles: int = 2
    best_score_path: Optional[Path] = None
    seed: Optional[int] = None

    def validate(self) -> None:
        """
        Check that the configuration describes a playable game.

        Raises
        ------
        ValueError
            If one of the values is out of range.
        """
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')
        if not _is_power_of_two(self.win_value) or self.win_value < 4:
            raise ValueError(f'win_value must be a power of two >= 4, got {self.win_value}')
        if not 0 <= self.initial_tiles <= self.size * self.size:
            raise ValueError(f'initial_tiles must fit on the board, got {self.initial_tiles}')
        if not self.tile_spawn_probs or not all(_is_power_of_two(value) for value in self.tile_spawn_probs):
            raise ValueError(f'spawned tiles must be powers of two, got {list(self.tile_spawn_probs)}')
        if abs(sum(self.tile_spawn_probs.values()) - 1.0) > 1e-9:
            raise ValueError(f'spawn probabilities must sum to 1, got {sum(self.tile_spawn_probs.values())}')


def _is_power_of_two(value: int) -> bool:
    return value >= 2 and value & (value - 1) == 0
