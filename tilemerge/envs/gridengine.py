"""Sliding-tile merge game engine."""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

from numpy import ndarray
from numpy.random import PCG64DXSM, default_rng

from tilemerge.config import GameConfiguration
from tilemerge.core.gameboard import (
    TILE_SPAWN_PROBS,
    board_from_values,
    boards_differ,
    empty_board,
    fill_cell,
    is_done,
)
from tilemerge.core.gamemove import Direction, legal_directions, slide
from tilemerge.storage import BestScoreStore, JsonBestScoreStore, MemoryBestScoreStore
from tilemerge.utils.console import format_board

# ##>: Module logger.
_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tile:
    """One tile of the grid."""

    value: int
    just_merged: bool = False


class MoveResult(NamedTuple):
    """
    Outcome of one move.

    Attributes
    ----------
    changed : bool
        Whether at least one cell changed.
    score_delta : int
        Score gained by the merges of the move.
    reached_new_milestone : bool
        Whether the move produced the winning tile for the first time.
    """

    changed: bool
    score_delta: int
    reached_new_milestone: bool


# ##>: Result of a rejected or ignored move.
NO_MOVE = MoveResult(changed=False, score_delta=0, reached_new_milestone=False)


@dataclass(frozen=True)
class GameState:
    """
    Read-only snapshot of a game.

    Attributes
    ----------
    grid : ndarray
        Copy of the structured board (fields ``value`` and ``merged``).
    score : int
        Score of the current game.
    best_score : int
        Best score ever reached.
    over : bool
        Whether the game reached a terminal position.
    won : bool
        Whether the winning tile was produced during this game.
    win_value : int
        Tile value that wins the game.
    """

    grid: ndarray
    score: int
    best_score: int
    over: bool
    won: bool
    win_value: int = 2048

    @property
    def size(self) -> int:
        return self.grid.shape[0]

    @property
    def values(self) -> ndarray:
        """Matrix of tile values, 0 for empty cells."""
        return self.grid['value'].copy()

    def tile(self, row: int, col: int) -> Optional[Tile]:
        """Tile at ``(row, col)``, None for an empty cell."""
        value, merged = self.grid[row, col]
        if value == 0:
            return None
        return Tile(value=int(value), just_merged=bool(merged))


class GridEngine:
    """
    Engine of the sliding-tile merge game.

    This class owns the grid, the score and the game flags. It implements the moves, the random tile
    spawns and the game over check, and keeps the best score in sync with a ``BestScoreStore``.

    Parameters
    ----------
    size : int, optional
        The size of the square grid (default is 4).
    win_value : int, optional
        Tile value that wins the game (default is 2048).
    store : BestScoreStore, optional
        Where the best score is persisted (default keeps it in memory).
    seed : int, optional
        Seed of the random number generator.
    tile_spawn_probs : dict[int, float], optional
        Probability of each value for a spawned tile.
    initial_tiles : int, optional
        Number of tiles placed by ``reset`` (default is 2).

    Notes
    -----
    The engine is not re-entrant. A multi-threaded host must serialize calls.
    """

    def __init__(
        self,
        size: int = 4,
        win_value: int = 2048,
        store: Optional[BestScoreStore] = None,
        seed: Optional[int] = None,
        tile_spawn_probs: Optional[dict[int, float]] = None,
        initial_tiles: int = 2,
    ):
        config = GameConfiguration(
            size=size,
            win_value=win_value,
            tile_spawn_probs=dict(tile_spawn_probs or TILE_SPAWN_PROBS),
            initial_tiles=initial_tiles,
            seed=seed,
        )
        config.validate()

        self._size = size
        self._win_value = win_value
        self._tile_spawn_probs = config.tile_spawn_probs
        self._initial_tiles = initial_tiles
        self._rng = default_rng(seed) if seed is not None else default_rng(PCG64DXSM())
        self._store = store or MemoryBestScoreStore()

        self._board = empty_board(size)
        self._score = 0
        self._best_score = self._load_best_score()
        self._over = False
        self._won = False

        self.reset()

    @classmethod
    def from_config(cls, config: GameConfiguration) -> 'GridEngine':
        """
        Build an engine from a configuration.

        A JSON best score store is used when ``config.best_score_path`` is set.
        """
        config.validate()
        store = JsonBestScoreStore(config.best_score_path) if config.best_score_path else None
        return cls(
            size=config.size,
            win_value=config.win_value,
            store=store,
            seed=config.seed,
            tile_spawn_probs=config.tile_spawn_probs,
            initial_tiles=config.initial_tiles,
        )

    @property
    def size(self) -> int:
        return self._size

    @property
    def score(self) -> int:
        return self._score

    @property
    def best_score(self) -> int:
        return self._best_score

    @property
    def over(self) -> bool:
        return self._over

    @property
    def won(self) -> bool:
        return self._won

    @property
    def win_value(self) -> int:
        return self._win_value

    @property
    def max_tile(self) -> int:
        return int(self._board['value'].max())

    @property
    def legal_moves(self) -> list[Direction]:
        """Directions that would change the grid."""
        return legal_directions(self._board['value'])

    @property
    def state(self) -> GameState:
        """
        Get a read-only snapshot of the game.

        Returns
        -------
        GameState
            The snapshot; its grid is a copy, later moves do not change it.
        """
        return GameState(
            grid=self._board.copy(),
            score=self._score,
            best_score=self._best_score,
            over=self._over,
            won=self._won,
            win_value=self._win_value,
        )

    def reset(self) -> GameState:
        """
        Start a new game: empty the grid, clear score and flags, and spawn the initial tiles.

        The best score is kept.

        Returns
        -------
        GameState
            The new game state.
        """
        self._board = empty_board(self._size)
        self._score = 0
        self._over = False
        self._won = False

        for _ in range(self._initial_tiles):
            self.spawn_tile()

        # ##: A fully seeded board may already be stuck.
        self._over = self.is_terminal()
        return self.state

    def load(self, values: ndarray) -> GameState:
        """
        Replace the grid by a given position.

        Parameters
        ----------
        values : ndarray
            Square matrix of tile values, 0 for empty cells.

        Returns
        -------
        GameState
            The new game state. The score is kept; ``won`` and ``over`` follow the position.

        Raises
        ------
        ValueError
            If the matrix has the wrong shape or holds values that are not tiles.
        """
        board = board_from_values(values)
        if board.shape != (self._size, self._size):
            raise ValueError(f'expected a {self._size}x{self._size} grid, got shape {board.shape}')

        tiles = board['value'][board['value'] != 0]
        if ((tiles < 2) | (tiles & (tiles - 1) != 0)).any():
            raise ValueError(f'tile values must be powers of two, got {sorted(set(tiles.tolist()))}')

        self._board = board
        self._won = bool((tiles >= self._win_value).any())
        self._over = self.is_terminal()
        return self.state

    def spawn_tile(self) -> Optional[tuple[int, int]]:
        """
        Place a new tile (2 or 4) on a random empty cell.

        Returns
        -------
        tuple[int, int] | None
            Coordinates of the new tile, or None when the grid is full.

        Notes
        -----
        A full grid is not an error; nothing happens.
        """
        cell = fill_cell(self._board, self._rng, self._tile_spawn_probs)
        if cell is not None:
            _logger.debug('Spawned %d at %s', self._board['value'][cell], cell)
        return cell

    def apply_move(self, direction: Union[Direction, str]) -> MoveResult:
        """
        Slide and merge every tile in a direction.

        Parameters
        ----------
        direction : Direction or str
            The move direction; the strings ``up``, ``down``, ``left`` and ``right`` are accepted.

        Returns
        -------
        MoveResult
            Whether the grid changed, the score gained and whether the winning tile was produced
            for the first time.

        Notes
        -----
        - Merge flags of every tile are cleared before the move is evaluated.
        - No tile is spawned; see ``step`` for the complete turn.
        - An unknown direction is logged and ignored.
        """
        try:
            direction = Direction(direction)
        except ValueError:
            _logger.warning('Ignoring unknown direction %r', direction)
            return NO_MOVE

        # ##: Merge flags only describe the last move.
        self._board['merged'] = False
        before = self._board.copy()

        delta, self._board, reached = slide(self._board, direction, self._win_value)
        changed = boards_differ(before, self._board)

        milestone = reached and not self._won
        if milestone:
            self._won = True
            _logger.info('Reached %d with score %d', self._win_value, self._score + delta)

        if delta:
            self._score += delta
            self._record_score()

        _logger.debug('Move %s: changed=%s, delta=%d', direction.value, changed, delta)
        return MoveResult(changed=changed, score_delta=delta, reached_new_milestone=milestone)

    def is_terminal(self) -> bool:
        """
        Check if no move can change the grid.

        Returns
        -------
        bool
            True when the grid is full and no two neighbouring cells hold the same value.
        """
        return is_done(self._board['value'])

    def step(self, direction: Union[Direction, str]) -> MoveResult:
        """
        Play one complete turn.

        The move is applied; when it changed the grid a new tile is spawned and the game is marked as
        over if no move is left. Input is ignored once the game is over.

        Parameters
        ----------
        direction : Direction or str
            The move direction.

        Returns
        -------
        MoveResult
            The outcome of the move.
        """
        if self._over:
            return NO_MOVE

        result = self.apply_move(direction)
        if result.changed:
            self.spawn_tile()
            if self.is_terminal():
                self._over = True
                _logger.info('Game over with score %d (max tile %d)', self._score, self.max_tile)
        return result

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(format_board(self.state))

    def _load_best_score(self) -> int:
        try:
            return self._store.load()
        except OSError:
            _logger.exception('Could not read the best score, starting from 0')
            return 0

    def _record_score(self) -> None:
        if self._score <= self._best_score:
            return

        self._best_score = self._score
        _logger.info('New best score %d', self._best_score)
        try:
            self._store.save(self._best_score)
        except OSError:
            _logger.exception('Could not persist best score %d', self._best_score)
