"""
Best score persistence.

The only persisted value of the game is one integer: the best score ever reached. Stores hide where
and how it is kept; the engine only calls ``load`` once and ``save`` on every new best score.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class BestScoreStore(ABC):
    """
    Interface of a best score storage.
    """

    @abstractmethod
    def load(self) -> int:
        """
        Read the persisted best score.

        Returns
        -------
        int
            The best score, 0 when nothing was persisted yet.
        """

    @abstractmethod
    def save(self, value: int) -> None:
        """
        Persist a new best score.

        Parameters
        ----------
        value : int
            The best score to keep.
        """


class MemoryBestScoreStore(BestScoreStore):
    """Keep the best score in memory, for one session only."""

    def __init__(self, value: int = 0):
        self._value = value

    def load(self) -> int:
        return self._value

    def save(self, value: int) -> None:
        self._value = value


class JsonBestScoreStore(BestScoreStore):
    """
    Keep the best score in a JSON file holding a single key.

    Parameters
    ----------
    path : str or Path
        Location of the JSON file.
    key : str, optional
        Name of the key holding the score (default is ``bestScore``).

    Notes
    -----
    - A missing file reads as 0.
    - Malformed content, including non-finite numbers, reads as 0 and is logged; the next ``save``
      overwrites it.
    - ``save`` lets ``OSError`` propagate so the caller decides how to report it.
    """

    def __init__(self, path: Union[str, Path], key: str = 'bestScore'):
        self.path = Path(path)
        self.key = key

    def load(self) -> int:
        if not self.path.exists():
            return 0

        try:
            content = json.loads(self.path.read_text(encoding='utf-8'))
            value = int(content[self.key])
        except (ValueError, KeyError, TypeError, OverflowError):
            _logger.warning('Ignoring malformed best score file %s', self.path)
            return 0

        if value < 0:
            _logger.warning('Ignoring negative best score %d in %s', value, self.path)
            return 0
        return value

    def save(self, value: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({self.key: int(value)}), encoding='utf-8')
