# -*- coding: utf-8 -*-
"""
Graphical User Interface for the sliding-tile merge game

This module provides functionality to create and manage a graphical window for displaying the
game board. It utilizes Matplotlib for rendering and handling user interactions, offering
a visual representation of the game state and allowing for real-time updates as the game progresses.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event


class WindowBoard:
    """
    A class for rendering and managing the game board using Matplotlib.

    Methods
    -------
    show_state(state: GameState)
        Update the display with the current game state.
    register_key_handler(key_handler: Callable)
        Register a function to handle keyboard events.
    show(block: bool = True)
        Display the game window.
    close()
        Close the game window.

    Notes
    -----
    - Tiles produced by a merge during the last move are outlined.
    - The figure title carries the score, the best score and the game status.
    """

    # ##: Colors mapping for different tile values.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#EDE0C8",
        8: "#F2B179",
        16: "#F59563",
        32: "#F67C5F",
        64: "#F65E3B",
        128: "#EDCF72",
        256: "#EDCC61",
        512: "#EDC850",
        1024: "#EDC53F",
        2048: "#EDC22E",
    }

    # ##: Color of tiles above the palette.
    SUPER_COLOR = "#3C3A32"

    # ##: Outline of merged tiles.
    MERGE_EDGE = "#F9F6F2"

    def __init__(self, title: str, size: int):
        """
        Initialize the game board window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            The size of the game board (e.g., 4 for a 4x4 board).
        """
        self.fig, self.axe = plt.subplots()
        self.fig.canvas.manager.set_window_title(title)
        self._setup_axes(size)
        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _setup_axes(self, size: int):
        """
        Set up one sub-axes per cell of the board.

        Parameters
        ----------
        size : int
            The size of the game board.
        """
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.92, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#BBADA0")
        self.axe.set_axis_off()

        self.texts = []
        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        for ax in self.axes:
            text = ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="demibold")
            self.texts.append(text)
            ax.set_xticks([])
            ax.set_yticks([])

    def _close_handler(self, event: Optional[Event] = None):
        self.closed = True

    def show_state(self, state):
        """
        Show or update the game board.

        Parameters
        ----------
        state : GameState
            The snapshot to display.
        """
        grid = state.grid
        for ax, text, value, merged in zip(self.axes, self.texts, grid["value"].flat, grid["merged"].flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            text.set_color("#776E65" if value in (2, 4) else "#F9F6F2")
            ax.set_facecolor(self.COLORS.get(value, self.SUPER_COLOR))

            # ##: Outline tiles merged by the last move.
            for spine in ax.spines.values():
                spine.set_edgecolor(self.MERGE_EDGE if merged else "#BBADA0")
                spine.set_linewidth(3 if merged else 1)

        self.title = self.fig.suptitle(self.status_line(state))
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(0.001)

    @staticmethod
    def status_line(state) -> str:
        """Title shown above the board."""
        line = f"Score: {state.score}    Best: {state.best_score}"
        if state.over:
            return line + "    Game over! (backspace to restart)"
        if state.won:
            return line + f"    You reached {state.win_value}!"
        return line

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            A function to handle keyboard events.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
