# -*- coding: utf-8 -*-
"""
This module provides the renderers of a game state.

`format_board` produces a plain-text table; the `WindowBoard` class, imported from
`tilemerge.utils.windows`, draws the board in a Matplotlib window.
"""

from .console import format_board

__all__ = ["format_board"]
