# -*- coding: utf-8 -*-
"""
Best score storages.
"""

from .bestscore import BestScoreStore, JsonBestScoreStore, MemoryBestScoreStore

__all__ = ["BestScoreStore", "JsonBestScoreStore", "MemoryBestScoreStore"]
