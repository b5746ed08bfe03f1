"""
Draughts Project 源代码模块

- draughts_engine: 跳棋规则引擎
"""

from . import draughts_engine

__all__ = [
    "draughts_engine",
]
