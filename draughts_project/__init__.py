"""
国际跳棋规则引擎 (Draughts Project)

维护棋局状态、验证走法并执行走法的规则引擎，附带命令行界面。
"""

__version__ = "0.1.0"
__author__ = "Draughts Project Team"
__description__ = "国际跳棋规则引擎 - 任意尺寸棋盘的走法验证、执行与悔棋"

from draughts_project.src import draughts_engine

__all__ = [
    "draughts_engine",
    "__version__",
    "__author__",
    "__description__",
]
