"""
跳棋规则引擎

维护任意尺寸国际跳棋棋局的权威状态，验证玩家提交的走法(包括连吃)，
执行走法并支持悔棋。
"""

__version__ = "0.1.0"
__author__ = "Draughts Engine Team"

from .rules_engine import (
    Color, Piece, DraughtsBoard, DraughtsGame, Move, MoveSegment,
    RuleEngine, MoveExecutor, SegmentCheck, SegmentVerdict,
    new_board, new_game, validate_segment, apply_move, undo_last_move
)
from .config import ConfigManager, GameConfig, SystemConfig
from .utils import setup_logger, get_logger, DraughtsError

__all__ = [
    "__version__", "__author__",
    "Color", "Piece", "DraughtsBoard", "DraughtsGame", "Move", "MoveSegment",
    "RuleEngine", "MoveExecutor", "SegmentCheck", "SegmentVerdict",
    "new_board", "new_game", "validate_segment", "apply_move", "undo_last_move",
    "ConfigManager", "GameConfig", "SystemConfig",
    "setup_logger", "get_logger", "DraughtsError"
]
