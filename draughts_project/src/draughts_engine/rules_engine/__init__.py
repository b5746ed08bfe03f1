"""
跳棋规则引擎模块

包含棋子编码、棋盘表示、单步走法验证以及走法的执行与撤销。
"""

from .piece import Color, Piece, PieceKind
from .board import DraughtsBoard, new_board
from .move import Move, MoveSegment, parse_move_notation
from .game import DraughtsGame, new_game
from .board_validator import BoardValidator
from .rule_engine import RuleEngine, SegmentCheck, SegmentRule, SegmentVerdict, validate_segment
from .move_executor import MoveExecutor, apply_move, undo_last_move

__all__ = [
    'Color', 'Piece', 'PieceKind',
    'DraughtsBoard', 'new_board',
    'Move', 'MoveSegment', 'parse_move_notation',
    'DraughtsGame', 'new_game',
    'BoardValidator',
    'RuleEngine', 'SegmentCheck', 'SegmentRule', 'SegmentVerdict', 'validate_segment',
    'MoveExecutor', 'apply_move', 'undo_last_move'
]
