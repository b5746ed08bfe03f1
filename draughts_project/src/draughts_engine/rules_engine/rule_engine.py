"""
跳棋规则引擎

验证单步走法的合法性。规则按顺序检查，遇到第一条不满足的规则即拒绝:
    1. 终点在棋盘内
    2. 与上一步首尾相接；如果是第一步，起点必须是当前玩家的棋子
    3. 终点为空
    4. 沿斜线移动至少一格
    5. 兵/王各自的走法与吃子规则
引擎只读取棋盘，从不修改棋盘。
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

from .board import DraughtsBoard, Coord
from .move import MoveSegment
from .piece import Color, Piece
from ..utils.logger import LoggerMixin


class SegmentRule(IntEnum):
    """单步走法被拒绝时违反的规则"""
    BOUNDS = 1
    CHAINING = 2
    DESTINATION_FREE = 3
    DIAGONAL = 4
    PIECE_MOVEMENT = 5
    # 连吃中的每一步都必须吃子，由走法执行器检查
    CHAIN_CAPTURE = 6


class SegmentVerdict(Enum):
    REJECTED = 0
    PLAIN_STEP = 1
    CAPTURE = 2


@dataclass(frozen=True)
class SegmentCheck:
    """
    单步走法的验证结果

    verdict 为 CAPTURE 时 taken 为被吃棋子的坐标；
    verdict 为 REJECTED 时 rule 和 reason 说明原因。
    """
    verdict: SegmentVerdict
    taken: Optional[Coord] = None
    rule: Optional[SegmentRule] = None
    reason: str = ""

    @property
    def is_valid(self) -> bool:
        return self.verdict is not SegmentVerdict.REJECTED

    @property
    def is_capture(self) -> bool:
        return self.verdict is SegmentVerdict.CAPTURE

    @classmethod
    def rejected(cls, rule: SegmentRule, reason: str) -> 'SegmentCheck':
        return cls(SegmentVerdict.REJECTED, rule=rule, reason=reason)

    @classmethod
    def plain_step(cls) -> 'SegmentCheck':
        return cls(SegmentVerdict.PLAIN_STEP)

    @classmethod
    def capture(cls, taken: Coord) -> 'SegmentCheck':
        return cls(SegmentVerdict.CAPTURE, taken=taken)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class RuleEngine(LoggerMixin):
    """
    跳棋规则引擎

    负责验证单步走法。men_capture_backward 为 True 时兵可以向后吃子，
    默认只能向前吃子。
    """

    def __init__(self, men_capture_backward: bool = False):
        self.men_capture_backward = men_capture_backward

    def validate_segment(
        self,
        board: DraughtsBoard,
        current_player: Color,
        segment: MoveSegment,
        predecessor: Optional[MoveSegment] = None
    ) -> SegmentCheck:
        """
        验证单步走法

        Args:
            board: 当前棋盘(连吃时为已执行前几步后的棋盘)
            current_player: 当前玩家
            segment: 要验证的单步
            predecessor: 同一走法中的上一步，None 表示这是第一步

        Returns:
            SegmentCheck: 验证结果
        """
        result = self._validate(board, Color(current_player), segment, predecessor)
        if not result.is_valid:
            self.log_debug(f"拒绝 {segment.origin}->{segment.destination}: "
                           f"规则{int(result.rule)} {result.reason}")
        return result

    def _validate(self, board, current_player, segment, predecessor) -> SegmentCheck:
        origin, dest = segment.origin, segment.destination

        # 1: 不能走出棋盘
        if not board.in_bounds(dest):
            return SegmentCheck.rejected(SegmentRule.BOUNDS, f"终点{dest}在棋盘外")
        if not board.in_bounds(origin):
            return SegmentCheck.rejected(SegmentRule.BOUNDS, f"起点{origin}在棋盘外")

        # 2: 与上一步相接，或走的是自己的棋子
        piece = board.get_piece(origin)
        if piece.is_empty:
            return SegmentCheck.rejected(SegmentRule.CHAINING, f"起点{origin}没有棋子")
        if predecessor is not None:
            if predecessor.destination != origin:
                return SegmentCheck.rejected(
                    SegmentRule.CHAINING,
                    f"起点{origin}与上一步终点{predecessor.destination}不相接"
                )
        elif piece.color != current_player:
            return SegmentCheck.rejected(SegmentRule.CHAINING, f"起点{origin}不是当前玩家的棋子")

        # 3: 终点为空
        if not board.is_empty(dest):
            return SegmentCheck.rejected(SegmentRule.DESTINATION_FREE, f"终点{dest}已有棋子")

        # 4: 斜线移动
        dx, dy = segment.delta
        if abs(dx) != abs(dy) or dx == 0:
            return SegmentCheck.rejected(SegmentRule.DIAGONAL, "不是斜线移动")

        # 5: 兵和王的规则
        if piece.is_man:
            return self._validate_man(board, piece, origin, dx, dy)
        return self._validate_king(board, piece, origin, dx, dy)

    def _validate_man(self, board, piece: Piece, origin: Coord, dx: int, dy: int) -> SegmentCheck:
        steps = abs(dx)
        forward = _sign(dy) == piece.color.forward

        if steps == 1:
            if not forward:
                return SegmentCheck.rejected(SegmentRule.PIECE_MOVEMENT, "兵不能后退")
            return SegmentCheck.plain_step()

        if steps == 2:
            if not forward and not self.men_capture_backward:
                return SegmentCheck.rejected(SegmentRule.PIECE_MOVEMENT, "兵不能向后吃子")
            middle = (origin[0] + dx // 2, origin[1] + dy // 2)
            if not board.get_piece(middle).is_enemy_of(piece.color):
                return SegmentCheck.rejected(SegmentRule.PIECE_MOVEMENT, f"{middle}没有可吃的对方棋子")
            return SegmentCheck.capture(middle)

        return SegmentCheck.rejected(SegmentRule.PIECE_MOVEMENT, f"兵不能一次走{steps}格")

    def _validate_king(self, board, piece: Piece, origin: Coord, dx: int, dy: int) -> SegmentCheck:
        occupied = self._occupied_on_path(board, origin, dx, dy)

        if not occupied:
            return SegmentCheck.plain_step()
        if len(occupied) > 1:
            return SegmentCheck.rejected(SegmentRule.PIECE_MOVEMENT, "路径上有多于一个棋子")

        taken, victim = occupied[0]
        if not victim.is_enemy_of(piece.color):
            return SegmentCheck.rejected(SegmentRule.PIECE_MOVEMENT, f"{taken}是己方棋子")
        return SegmentCheck.capture(taken)

    @staticmethod
    def _occupied_on_path(board, origin: Coord, dx: int, dy: int) -> List[Tuple[Coord, Piece]]:
        """起点和终点之间(不含两端)所有有棋子的格子"""
        step_x, step_y = _sign(dx), _sign(dy)
        occupied = []
        for i in range(1, abs(dx)):
            pos = (origin[0] + i * step_x, origin[1] + i * step_y)
            square = board.get_piece(pos)
            if not square.is_empty:
                occupied.append((pos, square))
        return occupied


_default_engine = RuleEngine()


def validate_segment(board: DraughtsBoard, current_player: Color, segment: MoveSegment,
                     predecessor: Optional[MoveSegment] = None) -> SegmentCheck:
    """使用默认规则(兵只能向前吃子)验证单步走法"""
    return _default_engine.validate_segment(board, current_player, segment, predecessor)
