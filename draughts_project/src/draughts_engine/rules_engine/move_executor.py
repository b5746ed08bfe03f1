"""
走法执行器

验证并执行完整走法，记录悔棋所需的信息，支持撤销上一步。

执行是原子的: 所有单步都在棋盘副本上依次验证和执行，全部通过后才提交到对局；
任何一步被拒绝时对局保持不变。
"""

from typing import Optional, Sequence

from .board import DraughtsBoard
from .game import DraughtsGame
from .move import Move, MoveSegment
from .piece import Piece
from .rule_engine import RuleEngine, SegmentRule
from ..utils.exceptions import MoveRejectedError, NoHistoryError
from ..utils.logger import LoggerMixin


class MoveExecutor(LoggerMixin):
    """
    走法执行器

    使用 RuleEngine 验证每一步，执行成功后把走法追加到对局历史并交换走子方。
    """

    def __init__(self, rule_engine: Optional[RuleEngine] = None):
        self.rule_engine = rule_engine or RuleEngine()

    def apply_move(self, game: DraughtsGame, segments: Sequence[MoveSegment]) -> Move:
        """
        执行走法

        Args:
            game: 对局
            segments: 按顺序排列的单步，只需填写 origin 和 destination

        Returns:
            Move: 已记录到历史中的走法(含悔棋信息)

        Raises:
            MoveRejectedError: 任意一步不合法，对局不变
        """
        if not segments:
            raise MoveRejectedError(0, SegmentRule.CHAINING, "走法不能为空")

        player = game.current_player
        scratch = game.board.copy()
        committed = []
        predecessor = None

        for index, submitted in enumerate(segments):
            segment = MoveSegment(submitted.origin, submitted.destination)
            check = self.rule_engine.validate_segment(scratch, player, segment, predecessor)
            if not check.is_valid:
                self.log_warning(f"走法被拒绝: 第{index + 1}步 {segment.origin}->{segment.destination}, "
                                 f"{check.reason}")
                raise MoveRejectedError(index, check.rule, check.reason)
            if len(segments) > 1 and not check.is_capture:
                reason = "连续多步的走法每一步都必须吃子"
                self.log_warning(f"走法被拒绝: 第{index + 1}步, {reason}")
                raise MoveRejectedError(index, SegmentRule.CHAIN_CAPTURE, reason)

            self._apply_segment(scratch, segment, check.taken)
            committed.append(segment)
            predecessor = segment

        move = Move(segments=committed, player=player)
        game.board = scratch
        game.move_history.append(move)
        game.current_player = player.opponent

        self.log_info(f"{player.name} 走 {_path(move)}")
        return move

    @staticmethod
    def _apply_segment(board: DraughtsBoard, segment: MoveSegment, taken):
        """在棋盘上执行一步并填写悔棋信息"""
        piece = board.get_piece(segment.origin)
        segment.origin_value = piece.to_value()

        if taken is not None:
            segment.captured_value = board.get_value(taken)
            segment.captured_pos = taken
            board.clear(taken)

        # 兵到达对方底线时升变为王
        if piece.is_man and segment.destination[1] == board.promotion_row(piece.color):
            piece = piece.promoted()

        board.clear(segment.origin)
        board.set_piece(segment.destination, piece)

    def undo_last_move(self, game: DraughtsGame) -> Move:
        """
        撤销上一步走法

        Returns:
            Move: 被撤销的走法

        Raises:
            NoHistoryError: 没有走法历史
        """
        if not game.move_history:
            raise NoHistoryError()

        move = game.move_history.pop()
        for segment in reversed(move.segments):
            game.board.clear(segment.destination)
            game.board.set_piece(segment.origin, Piece.from_value(segment.origin_value))
            if segment.is_capture:
                game.board.set_piece(segment.captured_pos, Piece.from_value(segment.captured_value))

        game.current_player = move.player
        self.log_info(f"撤销 {move.player.name} 的走法 {_path(move)}")
        return move


def _path(move: Move) -> str:
    """日志中用坐标表示走法路线"""
    return "->".join(str(sq) for sq in [move.origin] + [s.destination for s in move.segments])


_default_executor = MoveExecutor()


def apply_move(game: DraughtsGame, segments: Sequence[MoveSegment]) -> Move:
    """使用默认规则执行走法"""
    return _default_executor.apply_move(game, segments)


def undo_last_move(game: DraughtsGame) -> Move:
    """撤销对局的上一步走法"""
    return _default_executor.undo_last_move(game)
