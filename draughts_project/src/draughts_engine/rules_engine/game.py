"""
跳棋对局

对局包含一个棋盘、当前玩家和按时间顺序排列的走法历史。
只有走法执行器(MoveExecutor)会修改对局。
"""

from typing import List, Optional

from .board import DraughtsBoard, Coord
from .move import Move
from .piece import Color, Piece


class DraughtsGame:
    """
    跳棋对局类

    move_history 按时间顺序排列，最后一个元素是最近一步。
    """

    def __init__(self, xsize: int = 10, ysize: int = 10):
        """
        创建初始局面的对局，白方先走

        Raises:
            InvalidSizeError: 棋盘尺寸不合法
        """
        self.board = DraughtsBoard(xsize, ysize)
        self.current_player = Color.WHITE
        self.move_history: List[Move] = []

    @classmethod
    def from_board(cls, board: DraughtsBoard, current_player: Color = Color.WHITE) -> 'DraughtsGame':
        """用已有棋盘创建对局，历史为空"""
        game = cls.__new__(cls)
        game.board = board
        game.current_player = Color(current_player)
        game.move_history = []
        return game

    @property
    def xsize(self) -> int:
        return self.board.xsize

    @property
    def ysize(self) -> int:
        return self.board.ysize

    def get_piece_value(self, pos: Coord) -> int:
        """获取指定格子的棋子编码，供显示层使用"""
        return self.board.get_value(pos)

    def get_piece(self, pos: Coord) -> Piece:
        return self.board.get_piece(pos)

    def get_move_count(self) -> int:
        return len(self.move_history)

    def get_last_move(self) -> Optional[Move]:
        return self.move_history[-1] if self.move_history else None

    def __repr__(self) -> str:
        return (f"DraughtsGame(size={self.xsize}x{self.ysize}, "
                f"current_player={self.current_player.name}, moves={len(self.move_history)})")


def new_game(xsize: int, ysize: int) -> DraughtsGame:
    """创建新对局，尺寸不合法时抛出 InvalidSizeError"""
    return DraughtsGame(xsize, ysize)
