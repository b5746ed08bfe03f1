"""
跳棋棋盘数据结构

定义任意尺寸跳棋棋盘的表示、初始局面和基本操作。
"""

import copy
from typing import Dict, List, Optional, Tuple

import numpy as np

from .piece import Color, Piece, EMPTY, BLACK_MAN, WHITE_MAN
from ..utils.exceptions import InvalidSizeError, InvalidCoordinateError, InvalidBoardError

Coord = Tuple[int, int]

MIN_XSIZE = 2
MIN_YSIZE = 3


class DraughtsBoard:
    """
    跳棋棋盘类

    棋盘为 xsize 列 x ysize 行的矩阵，board[x, y] 存储坐标 (x, y) 的棋子编码。
    """

    def __init__(self, xsize: int = 10, ysize: int = 10):
        """
        初始化棋盘并摆放初始局面

        Args:
            xsize: 列数，至少为2
            ysize: 行数，至少为3

        Raises:
            InvalidSizeError: 尺寸不合法
        """
        if not _is_valid_size(xsize, ysize):
            raise InvalidSizeError(xsize, ysize)

        self.xsize = int(xsize)
        self.ysize = int(ysize)
        self.board = np.zeros((self.xsize, self.ysize), dtype=np.int8)
        self._setup_initial_position()

    def _setup_initial_position(self):
        """
        摆放初始局面

        北方 y < (ysize-2+ysize%2)//2 的行放黑兵，南方 y > (ysize-ysize%2)//2 的行放白兵，
        均只放在 (x+y) 为奇数的格子上，中间的行为空。
        """
        north_end = (self.ysize - 2 + self.ysize % 2) // 2
        south_start = (self.ysize - self.ysize % 2) // 2

        self.board.fill(0)
        for x in range(self.xsize):
            for y in range(self.ysize):
                if (x + y) % 2 == 0:
                    continue
                if y < north_end:
                    self.board[x, y] = BLACK_MAN.to_value()
                elif y > south_start:
                    self.board[x, y] = WHITE_MAN.to_value()

    @classmethod
    def from_matrix(cls, matrix) -> 'DraughtsBoard':
        """
        从矩阵创建棋盘对象

        Args:
            matrix: 形状为 (xsize, ysize) 的整数矩阵，matrix[x][y] 为棋子编码

        Returns:
            DraughtsBoard: 棋盘对象

        Raises:
            InvalidBoardError: 矩阵未通过完整性检查
        """
        from .board_validator import BoardValidator

        grid = np.array(matrix)
        is_valid, errors = BoardValidator().full_validation(grid)
        if not is_valid:
            raise InvalidBoardError(errors)

        board = cls.__new__(cls)
        board.xsize, board.ysize = grid.shape
        board.board = grid.astype(np.int8)
        return board

    @classmethod
    def empty(cls, xsize: int, ysize: int) -> 'DraughtsBoard':
        """创建没有任何棋子的棋盘"""
        board = cls(xsize, ysize)
        board.board.fill(0)
        return board

    def to_matrix(self) -> np.ndarray:
        """返回棋盘矩阵的副本"""
        return self.board.copy()

    @property
    def shape(self) -> Tuple[int, int]:
        return self.xsize, self.ysize

    def in_bounds(self, pos: Coord) -> bool:
        x, y = pos
        return 0 <= x < self.xsize and 0 <= y < self.ysize

    def _check(self, pos: Coord):
        if not self.in_bounds(pos):
            raise InvalidCoordinateError(pos, f"超出 {self.xsize}x{self.ysize} 棋盘")

    def get_value(self, pos: Coord) -> int:
        """
        获取指定位置的棋子编码

        Args:
            pos: 坐标 (x, y)

        Returns:
            int: 3位棋子编码

        Raises:
            InvalidCoordinateError: 坐标在棋盘外
        """
        self._check(pos)
        return int(self.board[pos[0], pos[1]])

    def get_piece(self, pos: Coord) -> Piece:
        """获取指定位置的棋子"""
        return Piece.from_value(self.get_value(pos))

    def set_piece(self, pos: Coord, piece: Piece):
        self._check(pos)
        self.board[pos[0], pos[1]] = piece.to_value()

    def clear(self, pos: Coord):
        self.set_piece(pos, EMPTY)

    def is_empty(self, pos: Coord) -> bool:
        return self.get_value(pos) == 0

    def promotion_row(self, color: Color) -> int:
        """兵升变的底线: 黑方为最后一行，白方为第0行"""
        return self.ysize - 1 if color is Color.BLACK else 0

    def get_all_pieces(self, color: Optional[Color] = None) -> List[Tuple[Coord, Piece]]:
        """
        获取所有棋子的位置

        Args:
            color: 指定颜色，None表示获取所有棋子

        Returns:
            List[Tuple[Coord, Piece]]: [(坐标, 棋子), ...]，按 x 再按 y 排序
        """
        pieces = []
        for x, y in zip(*np.nonzero(self.board)):
            piece = Piece.from_value(self.board[x, y])
            if color is None or piece.color == color:
                pieces.append(((int(x), int(y)), piece))
        return pieces

    def count_pieces(self, color: Optional[Color] = None) -> Dict[Piece, int]:
        """统计各类棋子数量"""
        counts: Dict[Piece, int] = {}
        for _, piece in self.get_all_pieces(color):
            counts[piece] = counts.get(piece, 0) + 1
        return counts

    def copy(self) -> 'DraughtsBoard':
        return copy.deepcopy(self)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DraughtsBoard):
            return False
        return np.array_equal(self.board, other.board)

    # 棋盘可变，不可哈希
    __hash__ = None

    def __repr__(self) -> str:
        return f"DraughtsBoard(xsize={self.xsize}, ysize={self.ysize})"


def _is_valid_size(xsize, ysize) -> bool:
    if isinstance(xsize, bool) or isinstance(ysize, bool):
        return False
    if not isinstance(xsize, (int, np.integer)) or not isinstance(ysize, (int, np.integer)):
        return False
    return xsize >= MIN_XSIZE and ysize >= MIN_YSIZE


def new_board(xsize: int, ysize: int) -> DraughtsBoard:
    """创建带初始局面的棋盘，尺寸不合法时抛出 InvalidSizeError"""
    return DraughtsBoard(xsize, ysize)
