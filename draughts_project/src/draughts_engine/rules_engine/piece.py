"""
棋子编码

每个格子用一个3位整数表示: [C|T|P]
    P (bit0): 是否有棋子
    T (bit1): 棋子类型，0 = 兵，1 = 王
    C (bit2): 棋子颜色，0 = 黑方，1 = 白方

规则代码只使用 Piece 对象，整数编码只在棋盘存储和对外接口处转换。
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from ..utils.exceptions import InvalidPieceValueError


PRESENT_BIT = 0b001
KING_BIT = 0b010
COLOR_BIT = 0b100


class Color(IntEnum):
    """玩家颜色，数值与颜色位一致"""
    BLACK = 0
    WHITE = 1

    @property
    def opponent(self) -> 'Color':
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def forward(self) -> int:
        """兵前进方向的 y 增量: 黑方向下(y增大)，白方向上(y减小)"""
        return 1 if self is Color.BLACK else -1


class PieceKind(Enum):
    EMPTY = "empty"
    MAN = "man"
    KING = "king"


@dataclass(frozen=True)
class Piece:
    """
    单个格子的内容

    kind 为 EMPTY 时 color 必须为 None。
    """
    kind: PieceKind
    color: Optional[Color] = None

    def __post_init__(self):
        if (self.kind is PieceKind.EMPTY) != (self.color is None):
            raise ValueError(f"棋子类型与颜色不匹配: {self.kind}, {self.color}")

    @property
    def is_empty(self) -> bool:
        return self.kind is PieceKind.EMPTY

    @property
    def is_king(self) -> bool:
        return self.kind is PieceKind.KING

    @property
    def is_man(self) -> bool:
        return self.kind is PieceKind.MAN

    def is_enemy_of(self, color: Color) -> bool:
        return not self.is_empty and self.color != color

    def promoted(self) -> 'Piece':
        """返回升变后的王，空格原样返回"""
        if self.is_empty:
            return self
        return Piece(PieceKind.KING, self.color)

    def to_value(self) -> int:
        """
        转换为3位整数编码

        Returns:
            int: 0, 1, 3, 5 或 7
        """
        if self.is_empty:
            return 0
        value = PRESENT_BIT
        if self.is_king:
            value |= KING_BIT
        if self.color is Color.WHITE:
            value |= COLOR_BIT
        return value

    @classmethod
    def from_value(cls, value: int) -> 'Piece':
        """
        从3位整数编码创建棋子

        Args:
            value: 整数编码

        Returns:
            Piece: 对应的棋子

        Raises:
            InvalidPieceValueError: 编码不合法(空格带有其他位，或超出3位)
        """
        value = int(value)
        if value == 0:
            return EMPTY
        if value < 0 or value > 0b111 or not value & PRESENT_BIT:
            raise InvalidPieceValueError(value)
        kind = PieceKind.KING if value & KING_BIT else PieceKind.MAN
        color = Color.WHITE if value & COLOR_BIT else Color.BLACK
        return cls(kind, color)

    @staticmethod
    def is_valid_value(value: int) -> bool:
        return int(value) in VALID_VALUES

    def __str__(self) -> str:
        if self.is_empty:
            return "."
        symbol = "b" if self.color is Color.BLACK else "w"
        return symbol.upper() if self.is_king else symbol


EMPTY = Piece(PieceKind.EMPTY)
BLACK_MAN = Piece(PieceKind.MAN, Color.BLACK)
WHITE_MAN = Piece(PieceKind.MAN, Color.WHITE)
BLACK_KING = Piece(PieceKind.KING, Color.BLACK)
WHITE_KING = Piece(PieceKind.KING, Color.WHITE)

VALID_VALUES = frozenset(p.to_value() for p in (EMPTY, BLACK_MAN, WHITE_MAN, BLACK_KING, WHITE_KING))
