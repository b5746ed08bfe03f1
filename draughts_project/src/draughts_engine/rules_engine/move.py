"""
跳棋走法数据结构

定义单步走法(MoveSegment)、完整走法(Move)以及坐标记法的转换。
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .piece import Color

Coord = Tuple[int, int]

_SQUARE_RE = re.compile(r"([a-z]+)(\d+)")
# 后续每个格子前必须有分隔符，因此 "c6xe4" 中的 x 总是被当作吃子分隔符
_STEP_RE = re.compile(r"\s*([-x:])\s*([a-z]+\d+)")


def column_to_letters(x: int) -> str:
    """
    列号转换为字母，超过26列时使用多个字母: 0 -> a, 25 -> z, 26 -> aa

    Raises:
        ValueError: 列号为负
    """
    if x < 0:
        raise ValueError(f"无效的列号: {x}")
    letters = ""
    n = x + 1
    while n:
        n, r = divmod(n - 1, 26)
        letters = chr(ord('a') + r) + letters
    return letters


def letters_to_column(letters: str) -> int:
    n = 0
    for ch in letters:
        n = n * 26 + (ord(ch) - ord('a') + 1)
    return n - 1


def square_to_notation(pos: Coord) -> str:
    """
    坐标转换为记法，列用字母，行用数字

    Args:
        pos: 坐标 (x, y)

    Returns:
        str: 如 (1, 6) -> "b6"，(27, 6) -> "ab6"
    """
    x, y = pos
    if x < 0 or y < 0:
        raise ValueError(f"无法用记法表示的坐标: {pos}")
    return f"{column_to_letters(x)}{y}"


def notation_to_square(text: str) -> Coord:
    match = _SQUARE_RE.fullmatch(text.strip().lower())
    if not match:
        raise ValueError(f"无效的格子记法: {text!r}")
    return letters_to_column(match.group(1)), int(match.group(2))


@dataclass
class MoveSegment:
    """
    单步走法

    提交走法时只需要 origin 和 destination，其余字段在走法执行后由执行器填写，
    用于悔棋:
        origin_value: 执行前起点的棋子编码
        captured_value: 被吃棋子的编码，没有吃子时为0
        captured_pos: 被吃棋子的坐标
    """
    origin: Coord
    destination: Coord
    origin_value: int = 0
    captured_value: int = 0
    captured_pos: Optional[Coord] = None

    def __post_init__(self):
        self.origin = (int(self.origin[0]), int(self.origin[1]))
        self.destination = (int(self.destination[0]), int(self.destination[1]))

    @property
    def delta(self) -> Coord:
        return (self.destination[0] - self.origin[0],
                self.destination[1] - self.origin[1])

    @property
    def is_capture(self) -> bool:
        return self.captured_value != 0

    def to_notation(self) -> str:
        separator = "x" if self.is_capture else "-"
        return f"{square_to_notation(self.origin)}{separator}{square_to_notation(self.destination)}"

    def __str__(self) -> str:
        return self.to_notation()

    def to_dict(self) -> dict:
        return {
            'origin': self.origin,
            'destination': self.destination,
            'origin_value': self.origin_value,
            'captured_value': self.captured_value,
            'captured_pos': self.captured_pos
        }


@dataclass
class Move:
    """
    完整走法

    一个玩家一回合的走法，由一个或多个首尾相接的单步组成。
    """
    segments: List[MoveSegment] = field(default_factory=list)
    player: Optional[Color] = None

    @property
    def origin(self) -> Coord:
        return self.segments[0].origin

    @property
    def destination(self) -> Coord:
        return self.segments[-1].destination

    @property
    def captured_positions(self) -> List[Coord]:
        return [s.captured_pos for s in self.segments if s.is_capture]

    @property
    def is_capture(self) -> bool:
        return any(s.is_capture for s in self.segments)

    def to_notation(self) -> str:
        """
        转换为坐标记法

        Returns:
            str: 如 "b6-a5" 或连吃 "c6xe4xc2"
        """
        if not self.segments:
            return ""
        separator = "x" if self.is_capture else "-"
        squares = [self.segments[0].origin] + [s.destination for s in self.segments]
        return separator.join(square_to_notation(sq) for sq in squares)

    def __str__(self) -> str:
        return self.to_notation()

    def __len__(self) -> int:
        return len(self.segments)

    def to_dict(self) -> dict:
        return {
            'player': None if self.player is None else self.player.name.lower(),
            'notation': self.to_notation(),
            'segments': [s.to_dict() for s in self.segments]
        }


def parse_move_notation(text: str) -> List[MoveSegment]:
    """
    解析坐标记法

    Args:
        text: 如 "b6-a5"、"c6xe4xc2"，分隔符可以是 -、x 或 :

    Returns:
        List[MoveSegment]: 待验证的单步列表

    Raises:
        ValueError: 记法格式错误
    """
    text = text.strip().lower()
    first = _SQUARE_RE.match(text)
    if not first:
        raise ValueError(f"无效的走法记法: {text!r}")

    squares = [notation_to_square(first.group(0))]
    pos = first.end()
    while pos < len(text):
        step = _STEP_RE.match(text, pos)
        if not step:
            raise ValueError(f"无效的走法记法: {text!r}")
        squares.append(notation_to_square(step.group(2)))
        pos = step.end()

    if len(squares) < 2:
        raise ValueError(f"无效的走法记法: {text!r}")
    return [MoveSegment(origin=a, destination=b) for a, b in zip(squares, squares[1:])]
