"""
棋局合法性验证器

检查棋盘矩阵的结构和每个格子的编码。
"""

from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .piece import Color, Piece, VALID_VALUES


class BoardValidator:
    """
    棋局合法性验证器

    可以验证 DraughtsBoard 对象，也可以直接验证 (xsize, ysize) 形状的矩阵。
    """

    def __init__(self, min_xsize: int = 2, min_ysize: int = 3):
        self.min_xsize = min_xsize
        self.min_ysize = min_ysize

    @staticmethod
    def _grid(board) -> np.ndarray:
        return board.board if hasattr(board, 'board') else np.asarray(board)

    def validate_board_structure(self, board) -> Tuple[bool, List[str]]:
        """
        验证棋盘基本结构

        Args:
            board: 棋盘对象或矩阵

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []
        grid = self._grid(board)

        if grid.ndim != 2:
            errors.append(f"棋盘维度错误: {grid.ndim}, 应为2")
            return False, errors

        xsize, ysize = grid.shape
        if xsize < self.min_xsize or ysize < self.min_ysize:
            errors.append(
                f"棋盘尺寸错误: {xsize}x{ysize}, 至少为{self.min_xsize}x{self.min_ysize}"
            )

        if not np.issubdtype(grid.dtype, np.integer):
            errors.append(f"棋盘数据类型错误: {grid.dtype}, 应为整数")

        return len(errors) == 0, errors

    def validate_piece_values(self, board) -> Tuple[bool, List[str]]:
        """
        验证每个格子都是合法的棋子编码

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []
        grid = self._grid(board)

        invalid = ~np.isin(grid, list(VALID_VALUES))
        for x, y in zip(*np.nonzero(invalid)):
            errors.append(f"位置({x}, {y})的棋子编码无效: {grid[x, y]}")

        return len(errors) == 0, errors

    def validate_current_player(self, current_player) -> Tuple[bool, List[str]]:
        if current_player in (Color.BLACK, Color.WHITE):
            return True, []
        return False, [f"当前玩家值错误: {current_player}, 应为0(黑)或1(白)"]

    def full_validation(self, board, current_player: Optional[Color] = None) -> Tuple[bool, List[str]]:
        """
        完整验证

        Args:
            board: 棋盘对象或矩阵
            current_player: 当前玩家，None 表示不检查

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        is_valid, errors = self.validate_board_structure(board)
        if not is_valid:
            # 结构错误时不再检查格子内容
            return False, errors

        _, value_errors = self.validate_piece_values(board)
        errors.extend(value_errors)

        if current_player is not None:
            _, player_errors = self.validate_current_player(current_player)
            errors.extend(player_errors)

        return len(errors) == 0, errors

    def get_validation_report(self, board, current_player: Optional[Color] = None) -> Dict[str, Any]:
        """获取包含棋子统计的验证报告"""
        is_valid, errors = self.full_validation(board, current_player)
        report: Dict[str, Any] = {
            'is_valid': is_valid,
            'errors': errors,
            'piece_counts': {}
        }
        if is_valid:
            grid = self._grid(board)
            values, counts = np.unique(grid[grid != 0], return_counts=True)
            report['piece_counts'] = {
                str(Piece.from_value(v)): int(c) for v, c in zip(values, counts)
            }
        return report
