"""
测试DraughtsBoard类的功能

测试初始局面、尺寸检查、格子读写和棋盘完整性验证。
"""

import pytest
import numpy as np
from draughts_project.src.draughts_engine.rules_engine import (
    BoardValidator, Color, DraughtsBoard, new_board
)
from draughts_project.src.draughts_engine.rules_engine.piece import (
    BLACK_MAN, WHITE_MAN, WHITE_KING, EMPTY
)
from draughts_project.src.draughts_engine.utils.exceptions import (
    InvalidBoardError, InvalidCoordinateError, InvalidSizeError
)


def expected_initial_value(x: int, y: int, ysize: int) -> int:
    north_end = (ysize - 2 + ysize % 2) // 2
    south_start = (ysize - ysize % 2) // 2
    if (x + y) % 2 == 0:
        return 0
    if y < north_end:
        return 1
    if y > south_start:
        return 5
    return 0


class TestInitialPosition:
    """初始局面的测试"""

    @pytest.mark.parametrize("xsize", range(2, 9))
    @pytest.mark.parametrize("ysize", range(3, 13))
    def test_initial_layout(self, xsize, ysize):
        """测试任意合法尺寸的初始局面"""
        board = new_board(xsize, ysize)

        assert board.board.shape == (xsize, ysize)
        for x in range(xsize):
            for y in range(ysize):
                assert board.get_value((x, y)) == expected_initial_value(x, y, ysize), (x, y)

    def test_standard_board(self):
        """测试10x10标准棋盘"""
        board = DraughtsBoard()

        assert board.shape == (10, 10)
        assert board.count_pieces(Color.BLACK) == {BLACK_MAN: 20}
        assert board.count_pieces(Color.WHITE) == {WHITE_MAN: 20}
        # 第4、5行为中立区
        assert not board.board[:, 4].any()
        assert not board.board[:, 5].any()
        assert board.get_piece((1, 6)) == WHITE_MAN
        assert board.get_piece((0, 3)) == BLACK_MAN
        assert board.get_piece((0, 0)) == EMPTY

    def test_smallest_board(self):
        """测试最小的2x3棋盘"""
        board = new_board(2, 3)
        assert board.to_matrix().tolist() == [[0, 0, 0], [1, 0, 5]]

    @pytest.mark.parametrize("xsize,ysize", [(1, 10), (10, 2), (0, 0), (-3, 5), (2.5, 4), ("8", 8), (True, 4)])
    def test_invalid_size(self, xsize, ysize):
        """测试非法尺寸"""
        with pytest.raises(InvalidSizeError):
            new_board(xsize, ysize)


class TestBoardAccess:
    """格子读写的测试"""

    def setup_method(self):
        self.board = DraughtsBoard.empty(6, 6)

    def test_empty_board(self):
        assert not self.board.board.any()
        assert self.board.get_all_pieces() == []

    def test_set_and_get(self):
        self.board.set_piece((2, 3), WHITE_KING)
        assert self.board.get_value((2, 3)) == 7
        assert self.board.get_piece((2, 3)) == WHITE_KING
        assert not self.board.is_empty((2, 3))

        self.board.clear((2, 3))
        assert self.board.is_empty((2, 3))

    def test_out_of_bounds(self):
        assert not self.board.in_bounds((6, 0))
        assert not self.board.in_bounds((0, -1))
        with pytest.raises(InvalidCoordinateError):
            self.board.get_value((6, 0))
        with pytest.raises(InvalidCoordinateError):
            self.board.set_piece((-1, 2), WHITE_MAN)

    def test_promotion_rows(self):
        assert self.board.promotion_row(Color.BLACK) == 5
        assert self.board.promotion_row(Color.WHITE) == 0

    def test_board_not_hashable(self):
        with pytest.raises(TypeError):
            hash(self.board)

    def test_copy_is_independent(self):
        copied = self.board.copy()
        copied.set_piece((1, 0), BLACK_MAN)
        assert self.board.is_empty((1, 0))
        assert copied != self.board

    def test_get_all_pieces(self):
        self.board.set_piece((1, 0), BLACK_MAN)
        self.board.set_piece((4, 5), WHITE_MAN)

        assert self.board.get_all_pieces() == [((1, 0), BLACK_MAN), ((4, 5), WHITE_MAN)]
        assert self.board.get_all_pieces(Color.WHITE) == [((4, 5), WHITE_MAN)]


class TestMatrixConversion:
    """矩阵转换和完整性验证的测试"""

    def test_matrix_round_trip(self):
        board = DraughtsBoard(8, 8)
        matrix = board.to_matrix()

        assert isinstance(matrix, np.ndarray)
        restored = DraughtsBoard.from_matrix(matrix)
        assert np.array_equal(board.board, restored.board)
        assert restored == board

    def test_matrix_is_copy(self):
        board = DraughtsBoard(4, 4)
        matrix = board.to_matrix()
        matrix[:] = 0
        assert board.board.any()

    def test_invalid_piece_values(self):
        matrix = np.zeros((4, 4), dtype=int)
        matrix[1, 2] = 6
        with pytest.raises(InvalidBoardError) as exc_info:
            DraughtsBoard.from_matrix(matrix)
        assert len(exc_info.value.errors) == 1

    def test_invalid_shape(self):
        with pytest.raises(InvalidBoardError):
            DraughtsBoard.from_matrix(np.zeros((1, 5), dtype=int))
        with pytest.raises(InvalidBoardError):
            DraughtsBoard.from_matrix(np.zeros(9, dtype=int))

    def test_validation_report(self):
        validator = BoardValidator()
        report = validator.get_validation_report(DraughtsBoard(), Color.WHITE)

        assert report['is_valid']
        assert report['errors'] == []
        assert report['piece_counts'] == {'b': 20, 'w': 20}

    def test_invalid_current_player(self):
        is_valid, errors = BoardValidator().full_validation(DraughtsBoard(), current_player=2)
        assert not is_valid
        assert len(errors) == 1

    def test_float_matrix_rejected(self):
        is_valid, errors = BoardValidator().full_validation(np.zeros((4, 4)))
        assert not is_valid
        assert "数据类型" in errors[0]
