"""
测试命令行接口
"""

import logging

import pytest
from click.testing import CliRunner

from draughts_project.main import cli
from draughts_project.src.draughts_engine.utils.exceptions import MoveRejectedError, NoHistoryError


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger('draughts')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


class TestCli:
    """命令行接口的测试"""

    def setup_method(self):
        self.runner = CliRunner()

    def test_new_board(self):
        result = self.runner.invoke(cli, ['new', '--xsize', '4', '--ysize', '4'])
        assert result.exit_code == 0, result.output
        assert "白方" in result.output

    def test_play_moves(self):
        result = self.runner.invoke(cli, ['play', 'b6-a5', 'a3-b4'])
        assert result.exit_code == 0, result.output
        assert "white: b6-a5" in result.output
        assert "black: a3-b4" in result.output

    def test_play_with_undo(self):
        result = self.runner.invoke(cli, ['play', 'b6-a5', '--undo', '1'])
        assert result.exit_code == 0, result.output
        assert "b6-a5" in result.output

    def test_illegal_move(self):
        result = self.runner.invoke(cli, ['play', 'b6-b5'])
        assert result.exit_code != 0
        assert isinstance(result.exception, MoveRejectedError)

    def test_undo_without_moves(self):
        result = self.runner.invoke(cli, ['play', '--undo', '1'])
        assert isinstance(result.exception, NoHistoryError)

    def test_config_directory(self, tmp_path):
        (tmp_path / 'game_config.yaml').write_text("xsize: 6\nysize: 6\n", encoding='utf-8')
        result = self.runner.invoke(cli, ['--config', str(tmp_path), 'play', 'b4-a3'])
        assert result.exit_code == 0, result.output

    def test_wide_board(self):
        result = self.runner.invoke(cli, ['play', '--xsize', '30', 'ab6-ac5', '--undo', '1'])
        assert result.exit_code == 0, result.output
        assert "white: ab6-ac5" in result.output

    def test_info(self):
        result = self.runner.invoke(cli, ['info'])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
