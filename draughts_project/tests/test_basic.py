"""
基础测试模块

测试项目的基本功能和导入。
"""

import pytest
import sys
from pathlib import Path

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


def test_project_import():
    """测试项目主模块是否可以正常导入"""
    try:
        import draughts_project
        assert draughts_project.__version__ == "0.1.0"
        assert draughts_project.__author__ == "Draughts Project Team"
    except ImportError as e:
        pytest.fail(f"无法导入draughts_project模块: {e}")


def test_submodules_import():
    """测试子模块是否可以正常导入"""
    try:
        from draughts_project.src import draughts_engine
        from draughts_project.src.draughts_engine import rules_engine, config, utils

        assert draughts_engine.__version__ == "0.1.0"
        assert hasattr(rules_engine, "apply_move")
        assert hasattr(config, "ConfigManager")
        assert hasattr(utils, "setup_logger")
    except ImportError as e:
        pytest.fail(f"无法导入子模块: {e}")


def test_public_interface():
    """测试对外接口是否完整"""
    from draughts_project.src import draughts_engine

    for name in ["new_board", "new_game", "validate_segment", "apply_move", "undo_last_move"]:
        assert callable(getattr(draughts_engine, name)), f"缺少接口 {name}"


def test_main_entry_point():
    """测试主入口文件是否存在"""
    assert (project_root / "draughts_project" / "main.py").exists()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
