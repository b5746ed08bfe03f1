"""
配置数据结构

定义各种配置类和默认参数。
"""

from dataclasses import dataclass


@dataclass
class GameConfig:
    """游戏配置"""
    xsize: int = 10                     # 棋盘列数
    ysize: int = 10                     # 棋盘行数

    # 游戏规则
    men_capture_backward: bool = False  # 兵是否可以向后吃子


@dataclass
class SystemConfig:
    """系统配置"""
    # 日志配置
    log_level: str = 'INFO'             # 日志级别
    log_file: str = ''                  # 日志文件，为空时只输出到控制台
    log_dir: str = 'logs'               # 日志目录
    log_max_size: int = 10              # 日志文件最大大小(MB)
    log_backup_count: int = 5           # 日志备份数量


# 默认配置实例
DEFAULT_GAME_CONFIG = GameConfig()
DEFAULT_SYSTEM_CONFIG = SystemConfig()
