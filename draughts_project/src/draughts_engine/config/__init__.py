"""
配置管理模块

包含游戏配置和系统配置。
"""

from .config_manager import ConfigManager
from .game_config import GameConfig, SystemConfig

__all__ = ['ConfigManager', 'GameConfig', 'SystemConfig']
