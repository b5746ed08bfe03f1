"""
配置管理器

负责加载、保存和管理各种配置。
"""

import copy
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, Type, TypeVar

import yaml

from .game_config import GameConfig, SystemConfig, DEFAULT_GAME_CONFIG, DEFAULT_SYSTEM_CONFIG
from ..utils.exceptions import ConfigurationError

T = TypeVar('T')

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    配置管理器

    负责加载、保存和管理系统的各种配置。缺失或损坏的配置文件会回退到默认配置。
    """

    def __init__(self, config_dir: str = "configs/draughts_engine"):
        """
        初始化配置管理器

        Args:
            config_dir: 配置文件目录
        """
        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self.config_files = {
            'game': self.config_dir / 'game_config.yaml',
            'system': self.config_dir / 'system_config.yaml'
        }

        self.default_configs = {
            'game': DEFAULT_GAME_CONFIG,
            'system': DEFAULT_SYSTEM_CONFIG
        }

        self.config_types = {
            'game': GameConfig,
            'system': SystemConfig
        }

    def _check_name(self, config_name: str):
        if config_name not in self.config_files:
            raise ConfigurationError(config_name, "未知的配置名称")

    def load_config(self, config_name: str, config_class: Type[T]) -> T:
        """
        加载配置

        Args:
            config_name: 配置名称
            config_class: 配置类

        Returns:
            配置对象
        """
        self._check_name(config_name)
        config_file = self.config_files[config_name]
        if not config_file.exists():
            logger.warning(f"配置文件不存在: {config_file}，使用默认配置")
            return copy.deepcopy(self.default_configs[config_name])

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            config = self._dict_to_dataclass(data or {}, config_class)
            logger.info(f"成功加载配置: {config_file}")
            return config

        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            logger.error(f"加载配置文件失败: {config_file}, 错误: {e}")
            return copy.deepcopy(self.default_configs[config_name])

    def save_config(self, config_name: str, config_obj: Any):
        """
        保存配置

        Args:
            config_name: 配置名称
            config_obj: 配置对象
        """
        self._check_name(config_name)
        config_file = self.config_files[config_name]

        data = asdict(config_obj)
        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True, indent=2)

        logger.info(f"成功保存配置: {config_file}")

    def get_game_config(self) -> GameConfig:
        """获取游戏配置"""
        return self.load_config('game', GameConfig)

    def get_system_config(self) -> SystemConfig:
        """获取系统配置"""
        return self.load_config('system', SystemConfig)

    def update_config(self, config_name: str, **kwargs):
        """
        更新配置

        Args:
            config_name: 配置名称
            **kwargs: 要更新的配置项
        """
        self._check_name(config_name)
        config = self.load_config(config_name, self.config_types[config_name])

        for key, value in kwargs.items():
            if hasattr(config, key):
                setattr(config, key, value)
            else:
                logger.warning(f"配置项不存在: {key}")

        self.save_config(config_name, config)

    def reset_config(self, config_name: str):
        """重置配置为默认值"""
        self._check_name(config_name)
        self.save_config(config_name, self.default_configs[config_name])

    @staticmethod
    def _dict_to_dataclass(data: Dict[str, Any], config_class: Type[T]) -> T:
        """忽略未知字段，把字典转换为配置数据类"""
        if not isinstance(data, dict):
            raise TypeError(f"配置内容应为映射类型: {type(data).__name__}")
        known = {f.name for f in fields(config_class)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"忽略未知配置项: {sorted(unknown)}")
        return config_class(**{k: v for k, v in data.items() if k in known})
