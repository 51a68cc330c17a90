"""
xmlconf 配置中心

集中管理存储、日志与演示窗口的可配置参数。
支持从环境变量读取配置。

用法:
    from xmlconf.config import store_config, demo_config

    root = store_config.root_tag
    path = demo_config.file_name
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class StoreConfig:
    """
    存储配置

    控制 XML 文件的读写方式。
    """
    root_tag: str = "Settings"      # 根元素名称
    encoding: str = "utf-8"         # 文件编码
    indent: str = "  "              # 缩进字符串（空串表示不缩进）
    atomic_write: bool = True       # 先写临时文件再替换


@dataclass
class DemoConfig:
    """
    演示窗口配置
    """
    file_name: str = "Config.xml"   # 配置文件名（相对当前目录）
    default_font_size: int = 14     # 默认字号
    window_title: str = "xmlconf 演示"
    geometry: str = "420x260"


@dataclass
class LogConfig:
    """
    日志配置
    """
    level: int = logging.INFO
    log_file: Optional[str] = None


def _get_env_str(key: str, default: str) -> str:
    """从环境变量获取字符串配置"""
    value = os.environ.get(key)
    if value:
        return value
    return default


def _get_env_int(key: str, default: int) -> int:
    """从环境变量获取整数配置"""
    value = os.environ.get(key)
    if value:
        try:
            return int(value)
        except ValueError:
            pass
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """从环境变量获取布尔配置（1/yes/true 为真）"""
    value = os.environ.get(key)
    if value:
        return value.strip().lower() in ("1", "yes", "true")
    return default


def _get_env_log_level(key: str, default: int) -> int:
    """从环境变量获取日志级别（名称或数字）"""
    value = os.environ.get(key)
    if not value:
        return default
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def _build_store_config() -> StoreConfig:
    indent_width = _get_env_int('XMLCONF_INDENT', 2)
    return StoreConfig(
        root_tag=_get_env_str('XMLCONF_ROOT_TAG', "Settings"),
        encoding=_get_env_str('XMLCONF_ENCODING', "utf-8"),
        indent=" " * max(indent_width, 0),
        atomic_write=_get_env_bool('XMLCONF_ATOMIC_WRITE', True),
    )


def _build_demo_config() -> DemoConfig:
    return DemoConfig(
        file_name=_get_env_str('XMLCONF_DEMO_FILE', "Config.xml"),
        default_font_size=_get_env_int('XMLCONF_DEMO_FONT_SIZE', 14),
    )


def _build_log_config() -> LogConfig:
    return LogConfig(
        level=_get_env_log_level('XMLCONF_LOG_LEVEL', logging.INFO),
        log_file=os.environ.get('XMLCONF_LOG_FILE') or None,
    )


# ============================================================
# 全局配置实例
# ============================================================

store_config = _build_store_config()

demo_config = _build_demo_config()

log_config = _build_log_config()


# ============================================================
# 便捷函数
# ============================================================

def reload_config():
    """
    重新加载配置

    从环境变量重新读取配置。
    """
    global store_config, demo_config, log_config

    store_config = _build_store_config()
    demo_config = _build_demo_config()
    log_config = _build_log_config()
