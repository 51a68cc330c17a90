"""
Utils 模块初始化文件
"""

from .events import ChangeEvent
from .logger import get_logger, setup_logging

__all__ = [
    'ChangeEvent',
    'get_logger',
    'setup_logging',
]
