# Domain Interfaces

"""
领域接口 - 抽象契约定义

使用 Python Protocol (Structural Subtyping) 定义接口，
展示层只依赖接口而不依赖具体存储实现。
"""

from .settings_accessor import ISettingsAccessor

__all__ = [
    'ISettingsAccessor',
]
