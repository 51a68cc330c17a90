# Domain Entities

"""
领域实体 - 核心数据模型

不依赖任何外部框架。
"""

from .operation_result import OperationResult, OperationStatus

__all__ = [
    'OperationResult',
    'OperationStatus',
]
