"""
文件操作结果

load / save 的默认入口会吞掉异常，try_* 版本返回 OperationResult，
让测试和严格的调用方可以区分成功、跳过与失败。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OperationStatus(str, Enum):
    """文件操作状态"""
    LOADED = "loaded"      # 已从文件读取
    CREATED = "created"    # 文件不存在，已按当前设置创建
    SKIPPED = "skipped"    # 未指定文件路径，未做任何事
    SAVED = "saved"        # 已写入文件
    FAILED = "failed"      # IO 或解析失败


@dataclass(frozen=True)
class OperationResult:
    """单次 load / save 的结果"""
    status: OperationStatus
    path: str = ""
    error: Optional[BaseException] = None
    applied_keys: tuple = ()     # load 时实际写入的键
    ignored_keys: tuple = ()     # load 时因未注册而被丢弃的键

    @property
    def ok(self) -> bool:
        return self.status is not OperationStatus.FAILED

    def __bool__(self) -> bool:
        return self.ok

    @property
    def message(self) -> str:
        if self.error is None:
            return f"{self.status.value}: {self.path}"
        return f"{self.status.value}: {self.path} ({type(self.error).__name__}: {self.error})"

    @classmethod
    def failed(cls, path: str, error: BaseException) -> 'OperationResult':
        return cls(status=OperationStatus.FAILED, path=path, error=error)
