"""
设置访问接口

定义展示层使用配置存储的抽象契约: 注册键、加载、类型化读写、保存。
"""

from typing import Protocol, Dict, Optional, runtime_checkable


@runtime_checkable
class ISettingsAccessor(Protocol):
    """
    设置访问接口

    职责:
    - 注册调用方定义的键集合（封闭键集）
    - 从文件加载 / 保存到文件
    - 以字符串、整数、浮点、布尔类型读写设置
    """

    @property
    def file_path(self) -> str:
        ...

    def add_setting(self, key: str, default_value: str) -> None:
        """注册键并设置默认值；已存在时覆盖当前值"""
        ...

    def contains_setting(self, key: str) -> bool:
        ...

    def remove_setting(self, key: str) -> None:
        ...

    def get_setting_dictionary(self) -> Dict[str, str]:
        ...

    def load_file(self) -> None:
        ...

    def save_file(self) -> None:
        ...

    def read_string(self, key: str) -> Optional[str]:
        ...

    def read_double(self, key: str, digits: int = -1) -> float:
        ...

    def read_int(self, key: str) -> int:
        ...

    def read_boolean(self, key: str) -> bool:
        ...

    def write_string(self, key: str, value: str) -> None:
        ...

    def write_double(self, key: str, value: float, digits: int = -1) -> None:
        ...

    def write_int(self, key: str, value: int) -> None:
        ...

    def write_boolean(self, key: str, value: bool) -> None:
        ...
