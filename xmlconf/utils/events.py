"""
变更通知

ChangeEvent 是一个极简的同步观察者列表:
- subscribe 返回句柄，unsubscribe 按句柄注销
- fire 在调用方线程上依次调用每个订阅者一次
- 单个订阅者抛出的异常只记录日志，不影响其他订阅者
"""

import itertools
from typing import Any, Callable, Dict

from xmlconf.utils.logger import get_logger


logger = get_logger(__name__)

# 订阅者签名: (sender, property_name) -> None
ChangeHandler = Callable[[Any, str], None]


class ChangeEvent:
    """属性变更事件"""

    def __init__(self):
        self._handlers: Dict[int, ChangeHandler] = {}
        self._next_handle = itertools.count(1)

    def subscribe(self, handler: ChangeHandler) -> int:
        """
        订阅事件

        Args:
            handler: 回调函数，签名: (sender, property_name) -> None

        Returns:
            订阅句柄，用于 unsubscribe
        """
        handle = next(self._next_handle)
        self._handlers[handle] = handler
        return handle

    def unsubscribe(self, handle: int) -> bool:
        """按句柄注销，返回是否存在该订阅"""
        return self._handlers.pop(handle, None) is not None

    def fire(self, sender: Any, property_name: str):
        """同步通知所有订阅者"""
        # 回调中可能增删订阅，先取快照
        for handle, handler in list(self._handlers.items()):
            try:
                handler(sender, property_name)
            except Exception:
                logger.error(f"变更回调 #{handle} 执行失败 ({property_name})", exc_info=True)

    def __len__(self) -> int:
        return len(self._handlers)
