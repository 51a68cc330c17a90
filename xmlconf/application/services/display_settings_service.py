"""
显示设置服务

封装演示窗口的业务逻辑（全屏开关、字号），不依赖任何 UI 框架，
只通过 ISettingsAccessor 使用配置存储。
"""

import math
from typing import Optional

from xmlconf.domain.interfaces import ISettingsAccessor
from xmlconf.utils import value_format
from xmlconf.utils.logger import get_logger


logger = get_logger(__name__)


class DisplaySettingsService:
    """
    显示设置服务

    职责:
    - 注册演示所需的键及默认值并加载文件
    - 读写全屏开关
    - 校验并应用字号
    - 退出时保存
    """

    KEY_FULL_SCREEN = "FullScreen"
    KEY_FONT_SIZE = "FontSize"

    def __init__(self, store: ISettingsAccessor, default_font_size: int = 14):
        """
        Args:
            store: 配置存储
            default_font_size: 首次运行时的字号
        """
        self.store = store
        self.default_font_size = default_font_size

    def initialize(self):
        """注册默认值并加载配置文件"""
        self.store.add_setting(self.KEY_FULL_SCREEN, "0")
        self.store.add_setting(self.KEY_FONT_SIZE, value_format.format_int(self.default_font_size))
        self.store.load_file()
        logger.info(f"显示设置已加载: {self.store.file_path}")

    def is_full_screen(self) -> bool:
        return self.store.read_boolean(self.KEY_FULL_SCREEN)

    def set_full_screen(self, enabled: bool) -> bool:
        """写入全屏开关，返回写入后读回的值"""
        self.store.write_boolean(self.KEY_FULL_SCREEN, enabled)
        return self.is_full_screen()

    def font_size(self) -> float:
        """当前字号，缺失或无效时为 NaN"""
        return self.store.read_double(self.KEY_FONT_SIZE)

    def font_size_text(self) -> Optional[str]:
        """字号的原始文本（用于回填输入框）"""
        return self.store.read_string(self.KEY_FONT_SIZE)

    def effective_font_size(self) -> Optional[float]:
        """可以应用到界面的字号；非正数、无穷或无效时返回 None"""
        size = self.font_size()
        if not math.isfinite(size) or size <= 0:
            return None
        return size

    def apply_font_size(self, text: str) -> bool:
        """
        应用用户输入的字号

        Args:
            text: 输入框内容

        Returns:
            是否已写入。无法解析、非有限值或为负数时不写入
        """
        size = value_format.parse_float(text)
        if size is None or not math.isfinite(size) or size < 0:
            logger.debug(f"忽略无效字号输入: {text!r}")
            return False

        self.store.write_double(self.KEY_FONT_SIZE, size)
        return True

    def shutdown(self):
        """保存配置（窗口关闭时调用）"""
        self.store.save_file()
        logger.info("显示设置已保存")
