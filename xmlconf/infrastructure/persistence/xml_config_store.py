"""
XML 配置存储 - 基础设施层

负责在内存中维护有序的 字符串->字符串 设置表，并与 XML 文件互相转换。

封闭键集:
    只有 add_setting 能引入新键。写入未注册的键、以及加载文件中
    未注册的键，都会被静默忽略；读取未注册的键返回哨兵值。

失败策略:
    load_file / save_file 从不抛出异常，只记录警告日志；
    需要知道结果时使用 try_load_file / try_save_file。

用法:
    store = XmlConfigurationStore("Config.xml")
    store.add_setting("FullScreen", "0")
    store.add_setting("FontSize", "14")
    store.load_file()

    if store.read_boolean("FullScreen"):
        ...
    store.write_double("FontSize", 16.5)
    store.save_file()
"""

import math
import os
from typing import Dict, Mapping, Optional

from xmlconf import config as app_config
from xmlconf.config import StoreConfig
from xmlconf.domain.entities import OperationResult, OperationStatus
from xmlconf.infrastructure.persistence.xml_codec import decode_settings, encode_settings
from xmlconf.utils import value_format
from xmlconf.utils.events import ChangeEvent
from xmlconf.utils.logger import get_logger


logger = get_logger(__name__)


class XmlConfigurationStore:
    """XML 文件配置存储"""

    def __init__(self, file_path: str, store_config: Optional[StoreConfig] = None):
        """
        初始化配置存储（不访问文件系统）

        Args:
            file_path: XML 配置文件的完整路径；空串表示不落盘
            store_config: 读写参数，默认使用全局 store_config
        """
        self._file_path = file_path or ""
        self._store_config = store_config
        self._settings: Dict[str, str] = {}

        # settings 整体被替换时触发，参数 (store, "settings")
        self.settings_changed = ChangeEvent()

    @property
    def file_path(self) -> str:
        """配置文件路径（只读）"""
        return self._file_path

    @property
    def store_config(self) -> StoreConfig:
        return self._store_config or app_config.store_config

    @property
    def settings(self) -> Dict[str, str]:
        """当前设置表（直接引用，修改其内容不会触发 settings_changed）"""
        return self._settings

    @settings.setter
    def settings(self, value: Optional[Mapping[str, str]]):
        if value is self._settings:
            return
        if value is None:
            value = {}
        elif not isinstance(value, dict):
            value = dict(value)
        self._settings = value
        self.settings_changed.fire(self, "settings")

    # ============================================================
    # 键管理
    # ============================================================

    def add_setting(self, key: str, default_value: str):
        """
        注册设置

        键已存在时等同于 write_string（覆盖当前值）；
        不存在时新增。这是唯一能引入新键的操作。
        """
        if key in self._settings:
            self.write_string(key, default_value)
            return
        self._settings[key] = default_value

    def contains_setting(self, key: str) -> bool:
        return key in self._settings

    def remove_setting(self, key: str):
        self._settings.pop(key, None)

    def get_setting_dictionary(self) -> Dict[str, str]:
        """当前设置的快照副本（值均转为字符串）"""
        return {key: str(value) for key, value in self._settings.items()}

    # ============================================================
    # 文件读写
    # ============================================================

    def load_file(self):
        """
        从文件加载设置

        - 未指定路径: 不做任何事
        - 文件不存在: 用当前设置创建文件（因此需先 add_setting 注册默认值）
        - 否则: 文件中的值覆盖已注册键的值，未注册的键被丢弃

        任何 IO 或解析错误都只记录日志，内存中的设置保持不变。
        """
        self.try_load_file()

    def try_load_file(self) -> OperationResult:
        """同 load_file，但返回操作结果"""
        path = self._file_path
        if not path:
            return OperationResult(status=OperationStatus.SKIPPED)

        if not os.path.isfile(path):
            logger.info(f"配置文件不存在，按当前设置创建: {path}")
            result = self.try_save_file()
            if not result.ok:
                return result
            return OperationResult(status=OperationStatus.CREATED, path=path)

        try:
            with open(path, 'rb') as f:
                items = decode_settings(f.read())
        except Exception as e:
            logger.warning(f"加载配置失败，保留当前设置: {path} ({type(e).__name__}: {e})")
            return OperationResult.failed(path, e)

        applied = []
        ignored = []
        for key, value in items:
            if key in self._settings:
                self.write_string(key, value)
                applied.append(key)
            else:
                ignored.append(key)

        if ignored:
            logger.debug(f"忽略未注册的键: {', '.join(ignored)}")
        logger.debug(f"已加载 {len(applied)} 项设置: {path}")

        return OperationResult(
            status=OperationStatus.LOADED,
            path=path,
            applied_keys=tuple(applied),
            ignored_keys=tuple(ignored),
        )

    def save_file(self):
        """
        将当前设置写入文件（覆盖已有文件）

        错误只记录日志，不会抛出。
        """
        self.try_save_file()

    def try_save_file(self) -> OperationResult:
        """同 save_file，但返回操作结果"""
        path = self._file_path
        if not path:
            return OperationResult(status=OperationStatus.SKIPPED)

        cfg = self.store_config
        tmp_path = path + ".tmp"
        try:
            data = encode_settings(
                self._settings,
                root_tag=cfg.root_tag,
                encoding=cfg.encoding,
                indent=cfg.indent,
            )

            parent = os.path.dirname(os.path.abspath(path))
            os.makedirs(parent, exist_ok=True)

            if cfg.atomic_write:
                with open(tmp_path, 'wb') as f:
                    f.write(data)
                os.replace(tmp_path, path)
            else:
                with open(path, 'wb') as f:
                    f.write(data)
        except Exception as e:
            logger.warning(f"保存配置失败: {path} ({type(e).__name__}: {e})")
            if cfg.atomic_write and os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError:
                    logger.debug(f"临时文件清理失败: {tmp_path}")
            return OperationResult.failed(path, e)

        logger.debug(f"已保存 {len(self._settings)} 项设置: {path}")
        return OperationResult(status=OperationStatus.SAVED, path=path)

    # ============================================================
    # 读取
    # ============================================================

    def read_string(self, key: str) -> Optional[str]:
        """读取字符串，键不存在时返回 None"""
        if key in self._settings:
            return str(self._settings[key])
        return None

    def read_double(self, key: str, digits: int = -1) -> float:
        """
        读取浮点数

        Args:
            key: 设置键
            digits: 小数位数；-1 表示不舍入，0 表示舍入到整数

        Returns:
            数值；键不存在或无法解析时返回 NaN
        """
        value = value_format.parse_float(self.read_string(key))
        if value is None:
            return math.nan
        return value_format.round_digits(value, digits)

    def read_int(self, key: str) -> int:
        """
        读取整数

        键不存在和无法解析都返回 0，调用方无法区分二者。
        """
        value = value_format.parse_int(self.read_string(key))
        if value is None:
            return 0
        return value

    def read_boolean(self, key: str) -> bool:
        """读取布尔值，"1" / "yes" / "true"（忽略大小写）为真，其余及缺失为假"""
        return value_format.parse_bool(self.read_string(key))

    # ============================================================
    # 写入
    # ============================================================

    def write_string(self, key: str, value: str):
        """写入字符串；键未注册时拒绝写入"""
        if key not in self._settings:
            logger.debug(f"拒绝写入未注册的键: {key}")
            return
        self._settings[key] = value

    def write_double(self, key: str, value: float, digits: int = -1):
        """
        写入浮点数

        Args:
            digits: 最多保留的小数位数，末尾的 0 不保留；-1 表示完整精度
        """
        self.write_string(key, value_format.format_float(value, digits))

    def write_int(self, key: str, value: int):
        self.write_string(key, value_format.format_int(value))

    def write_boolean(self, key: str, value: bool):
        """写入 "1" / "0" """
        self.write_string(key, value_format.format_bool(value))
