"""
持久化基础设施模块

提供 XML 配置文件的保存和加载功能。
"""
from .xml_codec import (
    InvalidSettingKeyError, InvalidSettingValueError, decode_settings, encode_settings
)
from .xml_config_store import XmlConfigurationStore

__all__ = [
    'InvalidSettingKeyError',
    'InvalidSettingValueError',
    'XmlConfigurationStore',
    'decode_settings',
    'encode_settings',
]
