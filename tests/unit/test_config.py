"""
配置模块单元测试
"""

import logging

import pytest
from xmlconf import config as app_config
from xmlconf.config import (
    StoreConfig, DemoConfig, LogConfig,
    _get_env_bool, _get_env_int, _get_env_log_level, _get_env_str, reload_config
)


@pytest.fixture(autouse=True)
def restore_config():
    """测试后按当前环境重建全局配置"""
    yield
    reload_config()


class TestConfigDataclasses:
    """配置数据类测试"""

    def test_store_config_defaults(self):
        """StoreConfig 默认值"""
        config = StoreConfig()

        assert config.root_tag == "Settings"
        assert config.encoding == "utf-8"
        assert config.indent == "  "
        assert config.atomic_write is True

    def test_demo_config_defaults(self):
        """DemoConfig 默认值"""
        config = DemoConfig()

        assert config.file_name == "Config.xml"
        assert config.default_font_size == 14

    def test_log_config_defaults(self):
        """LogConfig 默认值"""
        config = LogConfig()

        assert config.level == logging.INFO
        assert config.log_file is None


class TestEnvironmentVariables:
    """环境变量测试"""

    def test_get_env_str(self, monkeypatch):
        monkeypatch.setenv('TEST_STR', 'Root')

        assert _get_env_str('TEST_STR', 'x') == 'Root'
        assert _get_env_str('NONEXISTENT_KEY_12345', 'x') == 'x'

    def test_get_env_int_with_invalid_value(self, monkeypatch):
        """无效整数环境变量返回默认值"""
        monkeypatch.setenv('TEST_INT', 'abc')

        assert _get_env_int('TEST_INT', 50) == 50

    @pytest.mark.parametrize("raw,expected", [("1", True), ("Yes", True), ("0", False), ("off", False)])
    def test_get_env_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv('TEST_BOOL', raw)

        assert _get_env_bool('TEST_BOOL', not expected) is expected

    def test_get_env_log_level(self, monkeypatch):
        """日志级别支持名称和数字"""
        monkeypatch.setenv('TEST_LEVEL', 'debug')
        assert _get_env_log_level('TEST_LEVEL', logging.INFO) == logging.DEBUG

        monkeypatch.setenv('TEST_LEVEL', '30')
        assert _get_env_log_level('TEST_LEVEL', logging.INFO) == 30

        monkeypatch.setenv('TEST_LEVEL', 'nonsense')
        assert _get_env_log_level('TEST_LEVEL', logging.INFO) == logging.INFO


class TestReloadConfig:
    """配置重载测试"""

    def test_reload_config_updates_store_config(self, monkeypatch):
        """reload_config 应更新 store_config"""
        monkeypatch.setenv('XMLCONF_ROOT_TAG', 'Config')
        monkeypatch.setenv('XMLCONF_INDENT', '4')
        monkeypatch.setenv('XMLCONF_ATOMIC_WRITE', '0')

        reload_config()

        assert app_config.store_config.root_tag == 'Config'
        assert app_config.store_config.indent == '    '
        assert app_config.store_config.atomic_write is False

    def test_store_follows_reloaded_config(self, monkeypatch, tmp_path):
        """未显式传入配置的存储使用最新的全局配置"""
        from xmlconf.infrastructure.persistence import XmlConfigurationStore

        store = XmlConfigurationStore(str(tmp_path / "c.xml"))
        monkeypatch.setenv('XMLCONF_ROOT_TAG', 'Prefs')
        reload_config()

        assert store.store_config.root_tag == 'Prefs'
