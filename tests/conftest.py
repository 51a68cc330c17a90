"""
Pytest 配置文件

提供测试所需的 fixtures 和共享配置。
"""

import sys
from pathlib import Path

import pytest

# 确保项目根目录在 Python 路径中
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# ============================================================
# XmlConfigurationStore Fixtures
# ============================================================

@pytest.fixture
def config_path(tmp_path):
    """临时配置文件路径（文件尚不存在）"""
    return str(tmp_path / "Config.xml")


@pytest.fixture
def store(config_path):
    """空的配置存储"""
    from xmlconf.infrastructure.persistence import XmlConfigurationStore
    return XmlConfigurationStore(config_path)


@pytest.fixture
def demo_store(store):
    """已注册演示键的配置存储"""
    store.add_setting("FullScreen", "0")
    store.add_setting("FontSize", "14")
    return store


@pytest.fixture
def write_xml(config_path):
    """向配置文件写入原始 XML 文本"""
    def _write(text: str):
        Path(config_path).write_text(text, encoding="utf-8")
        return config_path
    return _write
