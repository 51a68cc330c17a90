"""
xmlconf 演示程序入口

打开一个显示设置窗口，配置保存在当前目录的 Config.xml。
"""

import sys
import os

# 确保程序根目录在 Python 路径中
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from xmlconf.config import demo_config, log_config
from xmlconf.infrastructure.persistence import XmlConfigurationStore
from xmlconf.application.services import DisplaySettingsService
from xmlconf.utils.logger import setup_logging, get_logger


def main():
    """程序入口"""
    setup_logging(level=log_config.level, log_file=log_config.log_file)
    logger = get_logger("xmlconf.main")

    # 配置文件路径
    file_path = os.path.join(os.getcwd(), demo_config.file_name)
    logger.info(f"配置文件: {file_path}")

    store = XmlConfigurationStore(file_path)
    service = DisplaySettingsService(store, default_font_size=demo_config.default_font_size)
    service.initialize()

    # 界面依赖 customtkinter，延迟导入
    from xmlconf.ui.styles import UIStyles
    from xmlconf.ui.main_window import SettingsDemoWindow

    UIStyles.apply_global_styles()

    app = SettingsDemoWindow(service)
    app.mainloop()


if __name__ == "__main__":
    main()
