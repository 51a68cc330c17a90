import customtkinter as ctk

class ThemeColors:
    """系统配色 (极简黑白灰)"""
    # 背景色
    BG_DARK = "#FFFFFF"           # 窗口背景
    BG_SECONDARY = "#F5F5F7"      # 标题栏背景
    BG_CARD = "#FFFFFF"           # 卡片背景

    # 功能色
    WARNING = "#555555"

    # 文本色
    TEXT_PRIMARY = "#000000"
    TEXT_SECONDARY = "#6E6E73"

    # 边框
    BORDER = "#000000"

class UIStyles:
    """UI 样式配置"""
    FONT_FAMILY = "Microsoft YaHei UI"

    @staticmethod
    def apply_global_styles():
        ctk.set_appearance_mode("light")
        ctk.set_default_color_theme("blue")
