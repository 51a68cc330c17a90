import tkinter as tk

import customtkinter as ctk

from xmlconf.application.services import DisplaySettingsService
from xmlconf.config import demo_config
from xmlconf.ui.styles import ThemeColors, UIStyles
from xmlconf.utils.logger import get_logger


class SettingsDemoWindow(ctk.CTk):
    def __init__(self, service: DisplaySettingsService):
        super().__init__()

        self.service = service
        self.logger = get_logger(__name__, ui_callback=self._show_status)

        # --- 窗口基础设置 ---
        self.title(demo_config.window_title)
        self.geometry(demo_config.geometry)
        self.configure(fg_color=ThemeColors.BG_DARK)

        # 状态变量
        self.full_screen_var = ctk.BooleanVar(value=self.service.is_full_screen())
        self.font_size_text = ctk.StringVar(value=self.service.font_size_text() or "")

        self._create_header()
        self._create_main_content()

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._apply_window_state(self.full_screen_var.get())
        self._apply_font_size()

        self.protocol("WM_DELETE_WINDOW", self.on_close)

    def _create_header(self):
        header_frame = ctk.CTkFrame(self, fg_color=ThemeColors.BG_SECONDARY, corner_radius=0, height=48)
        header_frame.grid(row=0, column=0, sticky="ew")
        header_frame.grid_columnconfigure(0, weight=1)
        header_frame.grid_propagate(False)

        ctk.CTkLabel(header_frame, text="显示设置", font=ctk.CTkFont(family=UIStyles.FONT_FAMILY, size=16, weight="bold"), text_color=ThemeColors.TEXT_PRIMARY).grid(row=0, column=0, padx=20, pady=10, sticky="w")
        self.status_label = ctk.CTkLabel(header_frame, text="● 就绪", font=ctk.CTkFont(family=UIStyles.FONT_FAMILY, size=11), text_color=ThemeColors.TEXT_SECONDARY)
        self.status_label.grid(row=0, column=1, padx=20, pady=10, sticky="e")

    def _create_main_content(self):
        card = ctk.CTkFrame(self, fg_color=ThemeColors.BG_CARD, border_width=1, border_color=ThemeColors.BORDER, corner_radius=12)
        card.grid(row=1, column=0, sticky="nsew", padx=20, pady=20)
        card.grid_columnconfigure(1, weight=1)

        self.full_screen_check = ctk.CTkCheckBox(
            card,
            text="全屏",
            variable=self.full_screen_var,
            command=self.action_toggle_full_screen,
            font=ctk.CTkFont(family=UIStyles.FONT_FAMILY, size=13)
        )
        self.full_screen_check.grid(row=0, column=0, columnspan=3, padx=20, pady=(20, 10), sticky="w")

        self.font_size_label = ctk.CTkLabel(card, text="字号", text_color=ThemeColors.TEXT_PRIMARY, font=ctk.CTkFont(family=UIStyles.FONT_FAMILY, size=13))
        self.font_size_label.grid(row=1, column=0, padx=(20, 10), pady=10, sticky="w")

        self.font_size_entry = ctk.CTkEntry(card, textvariable=self.font_size_text, font=ctk.CTkFont(family=UIStyles.FONT_FAMILY, size=13))
        self.font_size_entry.grid(row=1, column=1, padx=10, pady=10, sticky="ew")

        self.apply_btn = ctk.CTkButton(
            card,
            text="应用",
            width=80,
            fg_color="#FFFFFF",
            text_color="#000000",
            border_width=1,
            border_color=ThemeColors.BORDER,
            hover_color="#E5E5E5",
            corner_radius=6,
            font=(UIStyles.FONT_FAMILY, 13),
            command=self.action_apply_font_size
        )
        self.apply_btn.grid(row=1, column=2, padx=(10, 20), pady=10)

    # ============================================================
    # 事件处理
    # ============================================================

    def action_toggle_full_screen(self):
        enabled = self.service.set_full_screen(bool(self.full_screen_var.get()))
        self._apply_window_state(enabled)

    def action_apply_font_size(self):
        if not self.service.apply_font_size(self.font_size_text.get()):
            self.logger.warning(f"无效字号: {self.font_size_text.get()}")
            return
        self._apply_font_size()
        self.logger.success("字号已应用")

    def on_close(self):
        self.service.shutdown()
        self.destroy()

    # ============================================================
    # 界面同步
    # ============================================================

    def _apply_window_state(self, full_screen: bool):
        try:
            self.state("zoomed" if full_screen else "normal")
        except tk.TclError:
            # X11 下没有 zoomed 状态
            self.attributes("-zoomed", full_screen)

    def _apply_font_size(self):
        size = self.service.effective_font_size()
        if size is None:
            return

        font = ctk.CTkFont(family=UIStyles.FONT_FAMILY, size=max(1, int(round(size))))
        self.font_size_label.configure(font=font)
        self.font_size_entry.configure(font=font)
        self.full_screen_check.configure(font=font)

    def _show_status(self, message, level):
        color = ThemeColors.WARNING if level in ("warning", "error") else ThemeColors.TEXT_SECONDARY
        self.status_label.configure(text=f"● {message}", text_color=color)
