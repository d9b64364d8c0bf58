# game_launcher/ui/style/style.py
from __future__ import annotations

from PySide6.QtGui import QColor

from game_launcher.core.status import LauncherStatus

# =========================
# Style tokens
# =========================
BTN_PRIMARY = "#2F80ED"
BTN_SUCCESS = "#27AE60"
BTN_DANGER = "#EB5757"
BTN_GRAY = "#BDBDBD"

TEXT_MAIN = "#333333"
TEXT_SUB = "#666666"
BORDER_DISABLED = "#E0E0E0"
BG_WHITE = "#ffffff"

# border color of the Play button per state
STATUS_COLORS = {
    LauncherStatus.READY: BTN_SUCCESS,
    LauncherStatus.FAILED: BTN_DANGER,
    LauncherStatus.DOWNLOADING_GAME: BTN_PRIMARY,
    LauncherStatus.DOWNLOADING_UPDATE: BTN_PRIMARY,
}


def _rgba_with_alpha(hex_color: str, alpha: float) -> str:
    c = QColor(hex_color)
    return f"rgba({c.red()}, {c.green()}, {c.blue()}, {alpha})"


def _button_base(color: str, min_height: int, font_size: float) -> str:
    return f"""
        border-radius: 5px;
        border: 1px solid {color};
        padding: 1px 12px;
        font-weight: 500;
        font-size: {font_size}px;
        color: {TEXT_MAIN};
        background-color: {BG_WHITE};
        min-height: {min_height}px;
    """


def _button_disabled(min_height: int) -> str:
    return f"""
        border-radius: 5px;
        border: 1px solid {BORDER_DISABLED};
        color: #9e9e9e;
        background-color: #f5f5f5;
        min-height: {min_height}px;
    """


def btn_style(color: str, min_height: int = 30, font_size: float = 12.5) -> str:
    hover_bg = _rgba_with_alpha(color, 0.2)
    return f"""
        QPushButton {{
            {_button_base(color, min_height, font_size)}
        }}
        QPushButton:hover {{
            background-color: {hover_bg};
        }}
        QPushButton:disabled {{
            {_button_disabled(min_height)}
        }}
    """


def play_button_style(status: LauncherStatus | None) -> str:
    color = STATUS_COLORS.get(status, BTN_GRAY)
    return btn_style(color, min_height=44, font_size=15)


def msgbox_style(primary_color: str = BTN_PRIMARY) -> str:
    # QMessageBox buttons are QPushButtons too
    return f"""
        QMessageBox {{
            font-size: 13px;
            color: {TEXT_MAIN};
        }}
        QLabel {{
            color: {TEXT_MAIN};
        }}
        QPushButton {{
            {_button_base(primary_color, 30, 12.5)}
        }}
        QPushButton:hover {{
            border: 2px solid {primary_color};
        }}
    """


def log_view_style() -> str:
    return f"""
        QTextEdit {{
            border-radius: 6px;
            border: 1px solid {BORDER_DISABLED};
            padding: 6px;
            font-family: Consolas, monospace;
            font-size: 11.5px;
            color: {TEXT_SUB};
            background: {BG_WHITE};
        }}
    """
