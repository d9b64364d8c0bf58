# game_launcher/ui/launcher_window.py
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QColor, QIcon, QPainter, QPixmap
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QProgressBar,
    QPushButton, QTextEdit, QMessageBox
)

from game_launcher.core.installer import Installer
from game_launcher.core.launch_gate import LaunchGate
from game_launcher.core.status import LauncherStatus, StatusController
from game_launcher.ui.style.style import (
    BTN_GRAY,
    btn_style,
    log_view_style,
    msgbox_style,
    play_button_style,
)


class LauncherWindow(QWidget):
    """
    Pure view: every text it shows comes from StatusController signals,
    and the Play button only forwards to LaunchGate.
    """

    def __init__(
            self,
            title: str,
            status: StatusController,
            installer: Installer,
            gate: LaunchGate,
    ) -> None:
        super().__init__()
        self.status = status
        self.installer = installer
        self.gate = gate

        self.setWindowTitle(title)
        self.setWindowIcon(self._make_window_icon())
        self.setMinimumWidth(420)
        self.setStyleSheet("background-color: #ffffff;")

        # ---- UI ----
        root = QVBoxLayout(self)
        root.setContentsMargins(14, 14, 14, 14)
        root.setSpacing(10)

        head = QHBoxLayout()
        self.lbl_title = QLabel(title)
        self.lbl_title.setStyleSheet("font-size: 16px; font-weight: 700;")
        head.addWidget(self.lbl_title)
        head.addStretch(1)

        self.lbl_version = QLabel("")
        self.lbl_version.setStyleSheet("color: #555;")
        head.addWidget(self.lbl_version)
        root.addLayout(head)

        self.btn_play = QPushButton("Checking for updates...")
        self.btn_play.setCursor(Qt.CursorShape.PointingHandCursor)
        self.btn_play.setStyleSheet(play_button_style(None))
        self.btn_play.clicked.connect(self.on_play)
        root.addWidget(self.btn_play)

        self.prog = QProgressBar()
        self.prog.setRange(0, 100)
        self.prog.setValue(0)
        self.prog.setVisible(False)
        root.addWidget(self.prog)

        # collapsed by default
        self.txt_log = QTextEdit()
        self.txt_log.setReadOnly(True)
        self.txt_log.setVisible(False)
        self.txt_log.setStyleSheet(log_view_style())
        root.addWidget(self.txt_log)

        row = QHBoxLayout()
        row.setSpacing(8)

        self.btn_toggle_log = QPushButton("Show log")
        self.btn_toggle_log.setCursor(Qt.CursorShape.PointingHandCursor)
        self.btn_toggle_log.setStyleSheet(btn_style(BTN_GRAY))
        self.btn_toggle_log.clicked.connect(self.on_toggle_log)
        row.addWidget(self.btn_toggle_log)

        row.addStretch(1)

        self.btn_close = QPushButton("Close")
        self.btn_close.setCursor(Qt.CursorShape.PointingHandCursor)
        self.btn_close.setStyleSheet(btn_style(BTN_GRAY))
        self.btn_close.clicked.connect(self.close)
        row.addWidget(self.btn_close)

        root.addLayout(row)

        # ---- wiring ----
        self.status.sig_label.connect(self.btn_play.setText)
        self.status.sig_status.connect(self.on_status)
        self.status.sig_version.connect(self.lbl_version.setText)
        self.status.sig_log.connect(self.txt_log.append)
        self.status.sig_error.connect(self.on_error)
        self.installer.sig_progress.connect(self.on_progress)

    def _make_window_icon(self) -> QIcon:
        pix = QPixmap(32, 32)
        pix.fill(QColor("transparent"))

        painter = QPainter(pix)
        painter.setBrush(QColor("#2F80ED"))
        painter.setPen(QColor("#2F80ED"))
        painter.drawEllipse(2, 2, 28, 28)
        painter.end()

        return QIcon(pix)

    def _msg_warn(self, title: str, text: str) -> None:
        box = QMessageBox(self)
        box.setIcon(QMessageBox.Icon.Warning)
        box.setWindowTitle(title)
        box.setText(text)
        box.setStyleSheet(msgbox_style(primary_color=BTN_GRAY))
        box.exec()

    # ---------------- events ----------------
    def on_status(self, st: LauncherStatus) -> None:
        self.btn_play.setStyleSheet(play_button_style(st))
        downloading = st in (LauncherStatus.DOWNLOADING_GAME, LauncherStatus.DOWNLOADING_UPDATE)
        self.prog.setVisible(downloading)
        self.btn_close.setEnabled(not downloading)

    def on_progress(self, percent: int) -> None:
        self.prog.setValue(max(0, min(100, percent)))

    def on_error(self, message: str) -> None:
        self._msg_warn("Launcher", message)

    def on_play(self) -> None:
        self.gate.on_launch_requested()

    def on_toggle_log(self) -> None:
        vis = not self.txt_log.isVisible()
        self.txt_log.setVisible(vis)
        self.txt_log.setMinimumHeight(180 if vis else 0)
        self.btn_toggle_log.setText("Hide log" if vis else "Show log")
        self.adjustSize()
        if not vis:
            self.resize(self.width(), self.minimumSizeHint().height())

    def closeEvent(self, event: QCloseEvent) -> None:
        # downloads cannot be cancelled
        if self.installer.is_busy():
            self._msg_warn("Launcher", "Please wait until the download has finished.")
            event.ignore()
            return
        super().closeEvent(event)
