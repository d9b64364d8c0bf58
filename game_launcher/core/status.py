# game_launcher/core/status.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot

from game_launcher.core.versioning import Version


class LauncherStatus(Enum):
    # value doubles as the Play button label
    READY = "Play"
    FAILED = "Update Failed - Retry"
    DOWNLOADING_GAME = "Downloading Game..."
    DOWNLOADING_UPDATE = "Downloading Update..."

    @property
    def label(self) -> str:
        return self.value


class StatusController(QObject):
    """
    Current launcher state plus the texts derived from it.

    Only touched from the UI thread. set_status() emits the new label in the
    same call, so the button text can never lag behind get_status().
    """

    sig_status: Signal = Signal(object)  # LauncherStatus
    sig_label: Signal = Signal(str)
    sig_version: Signal = Signal(str)
    sig_error: Signal = Signal(str)
    sig_log: Signal = Signal(str)

    def __init__(self) -> None:
        super().__init__()
        self._status: Optional[LauncherStatus] = None
        self._label: str = ""
        self._version_text: str = ""

    def get_status(self) -> Optional[LauncherStatus]:
        return self._status

    @property
    def label(self) -> str:
        return self._label

    @property
    def version_text(self) -> str:
        return self._version_text

    def set_status(self, status: LauncherStatus) -> None:
        self._status = status
        self._label = status.label
        self.log(f"[launcher] status={status.name}")
        self.sig_status.emit(status)
        self.sig_label.emit(self._label)

    def set_version(self, version: Version) -> None:
        self._version_text = version.label
        self.sig_version.emit(self._version_text)

    def fail(self, context: str, detail: object) -> None:
        self.set_status(LauncherStatus.FAILED)
        self.report_error(context, detail)

    def report_error(self, context: str, detail: object) -> None:
        msg = f"{context}: {detail}"
        logging.error("[launcher] %s", msg)
        self.sig_log.emit(f"[launcher] {msg}")
        self.sig_error.emit(msg)

    @Slot(str)
    def log(self, msg: str) -> None:
        logging.info(msg)
        self.sig_log.emit(msg)
