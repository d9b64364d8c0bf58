# game_launcher/launcher_main.py
from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication, QMessageBox

from game_launcher.core.api import RemoteClient
from game_launcher.core.app_config import load_launcher_config
from game_launcher.core.installer import Installer
from game_launcher.core.launch_gate import LaunchGate
from game_launcher.core.paths import CONFIG_FILE_NAME, LOG_FILE_NAME, get_paths, get_root_dir
from game_launcher.core.status import StatusController
from game_launcher.core.update_checker import UpdateChecker
from game_launcher.ui.launcher_window import LauncherWindow


def setup_logging(log_file: Path) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    file_error = None
    try:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    except OSError as e:
        file_error = e

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        handlers=handlers,
    )
    if file_error is not None:
        logging.warning("log file disabled (%s): %s", log_file, file_error)


def main() -> int:
    root = get_root_dir()
    setup_logging(root / LOG_FILE_NAME)

    app = QApplication(sys.argv)

    try:
        cfg = load_launcher_config(root / CONFIG_FILE_NAME)
    except (OSError, ValueError) as e:
        logging.exception("config load failed")
        QMessageBox.critical(None, "Launcher", f"Invalid configuration: {str(e)}")
        return 1

    paths = get_paths(cfg.artifact_name, root)
    logging.info("[launcher] root=%s", paths.root_dir)

    status = StatusController()
    client = RemoteClient.from_config(cfg)
    installer = Installer(paths=paths, client=client, status=status)
    checker = UpdateChecker(paths=paths, client=client, status=status, installer=installer)
    gate = LaunchGate(paths=paths, status=status, checker=checker, on_exit=app.quit)

    w = LauncherWindow(title=cfg.window_title, status=status, installer=installer, gate=gate)
    w.show()

    # first check once the window is on screen
    QTimer.singleShot(0, checker.check_for_updates)

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
