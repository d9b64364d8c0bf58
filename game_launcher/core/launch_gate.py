# game_launcher/core/launch_gate.py
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Tuple

from game_launcher.core.paths import LauncherPaths
from game_launcher.core.runner import run_exe
from game_launcher.core.status import LauncherStatus, StatusController
from game_launcher.core.update_checker import UpdateChecker

Runner = Callable[[Path, Optional[Path]], Tuple[bool, str]]


class GateAction(Enum):
    LAUNCHED = "launched"
    RETRIED = "retried"
    IGNORED = "ignored"


class LaunchGate:
    """Decides what the single Play/Retry button does."""

    def __init__(
            self,
            paths: LauncherPaths,
            status: StatusController,
            checker: UpdateChecker,
            on_exit: Callable[[], None],
            runner: Runner = run_exe,
    ) -> None:
        self.paths = paths
        self.status = status
        self.checker = checker
        self.on_exit = on_exit
        self.runner = runner

    def on_launch_requested(self) -> GateAction:
        current = self.status.get_status()

        if self.paths.exe_path.exists() and current is LauncherStatus.READY:
            ok, msg = self.runner(self.paths.exe_path, self.paths.build_dir)
            self.status.log(f"[launcher] run.ok={ok} run.msg={msg}")
            if not ok:
                self.status.report_error("Error starting game", msg)
                return GateAction.IGNORED
            self.on_exit()
            return GateAction.LAUNCHED

        if current is LauncherStatus.FAILED:
            self.status.log("[launcher] retry requested")
            self.checker.check_for_updates()
            return GateAction.RETRIED

        # still downloading, or "ready" without an exe on disk
        return GateAction.IGNORED
