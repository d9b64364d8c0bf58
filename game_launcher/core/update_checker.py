# game_launcher/core/update_checker.py
from __future__ import annotations

from game_launcher.core.api import RemoteClient, fetch_remote_version
from game_launcher.core.installer import Installer
from game_launcher.core.paths import LauncherPaths
from game_launcher.core.state import read_version_marker
from game_launcher.core.status import LauncherStatus, StatusController


class UpdateChecker:
    def __init__(
            self,
            paths: LauncherPaths,
            client: RemoteClient,
            status: StatusController,
            installer: Installer,
    ) -> None:
        self.paths = paths
        self.client = client
        self.status = status
        self.installer = installer

    def check_for_updates(self) -> None:
        """
        Runs once when the window appears and again on every manual retry.

        Version.txt absent      -> fresh install
        local == remote         -> Ready
        local != remote         -> update install (even if local is "newer")
        """
        if self.installer.is_busy():
            self.status.log("[launcher] check ignored: download in progress")
            return

        if not self.paths.version_file.exists():
            self.status.log("[launcher] Version.txt not found -> fresh install")
            self.installer.install(is_update=False)
            return

        try:
            local = read_version_marker(self.paths.version_file)
        except (OSError, ValueError) as e:
            self.status.fail("Error reading installed version", e)
            return

        if local is None:
            # removed between the exists() check and the read
            self.installer.install(is_update=False)
            return

        self.status.set_version(local)
        self.status.log(f"[launcher] local_version={local}")

        ok, msg, remote = fetch_remote_version(self.client)
        self.status.log(f"[launcher] fetch_version.ok={ok}")
        if not ok or remote is None:
            self.status.fail("Error checking for game updates", msg)
            return

        self.status.log(f"[launcher] remote_version={remote}")

        if local == remote:
            self.status.set_status(LauncherStatus.READY)
            return

        self.installer.install(is_update=True, remote_version=remote)
