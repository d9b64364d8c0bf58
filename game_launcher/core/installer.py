# game_launcher/core/installer.py
from __future__ import annotations

import logging
import shutil
import zipfile
from pathlib import Path
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Signal, Slot

from game_launcher.core.api import RemoteClient, fetch_remote_version
from game_launcher.core.paths import LauncherPaths
from game_launcher.core.state import write_version_marker
from game_launcher.core.status import LauncherStatus, StatusController
from game_launcher.core.versioning import Version
from game_launcher.workers.download_worker import DownloadJob, DownloadResult, DownloadWorker


def remove_build_dir(build_dir: Path) -> None:
    if build_dir.exists():
        shutil.rmtree(build_dir)


def extract_archive(zip_path: Path, root_dir: Path) -> None:
    # entries are stored under Build/, so extracting into root rebuilds build_dir
    with zipfile.ZipFile(zip_path, "r") as zf:
        zf.extractall(root_dir)


def cleanup_paths(*targets: Path) -> None:
    """
    Best-effort removal of temporary files. Failures are logged, not raised.
    """
    for p in targets:
        try:
            if p.is_file():
                p.unlink()
            elif p.is_dir():
                shutil.rmtree(p)
        except OSError:
            logging.exception("cleanup failed: %s", p)


WorkerFactory = Callable[[RemoteClient, DownloadJob], DownloadWorker]


class Installer(QObject):
    """
    Downloads Build.zip on a worker thread, then (back on the UI thread)
    replaces Build/ and stamps Version.txt.

    Steps are not rolled back: if Build/ was removed and extraction fails,
    the game stays missing until the next successful install.
    """

    sig_progress: Signal = Signal(int)

    def __init__(
            self,
            paths: LauncherPaths,
            client: RemoteClient,
            status: StatusController,
            worker_factory: WorkerFactory = DownloadWorker,
    ) -> None:
        super().__init__()
        self.paths = paths
        self.client = client
        self.status = status
        self.worker_factory = worker_factory
        self.worker: Optional[DownloadWorker] = None
        # started workers not yet finished; dropped by _reap_workers
        self._workers: List[DownloadWorker] = []
        self._in_flight = False

    def is_busy(self) -> bool:
        return self._in_flight

    def install(self, is_update: bool, remote_version: Optional[Version] = None) -> bool:
        if self._in_flight:
            self.status.log("[launcher] install ignored: download already in progress")
            return False

        self.status.set_status(
            LauncherStatus.DOWNLOADING_UPDATE if is_update else LauncherStatus.DOWNLOADING_GAME
        )

        if not is_update or remote_version is None:
            ok, msg, fetched = fetch_remote_version(self.client)
            self.status.log(f"[launcher] fetch_version.ok={ok}")
            if not ok or fetched is None:
                self.status.fail("Error installing game files", msg)
                return False
            remote_version = fetched

        job = DownloadJob(
            archive_path=self.paths.archive_file,
            version=remote_version,
            is_update=is_update,
        )

        self._in_flight = True
        self.sig_progress.emit(0)
        try:
            worker = self.worker_factory(self.client, job)
            worker.sig_log.connect(self.status.log)
            worker.sig_progress.connect(self.sig_progress)
            worker.sig_done.connect(self.on_download_done)
            worker.finished.connect(self._reap_workers)
            self._workers.append(worker)
            self.worker = worker
            worker.start()
        except Exception as e:
            self._in_flight = False
            self._reap_workers()
            logging.exception("could not start download worker")
            self.status.fail("Error installing game files", e)
            return False

        return True

    @Slot(object)
    def on_download_done(self, result: DownloadResult) -> None:
        self._in_flight = False

        if not result.ok:
            self.status.fail("Error downloading game files", result.message)
            return

        zip_path = result.job.archive_path
        try:
            remove_build_dir(self.paths.build_dir)
            extract_archive(zip_path, self.paths.root_dir)
            zip_path.unlink()
            write_version_marker(self.paths.version_file, result.job.version)
        except Exception as e:
            logging.exception("install failed")
            cleanup_paths(zip_path)
            self.status.fail("Error finishing download", e)
            return

        self.status.log(f"[launcher] installed {self.paths.build_dir} (v{result.job.version})")
        self.sig_progress.emit(100)
        self.status.set_version(result.job.version)
        self.status.set_status(LauncherStatus.READY)

    @Slot()
    def _reap_workers(self) -> None:
        alive: List[DownloadWorker] = []
        for w in self._workers:
            if w.isRunning():
                alive.append(w)
            else:
                w.deleteLater()
        self._workers = alive
        if self.worker is not None and self.worker not in alive:
            self.worker = None

    def wait(self, timeout_ms: int = 30000) -> bool:
        return all(w.wait(timeout_ms) for w in list(self._workers))
