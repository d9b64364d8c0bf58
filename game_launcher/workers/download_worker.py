# game_launcher/workers/download_worker.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QThread, Signal

from game_launcher.core.api import RemoteClient
from game_launcher.core.versioning import Version


@dataclass(frozen=True)
class DownloadJob:
    archive_path: Path
    version: Version  # stamped into Version.txt once the archive is installed
    is_update: bool


@dataclass(frozen=True)
class DownloadResult:
    ok: bool
    message: str
    job: DownloadJob
    bytes_written: int = 0


class DownloadWorker(QThread):
    sig_log: Signal = Signal(str)
    sig_progress: Signal = Signal(int)
    sig_done: Signal = Signal(object)  # DownloadResult

    def __init__(self, client: RemoteClient, job: DownloadJob) -> None:
        super().__init__()
        self.client = client
        self.job = job

    def _progress(self, written: int, total: int) -> None:
        if total > 0:
            self.sig_progress.emit(max(0, min(100, int(written * 100 / total))))

    def run(self) -> None:
        kind = "update" if self.job.is_update else "game"
        self.sig_log.emit(f"[launcher] download start ({kind}): {self.job.archive_path.name} (v{self.job.version})")
        try:
            ok, msg, nbytes = self.client.download_archive(self.job.archive_path, progress_cb=self._progress)
            result = DownloadResult(ok, msg, self.job, nbytes)
        except Exception as e:
            result = DownloadResult(False, f"unexpected error: {str(e)}", self.job)

        self.sig_log.emit(f"[launcher] download.ok={result.ok}")
        self.sig_log.emit(f"[launcher] download.msg={result.message}")
        self.sig_log.emit(f"[launcher] download.bytes={result.bytes_written}")
        self.sig_done.emit(result)
