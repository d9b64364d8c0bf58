# game_launcher/core/api.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple

import requests
from requests.adapters import HTTPAdapter
from requests.exceptions import ConnectionError, HTTPError, RequestException, Timeout
from urllib3.util.retry import Retry

from game_launcher.core.app_config import LauncherConfig
from game_launcher.core.versioning import Version, VersionFormatError

DOWNLOAD_CHUNK_SIZE = 1024 * 1024  # 1MB
USER_AGENT = "game-launcher"


class RemoteClient:
    """
    HTTP access to the version authority (plain text "x.y.z") and the
    build archive. Errors come back as (ok, message, value), never raised.
    """

    def __init__(
            self,
            version_url: str,
            archive_url: str,
            timeout_sec: int = 10,
            download_timeout_sec: int = 60,
            retries: int = 3,
            backoff: float = 0.3,
    ) -> None:
        self.version_url = version_url
        self.archive_url = archive_url
        self.timeout_sec = int(timeout_sec)
        self.download_timeout_sec = int(download_timeout_sec)

        self.session: requests.Session = requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        self._mount_retry_adapter(retries=retries, backoff=backoff)

    @classmethod
    def from_config(cls, cfg: LauncherConfig) -> "RemoteClient":
        return cls(
            version_url=cfg.version_url,
            archive_url=cfg.archive_url,
            timeout_sec=cfg.http_timeout_sec,
            download_timeout_sec=cfg.download_timeout_sec,
            retries=cfg.retries,
        )

    def _mount_retry_adapter(self, retries: int, backoff: float) -> None:
        retry = Retry(
            total=retries,
            connect=retries,
            read=retries,
            backoff_factor=backoff,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=frozenset(["GET"]),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def fetch_version_text(self) -> Tuple[bool, str, Optional[str]]:
        try:
            res = self.session.get(self.version_url, timeout=self.timeout_sec, allow_redirects=True)
            res.raise_for_status()
        except Timeout:
            return False, "version request timed out", None
        except ConnectionError as e:
            return False, f"connection error: {str(e)}", None
        except HTTPError as e:
            return False, f"bad status: {e.response.status_code if e.response is not None else '?'}", None
        except (RequestException, ValueError) as e:
            # urllib3 raises ValueError for unusable timeouts and malformed urls
            return False, f"request failed: {str(e)}", None

        try:
            return True, "ok", res.content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            return False, f"version body is not utf-8: {str(e)}", None

    def download_archive(
            self,
            dst_path: Path,
            progress_cb: Optional[Callable[[int, int], None]] = None,  # (written, total)
    ) -> Tuple[bool, str, int]:
        """
        Streams the archive into dst_path via a ".part" file that is only
        renamed once the body is complete. On failure nothing is left behind.
        """
        part_path = dst_path.with_name(dst_path.name + ".part")

        try:
            with self.session.get(
                    self.archive_url,
                    headers={"Accept": "*/*"},
                    timeout=(self.timeout_sec, self.download_timeout_sec),
                    allow_redirects=True,
                    stream=True,
            ) as res:
                if res.status_code != 200:
                    return False, f"bad status: {res.status_code}", 0
                nbytes = _stream_to_file(res, part_path, progress_cb)

            part_path.replace(dst_path)
        except (RequestException, OSError, ValueError) as e:
            cleanup_partial(part_path)
            return False, f"download failed: {str(e)}", 0

        return True, "ok", nbytes


def _content_length(res: requests.Response) -> int:
    raw = (res.headers.get("Content-Length") or "").strip()
    return int(raw) if raw.isdigit() else 0


def _stream_to_file(
        res: requests.Response,
        path: Path,
        progress_cb: Optional[Callable[[int, int], None]],
) -> int:
    total = _content_length(res)
    written = 0
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        for chunk in res.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
            if not chunk:
                continue
            f.write(chunk)
            written += len(chunk)
            if progress_cb is not None:
                try:
                    progress_cb(written, total)
                except Exception:
                    logging.exception("progress_cb failed")
    return written


def cleanup_partial(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError:
        logging.exception("could not remove partial download: %s", path)


def fetch_remote_version(client: RemoteClient) -> Tuple[bool, str, Optional[Version]]:
    ok, msg, text = client.fetch_version_text()
    if not ok or text is None:
        return False, msg, None

    try:
        return True, "ok", Version.parse(text)
    except VersionFormatError as e:
        return False, f"invalid remote version: {str(e)}", None
