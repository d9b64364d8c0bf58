# game_launcher/core/paths.py
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

VERSION_FILE_NAME = "Version.txt"
ARCHIVE_FILE_NAME = "Build.zip"
BUILD_DIR_NAME = "Build"
CONFIG_FILE_NAME = "launcher.json"
LOG_FILE_NAME = "launcher.log"


@dataclass(frozen=True)
class LauncherPaths:
    root_dir: Path
    version_file: Path
    archive_file: Path
    build_dir: Path
    exe_path: Path
    config_file: Path
    log_file: Path


def get_root_dir() -> Path:
    """
    - frozen (PyInstaller): folder that holds launcher.exe
    - otherwise: current working directory
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path.cwd()


def get_paths(artifact_name: str, root_dir: Optional[Path] = None) -> LauncherPaths:
    root = (root_dir or get_root_dir()).resolve()
    build = root / BUILD_DIR_NAME
    return LauncherPaths(
        root_dir=root,
        version_file=root / VERSION_FILE_NAME,
        archive_file=root / ARCHIVE_FILE_NAME,
        build_dir=build,
        exe_path=build / artifact_name,
        config_file=root / CONFIG_FILE_NAME,
        log_file=root / LOG_FILE_NAME,
    )
