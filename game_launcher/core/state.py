# game_launcher/core/state.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from game_launcher.core.versioning import Version


def read_version_marker(version_file: Path) -> Optional[Version]:
    """
    None      => never installed (Version.txt absent)
    Version   => parsed marker
    raises VersionFormatError / OSError for a marker that exists but is bad
    """
    if not version_file.exists():
        return None
    return Version.parse(version_file.read_text(encoding="utf-8-sig"))


def write_version_marker(version_file: Path, version: Version) -> None:
    version_file.parent.mkdir(parents=True, exist_ok=True)
    tmp = version_file.with_suffix(".tmp")

    tmp.write_text(str(version), encoding="utf-8")
    tmp.replace(version_file)
