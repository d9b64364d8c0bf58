# game_launcher/core/app_config.py
from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

DEFAULT_VERSION_URL = "https://drive.google.com/uc?id=1a9iadcTlxFeA5o0KRsVIaO4AF4EZyN_u"
DEFAULT_ARCHIVE_URL = "https://drive.google.com/uc?id=1x9FYc4Y5Z8WsA38qqcTGEt4RtbkYiuuf"

# requests/urllib3 reject a zero timeout
POSITIVE_INT_KEYS = ("http_timeout_sec", "download_timeout_sec")


@dataclass(frozen=True)
class LauncherConfig:
    version_url: str = DEFAULT_VERSION_URL
    archive_url: str = DEFAULT_ARCHIVE_URL
    artifact_name: str = "DungeonMaster.exe"
    window_title: str = "Dungeon Master Launcher"
    http_timeout_sec: int = 10
    download_timeout_sec: int = 60
    retries: int = 3


def _read_json_object(path: Path) -> Dict[str, Any]:
    # utf-8-sig also accepts files saved with a BOM (notepad)
    raw = path.read_text(encoding="utf-8-sig")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"{path.name}: JSON parse failed: {str(e)}")

    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: top level must be an object")
    return data


def load_launcher_config(cfg_path: Path) -> LauncherConfig:
    """
    launcher.json is optional. Missing keys fall back to the defaults above,
    unknown keys are ignored.
    """
    cfg = LauncherConfig()
    if not cfg_path.exists():
        return cfg

    data = _read_json_object(cfg_path)

    overrides: Dict[str, Any] = {}
    for f in fields(LauncherConfig):
        if f.name not in data:
            continue
        v = data[f.name]
        if isinstance(f.default, int):
            if not isinstance(v, int) or isinstance(v, bool) or v < 0:
                raise ValueError(f'{cfg_path.name}: "{f.name}" must be a non-negative integer')
            if f.name in POSITIVE_INT_KEYS and v < 1:
                raise ValueError(f'{cfg_path.name}: "{f.name}" must be at least 1')
            overrides[f.name] = v
        else:
            if not isinstance(v, str) or not v.strip():
                raise ValueError(f'{cfg_path.name}: "{f.name}" must be a non-empty string')
            overrides[f.name] = v.strip()

    return replace(cfg, **overrides)
