from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from game_launcher.core.paths import LauncherPaths, get_paths
from game_launcher.core.status import StatusController

ARTIFACT_NAME = "DungeonMaster.exe"


@pytest.fixture
def paths(tmp_path: Path) -> LauncherPaths:
    return get_paths(ARTIFACT_NAME, tmp_path)


@pytest.fixture
def status(qapp) -> StatusController:
    return StatusController()


@pytest.fixture
def status_log(status: StatusController) -> Dict[str, list]:
    """Everything the controller emitted, by signal."""
    seen: Dict[str, list] = {"status": [], "label": [], "version": [], "error": [], "log": []}
    status.sig_status.connect(seen["status"].append)
    status.sig_label.connect(seen["label"].append)
    status.sig_version.connect(seen["version"].append)
    status.sig_error.connect(seen["error"].append)
    status.sig_log.connect(seen["log"].append)
    return seen
