# game_launcher/core/runner.py
from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


def _detach_kwargs() -> Dict[str, Any]:
    # the game must outlive the launcher process that started it
    if os.name == "nt":
        return {
            "creationflags": subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP,
        }
    return {"start_new_session": True}


def run_exe(exe_path: Path, workdir: Optional[Path] = None) -> Tuple[bool, str]:
    """
    Starts the game detached and returns right away; the caller exits after.
    The working directory defaults to the exe's folder so the game finds its
    data files.
    """
    if not exe_path.is_file():
        return False, f"exe not found: {exe_path}"

    cwd = workdir if workdir is not None else exe_path.parent

    try:
        subprocess.Popen(
            [str(exe_path)],
            cwd=str(cwd),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            close_fds=True,
            **_detach_kwargs(),
        )
    except OSError as e:
        return False, f"run failed: {str(e)}"

    return True, "ok"
