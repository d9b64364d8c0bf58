from __future__ import annotations

import pytest

from game_launcher.core.launch_gate import GateAction, LaunchGate
from game_launcher.core.status import LauncherStatus


class FakeChecker:
    def __init__(self) -> None:
        self.calls = 0

    def check_for_updates(self) -> None:
        self.calls += 1


class Recorder:
    def __init__(self, result=(True, "ok")) -> None:
        self.result = result
        self.runs = []
        self.exits = 0

    def run(self, exe_path, workdir):
        self.runs.append((exe_path, workdir))
        return self.result

    def exit(self) -> None:
        self.exits += 1


@pytest.fixture
def exe(paths):
    paths.build_dir.mkdir()
    paths.exe_path.write_bytes(b"MZ")
    return paths.exe_path


def _gate(paths, status, checker, rec):
    return LaunchGate(paths=paths, status=status, checker=checker, on_exit=rec.exit, runner=rec.run)


def test_ready_launches_in_build_dir_and_exits(paths, status, exe):
    status.set_status(LauncherStatus.READY)
    checker, rec = FakeChecker(), Recorder()

    assert _gate(paths, status, checker, rec).on_launch_requested() is GateAction.LAUNCHED

    assert rec.runs == [(exe, paths.build_dir)]
    assert rec.exits == 1
    assert checker.calls == 0


def test_failed_retries_check(paths, status, exe):
    status.set_status(LauncherStatus.FAILED)
    checker, rec = FakeChecker(), Recorder()

    assert _gate(paths, status, checker, rec).on_launch_requested() is GateAction.RETRIED

    assert checker.calls == 1
    assert rec.runs == []


@pytest.mark.parametrize("st", [LauncherStatus.DOWNLOADING_GAME, LauncherStatus.DOWNLOADING_UPDATE])
def test_noop_while_downloading(paths, status, status_log, exe, st):
    status.set_status(st)
    checker, rec = FakeChecker(), Recorder()

    assert _gate(paths, status, checker, rec).on_launch_requested() is GateAction.IGNORED

    assert rec.runs == []
    assert rec.exits == 0
    assert checker.calls == 0
    assert status.get_status() is st
    assert status_log["status"] == [st]


def test_ready_without_exe_is_noop(paths, status):
    status.set_status(LauncherStatus.READY)
    checker, rec = FakeChecker(), Recorder()

    assert _gate(paths, status, checker, rec).on_launch_requested() is GateAction.IGNORED
    assert rec.runs == []


def test_before_first_check_is_noop(paths, status, exe):
    checker, rec = FakeChecker(), Recorder()
    assert _gate(paths, status, checker, rec).on_launch_requested() is GateAction.IGNORED


def test_start_failure_keeps_launcher_open(paths, status, status_log, exe):
    status.set_status(LauncherStatus.READY)
    checker, rec = FakeChecker(), Recorder(result=(False, "run failed: permission denied"))

    assert _gate(paths, status, checker, rec).on_launch_requested() is GateAction.IGNORED

    assert rec.exits == 0
    assert status.get_status() is LauncherStatus.READY
    assert status_log["error"] == ["Error starting game: run failed: permission denied"]
