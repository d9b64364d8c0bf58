from __future__ import annotations

from game_launcher.core.status import LauncherStatus, StatusController
from game_launcher.core.versioning import Version


def test_exactly_four_states_with_labels():
    assert {s: s.label for s in LauncherStatus} == {
        LauncherStatus.READY: "Play",
        LauncherStatus.FAILED: "Update Failed - Retry",
        LauncherStatus.DOWNLOADING_GAME: "Downloading Game...",
        LauncherStatus.DOWNLOADING_UPDATE: "Downloading Update...",
    }


def test_unset_until_first_check(status: StatusController):
    assert status.get_status() is None
    assert status.label == ""


def test_label_in_sync_when_status_signal_fires(status: StatusController):
    observed = []
    status.sig_status.connect(lambda st: observed.append((st, status.label)))

    for st in LauncherStatus:
        status.set_status(st)

    assert observed == [(st, st.label) for st in LauncherStatus]


def test_set_version_emits_label(status: StatusController, status_log):
    status.set_version(Version(1, 2, 3))
    assert status.version_text == "v1.2.3"
    assert status_log["version"] == ["v1.2.3"]


def test_fail_sets_failed_and_surfaces_message(status: StatusController, status_log):
    status.fail("Error checking for game updates", "offline")

    assert status.get_status() is LauncherStatus.FAILED
    assert status_log["label"] == ["Update Failed - Retry"]
    assert status_log["error"] == ["Error checking for game updates: offline"]


def test_report_error_keeps_status(status: StatusController, status_log):
    status.set_status(LauncherStatus.READY)
    status.report_error("Error starting game", "exe not found")

    assert status.get_status() is LauncherStatus.READY
    assert status_log["error"] == ["Error starting game: exe not found"]
