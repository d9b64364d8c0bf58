from __future__ import annotations

import json

import pytest

from game_launcher.core.app_config import DEFAULT_VERSION_URL, LauncherConfig, load_launcher_config
from game_launcher.core.paths import get_paths


def test_missing_file_uses_defaults(tmp_path):
    cfg = load_launcher_config(tmp_path / "launcher.json")
    assert cfg == LauncherConfig()
    assert cfg.version_url == DEFAULT_VERSION_URL
    assert cfg.artifact_name == "DungeonMaster.exe"


def test_overrides_and_unknown_keys(tmp_path):
    p = tmp_path / "launcher.json"
    p.write_text(json.dumps({
        "version_url": " https://example.test/version.txt ",
        "artifact_name": "Game.exe",
        "retries": 0,
        "something_else": True,
    }), encoding="utf-8")

    cfg = load_launcher_config(p)

    assert cfg.version_url == "https://example.test/version.txt"
    assert cfg.artifact_name == "Game.exe"
    assert cfg.retries == 0
    assert cfg.http_timeout_sec == 10


def test_bom_prefixed_file(tmp_path):
    p = tmp_path / "launcher.json"
    p.write_bytes(b"\xef\xbb\xbf" + json.dumps({"window_title": "DM"}).encode("utf-8"))
    assert load_launcher_config(p).window_title == "DM"


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        "[1, 2]",
        '{"retries": -1}',
        '{"retries": "3"}',
        '{"archive_url": ""}',
        '{"http_timeout_sec": 0}',
        '{"download_timeout_sec": 0}',
    ],
)
def test_invalid_config_raises(tmp_path, raw):
    p = tmp_path / "launcher.json"
    p.write_text(raw, encoding="utf-8")
    with pytest.raises(ValueError):
        load_launcher_config(p)


def test_paths_layout(tmp_path):
    paths = get_paths("Game.exe", tmp_path)
    assert paths.version_file == tmp_path.resolve() / "Version.txt"
    assert paths.archive_file == tmp_path.resolve() / "Build.zip"
    assert paths.build_dir == tmp_path.resolve() / "Build"
    assert paths.exe_path == tmp_path.resolve() / "Build" / "Game.exe"


def test_zero_retries_is_allowed(tmp_path):
    p = tmp_path / "launcher.json"
    p.write_text('{"retries": 0, "http_timeout_sec": 1}', encoding="utf-8")

    cfg = load_launcher_config(p)
    assert (cfg.retries, cfg.http_timeout_sec) == (0, 1)
