import json
import os

from Cores import Settings
from Cores.Common import make_log, purge_old_logs, logs_dir


def test_defaults_when_missing(tmp_path, monkeypatch):
    monkeypatch.setenv("RXMARBLES_DATA_DIR", str(tmp_path))
    cfg = Settings.get_app_settings()
    assert cfg["log_keep_days"] == 30
    assert cfg["theme"] == "DarkTheme.qss"
    assert cfg["splitter"] == [320, 660]


def test_broken_file_falls_back(tmp_path, monkeypatch):
    monkeypatch.setenv("RXMARBLES_DATA_DIR", str(tmp_path))
    (tmp_path / "settings.json").write_text("{not json", encoding="utf-8")
    assert Settings.get_app_settings()["window_w"] == 980


def test_values_are_clamped(tmp_path, monkeypatch):
    monkeypatch.setenv("RXMARBLES_DATA_DIR", str(tmp_path))
    data = {"app": {"log_keep_days": 0, "window_w": 10, "window_h": "x", "theme": "../evil.qss", "splitter": [1]}}
    (tmp_path / "settings.json").write_text(json.dumps(data), encoding="utf-8")
    cfg = Settings.get_app_settings()
    assert cfg["log_keep_days"] == 1
    assert cfg["window_w"] == Settings.MIN_W
    assert cfg["window_h"] == 620
    assert cfg["theme"] == "evil.qss"
    assert cfg["splitter"] == [320, 660]


def test_save_merges(tmp_path, monkeypatch):
    monkeypatch.setenv("RXMARBLES_DATA_DIR", str(tmp_path))
    assert Settings.save_app_settings({"window_w": 1200})
    assert Settings.save_app_settings({"log_keep_days": 7})
    cfg = Settings.get_app_settings()
    assert cfg["window_w"] == 1200
    assert cfg["log_keep_days"] == 7
    assert not (tmp_path / "settings.json.tmp").exists()


def test_theme_file_ships():
    assert os.path.isfile(Settings.theme_path())


def test_log_writes_and_purge(tmp_path, monkeypatch):
    monkeypatch.setenv("RXMARBLES_LOG_DIR", str(tmp_path))
    log = make_log("PurgeCheck")
    log("[*]", "hello")
    p = tmp_path / "PurgeCheck_log.log"
    assert p.is_file()
    old = tmp_path / "old.log"
    old.write_text("x", encoding="utf-8")
    os.utime(old, (0, 0))
    assert logs_dir() == str(tmp_path)
    assert purge_old_logs(30) >= 1
    assert not old.exists()
