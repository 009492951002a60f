import logging
from pathlib import Path

import pytest

from launch_gate.config import AppConfig
from launch_gate.logging_setup import setup_logging


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    logging.getLogger("settings").setLevel(logging.NOTSET)


def _config(data_dir: Path, monkeypatch) -> AppConfig:
    monkeypatch.setenv("LAUNCH_GATE_DATA_DIR", str(data_dir))
    return AppConfig()


def test_file_logging_enabled(tmp_path: Path, monkeypatch, clean_root):
    log_file = setup_logging(_config(tmp_path, monkeypatch))
    assert log_file == tmp_path.resolve() / "logs" / "launch-gate.log"
    assert log_file.exists()


def test_unwritable_logs_dir_falls_back_to_console(tmp_path: Path, monkeypatch, clean_root):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    before = len(clean_root.handlers)

    assert setup_logging(_config(blocker, monkeypatch)) is None
    added = clean_root.handlers[before:]
    assert len(added) == 1
    assert isinstance(added[0], logging.StreamHandler)


def test_second_call_replaces_handlers(tmp_path: Path, monkeypatch, clean_root):
    config = _config(tmp_path, monkeypatch)
    before = len(clean_root.handlers)
    setup_logging(config)
    setup_logging(config, verbose=True)
    assert len(clean_root.handlers) == before + 2
    assert clean_root.level == logging.DEBUG


def test_settings_writes_quiet_unless_verbose(tmp_path: Path, monkeypatch, clean_root):
    config = _config(tmp_path, monkeypatch)
    setup_logging(config)
    assert not logging.getLogger("settings").isEnabledFor(logging.INFO)
    setup_logging(config, verbose=True)
    assert logging.getLogger("settings").isEnabledFor(logging.DEBUG)
