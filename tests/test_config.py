"""Tests for settings and logger configuration."""

from __future__ import annotations

import logging
import os
import time

import pytest
from pydantic import ValidationError

from slotevents.config import Settings
from slotevents.logger import clean_old_logs, configure_logger


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    package = logging.getLogger("slotevents")
    saved = (root.handlers[:], root.level, package.level)
    yield
    for handler in root.handlers:
        if handler not in saved[0]:
            handler.close()
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    package.setLevel(saved[2])


def test_settings_defaults():
    settings = Settings.from_env({})

    assert settings.log_level == "INFO"
    assert settings.log_level_value == logging.INFO
    assert settings.log_dir is None
    assert settings.max_log_files == 5


def test_settings_from_env(tmp_path):
    settings = Settings.from_env(
        {
            "SLOTEVENTS_LOG_LEVEL": "debug",
            "SLOTEVENTS_LOG_DIR": str(tmp_path),
            "SLOTEVENTS_MAX_LOG_FILES": "2",
            "SLOTEVENTS_TITLE": "Demo",
            "UNRELATED": "x",
        }
    )

    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == logging.DEBUG
    assert settings.log_dir == tmp_path
    assert settings.max_log_files == 2
    assert settings.title == "Demo"


def test_settings_reads_os_environ(monkeypatch):
    monkeypatch.setenv("SLOTEVENTS_LOG_LEVEL", "warning")

    assert Settings.from_env().log_level == "WARNING"


@pytest.mark.parametrize(
    "env",
    [{"SLOTEVENTS_LOG_LEVEL": "loud"}, {"SLOTEVENTS_MAX_LOG_FILES": "0"}],
)
def test_settings_rejects_bad_values(env):
    with pytest.raises(ValidationError):
        Settings.from_env(env)


def test_clean_old_logs_keeps_newest(tmp_path):
    for i in range(4):
        path = tmp_path / f"{i}.log"
        path.write_text("x")
        stamp = time.time() - 100 + i
        os.utime(path, (stamp, stamp))

    clean_old_logs(tmp_path, max_files=2)

    assert sorted(p.name for p in tmp_path.glob("*.log")) == ["2.log", "3.log"]


def test_clean_old_logs_missing_dir(tmp_path):
    clean_old_logs(tmp_path / "missing")


def test_configure_logger_console_only(restore_logging):
    assert configure_logger(logging.DEBUG) is None
    assert logging.getLogger("slotevents").level == logging.DEBUG


def test_configure_logger_writes_file(tmp_path, restore_logging):
    log_dir = tmp_path / "logs"

    log_file = configure_logger(logging.INFO, log_dir=log_dir, max_log_files=3)
    logging.getLogger("slotevents.test").info("hello from the emitter")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_file is not None
    assert log_file.parent == log_dir
    assert "hello from the emitter" in log_file.read_text()
