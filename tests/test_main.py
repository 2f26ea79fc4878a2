"""Тесты вспомогательных функций модуля main."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from container_lister.main import initialize_workdir, setup_logging_from_settings
from container_lister.settings.groups import SCHEMA, SettingsGroup
from container_lister.utils.paths import APP_DIR, resolve_app_dir


class DummySettings:
    def __init__(self, enabled: bool = True, level: str = "INFO") -> None:
        self.logging = SettingsGroup("logging", SCHEMA["logging"])
        self.logging.set("enabled", enabled)
        self.logging.set("level", level)

    def get_group(self, name: str):  # type: ignore[override]
        if name == "logging":
            return self.logging
        raise KeyError(name)


def test_initialize_workdir_creates_structure(tmp_path: Path) -> None:
    base_dir = tmp_path / ".container_lister"
    assert initialize_workdir(base_dir)
    assert (base_dir / "logs").is_dir()


def test_initialize_workdir_reports_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    assert initialize_workdir(blocker / "nested") is False


def test_setup_logging_enabled_creates_log(tmp_path: Path) -> None:
    logging.disable(logging.NOTSET)
    settings = DummySettings(enabled=True, level="INFO")
    setup_logging_from_settings(tmp_path, settings)
    logger = logging.getLogger("test")
    logger.info("log entry")
    for handler in logging.getLogger().handlers:
        handler.flush()
    log_file = tmp_path / "logs" / "app.log"
    assert log_file.exists()
    assert "log entry" in log_file.read_text(encoding="utf-8")


def test_setup_logging_disabled(tmp_path: Path) -> None:
    logging.disable(logging.NOTSET)
    settings = DummySettings(enabled=False)
    setup_logging_from_settings(tmp_path, settings)
    assert logging.root.manager.disable >= logging.CRITICAL
    logging.disable(logging.NOTSET)


def test_resolve_app_dir_honours_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("CONTAINER_LISTER_HOME", str(tmp_path))
    assert resolve_app_dir() == tmp_path / ".container_lister"
    monkeypatch.delenv("CONTAINER_LISTER_HOME")
    assert resolve_app_dir() == APP_DIR
