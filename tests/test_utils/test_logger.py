"""Проверки подсистемы логирования."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from container_lister.utils.logger import configure_logging, resolve_log_level


def _read_log(log_dir: Path) -> str:
    for handler in logging.getLogger().handlers:
        handler.flush()
    return (log_dir / "app.log").read_text(encoding="utf-8")


def test_configure_logging_creates_file(tmp_path: Path) -> None:
    """После конфигурации должны появиться файлы логов и запись в них."""

    log_dir = tmp_path / "logs"
    configure_logging(log_dir, level_name="INFO", max_bytes=1024, backup_count=1)

    logging.getLogger("lister.test").info("log entry")

    assert "log entry" in _read_log(log_dir)


def test_configured_handlers_mask_sas_token(tmp_path: Path) -> None:
    """SAS-подпись из аргументов сообщения не попадает в файл лога."""

    log_dir = tmp_path / "logs"
    configure_logging(log_dir, level_name="INFO")

    logging.getLogger("lister.test").info(
        "Request to %s failed", "https://acct.blob.core.windows.net/?sv=1&sig=TOPSECRET"
    )

    content = _read_log(log_dir)
    assert "TOPSECRET" not in content
    assert "https://acct.blob.core.windows.net/?***" in content


def test_traceback_text_is_masked(tmp_path: Path) -> None:
    """Текст исключения в traceback тоже очищается от подписи."""

    log_dir = tmp_path / "logs"
    configure_logging(log_dir, level_name="INFO")

    try:
        raise TypeError("bad https://acct.blob.core.windows.net/?sv=1&sig=SECRETSIG")
    except TypeError:
        logging.getLogger("lister.test").exception("Unexpected error")

    content = _read_log(log_dir)
    assert "SECRETSIG" not in content
    assert "TypeError: bad https://acct.blob.core.windows.net/?***" in content


def test_resolve_log_level_invalid() -> None:
    """Неизвестный уровень логирования приводит к ValueError."""

    with pytest.raises(ValueError):
        resolve_log_level("INVALID")
