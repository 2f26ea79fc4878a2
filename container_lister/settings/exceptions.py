"""Ошибки подсистемы настроек."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

LOGGER = logging.getLogger(__name__)


class SettingsError(Exception):
    """Базовая ошибка настроек; пишется в лог при создании."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        LOGGER.error("Settings error: %s", message)


class SettingsNotFoundError(SettingsError):
    """Запрошена неизвестная группа или ключ."""

    def __init__(self, group: str, key: Optional[str] = None) -> None:
        self.group = group
        self.key = key
        name = f"{group}.{key}" if key else group
        super().__init__(f"Setting '{name}' not found")


class SettingsValidationError(SettingsError):
    """Значение не прошло валидатор своего ключа."""

    def __init__(self, key: str, value: Any, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Validation error for '{key}': {reason} (value={value!r})")


class SettingsIOError(SettingsError):
    """config.json не удалось прочитать, разобрать или записать."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"I/O error with settings file '{path}': {reason}")
