"""Настройки приложения, хранящиеся в config.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from container_lister.settings.exceptions import SettingsIOError, SettingsNotFoundError
from container_lister.settings.groups import SCHEMA, SettingsGroup

CONFIG_VERSION = "1.0.0"


class SettingsRegistry:
    """Группы настроек из SCHEMA плюс чтение и запись config.json.

    Отсутствующий файл создаётся со значениями по умолчанию; группы и ключи,
    которых нет в файле, сохраняют значения по умолчанию.
    """

    def __init__(self, config_path: Path) -> None:
        self._logger = logging.getLogger(__name__)
        self._file_path = config_path
        self._groups: Dict[str, SettingsGroup] = {
            name: SettingsGroup(name, specs) for name, specs in SCHEMA.items()
        }

    @property
    def config_path(self) -> Path:
        return self._file_path

    def get_group(self, group: str) -> SettingsGroup:
        try:
            return self._groups[group]
        except KeyError:
            raise SettingsNotFoundError(group) from None

    def get_value(self, group: str, key: str, default: Any = None) -> Any:
        """Значение ключа; default возвращается для неизвестных группы/ключа, если задан."""

        settings_group = self._groups.get(group)
        if settings_group is None or key not in settings_group:
            if default is not None:
                return default
            raise SettingsNotFoundError(group, key)
        return settings_group.get(key)

    def set_value(self, group: str, key: str, value: Any) -> None:
        self.get_group(group).set(key, value)

    def load_from_disk(self) -> None:
        if not self._file_path.exists():
            self._logger.info("Config file %s not found, writing defaults.", self._file_path)
            self.save_to_disk()
            return
        try:
            content = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsIOError(self._file_path, str(exc)) from exc
        if not isinstance(content, dict):
            raise SettingsIOError(self._file_path, "top-level JSON value must be an object")
        for name, group in self._groups.items():
            section = content.get(name)
            if isinstance(section, dict):
                group.update(section)

    def save_to_disk(self) -> None:
        payload: Dict[str, Any] = {"version": CONFIG_VERSION}
        for name, group in self._groups.items():
            payload[name] = group.to_dict()
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as exc:
            raise SettingsIOError(self._file_path, str(exc)) from exc
