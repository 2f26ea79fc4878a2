"""Схема настроек: группы app, logging и listing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from container_lister.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from container_lister.settings.validators import (
    CompositeValidator,
    EnumValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
    Validator,
)

# Префикс имени контейнера: строчные латинские буквы, цифры и дефис
CONTAINER_PREFIX_PATTERN = r"^[a-z0-9-]{0,63}$"


@dataclass(frozen=True, slots=True)
class SettingSpec:
    """Значение по умолчанию и валидатор одного ключа."""

    default: Any
    validator: Optional[Validator] = None


def _integer_in(min_value: int, max_value: int) -> Validator:
    return CompositeValidator([TypeValidator(int), RangeValidator(min_value, max_value)])


SCHEMA: Dict[str, Dict[str, SettingSpec]] = {
    "app": {
        "language": SettingSpec("en", EnumValidator(["en", "ru"])),
        "window_width": SettingSpec(640, _integer_in(320, 10000)),
        "window_height": SettingSpec(480, _integer_in(240, 10000)),
    },
    "logging": {
        "enabled": SettingSpec(True, TypeValidator(bool)),
        "level": SettingSpec("INFO", EnumValidator(["DEBUG", "INFO", "WARNING", "ERROR"])),
        "max_file_size_mb": SettingSpec(10, _integer_in(1, 1000)),
        "max_archived_files": SettingSpec(5, _integer_in(1, 50)),
    },
    "listing": {
        "connection_timeout_sec": SettingSpec(20, _integer_in(1, 300)),
        "read_timeout_sec": SettingSpec(60, _integer_in(1, 600)),
        "retry_total": SettingSpec(3, _integer_in(0, 10)),
        "results_per_page": SettingSpec(500, _integer_in(1, 5000)),
        "name_starts_with": SettingSpec(
            "", CompositeValidator([TypeValidator(str), RegexValidator(CONTAINER_PREFIX_PATTERN)])
        ),
    },
}


class SettingsGroup:
    """Значения одной группы схемы; каждое присваивание проходит валидацию."""

    def __init__(self, name: str, specs: Mapping[str, SettingSpec]) -> None:
        self.name = name
        self._specs = dict(specs)
        self._values = {key: spec.default for key, spec in self._specs.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._specs

    def get(self, key: str) -> Any:
        if key not in self._specs:
            raise SettingsNotFoundError(self.name, key)
        return self._values[key]

    def set(self, key: str, value: Any) -> None:
        spec = self._specs.get(key)
        if spec is None:
            raise SettingsNotFoundError(self.name, key)
        if spec.validator is not None:
            is_valid, error = spec.validator.validate(value)
            if not is_valid:
                raise SettingsValidationError(f"{self.name}.{key}", value, error)
        self._values[key] = value

    def update(self, data: Mapping[str, Any]) -> None:
        """Применяет значения из config.json; незнакомые ключи игнорируются."""

        for key, value in data.items():
            if key in self._specs:
                self.set(key, value)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)
