"""Структуры данных для описания объектов хранилища."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class ContainerRecord:
    """Минимальное представление контейнера: только имя."""

    name: str

    @classmethod
    def from_item(cls, item: Any) -> "ContainerRecord":
        """Строит запись из ContainerProperties SDK или словаря.

        Поднимает ValueError, если у элемента нет непустого строкового имени.
        """

        if isinstance(item, Mapping):
            name = item.get("name")
        else:
            name = getattr(item, "name", None)
        if not isinstance(name, str) or not name:
            raise ValueError(f"Container item without a name: {type(item).__name__}")
        return cls(name=name)
