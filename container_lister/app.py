"""Высокоуровневые утилиты для создания и запуска GUI приложения."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from PySide6 import QtWidgets

from container_lister.i18n.translator import set_language
from container_lister.settings.registry import SettingsRegistry
from container_lister.storage.data_provider import ContainerDataProvider
from container_lister.ui.main_window import create_main_window


class RunnableApp(Protocol):
    """Интерфейс приложения, которое можно запустить и получить код возврата."""

    def run(self) -> int:  # pragma: no cover - протокол
        """Запускает цикл приложения и возвращает код завершения."""


@dataclass
class GUIApp:
    """Приложение PySide6: QApplication плюс главное окно."""

    settings: SettingsRegistry
    data_provider: ContainerDataProvider

    def __post_init__(self) -> None:
        """Создаёт экземпляр QApplication и главное окно."""

        self._qt_app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
        set_language(self.settings.get_value("app", "language", default="en"))
        self._window = create_main_window(
            settings=self.settings,
            data_provider=self.data_provider,
        )

    def run(self) -> int:
        """Показывает окно и запускает основной цикл."""

        self._window.show()
        return self._qt_app.exec()


def create_application(
    settings: SettingsRegistry,
    data_provider: ContainerDataProvider,
) -> RunnableApp:
    """Фабрика GUI приложения."""

    return GUIApp(settings=settings, data_provider=data_provider)
