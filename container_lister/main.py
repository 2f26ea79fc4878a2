"""Точка входа в приложение Blob Container Lister."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from container_lister import __version__
from container_lister.settings.exceptions import SettingsError
from container_lister.settings.registry import SettingsRegistry
from container_lister.storage.data_provider import ContainerDataProvider
from container_lister.utils.logger import configure_logging
from container_lister.utils.paths import resolve_app_dir

LOGGER = logging.getLogger(__name__)


def initialize_settings(config_path: Path) -> SettingsRegistry:
    """Получает singleton реестр настроек и загружает config.json."""

    registry = SettingsRegistry(config_path=config_path)
    registry.load_from_disk()
    return registry


def setup_logging_from_settings(base_dir: Path, settings: SettingsRegistry) -> None:
    """Настраивает логирование в соответствии с группой logging."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    configure_logging(
        log_dir=base_dir / "logs",
        level_name=logging_settings.get("level"),
        max_bytes=logging_settings.get("max_file_size_mb") * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files"),
    )


def initialize_workdir(base_dir: Path) -> bool:
    """Создаёт рабочую структуру (config и logs)."""

    try:
        base_dir.mkdir(parents=True, exist_ok=True)
        (base_dir / "logs").mkdir(exist_ok=True)
        return True
    except OSError as exc:
        LOGGER.error("Не удалось инициализировать рабочую директорию: %s", exc)
        return False


def main() -> int:
    """Основная точка входа: готовит окружение и запускает приложение."""

    base_dir = resolve_app_dir()
    if not initialize_workdir(base_dir):
        return 1
    configure_logging(base_dir / "logs")

    try:
        settings = initialize_settings(base_dir / "config.json")
    except SettingsError as exc:
        LOGGER.error("Не удалось загрузить настройки: %s", exc)
        return 1
    setup_logging_from_settings(base_dir, settings)

    from container_lister.app import create_application

    LOGGER.info("Запуск Blob Container Lister версии %s", __version__)
    app = create_application(
        settings=settings,
        data_provider=ContainerDataProvider(settings),
    )
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
