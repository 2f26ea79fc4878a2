"""Централизованное описание путей приложения."""

from __future__ import annotations

import os
from pathlib import Path


# APP_DIR — базовая директория, где сохраняются настройки и логи
APP_DIR = Path.home() / ".container_lister"


def resolve_app_dir() -> Path:
    """Возвращает рабочую директорию с учётом CONTAINER_LISTER_HOME."""

    override = os.environ.get("CONTAINER_LISTER_HOME")
    if override:
        return Path(override) / ".container_lister"
    return APP_DIR
