"""Функции перечисления контейнеров через клиент хранилища."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List

from azure.core.exceptions import AzureError

from container_lister.storage.client import StorageClientWrapper
from container_lister.storage.exceptions import ListingFailure
from container_lister.storage.models import ContainerRecord

LOGGER = logging.getLogger(__name__)


def iter_container_records(
    client: StorageClientWrapper,
    *,
    results_per_page: int | None = None,
    name_starts_with: str | None = None,
) -> Iterator[ContainerRecord]:
    """Лениво перечисляет контейнеры; каждая страница запрашивается SDK по мере обхода.

    Элементы без имени пропускаются с предупреждением.
    """

    raw = client.get_raw_client()
    options: Dict[str, Any] = {}
    if results_per_page:
        options["results_per_page"] = results_per_page
    if name_starts_with:
        options["name_starts_with"] = name_starts_with
    try:
        for position, item in enumerate(raw.list_containers(**options)):
            try:
                yield ContainerRecord.from_item(item)
            except ValueError as exc:
                LOGGER.warning("Skipping container #%s: %s", position, exc)
    except (ValueError, AzureError) as exc:
        raise ListingFailure(f"Cannot list containers: {exc}") from exc


def list_container_records(
    client: StorageClientWrapper,
    *,
    results_per_page: int | None = None,
    name_starts_with: str | None = None,
) -> List[ContainerRecord]:
    """Полностью вычитывает последовательность контейнеров в список."""

    return list(
        iter_container_records(
            client,
            results_per_page=results_per_page,
            name_starts_with=name_starts_with,
        )
    )
