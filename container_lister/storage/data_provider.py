"""Поставщик данных хранилища для интерфейса.

Объединяет настройки группы `listing` с функциями из
`container_lister.storage.listing`: создаёт клиент для введённого SAS URL и
возвращает полностью вычитанный список контейнеров.
"""

from __future__ import annotations

import logging
from typing import Any, List

from container_lister.storage import listing
from container_lister.storage.client import StorageClientWrapper
from container_lister.storage.models import ContainerRecord

LOGGER = logging.getLogger(__name__)


class ContainerDataProvider:
    """Высокоуровневый API получения контейнеров по SAS URL."""

    def __init__(self, settings: Any) -> None:
        self._settings = settings

    # ------------------------------------------------------------------ helpers
    def _listing_value(self, key: str, default: Any) -> Any:
        return self._settings.get_value("listing", key, default=default)

    def _create_client(self, connection_url: str) -> StorageClientWrapper:
        """Создаёт клиент хранилища с транспортными параметрами из настроек."""

        return StorageClientWrapper(
            connection_url,
            connection_timeout=int(self._listing_value("connection_timeout_sec", 20)),
            read_timeout=int(self._listing_value("read_timeout_sec", 60)),
            retry_total=int(self._listing_value("retry_total", 3)),
        )

    # ------------------------------------------------------------------- fetches
    def fetch_containers(self, connection_url: str) -> List[ContainerRecord]:
        """Возвращает все контейнеры аккаунта в порядке перечисления.

        Ошибки SDK приходят как ListingFailure и не перехватываются.
        """

        client = self._create_client(connection_url)
        records = listing.list_container_records(
            client,
            results_per_page=int(self._listing_value("results_per_page", 500)),
            name_starts_with=self._listing_value("name_starts_with", "") or None,
        )
        LOGGER.info(
            "Listed %s containers for account %s",
            len(records),
            client.account_name or "<unknown>",
        )
        return records

    def fetch_container_names(self, connection_url: str) -> List[str]:
        """Возвращает только имена контейнеров."""

        return [record.name for record in self.fetch_containers(connection_url)]
