"""Ошибки слоя хранилища."""

from __future__ import annotations

import logging

from container_lister.utils.helpers import redact_sas_token

LOGGER = logging.getLogger(__name__)


class ListingFailure(Exception):
    """Не удалось получить список контейнеров.

    Одна категория на все случаи: некорректный URL, просроченная или
    недостаточная подпись, сетевой сбой. Сообщение очищается от SAS-токена
    при создании, поэтому его можно показывать пользователю и писать в лог.
    """

    def __init__(self, message: str) -> None:
        self.message = redact_sas_token(message)
        super().__init__(self.message)
        LOGGER.error("Listing failure: %s", self.message)
