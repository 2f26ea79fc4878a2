"""Обёртка над BlobServiceClient с безопасной инициализацией."""

from __future__ import annotations

from typing import Any

from azure.core.exceptions import AzureError
from azure.storage.blob import BlobServiceClient

from container_lister.storage.exceptions import ListingFailure


class StorageClientWrapper:
    """Создаёт клиент хранилища, привязанный к одному SAS URL.

    Сам URL не сохраняется в атрибутах и не попадает в логи: SDK разбирает
    из него адрес аккаунта и токен.
    """

    def __init__(
        self,
        connection_url: str,
        *,
        connection_timeout: int | None = None,
        read_timeout: int | None = None,
        retry_total: int | None = None,
        raw_client: Any | None = None,
    ) -> None:
        self._transport_options = {
            key: value
            for key, value in (
                ("connection_timeout", connection_timeout),
                ("read_timeout", read_timeout),
                ("retry_total", retry_total),
            )
            if value is not None
        }
        self._client = raw_client or self._create_client(connection_url)

    def _create_client(self, connection_url: str) -> BlobServiceClient:
        try:
            return BlobServiceClient(account_url=connection_url, **self._transport_options)
        except (ValueError, AzureError) as exc:
            raise ListingFailure(f"Cannot create storage client: {exc}") from exc

    @property
    def account_name(self) -> str | None:
        """Имя аккаунта хранилища, если SDK смог его определить."""

        return getattr(self._client, "account_name", None)

    def get_raw_client(self) -> Any:
        """Возвращает внутренний BlobServiceClient."""

        return self._client
