"""Поддельные объекты SDK хранилища для тестов."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional


class FakeContainerProperties:
    """Подобие azure.storage.blob.ContainerProperties."""

    def __init__(self, name: Any) -> None:
        self.name = name


class FakeServiceClient:
    """Подобие BlobServiceClient: list_containers возвращает ленивый итератор."""

    account_name = "acct"

    def __init__(
        self,
        items: List[Any],
        *,
        error: Optional[Exception] = None,
        error_at: int = 0,
    ) -> None:
        self._items = items
        self._error = error
        self._error_at = error_at
        self.calls: List[Dict[str, Any]] = []
        self.consumed = 0

    def list_containers(self, **kwargs: Any) -> Iterator[Any]:
        self.calls.append(kwargs)
        return self._iterate()

    def _iterate(self) -> Iterator[Any]:
        for index, item in enumerate(self._items):
            if self._error is not None and index == self._error_at:
                raise self._error
            self.consumed += 1
            yield item
        if self._error is not None and self._error_at >= len(self._items):
            raise self._error
