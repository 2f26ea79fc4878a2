"""Тесты высокоуровневого поставщика данных хранилища."""

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from container_lister.storage import client as client_module
from container_lister.storage.client import StorageClientWrapper
from container_lister.storage.data_provider import ContainerDataProvider
from container_lister.storage.exceptions import ListingFailure
from tests.test_storage.fakes import FakeContainerProperties, FakeServiceClient


class DummySettings:
    """Минимальные настройки для тестов."""

    def __init__(self, **overrides: Any) -> None:
        self._values = overrides

    def get_value(self, group: str, key: str, default: Any = None) -> Any:
        if group == "listing" and key in self._values:
            return self._values[key]
        return default


def _install_fake_client(
    monkeypatch: pytest.MonkeyPatch, raw: FakeServiceClient
) -> List[Dict[str, Any]]:
    created: List[Dict[str, Any]] = []

    def fake_blob_service_client(**kwargs: Any) -> FakeServiceClient:
        created.append(kwargs)
        return raw

    monkeypatch.setattr(client_module, "BlobServiceClient", fake_blob_service_client)
    return created


def test_fetch_container_names_in_order(monkeypatch: pytest.MonkeyPatch) -> None:
    raw = FakeServiceClient([FakeContainerProperties("logs"), FakeContainerProperties("images")])
    _install_fake_client(monkeypatch, raw)
    provider = ContainerDataProvider(DummySettings())
    assert provider.fetch_container_names("https://acct.blob.core.windows.net/?sig=x") == [
        "logs",
        "images",
    ]


def test_settings_are_forwarded_to_sdk(monkeypatch: pytest.MonkeyPatch) -> None:
    raw = FakeServiceClient([])
    created = _install_fake_client(monkeypatch, raw)
    provider = ContainerDataProvider(
        DummySettings(
            connection_timeout_sec=7,
            read_timeout_sec=11,
            retry_total=0,
            results_per_page=25,
            name_starts_with="lo",
        )
    )

    provider.fetch_containers("https://acct.blob.core.windows.net/?sig=x")

    assert created == [
        {
            "account_url": "https://acct.blob.core.windows.net/?sig=x",
            "connection_timeout": 7,
            "read_timeout": 11,
            "retry_total": 0,
        }
    ]
    assert raw.calls == [{"results_per_page": 25, "name_starts_with": "lo"}]


def test_empty_prefix_is_not_sent(monkeypatch: pytest.MonkeyPatch) -> None:
    raw = FakeServiceClient([])
    _install_fake_client(monkeypatch, raw)
    ContainerDataProvider(DummySettings(name_starts_with="")).fetch_containers("https://a/")
    assert raw.calls == [{"results_per_page": 500}]


def test_each_call_creates_new_client(monkeypatch: pytest.MonkeyPatch) -> None:
    created = _install_fake_client(monkeypatch, FakeServiceClient([]))
    provider = ContainerDataProvider(DummySettings())
    provider.fetch_container_names("https://a/")
    provider.fetch_container_names("https://b/")
    assert [kwargs["account_url"] for kwargs in created] == ["https://a/", "https://b/"]


def test_empty_url_propagates_listing_failure() -> None:
    provider = ContainerDataProvider(DummySettings())
    with pytest.raises(ListingFailure):
        provider.fetch_container_names("")


def test_uses_create_client_hook(monkeypatch: pytest.MonkeyPatch) -> None:
    """fetch_containers должен работать через _create_client."""

    raw = FakeServiceClient([{"name": "only"}])

    def fake_create_client(self: ContainerDataProvider, connection_url: str) -> StorageClientWrapper:
        assert connection_url == "sas"
        return StorageClientWrapper(connection_url, raw_client=raw)

    monkeypatch.setattr(ContainerDataProvider, "_create_client", fake_create_client)
    records = ContainerDataProvider(DummySettings()).fetch_containers("sas")
    assert [record.name for record in records] == ["only"]
