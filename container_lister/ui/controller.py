"""Контроллер действия «показать контейнеры».

Не зависит от Qt: окно передаётся как `ContainerListView`, фоновое выполнение
как `ListingRunner`. Это позволяет проверять логику без графической среды.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, List, Optional, Protocol, Sequence

from container_lister.i18n.translator import translate

LOGGER = logging.getLogger(__name__)

ListingJob = Callable[[], List[str]]


class ContainerListView(Protocol):
    """Поверхность, с которой работает контроллер."""

    def connection_url(self) -> str:
        """Текущее значение поля ввода URL."""

    def show_container_names(self, names: Sequence[str]) -> None:
        """Очищает область вывода и добавляет по одной строке на имя."""

    def show_status(self, message: str) -> None:
        """Показывает информационное сообщение."""

    def show_error(self, message: str) -> None:
        """Показывает сообщение об ошибке, не трогая область вывода."""

    def set_busy(self, busy: bool) -> None:
        """Блокирует/разблокирует кнопку запуска."""


class NamesProvider(Protocol):
    def fetch_container_names(self, connection_url: str) -> List[str]:
        """Возвращает имена контейнеров или поднимает ListingFailure."""


class ListingRunner(Protocol):
    """Выполняет задачу вне потока интерфейса и сообщает результат в нём."""

    def start(
        self,
        job: ListingJob,
        on_success: Callable[[List[str]], None],
        on_failure: Callable[[str], None],
    ) -> None:
        """Запускает задачу; ровно один из колбэков будет вызван позже."""


class ContainerListController:
    """Оркестрирует одно действие пользователя: чтение URL, запрос, отрисовка.

    Пока запрос выполняется, повторные нажатия игнорируются. Номер поколения
    отсекает результаты запросов, отменённых через `cancel()`.
    """

    def __init__(
        self,
        view: ContainerListView,
        provider: NamesProvider,
        runner: ListingRunner,
    ) -> None:
        self._view = view
        self._provider = provider
        self._runner = runner
        self._generation = 0
        self._pending_generation: Optional[int] = None

    @property
    def is_listing(self) -> bool:
        """Выполняется ли сейчас запрос."""

        return self._pending_generation is not None

    # ------------------------------------------------------------------ operations
    def get_connection_url(self) -> str:
        """Возвращает значение поля ввода без изменений и проверок."""

        return self._view.connection_url()

    def render_container_names(self, names: Sequence[str]) -> None:
        """Заменяет содержимое области вывода списком имён в исходном порядке."""

        self._view.show_container_names(list(names))

    def list_and_render_containers(self) -> bool:
        """Запускает получение списка; возвращает False, если запрос уже идёт."""

        if self.is_listing:
            LOGGER.debug("Listing #%s still in progress, request ignored", self._pending_generation)
            return False

        connection_url = self.get_connection_url()
        self._generation += 1
        generation = self._generation
        self._pending_generation = generation
        self._view.set_busy(True)
        self._view.show_status(translate("status.loading"))
        LOGGER.info("Listing #%s started", generation)

        def job() -> List[str]:
            return self._provider.fetch_container_names(connection_url)

        self._runner.start(
            job,
            partial(self._on_listing_ready, generation),
            partial(self._on_listing_failed, generation),
        )
        return True

    def cancel(self) -> None:
        """Забывает текущий запрос: его результат не будет отрисован."""

        if self._pending_generation is None:
            return
        LOGGER.info("Listing #%s cancelled", self._pending_generation)
        self._pending_generation = None
        self._view.set_busy(False)

    # --------------------------------------------------------------- completions
    def _on_listing_ready(self, generation: int, names: List[str]) -> None:
        if generation != self._pending_generation:
            LOGGER.debug("Dropping result of stale listing #%s", generation)
            return
        self._pending_generation = None
        self.render_container_names(names)
        self._view.set_busy(False)
        self._view.show_status(translate("status.loaded").format(count=len(names)))
        LOGGER.info("Listing #%s finished: %s containers", generation, len(names))

    def _on_listing_failed(self, generation: int, message: str) -> None:
        if generation != self._pending_generation:
            LOGGER.debug("Dropping failure of stale listing #%s", generation)
            return
        self._pending_generation = None
        self._view.set_busy(False)
        self._view.show_error(translate("status.failed").format(message=message))
