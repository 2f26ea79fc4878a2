"""Фоновое выполнение запросов к хранилищу для разгрузки UI."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from PySide6 import QtCore

from container_lister.storage.exceptions import ListingFailure
from container_lister.ui.controller import ListingJob
from container_lister.utils.helpers import redact_sas_token

LOGGER = logging.getLogger(__name__)


class ListingThread(QtCore.QThread):
    """Поток, который полностью вычитывает список контейнеров."""

    names_ready = QtCore.Signal(list)
    failed = QtCore.Signal(str)

    def __init__(self, job: ListingJob) -> None:
        super().__init__()
        self._job = job

    def run(self) -> None:
        try:
            if self.isInterruptionRequested():
                return
            names = self._job()
            if self.isInterruptionRequested():
                return
            self.names_ready.emit(names)
        except ListingFailure as exc:
            self.failed.emit(exc.message)
        except Exception as exc:  # noqa: BLE001
            LOGGER.exception("Unexpected error in listing thread")
            self.failed.emit(redact_sas_token(str(exc)))


class QtListingRunner(QtCore.QObject):
    """Запускает ListingThread и вызывает колбэки в потоке интерфейса."""

    def __init__(self, parent: QtCore.QObject | None = None) -> None:
        super().__init__(parent)
        self._thread: Optional[ListingThread] = None
        self._on_success: Optional[Callable[[List[str]], None]] = None
        self._on_failure: Optional[Callable[[str], None]] = None

    def start(
        self,
        job: ListingJob,
        on_success: Callable[[List[str]], None],
        on_failure: Callable[[str], None],
    ) -> None:
        if self._thread is not None and self._thread.isRunning():
            raise RuntimeError("Listing thread is already running")
        self._on_success = on_success
        self._on_failure = on_failure
        thread = ListingThread(job)
        thread.names_ready.connect(self._handle_ready)
        thread.failed.connect(self._handle_failed)
        thread.finished.connect(self._handle_finished)
        thread.finished.connect(thread.deleteLater)
        self._thread = thread
        thread.start()

    def stop(self) -> None:
        """Просит поток завершиться и дожидается его."""

        if self._thread is None:
            return
        self._thread.requestInterruption()
        self._thread.wait()
        self._on_success = None
        self._on_failure = None

    @QtCore.Slot(list)
    def _handle_ready(self, names: List[str]) -> None:
        if self._on_success is not None:
            self._on_success(names)

    @QtCore.Slot(str)
    def _handle_failed(self, message: str) -> None:
        if self._on_failure is not None:
            self._on_failure(message)

    @QtCore.Slot()
    def _handle_finished(self) -> None:
        if self.sender() is self._thread:
            self._thread = None
