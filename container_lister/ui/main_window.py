"""Главное окно: поле SAS URL, кнопка запроса и список контейнеров."""

from __future__ import annotations

import logging
from typing import Sequence

from PySide6 import QtGui, QtWidgets

from container_lister.i18n.translator import translate
from container_lister.settings.exceptions import SettingsError
from container_lister.settings.registry import SettingsRegistry
from container_lister.storage.data_provider import ContainerDataProvider
from container_lister.ui.controller import ContainerListController, ListingRunner
from container_lister.ui.dialogs.about import AboutDialog
from container_lister.ui.workers import QtListingRunner


class MainWindow(QtWidgets.QMainWindow):
    """Окно приложения; реализует ContainerListView для контроллера."""

    def __init__(
        self,
        *,
        settings: SettingsRegistry,
        data_provider: ContainerDataProvider,
        runner: ListingRunner | None = None,
    ) -> None:
        super().__init__()
        self._logger = logging.getLogger(__name__)
        self._settings = settings
        self._url_input = QtWidgets.QLineEdit()
        self._url_input.setObjectName("serviceSasUrl")
        self._url_input.setPlaceholderText(translate("placeholders.connection_url"))
        self._url_input.setClearButtonEnabled(True)
        self._list_button = QtWidgets.QPushButton(translate("actions.list_containers"))
        self._list_button.setObjectName("listContainers")
        self._output = QtWidgets.QListWidget()
        self._output.setObjectName("output")
        self._output.setSelectionMode(
            QtWidgets.QAbstractItemView.SelectionMode.ExtendedSelection
        )
        self._status_label = QtWidgets.QLabel()
        self._status_label.setObjectName("statusMessage")
        self._qt_runner = runner if runner is not None else QtListingRunner(self)
        self._controller = ContainerListController(self, data_provider, self._qt_runner)

        self._setup_window()
        self._create_menu_bar()
        self._create_status_bar()
        self.show_status(translate("status.ready"))

    # ------------------------------------------------------------------- setup
    def _setup_window(self) -> None:
        self.setWindowTitle(translate("app.title"))
        width = int(self._settings.get_value("app", "window_width", default=640))
        height = int(self._settings.get_value("app", "window_height", default=480))
        self.resize(width, height)

        central = QtWidgets.QWidget()
        root_layout = QtWidgets.QVBoxLayout(central)
        root_layout.addWidget(self._build_top_panel())
        root_layout.addWidget(self._output, stretch=1)
        self.setCentralWidget(central)

    def _build_top_panel(self) -> QtWidgets.QWidget:
        panel = QtWidgets.QWidget()
        layout = QtWidgets.QHBoxLayout(panel)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(QtWidgets.QLabel(translate("labels.connection_url")))
        layout.addWidget(self._url_input, stretch=4)
        self._url_input.returnPressed.connect(self._on_list_button_clicked)
        self._list_button.clicked.connect(self._on_list_button_clicked)
        layout.addWidget(self._list_button)
        return panel

    def _create_menu_bar(self) -> None:
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu(translate("menu.file"))
        exit_action = file_menu.addAction(translate("actions.exit"))
        exit_action.setShortcut(QtGui.QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)

        help_menu = menu_bar.addMenu(translate("menu.help"))
        about_action = help_menu.addAction(translate("menu.about"))
        about_action.triggered.connect(self._open_about_dialog)

    def _create_status_bar(self) -> None:
        self.statusBar().addWidget(self._status_label, 1)

    # ------------------------------------------------------ ContainerListView
    def connection_url(self) -> str:
        return self._url_input.text()

    def show_container_names(self, names: Sequence[str]) -> None:
        self._output.clear()
        for name in names:
            self._output.addItem(QtWidgets.QListWidgetItem(name))

    def show_status(self, message: str) -> None:
        self._status_label.setStyleSheet("")
        self._status_label.setText(message)
        self._status_label.setToolTip("")

    def show_error(self, message: str) -> None:
        self._status_label.setStyleSheet("color: #c01547;")
        self._status_label.setText(message)
        self._status_label.setToolTip(message)

    def set_busy(self, busy: bool) -> None:
        self._list_button.setEnabled(not busy)

    # ----------------------------------------------------------------- actions
    def _on_list_button_clicked(self) -> None:
        self._controller.list_and_render_containers()

    def _open_about_dialog(self) -> None:
        dialog = AboutDialog(icon=self.windowIcon(), parent=self)
        dialog.exec()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._controller.cancel()
        if isinstance(self._qt_runner, QtListingRunner):
            self._qt_runner.stop()
        if not self.isMaximized():
            geometry = self.geometry()
            try:
                self._settings.set_value("app", "window_width", max(geometry.width(), 320))
                self._settings.set_value("app", "window_height", max(geometry.height(), 240))
                self._settings.save_to_disk()
            except SettingsError as exc:
                self._logger.error("Cannot persist window state: %s", exc)
        super().closeEvent(event)


def create_main_window(
    *,
    settings: SettingsRegistry,
    data_provider: ContainerDataProvider,
) -> MainWindow:
    """Фабрика главного окна."""

    return MainWindow(settings=settings, data_provider=data_provider)
