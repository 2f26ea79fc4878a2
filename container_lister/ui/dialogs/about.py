"""Диалог «О программе» с локализацией."""

from __future__ import annotations

import platform

from PySide6 import QtCore, QtGui, QtWidgets

from container_lister import __version__
from container_lister.i18n.translator import translate


class AboutDialog(QtWidgets.QDialog):
    """Отображает название, версию приложения и версию Python."""

    def __init__(
        self,
        *,
        icon: QtGui.QIcon | None = None,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._icon = icon
        self.setWindowTitle(translate("about.dialog.title"))
        self.resize(420, 220)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        if self._icon and not self._icon.isNull():
            icon_label = QtWidgets.QLabel()
            icon_label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
            icon_label.setPixmap(self._icon.pixmap(64, 64))
            layout.addWidget(icon_label)

        title = QtWidgets.QLabel(translate("about.app.name"))
        font = title.font()
        font.setPointSize(font.pointSize() + 4)
        font.setBold(True)
        title.setFont(font)
        title.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        for text in (
            translate("about.version").format(version=__version__),
            translate("about.build").format(python=platform.python_version()),
        ):
            label = QtWidgets.QLabel(text)
            label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(label)

        description = QtWidgets.QLabel(translate("about.description"))
        description.setWordWrap(True)
        description.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(description)

        close_button = QtWidgets.QPushButton(translate("actions.close"))
        close_button.clicked.connect(self.accept)
        layout.addWidget(close_button, alignment=QtCore.Qt.AlignmentFlag.AlignCenter)
