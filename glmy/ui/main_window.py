"""Главное окно GLMY: состояние конфигурации и содержимое домашней директории."""

from __future__ import annotations

import logging
from typing import Any, Dict

from PySide6 import QtWidgets

from glmy import __version__
from glmy.bridge import CommandBridge
from glmy.exceptions import GLMYError
from glmy.session.responses import parse_response


class MainWindow(QtWidgets.QMainWindow):
    """Минимальная оболочка, работающая только через CommandBridge."""

    def __init__(self, *, bridge: CommandBridge, home_candidate: str = "") -> None:
        super().__init__()
        self._logger = logging.getLogger(__name__)
        self._bridge = bridge
        self._home_candidate = home_candidate
        self._config: Dict[str, Any] = {}

        self._path_edit = QtWidgets.QLineEdit()
        self._path_edit.setPlaceholderText("/")
        self._path_edit.returnPressed.connect(self.refresh_listing)
        self._refresh_button = QtWidgets.QPushButton("Refresh")
        self._refresh_button.clicked.connect(self.refresh_listing)
        self._entries = QtWidgets.QListWidget()
        self._status_label = QtWidgets.QLabel()

        self._setup_window()
        self.load_configuration()
        self.refresh_listing()

    def _setup_window(self) -> None:
        self.setWindowTitle(f"GLMY {__version__}")
        self.resize(960, 640)

        toolbar = QtWidgets.QHBoxLayout()
        toolbar.addWidget(self._path_edit)
        toolbar.addWidget(self._refresh_button)

        layout = QtWidgets.QVBoxLayout()
        layout.addLayout(toolbar)
        layout.addWidget(self._entries)

        central = QtWidgets.QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)
        self.statusBar().addPermanentWidget(self._status_label)

    def load_configuration(self) -> None:
        """Запрашивает конфигурацию и показывает её версию в строке состояния."""

        try:
            payload = parse_response(self._bridge.initialize(self._home_candidate))
        except GLMYError as exc:
            self._show_error(exc)
            return
        result = payload.get("result")
        self._config = result if isinstance(result, dict) else {}
        self._status_label.setText(f"config {self._config.get('version', '?')}")

    def refresh_listing(self) -> None:
        """Перечитывает содержимое выбранной поддиректории."""

        self._entries.clear()
        try:
            payload = parse_response(self._bridge.read_dir(self._path_edit.text()))
        except GLMYError as exc:
            self._show_error(exc)
            return
        listing = payload.get("result", {})
        self._entries.addItems(listing.get("entries", []))
        self.statusBar().showMessage(f"{listing.get('total', 0)} / {listing.get('count', 0)}")

    def _show_error(self, error: GLMYError) -> None:
        self._logger.warning("Request failed: %s", error.message)
        self.statusBar().showMessage(error.message)


def create_main_window(*, bridge: CommandBridge, home_candidate: str = "") -> MainWindow:
    """Фабрика главного окна."""

    return MainWindow(bridge=bridge, home_candidate=home_candidate)
