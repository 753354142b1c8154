"""Высокоуровневые утилиты для создания и запуска GUI приложения GLMY."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from PySide6 import QtWidgets

from glmy.bridge import CommandBridge
from glmy.ui.main_window import create_main_window


class RunnableApp(Protocol):
    """Интерфейс приложения, которое можно запустить и получить код возврата."""

    def run(self) -> int:  # pragma: no cover - протокол
        """Запускает цикл приложения и возвращает код завершения."""


@dataclass
class GUIApp:
    """Приложение PySide6, получающее данные только через CommandBridge."""

    bridge: CommandBridge
    home_candidate: str = ""

    def __post_init__(self) -> None:
        """Создаёт экземпляр QApplication и главное окно."""

        self._qt_app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
        self._qt_app.setApplicationName("GLMY")
        self._window = create_main_window(bridge=self.bridge, home_candidate=self.home_candidate)

    def run(self) -> int:
        """Запускает основной цикл приложения."""

        self._window.show()
        return self._qt_app.exec()


def create_application(bridge: CommandBridge, home_candidate: str = "") -> RunnableApp:
    """Фабрика GUI приложения."""

    return GUIApp(bridge=bridge, home_candidate=home_candidate)
