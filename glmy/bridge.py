"""Qt-мост между GUI и операциями сессии."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6 import QtCore

from glmy.session.bootstrapper import SessionBootstrapper


class CommandBridge(QtCore.QObject):
    """Публикует initialize и read_dir как слоты, возвращающие JSON-строку."""

    responded = QtCore.Signal(str, str)

    def __init__(
        self,
        session: Optional[SessionBootstrapper] = None,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._session = session or SessionBootstrapper()
        self._logger = logging.getLogger(__name__)

    @QtCore.Slot(str, result=str)
    def initialize(self, home: str) -> str:
        response = self._session.initialize(home)
        self._emit("initialize", response)
        return response

    @QtCore.Slot(str, result=str)
    def read_dir(self, subpath: str) -> str:
        response = self._session.read_dir(subpath)
        self._emit("read_dir", response)
        return response

    def _emit(self, method: str, response: str) -> None:
        self._logger.debug("Command %s answered: %s", method, response)
        self.responded.emit(method, response)
