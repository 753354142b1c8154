"""Операции сессии, вызываемые из GUI: initialize и read_dir."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from glmy.exceptions import GLMYError, HomeUnavailableError
from glmy.filesystem.base import FileSystem
from glmy.filesystem.local import LocalFileSystem
from glmy.home.environment import Environment
from glmy.home.resolver import HomeResolver
from glmy.session.config import ConfigStore
from glmy.session.listing import list_directory, listing_target
from glmy.session.responses import error_response_from, success_response


class SessionBootstrapper:
    """Выполняет запросы GUI и возвращает JSON-ответы.

    Каждый вызов заново определяет домашнюю директорию и заново читает
    (или создаёт) config.json: никакого состояния между вызовами не хранится.
    Исключения GLMYError превращаются в ответ со статусом "error".
    """

    def __init__(
        self,
        filesystem: Optional[FileSystem] = None,
        environment: Optional[Environment] = None,
    ) -> None:
        self._fs = filesystem or LocalFileSystem()
        self._resolver = HomeResolver(self._fs, environment)
        self._config = ConfigStore(self._fs)
        self._logger = logging.getLogger(__name__)

    def initialize(self, home_candidate: str = "") -> str:
        """Возвращает содержимое config.json, создавая файл при первом запуске."""

        try:
            home = self._require_home(home_candidate)
            data = self._config.bootstrap(home)
        except GLMYError as exc:
            return error_response_from(exc)
        return success_response(data)

    def read_dir(self, subpath: str = "") -> str:
        """Перечисляет записи домашней директории или её поддиректории.

        Переданный ранее кандидат домашней директории не учитывается: путь
        всегда определяется заново по стандартной цепочке.
        """

        try:
            home = self._require_home("")
            target = listing_target(home, subpath)
            listing = list_directory(self._fs, target)
        except GLMYError as exc:
            return error_response_from(exc)
        self._logger.debug("Listed %s: %d of %d entries", target, listing.total, listing.count)
        return success_response(listing.to_dict())

    def _require_home(self, candidate: str) -> Path:
        home = self._resolver.resolve(candidate)
        if home is None:
            raise HomeUnavailableError()
        return home
