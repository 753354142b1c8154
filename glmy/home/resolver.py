"""Поиск и создание домашней директории GLMY."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from glmy.filesystem.base import FileSystem
from glmy.filesystem.local import LocalFileSystem
from glmy.home.environment import Environment
from glmy.utils.paths import DOCUMENTS_FOLDER_NAME, HOME_FOLDER_NAME


class HomeResolver:
    """Определяет домашнюю директорию по цепочке запасных вариантов.

    Явно переданный путь используется как есть, если он существует. Без него
    берётся домашняя директория пользователя (или текущая рабочая), при наличии
    соглашения заходим в Documents и создаём/используем подпапку GLMY.
    Любая неудача возвращается как ``None`` без различения причин.
    """

    def __init__(
        self,
        filesystem: Optional[FileSystem] = None,
        environment: Optional[Environment] = None,
    ) -> None:
        self._fs = filesystem or LocalFileSystem()
        self._environment = environment or Environment.detect()
        self._logger = logging.getLogger(__name__)

    def resolve(self, candidate: str = "") -> Optional[Path]:
        """Возвращает существующую домашнюю директорию или None.

        Явный ``candidate`` возвращается как ``Path(candidate)``: завершающий
        разделитель и сегменты ``.`` убирает нормализация pathlib, прочие
        части пути (``..``, символические ссылки) не раскрываются.
        """

        if candidate:
            home = Path(candidate)
            if self._fs.exists(home):
                return home
            self._logger.debug("Home candidate %s does not exist", home)
            return None

        base = self._base_directory()
        if base is None or not self._fs.exists(base):
            self._logger.debug("No usable base directory (%s)", base)
            return None

        if self._environment.has_documents_folder:
            documents = base / DOCUMENTS_FOLDER_NAME
            if self._fs.exists(documents):
                base = documents

        home = base / HOME_FOLDER_NAME
        if self._fs.exists(home):
            return home
        try:
            self._fs.mkdir(home)
        except OSError as exc:
            self._logger.debug("Failed to create home directory %s: %s", home, exc)
            return None
        self._logger.info("Created home directory %s", home)
        return home

    def _base_directory(self) -> Optional[Path]:
        home = self._fs.home_dir()
        if home is not None:
            return home
        return self._fs.current_dir()


def resolve_home(
    candidate: str = "",
    *,
    filesystem: Optional[FileSystem] = None,
    environment: Optional[Environment] = None,
) -> Optional[Path]:
    """Удобная обёртка над HomeResolver.resolve."""

    return HomeResolver(filesystem, environment).resolve(candidate)
