"""Точка входа в приложение GLMY."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from glmy import __version__
from glmy.app import create_application
from glmy.bridge import CommandBridge
from glmy.exceptions import HOME_UNAVAILABLE_MESSAGE
from glmy.filesystem.base import FileSystem
from glmy.filesystem.local import LocalFileSystem
from glmy.home.resolver import resolve_home
from glmy.session.bootstrapper import SessionBootstrapper
from glmy.session.workspace import prepare_workspace
from glmy.utils.logger import configure_console_logging, configure_logging
from glmy.utils.paths import LOGS_FOLDER_NAME

LOGGER = logging.getLogger(__name__)


def initialize_workdir(
    filesystem: FileSystem,
    home_candidate: str = "",
    *,
    level_name: str = "INFO",
) -> Optional[Path]:
    """Определяет домашнюю директорию, включает файловый лог и готовит папки."""

    home = resolve_home(home_candidate, filesystem=filesystem)
    if home is None:
        LOGGER.error(HOME_UNAVAILABLE_MESSAGE)
        return None
    configure_logging(home / LOGS_FOLDER_NAME, level_name=level_name)
    if not prepare_workspace(filesystem, home):
        return None
    return home


def main() -> int:
    """Основная точка входа: готовит окружение и запускает приложение."""

    level_name = os.environ.get("GLMY_LOG_LEVEL", "INFO")
    home_candidate = os.environ.get("GLMY_HOME", "")
    configure_console_logging(level_name)

    filesystem = LocalFileSystem()
    home = initialize_workdir(filesystem, home_candidate, level_name=level_name)
    if home is None:
        return 1

    LOGGER.info("Запуск GLMY версии %s (home: %s)", __version__, home)
    bridge = CommandBridge(SessionBootstrapper(filesystem))
    app = create_application(bridge, home_candidate)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
