"""Подготовка рабочей структуры внутри домашней директории."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, List, Tuple

from glmy.filesystem.base import FileSystem

LOGGER = logging.getLogger(__name__)

WORKSPACE_FOLDERS: Final[Tuple[str, ...]] = (
    "bookmarks",
    "databases",
    "notes",
    "snippets",
    "temp",
    "todos",
)
START_NOTE_NAME: Final[str] = "start.md"

INTRODUCTION_TEXT: Final[str] = (
    "title: Welcome to GLMY\n"
    "description: Simple introduction text.\n"
    "---\n"
    "Welcome to [GLMY](https://glmy.rat.md).\n\n"
    "Start your new **awesome** adventure right here!\n\n"
    "_~~~ GLMY_"
)


def prepare_workspace(filesystem: FileSystem, home: Path) -> bool:
    """Создаёт недостающие папки (notes, todos, ...) и приветственную заметку."""

    created: List[str] = []
    try:
        for name in WORKSPACE_FOLDERS:
            if _ensure_folder(filesystem, home / name):
                created.append(name)
        if "notes" in created:
            filesystem.write_text(home / "notes" / START_NOTE_NAME, INTRODUCTION_TEXT)
    except OSError as exc:
        LOGGER.error("Не удалось подготовить рабочую директорию %s: %s", home, exc)
        return False
    if created:
        LOGGER.info("Created workspace folders in %s: %s", home, ", ".join(created))
    return True


def _ensure_folder(filesystem: FileSystem, path: Path) -> bool:
    if filesystem.exists(path):
        return False
    filesystem.mkdir(path)
    return True
