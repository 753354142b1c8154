"""Контракт файловой системы, с которой работают резолвер и сессия."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Минимальный набор операций над файловой системой.

    Методы, изменяющие состояние или читающие данные, поднимают ``OSError``
    при сбое. ``scan_dir`` поднимает ошибку сразу, если директорию нельзя
    открыть, а сбой чтения отдельной записи отдаёт как ``None``.
    """

    def exists(self, path: Path) -> bool:
        """Проверяет существование файла или директории."""

    def mkdir(self, path: Path) -> None:
        """Создаёт одну директорию без родителей."""

    def read_text(self, path: Path) -> str:
        """Читает файл целиком как UTF-8."""

    def write_text(self, path: Path, content: str) -> None:
        """Записывает текст в файл, создавая его при необходимости."""

    def scan_dir(self, path: Path) -> Iterator[Optional[Path]]:
        """Перечисляет непосредственные записи директории."""

    def home_dir(self) -> Optional[Path]:
        """Домашняя директория пользователя или None, если её нельзя определить."""

    def current_dir(self) -> Optional[Path]:
        """Текущая рабочая директория процесса или None."""
