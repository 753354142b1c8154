"""Реализация FileSystem поверх pathlib и os."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Iterator, Optional


class LocalFileSystem:
    """Работает с реальной файловой системой процесса."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def exists(self, path: Path) -> bool:
        return path.exists()

    def mkdir(self, path: Path) -> None:
        path.mkdir()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")

    def scan_dir(self, path: Path) -> Iterator[Optional[Path]]:
        """Открывает директорию сразу, чтобы ошибка открытия не откладывалась."""

        iterator = os.scandir(path)
        return self._iterate_entries(iterator, path)

    def home_dir(self) -> Optional[Path]:
        try:
            return Path.home()
        except (RuntimeError, KeyError) as exc:
            self._logger.debug("User home directory is not available: %s", exc)
            return None

    def current_dir(self) -> Optional[Path]:
        try:
            return Path.cwd()
        except OSError as exc:
            self._logger.debug("Current working directory is not available: %s", exc)
            return None

    def _iterate_entries(self, iterator: Any, path: Path) -> Iterator[Optional[Path]]:
        with iterator:
            while True:
                try:
                    entry = next(iterator)
                except StopIteration:
                    return
                except OSError as exc:
                    # после ошибки чтения scandir продолжить нельзя
                    self._logger.warning("Failed to read entry in %s: %s", path, exc)
                    yield None
                    return
                yield Path(entry.path)
