"""Листинг директорий внутри домашней директории."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from glmy.exceptions import DirectoryListingError
from glmy.filesystem.base import FileSystem
from glmy.utils.paths import ROOT_SEPARATOR, normalize_subpath

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class DirectoryListing:
    """Результат перечисления: всего записей и успешно прочитанные пути."""

    count: int = 0
    entries: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.entries)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "entries": list(self.entries),
            "total": self.total,
        }


def listing_target(home: Path, subpath: str) -> Path:
    """Путь для листинга: сама домашняя директория или её поддиректория."""

    if not subpath or subpath == ROOT_SEPARATOR:
        return home
    relative = normalize_subpath(subpath)
    return home / relative if relative else home


def list_directory(filesystem: FileSystem, target: Path) -> DirectoryListing:
    """Перечисляет записи target, считая и те, что не удалось преобразовать в строку."""

    try:
        raw_entries = filesystem.scan_dir(target)
    except OSError as exc:
        raise DirectoryListingError(target, exc.strerror or str(exc)) from exc

    listing = DirectoryListing()
    for entry in raw_entries:
        listing.count += 1
        text = _entry_to_string(entry)
        if text is not None:
            listing.entries.append(text)
    return listing


def _entry_to_string(entry: Optional[Path]) -> Optional[str]:
    if entry is None:
        return None
    text = str(entry)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        LOGGER.warning("Skipping entry with undecodable name: %r", text)
        return None
    return text
