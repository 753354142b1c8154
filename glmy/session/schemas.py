"""Конфигурация по умолчанию, записываемая при первом запуске."""

from __future__ import annotations

import copy
from typing import Any, Dict

# paths.home задан литералом и не зависит от найденной домашней директории
DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "0.1.0",
    "paths": {
        "home": "C:\\Users\\ziegler\\Desktop\\GLMY",
        "notes": "<home>/notes",
        "todos": "<home>/todos",
        "bookmarks": "<home>/bookmarks",
        "databases": "<home>/databases",
    },
}


def default_config() -> Dict[str, Any]:
    """Возвращает независимую копию DEFAULT_CONFIG."""

    return copy.deepcopy(DEFAULT_CONFIG)
