"""Описание окружения, влияющего на выбор домашней директории."""

from __future__ import annotations

import platform
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Environment:
    """Платформенные соглашения, которые учитывает резолвер."""

    has_documents_folder: bool = False

    @classmethod
    def detect(cls) -> "Environment":
        """Соглашение о папке Documents действует только в Windows."""

        return cls(has_documents_folder=platform.system() == "Windows")
