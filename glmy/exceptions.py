"""Исключения GLMY, общие для резолвера и операций сессии."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)

HOME_UNAVAILABLE_MESSAGE = "The GLMY home directory does not exist and could not be created."
CONFIG_UNAVAILABLE_MESSAGE = "The GLMY configuration file does not exist and could not be created."


class GLMYError(Exception):
    """Базовое исключение с сообщением и деталями, логирующее себя при создании."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        """Сохраняет сообщение и детали, логируя ошибку."""

        self.message = message
        self.details = details or {}
        super().__init__(message)
        LOGGER.error("%s | details=%s", message, self.details)


class HomeUnavailableError(GLMYError):
    """Домашняя директория не найдена и не может быть создана."""

    def __init__(self) -> None:
        super().__init__(HOME_UNAVAILABLE_MESSAGE)


class ConfigUnavailableError(GLMYError):
    """config.json не удалось создать, прочитать или разобрать."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(CONFIG_UNAVAILABLE_MESSAGE)
        LOGGER.debug("Config file %s unavailable: %s", path, reason)


class DirectoryListingError(GLMYError):
    """Перечисление директории завершилось ошибкой ОС."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(reason, details={"path": str(path)})
