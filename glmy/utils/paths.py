"""Централизованное описание имён путей приложения."""

from __future__ import annotations

from typing import Final

# HOME_FOLDER_NAME: подпапка, создаваемая внутри домашней директории пользователя
HOME_FOLDER_NAME: Final[str] = "GLMY"
DOCUMENTS_FOLDER_NAME: Final[str] = "Documents"
CONFIG_FILE_NAME: Final[str] = "config.json"
LOGS_FOLDER_NAME: Final[str] = "logs"

# Единственный символ, обозначающий корень домашней директории в запросах листинга
ROOT_SEPARATOR: Final[str] = "/"


def normalize_subpath(raw_value: str) -> str:
    """Приводит разделители к '/' и убирает их по краям относительного пути.

    Пробелы являются частью имени и не отбрасываются.
    """

    return raw_value.replace("\\", "/").strip("/")
