"""Создание и чтение config.json в домашней директории."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any

from glmy.exceptions import ConfigUnavailableError
from glmy.filesystem.base import FileSystem
from glmy.session.schemas import default_config
from glmy.utils.paths import CONFIG_FILE_NAME


class ConfigStore:
    """Загружает config.json, создавая его со значениями по умолчанию."""

    def __init__(self, filesystem: FileSystem) -> None:
        self._fs = filesystem
        self._logger = logging.getLogger(__name__)

    @staticmethod
    def config_path(home: Path) -> Path:
        return home / CONFIG_FILE_NAME

    def bootstrap(self, home: Path) -> Any:
        """Возвращает содержимое config.json, при отсутствии файла записывает defaults.

        Содержимое существующего файла не проверяется на соответствие схеме
        и никогда не перезаписывается.
        """

        target = self.config_path(home)
        if not self._fs.exists(target):
            return self._write_defaults(target)
        return self._read(target)

    def _write_defaults(self, target: Path) -> Any:
        defaults = default_config()
        try:
            self._fs.write_text(target, json.dumps(defaults, indent=2, ensure_ascii=False))
        except OSError as exc:
            raise ConfigUnavailableError(target, str(exc)) from exc
        self._logger.info("Config file %s not found, wrote defaults.", target)
        return defaults

    def _read(self, target: Path) -> Any:
        try:
            return json.loads(
                self._fs.read_text(target),
                parse_float=_parse_finite_float,
                parse_constant=_reject_constant,
            )
        except (OSError, ValueError, RecursionError) as exc:
            raise ConfigUnavailableError(target, str(exc)) from exc


def _reject_constant(name: str) -> Any:
    """NaN и Infinity не являются допустимым JSON."""

    raise ValueError(f"Unsupported JSON constant: {name}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value
