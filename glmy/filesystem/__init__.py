"""Абстракция файловой системы, внедряемая в резолвер и загрузчик сессии."""

from glmy.filesystem.base import FileSystem
from glmy.filesystem.local import LocalFileSystem

__all__ = ["FileSystem", "LocalFileSystem"]
