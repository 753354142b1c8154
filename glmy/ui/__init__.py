"""Виджеты GLMY."""

from .main_window import MainWindow, create_main_window

__all__ = ["MainWindow", "create_main_window"]
