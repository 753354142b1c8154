"""Общие утилиты GLMY."""
