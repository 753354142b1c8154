"""GLMY: серверная часть настольного приложения (домашняя директория, конфигурация, листинг)."""

__version__ = "0.1.0"
