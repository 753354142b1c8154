"""Определение домашней директории GLMY."""
