"""Операции сессии: инициализация конфигурации и листинг директорий."""
