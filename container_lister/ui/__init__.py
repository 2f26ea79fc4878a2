"""Графический интерфейс на PySide6."""
