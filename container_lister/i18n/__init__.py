"""Локализация строк интерфейса."""
