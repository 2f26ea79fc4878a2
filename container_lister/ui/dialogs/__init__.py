"""Пакет диалоговых окон."""

from .about import AboutDialog

__all__ = [
    "AboutDialog",
]
