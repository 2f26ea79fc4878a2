"""Blob Container Lister: просмотр контейнеров хранилища по SAS URL."""

__version__ = "0.1.0"
