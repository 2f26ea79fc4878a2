"""Доступ к списку контейнеров blob-хранилища через azure-storage-blob."""
