"""Различные вспомогательные функции."""

from __future__ import annotations

import re

_MASK = "***"
# Query-строка URL целиком: в SAS URL именно там лежит подпись
_URL_QUERY_RE = re.compile(r"(https?://[^\s?'\"<>]+)\?[^\s'\"<>]*", re.IGNORECASE)
_SIGNATURE_RE = re.compile(r"(\bsig=)[^&\s'\"<>]+", re.IGNORECASE)


def redact_sas_token(text: str) -> str:
    """Маскирует SAS-токены в произвольном тексте (сообщения, логи)."""

    if not text:
        return text
    redacted = _URL_QUERY_RE.sub(rf"\1?{_MASK}", text)
    return _SIGNATURE_RE.sub(rf"\g<1>{_MASK}", redacted)
