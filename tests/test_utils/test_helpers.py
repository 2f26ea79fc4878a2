"""Проверки маскирования SAS-токенов."""

from __future__ import annotations

from container_lister.utils.helpers import redact_sas_token


def test_redact_replaces_url_query() -> None:
    text = "GET https://acct.blob.core.windows.net/?sv=2022-11-02&sig=SECRET%3D failed"
    assert redact_sas_token(text) == "GET https://acct.blob.core.windows.net/?*** failed"


def test_redact_masks_stray_signature() -> None:
    assert redact_sas_token("sv=2022&sig=SECRET&se=2030") == "sv=2022&sig=***&se=2030"


def test_redact_keeps_plain_text() -> None:
    assert redact_sas_token("Invalid URL: https://") == "Invalid URL: https://"
    assert redact_sas_token("") == ""
