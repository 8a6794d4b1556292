from __future__ import annotations

import pytest

from rest_client.exceptions import RestArgumentError
from rest_client.security import REDACTED, sanitize_headers, validate_base_uri


def test_sanitize_headers_masks_credentials_only() -> None:
    headers = {
        "Authorization": "Bearer secret",
        "X-Session-Token": "abc",
        "X-Webhook-Secret": "shh",
        "Accept": "application/json",
    }

    assert sanitize_headers(headers) == {
        "Authorization": REDACTED,
        "X-Session-Token": REDACTED,
        "X-Webhook-Secret": REDACTED,
        "Accept": "application/json",
    }
    assert headers["Authorization"] == "Bearer secret"


def test_validate_base_uri_accepts_http_and_https() -> None:
    assert validate_base_uri("https://api.example.com/v1/") == "https://api.example.com/v1/"
    assert validate_base_uri("http://127.0.0.1:8080") == "http://127.0.0.1:8080"


@pytest.mark.parametrize("uri", ["http://[::1", "mailto:user@example.com"])
def test_validate_base_uri_rejects_malformed(uri: str) -> None:
    with pytest.raises(RestArgumentError):
        validate_base_uri(uri)
