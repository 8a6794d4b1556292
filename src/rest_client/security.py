"""Base URI checks and header redaction for debug logging."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import urlsplit

from .exceptions import RestArgumentError

REDACTED = "[REDACTED]"

SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "proxy-authorization",
        "cookie",
        "set-cookie",
        "x-api-key",
    }
)
SENSITIVE_SUFFIXES = ("-token", "-secret")


def is_sensitive_header(name: str) -> bool:
    lowered = name.lower()
    return lowered in SENSITIVE_HEADERS or lowered.endswith(SENSITIVE_SUFFIXES)


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Copy of ``headers`` safe to log: credential-bearing values are masked."""
    return {name: REDACTED if is_sensitive_header(name) else value for name, value in headers.items()}


def validate_base_uri(uri: str) -> str:
    """Validate a base URI: absolute http(s) with a host."""
    if "\x00" in uri:
        raise RestArgumentError("Invalid base URI")
    try:
        parsed = urlsplit(uri)
    except ValueError as exc:
        raise RestArgumentError(f"Invalid base URI: {uri!r}", cause=exc) from exc
    if not parsed.scheme or not parsed.netloc:
        raise RestArgumentError("Base URI must include scheme and host")
    if parsed.scheme not in {"http", "https"}:
        raise RestArgumentError(f"Unsupported base URI scheme: {parsed.scheme}")
    return uri
