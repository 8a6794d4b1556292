"""Argument validation helpers shared by the builders."""

from __future__ import annotations

import re
from typing import TypeVar

from .exceptions import RestArgumentError

T = TypeVar("T")

# RFC 9110 token characters.
_HEADER_NAME = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
_HEADER_VALUE_FORBIDDEN = re.compile(r"[\x00\r\n]")


def require(value: T | None, message: str) -> T:
    """Return ``value`` or fail fast when it is missing."""
    if value is None:
        raise RestArgumentError(message)
    return value


def validate_header(name: object, value: object) -> tuple[str, str]:
    """Return ``(name, value)`` as strings httpx can put on the wire.

    Names must be RFC 9110 tokens; values must be ASCII without CR, LF or NUL.
    """
    name = str(require(name, "Header name is required"))
    value = str(require(value, "Header value is required"))
    if not _HEADER_NAME.match(name):
        raise RestArgumentError(f"Invalid header name: {name!r}")
    if not value.isascii():
        raise RestArgumentError(f"Header {name!r} value must be ASCII")
    if _HEADER_VALUE_FORBIDDEN.search(value):
        raise RestArgumentError(f"Header {name!r} value contains a line break or NUL")
    return name, value


def validate_timeout(seconds: float | None, name: str, *, required: bool = False) -> float | None:
    if seconds is None:
        if required:
            raise RestArgumentError(f"{name} is required")
        return None
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise RestArgumentError(f"{name} must be a number of seconds")
    if seconds <= 0:
        raise RestArgumentError(f"{name} must be greater than 0")
    return float(seconds)
