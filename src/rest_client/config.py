"""Client-wide configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, TypeVar

from .exceptions import RestArgumentError

E = TypeVar("E", bound=Enum)


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @property
    def allows_body(self) -> bool:
        """Whether requests with this method carry the options' body."""
        return self in _BODY_METHODS


_BODY_METHODS = frozenset({HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH})


class RedirectPolicy(str, Enum):
    NEVER = "never"
    ALWAYS = "always"
    # Follow redirects except https -> http downgrades.
    NORMAL = "normal"


class HttpVersion(str, Enum):
    HTTP_1_1 = "HTTP_1_1"
    HTTP_2 = "HTTP_2"


def coerce_enum(enum_cls: type[E], value: E | str, label: str) -> E:
    """Accept an enum member or its value/name (case-insensitive)."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        for member in enum_cls:
            if value.upper() in {member.name, str(member.value).upper()}:
                return member
    raise RestArgumentError(f"Unsupported {label}: {value!r}")


@dataclass(frozen=True)
class ClientConfig:
    base_uri: str | None = None
    default_headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    connect_timeout: float = 10.0
    request_timeout: float | None = None
    redirect_policy: RedirectPolicy = RedirectPolicy.NORMAL
    http_version: HttpVersion = HttpVersion.HTTP_2
