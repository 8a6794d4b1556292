"""Read-only view over a completed HTTP exchange."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .exceptions import RestResponseValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class RestResponse:
    status_code: int
    headers: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    body: str = ""
    uri: str = ""

    def __hash__(self) -> int:
        return hash((self.status_code, frozenset(self.headers.items()), self.body, self.uri))

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "RestResponse":
        headers: dict[str, list[str]] = {}
        for name, value in response.headers.multi_items():
            headers.setdefault(name, []).append(value)
        return cls(
            status_code=response.status_code,
            headers=MappingProxyType({name: tuple(values) for name, values in headers.items()}),
            body=response.content.decode("utf-8", errors="replace"),
            uri=str(response.url),
        )

    def header(self, name: str | None) -> str | None:
        """Return the first value of header ``name``, ignoring case."""
        if not name:
            return None
        wanted = name.lower()
        for key, values in self.headers.items():
            if key.lower() == wanted and values:
                return values[0]
        return None

    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any | None:
        """Parse the body as JSON; ``None`` for an empty body."""
        if not self.body:
            return None
        try:
            return json.loads(self.body)
        except json.JSONDecodeError as exc:
            raise RestResponseValidationError(f"Response body from {self.uri} is not valid JSON", cause=exc) from exc

    def parse(self, model: type[T]) -> T:
        """Validate the JSON body into ``model``.

        ``model`` may be a pydantic model or any type supported by
        :class:`pydantic.TypeAdapter`, e.g. ``list[User]``.
        """
        try:
            return TypeAdapter(model).validate_json(self.body or "null")
        except ValidationError as exc:
            raise RestResponseValidationError(
                f"Response body from {self.uri} does not match {model!r}", cause=exc
            ) from exc
