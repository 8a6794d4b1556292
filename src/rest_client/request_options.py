"""Per-request overrides for the REST client."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .validation import require, validate_header, validate_timeout


def _empty_mapping() -> Mapping:
    return MappingProxyType({})


@dataclass(frozen=True)
class RequestOptions:
    """Immutable query parameters, headers, body and timeout for one call.

    Instances are reusable across calls. Build them with
    :meth:`RequestOptions.builder`; an instance with nothing set is equal to
    :meth:`RequestOptions.empty`.
    """

    query_params: Mapping[str, tuple[str, ...]] = field(default_factory=_empty_mapping)
    headers: Mapping[str, str] = field(default_factory=_empty_mapping)
    body: str | None = None
    timeout: float | None = None

    def __hash__(self) -> int:
        return hash((frozenset(self.query_params.items()), frozenset(self.headers.items()), self.body, self.timeout))

    @staticmethod
    def empty() -> "RequestOptions":
        return _EMPTY

    @staticmethod
    def builder() -> "RequestOptionsBuilder":
        return RequestOptionsBuilder()

    def to_builder(self) -> "RequestOptionsBuilder":
        """Return a builder pre-filled with these options."""
        builder = RequestOptionsBuilder()
        for name, values in self.query_params.items():
            for value in values:
                builder.query_param(name, value)
        builder.headers(self.headers)
        builder.body(self.body)
        builder.timeout(self.timeout)
        return builder


class RequestOptionsBuilder:
    """Mutable accumulator for :class:`RequestOptions`."""

    def __init__(self) -> None:
        self._query_params: dict[str, list[str]] = {}
        self._headers: dict[str, str] = {}
        self._body: str | None = None
        self._timeout: float | None = None

    def query_param(self, name: str, value: object) -> "RequestOptionsBuilder":
        name = require(name, "Query parameter name is required")
        value = require(value, "Query parameter value is required")
        self._query_params.setdefault(str(name), []).append(str(value))
        return self

    def header(self, name: str, value: str) -> "RequestOptionsBuilder":
        name, value = validate_header(name, value)
        self._headers[name] = value
        return self

    def headers(self, headers: Mapping[str, str]) -> "RequestOptionsBuilder":
        require(headers, "Headers mapping is required")
        for name, value in headers.items():
            self.header(name, value)
        return self

    def body(self, body: str | None) -> "RequestOptionsBuilder":
        self._body = body
        return self

    def timeout(self, seconds: float | None) -> "RequestOptionsBuilder":
        self._timeout = validate_timeout(seconds, "Request timeout")
        return self

    def build(self) -> RequestOptions:
        if not self._query_params and not self._headers and self._body is None and self._timeout is None:
            return _EMPTY
        query = {name: tuple(values) for name, values in self._query_params.items()}
        return RequestOptions(
            query_params=MappingProxyType(query),
            headers=MappingProxyType(dict(self._headers)),
            body=self._body,
            timeout=self._timeout,
        )


_EMPTY = RequestOptions()
