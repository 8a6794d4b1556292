"""Request URI assembly."""

from __future__ import annotations

import re
from typing import Mapping, Sequence
from urllib.parse import urlencode, urljoin, urlsplit, urlunsplit

from .exceptions import RestURIError

_INVALID_URI_CHARS = re.compile(r"[\x00-\x20\x7f]")


def encode_query_params(query_params: Mapping[str, Sequence[str]]) -> str:
    """Form-encode ``name=value`` pairs in name order, then value order.

    Names with no values are skipped.
    """
    pairs = [(name, value) for name, values in query_params.items() for value in values]
    return urlencode(pairs, encoding="utf-8")


def combine_queries(existing: str, extra: str) -> str:
    if existing and extra:
        return f"{existing}&{extra}"
    return existing or extra


def build_uri(base_uri: str | None, path: str, query_params: Mapping[str, Sequence[str]]) -> str:
    """Resolve ``path`` against ``base_uri`` and append the encoded query parameters.

    An absolute ``path`` ignores the base. Without a base, ``path`` must be an
    absolute URI. Raises :class:`RestURIError` when the result is not a valid
    absolute URI.
    """
    if _INVALID_URI_CHARS.search(path):
        raise RestURIError(f"Illegal character in path {path!r}")
    try:
        resolved = urljoin(base_uri, path) if base_uri else path
        parts = urlsplit(resolved)
    except ValueError as exc:
        raise RestURIError(f"Failed to build URI for path {path!r}", cause=exc) from exc

    if not parts.scheme or not parts.netloc:
        raise RestURIError(f"Cannot resolve {path!r} to an absolute URI")

    query = combine_queries(parts.query, encode_query_params(query_params))
    uri = urlunsplit((parts.scheme, parts.netloc, parts.path or "/", query, parts.fragment))
    if _INVALID_URI_CHARS.search(uri):
        raise RestURIError(f"Failed to build URI for path {path!r}")
    return uri
