"""Synchronous REST client over httpx."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

import httpx

from .config import ClientConfig, HttpMethod, HttpVersion, RedirectPolicy, coerce_enum
from .exceptions import RestArgumentError, RestClientError, RestURIError
from .request_options import RequestOptions
from .response import RestResponse
from .security import sanitize_headers, validate_base_uri
from .uri import build_uri
from .validation import require, validate_header, validate_timeout

logger = logging.getLogger(__name__)


def _resolve_request_options(options: RequestOptions | None) -> RequestOptions:
    return options if options is not None else RequestOptions.empty()


def _request_content(method: HttpMethod, body: str | None) -> bytes | None:
    if not method.allows_body or body is None:
        return None
    return body.encode("utf-8")


def _is_downgrade(source: httpx.URL, target: httpx.URL) -> bool:
    return source.scheme == "https" and target.scheme == "http"


class RestClient:
    """Immutable, thread-safe client. Create it with :meth:`RestClient.builder`."""

    default_connect_timeout = 10.0
    default_request_timeout = 30.0
    default_redirect_policy = RedirectPolicy.NORMAL
    default_http_version = HttpVersion.HTTP_2

    def __init__(self, config: ClientConfig, *, transport: httpx.BaseTransport | None = None) -> None:
        self._config = config
        self._httpx = httpx.Client(
            timeout=httpx.Timeout(self.default_request_timeout, connect=config.connect_timeout),
            follow_redirects=config.redirect_policy is RedirectPolicy.ALWAYS,
            http2=config.http_version is HttpVersion.HTTP_2,
            transport=transport,
            trust_env=False,
        )

    @staticmethod
    def builder() -> "RestClientBuilder":
        return RestClientBuilder()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._httpx.close()

    def get(self, path: str, options: RequestOptions | None = None) -> RestResponse:
        return self.send(HttpMethod.GET, path, options)

    def post(self, path: str, options: RequestOptions | None = None) -> RestResponse:
        return self.send(HttpMethod.POST, path, options)

    def put(self, path: str, options: RequestOptions | None = None) -> RestResponse:
        return self.send(HttpMethod.PUT, path, options)

    def patch(self, path: str, options: RequestOptions | None = None) -> RestResponse:
        return self.send(HttpMethod.PATCH, path, options)

    def delete(self, path: str, options: RequestOptions | None = None) -> RestResponse:
        return self.send(HttpMethod.DELETE, path, options)

    def head(self, path: str, options: RequestOptions | None = None) -> RestResponse:
        return self.send(HttpMethod.HEAD, path, options)

    def options(self, path: str, options: RequestOptions | None = None) -> RestResponse:
        return self.send(HttpMethod.OPTIONS, path, options)

    def send(
        self,
        method: HttpMethod | str,
        path: str,
        options: RequestOptions | None = None,
    ) -> RestResponse:
        method = coerce_enum(HttpMethod, require(method, "HTTP method is required"), "HTTP method")
        path = require(path, "Request path is required")
        request_options = _resolve_request_options(options)

        uri = build_uri(self._config.base_uri, path, request_options.query_params)
        headers = self._headers(request_options)
        timeout = self._resolve_timeout(request_options)
        try:
            request = self._httpx.build_request(
                method.value,
                uri,
                headers=headers,
                content=_request_content(method, request_options.body),
                timeout=httpx.Timeout(timeout, connect=self._config.connect_timeout),
            )
        except httpx.InvalidURL as exc:
            raise RestURIError(f"Failed to build URI for path {path!r}", cause=exc) from exc

        logger.debug(
            "%s %s timeout=%.3fs headers=%s",
            method.value,
            uri,
            timeout,
            sanitize_headers(headers),
        )
        try:
            response = self._send(request)
        except httpx.RequestError as exc:
            raise RestClientError(
                f"I/O error while invoking {method.value} {uri}",
                method=method.value,
                uri=uri,
                cause=exc,
            ) from exc

        logger.debug("%s %s -> %s", method.value, response.url, response.status_code)
        return RestResponse.from_httpx(response)

    def _headers(self, request_options: RequestOptions) -> dict[str, str]:
        merged = dict(self._config.default_headers)
        # RequestOptions built without the builder skip header validation.
        for name, value in request_options.headers.items():
            name, value = validate_header(name, value)
            merged[name] = value
        return merged

    def _resolve_timeout(self, request_options: RequestOptions) -> float:
        if request_options.timeout is not None:
            return request_options.timeout
        if self._config.request_timeout is not None:
            return self._config.request_timeout
        return self.default_request_timeout

    def _send(self, request: httpx.Request) -> httpx.Response:
        response = self._httpx.send(request)
        if self._config.redirect_policy is not RedirectPolicy.NORMAL:
            return response

        hops = 0
        while response.next_request is not None:
            next_request = response.next_request
            if _is_downgrade(response.url, next_request.url):
                break
            hops += 1
            if hops > self._httpx.max_redirects:
                raise httpx.TooManyRedirects("Exceeded maximum allowed redirects.", request=next_request)
            response.close()
            response = self._httpx.send(next_request)
        return response


class RestClientBuilder:
    """Fluent builder for :class:`RestClient`."""

    def __init__(self) -> None:
        self._base_uri: str | None = None
        self._connect_timeout = RestClient.default_connect_timeout
        self._request_timeout: float | None = None
        self._default_headers: dict[str, str] = {}
        self._http_version = RestClient.default_http_version
        self._redirect_policy = RestClient.default_redirect_policy
        self._transport: httpx.BaseTransport | None = None

    def base_uri(self, base_uri: str | None) -> "RestClientBuilder":
        self._base_uri = None if base_uri is None else validate_base_uri(str(base_uri))
        return self

    def connect_timeout(self, seconds: float) -> "RestClientBuilder":
        self._connect_timeout = validate_timeout(seconds, "Connect timeout", required=True)
        return self

    def request_timeout(self, seconds: float | None) -> "RestClientBuilder":
        self._request_timeout = validate_timeout(seconds, "Request timeout")
        return self

    def default_header(self, name: str, value: str) -> "RestClientBuilder":
        name, value = validate_header(name, value)
        self._default_headers[name] = value
        return self

    def default_headers(self, headers: Mapping[str, str]) -> "RestClientBuilder":
        require(headers, "Headers mapping is required")
        for name, value in headers.items():
            self.default_header(name, value)
        return self

    def http_version(self, version: HttpVersion | str) -> "RestClientBuilder":
        version = require(version, "HTTP version is required")
        self._http_version = coerce_enum(HttpVersion, version, "HTTP version")
        return self

    def redirect_policy(self, policy: RedirectPolicy | str) -> "RestClientBuilder":
        policy = require(policy, "Redirect policy is required")
        self._redirect_policy = coerce_enum(RedirectPolicy, policy, "redirect policy")
        return self

    def transport(self, transport: httpx.BaseTransport | None) -> "RestClientBuilder":
        if transport is not None and not isinstance(transport, httpx.BaseTransport):
            raise RestArgumentError("transport must be an httpx.BaseTransport")
        self._transport = transport
        return self

    def build(self) -> RestClient:
        config = ClientConfig(
            base_uri=self._base_uri,
            default_headers=MappingProxyType(dict(self._default_headers)),
            connect_timeout=self._connect_timeout,
            request_timeout=self._request_timeout,
            redirect_policy=self._redirect_policy,
            http_version=self._http_version,
        )
        return RestClient(config, transport=self._transport)
