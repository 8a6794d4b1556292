"""Fluent REST client over httpx."""

import logging

from .client import RestClient, RestClientBuilder
from .config import ClientConfig, HttpMethod, HttpVersion, RedirectPolicy
from .exceptions import (
    RestArgumentError,
    RestClientError,
    RestError,
    RestResponseValidationError,
    RestURIError,
)
from .request_options import RequestOptions, RequestOptionsBuilder
from .response import RestResponse

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ClientConfig",
    "HttpMethod",
    "HttpVersion",
    "RedirectPolicy",
    "RequestOptions",
    "RequestOptionsBuilder",
    "RestArgumentError",
    "RestClient",
    "RestClientBuilder",
    "RestClientError",
    "RestError",
    "RestResponse",
    "RestResponseValidationError",
    "RestURIError",
]
