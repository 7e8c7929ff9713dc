"""Fluent builder for constructing and executing HTTP requests."""

from .builder import ApiBuilder
from .enums import HttpMethod, HttpScheme
from .exceptions import (
    ApiBuilderError,
    ApiRequestError,
    ConfigurationError,
    RequestFailedError,
    UriConstructionError,
)
from .http_client import HttpClient
from .profiles import build_from_profile, list_profiles

__all__ = [
    "ApiBuilder",
    "ApiBuilderError",
    "ApiRequestError",
    "ConfigurationError",
    "HttpClient",
    "HttpMethod",
    "HttpScheme",
    "RequestFailedError",
    "UriConstructionError",
    "build_from_profile",
    "list_profiles",
]
