"""
Fluent request builder

Accumulates the pieces of an HTTP request on a single mutable descriptor and
executes it through an HttpClient. Every with_* call mutates the descriptor
and returns the same builder, so one builder is typically created per remote
host and re-chained before each execute().

Query parameters, body parameters and headers persist between executions;
there is no reset. A builder must not be shared between threads.
"""

import json
from collections.abc import Mapping
from typing import Any

from .enums import DEFAULT_PORTS, HttpMethod, HttpScheme
from .exceptions import (
    ApiBuilderError,
    ApiRequestError,
    RequestFailedError,
    UriConstructionError,
)
from .http_client import HttpClient, default_http_client
from .logging_config import get_module_logger
from .request_data import ApiRequestData, merge_field

logger = get_module_logger("builder")


def _format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_format_query_value(item) for item in value)
    return str(value)


def build_query_string(query_parameters: Any) -> str:
    """
    Render query parameters as "key1=value1&key2=value2".

    Args:
        query_parameters: Mapping, list of (key, value) pairs, or a raw string

    Returns:
        Query string without the leading "?". Values are not percent-encoded
        and pairs whose value is None are skipped.
    """
    if isinstance(query_parameters, str):
        return query_parameters

    if isinstance(query_parameters, Mapping):
        pairs = query_parameters.items()
    else:
        pairs = query_parameters

    return "&".join(
        f"{key}={_format_query_value(value)}" for key, value in pairs if value is not None
    )


class ApiBuilder:
    """Chainable builder for a single remote API"""

    def __init__(self, http_client: HttpClient | None = None):
        """
        Args:
            http_client: HTTP client used by execute() (optional, uses the default client)
        """
        self.http_client = http_client if http_client is not None else default_http_client
        self._data = ApiRequestData()

    # Setters

    def with_method(self, method: HttpMethod) -> "ApiBuilder":
        self._data.method = method
        return self

    def with_host(self, host: str) -> "ApiBuilder":
        self._data.host = host
        return self

    def with_port(self, port: int) -> "ApiBuilder":
        self._data.port = port
        return self

    def with_scheme(self, scheme: HttpScheme) -> "ApiBuilder":
        """
        Set the scheme and reset the port to the scheme's default.

        Any port set earlier is overwritten, so a custom port has to be set
        after the scheme.
        """
        self._data.scheme = scheme
        self._data.port = 443 if scheme == HttpScheme.HTTPS else 80
        return self

    def with_path(self, path: str) -> "ApiBuilder":
        self._data.path = path
        return self

    def with_query_parameters(self, params: Any) -> "ApiBuilder":
        self._data.query_parameters = merge_field(self._data.query_parameters, params)
        return self

    def with_body_parameters(self, body: Any) -> "ApiBuilder":
        self._data.body_parameters = merge_field(self._data.body_parameters, body)
        return self

    def with_headers(self, headers: Mapping[str, str] | None) -> "ApiBuilder":
        self._data.headers = merge_field(self._data.headers, headers)
        return self

    def with_auth(self, access_token: str | None) -> "ApiBuilder":
        """Add a Bearer Authorization header; empty tokens are ignored"""
        if access_token:
            self.with_headers({"Authorization": "Bearer " + access_token})
        return self

    # Getters

    def get_host(self) -> str:
        return self._data.host

    def get_port(self) -> int:
        return self._data.port

    def get_scheme(self) -> HttpScheme | None:
        return self._data.scheme

    def get_method(self) -> HttpMethod | None:
        return self._data.method

    def get_path(self) -> str:
        return self._data.path

    def get_query_parameters(self) -> Any:
        return self._data.query_parameters

    def get_body_parameters(self) -> Any:
        return self._data.body_parameters

    def get_headers(self) -> dict[str, str]:
        return self._data.headers

    # URL construction

    def get_uri(self) -> str:
        """
        Build "scheme://host[:port][path]".

        The port is only included when it differs from the scheme's default.

        Raises:
            UriConstructionError: If scheme, host or port is missing
        """
        scheme, host, port, path = (
            self._data.scheme,
            self._data.host,
            self._data.port,
            self._data.path,
        )
        if not scheme or not host or not port:
            raise UriConstructionError()

        uri = f"{scheme}://{host}"
        if scheme in DEFAULT_PORTS and DEFAULT_PORTS[scheme] != port:
            uri += f":{port}"
        if path:
            uri += path
        return uri

    def get_url(self) -> str:
        """Build the full URL, including the query string when there is one"""
        uri = self.get_uri()
        query_parameters = self.get_query_parameters()
        if not query_parameters:
            return uri

        query_string = build_query_string(query_parameters)
        if not query_string:
            return uri
        return f"{uri}?{query_string}"

    # Execution

    def execute(self) -> Any:
        """
        Send the described request and decode the JSON response.

        The body parameters are serialized as JSON whenever present, whatever
        the method.

        Returns:
            The decoded JSON response body

        Raises:
            UriConstructionError: If the URL cannot be built
            RequestFailedError: If the response status is not ok
            ApiRequestError: If the request fails or the body is not valid JSON
        """
        url = self.get_url()
        method = self._data.method or HttpMethod.GET

        headers = self._data.headers or None
        body = None
        if self._data.body_parameters:
            body = json.dumps(self._data.body_parameters)

        logger.debug(f"{method} {url}")

        try:
            response = self.http_client.request(str(method), url, headers=headers, data=body)

            logger.debug(f"{method} {url} -> HTTP {response.status_code}")

            if not response.ok:
                raise RequestFailedError(
                    f"Request failed with status {response.status_code}",
                    status_code=response.status_code,
                    response_text=response.text,
                )

            return response.json()

        except ApiBuilderError:
            raise
        except Exception as e:
            # Transport, client and JSON decode failures keep their message
            raise ApiRequestError(str(e)) from e
