"""HTTP client abstraction for dependency injection and testability."""

from typing import Any

import requests


class HttpClient:
    """
    HTTP client wrapper for sending requests.

    The builder talks to this class instead of requests directly so tests can
    inject a mock client.
    """

    def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        data: Any | None = None,
        timeout: float | None = None,
        **kwargs,
    ) -> requests.Response:
        """
        Send a request.

        Args:
            method: HTTP method (e.g., "GET", "POST")
            url: Fully built URL to request
            headers: Optional HTTP headers
            data: Optional request body, already serialized
            timeout: Optional request timeout in seconds (None waits indefinitely)
            **kwargs: Additional arguments to pass to requests.request()

        Returns:
            requests.Response object
        """
        return requests.request(
            method, url, headers=headers, data=data, timeout=timeout, **kwargs
        )


default_http_client = HttpClient()
