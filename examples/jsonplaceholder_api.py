"""
JSONPlaceholder client built on ApiBuilder
https://jsonplaceholder.typicode.com
"""

from typing import Any

from api_builder import ApiBuilder, HttpMethod, HttpScheme
from api_builder.http_client import HttpClient

JSON_HEADERS = {"Content-type": "application/json; charset=UTF-8"}


class JsonPlaceholderApi:
    """
    Posts resource of the JSONPlaceholder fake REST API.

    One builder is reused for every call, so query parameters set by
    get_user_posts() are still present on later calls.
    """

    def __init__(self, http_client: HttpClient | None = None):
        self.api = (
            ApiBuilder(http_client)
            .with_scheme(HttpScheme.HTTPS)
            .with_host("jsonplaceholder.typicode.com")
        )

    def get_posts(self) -> list[dict[str, Any]]:
        """GET /posts"""
        return self.api.with_method(HttpMethod.GET).with_path("/posts").execute()

    def get_user_posts(self, params: dict[str, Any]) -> list[dict[str, Any]]:
        """GET /posts?userId={userId}&id={id}"""
        return (
            self.api.with_method(HttpMethod.GET)
            .with_path("/posts")
            .with_query_parameters(params)
            .execute()
        )

    def create_post(self, body: dict[str, Any]) -> dict[str, Any]:
        """POST /posts"""
        return (
            self.api.with_method(HttpMethod.POST)
            .with_path("/posts")
            .with_body_parameters(body)
            .with_headers(JSON_HEADERS)
            .execute()
        )

    def update_post(self, index: int, body: dict[str, Any]) -> dict[str, Any]:
        """PUT /posts/{index}"""
        return (
            self.api.with_method(HttpMethod.PUT)
            .with_path(f"/posts/{index}")
            .with_body_parameters(body)
            .with_headers(JSON_HEADERS)
            .execute()
        )

    def delete_post(self, index: int) -> None:
        """DELETE /posts/{index}"""
        self.api.with_method(HttpMethod.DELETE).with_path(f"/posts/{index}").execute()
