"""
Example of sending a JWT in the 'Bearer' Authorization header
"""

from typing import Any

from api_builder import ApiBuilder, HttpMethod, HttpScheme
from api_builder.http_client import HttpClient


class UsersApi:
    def __init__(
        self,
        access_token: str,
        host: str = "api.example.com",
        http_client: HttpClient | None = None,
    ):
        self.api = (
            ApiBuilder(http_client)
            .with_scheme(HttpScheme.HTTPS)
            .with_host(host)
            .with_auth(access_token)
        )

    def get_users(self) -> list[dict[str, Any]]:
        """GET /users"""
        return self.api.with_method(HttpMethod.GET).with_path("/users").execute()
