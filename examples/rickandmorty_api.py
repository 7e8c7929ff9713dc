"""
Rick and Morty API client built on ApiBuilder
https://rickandmortyapi.com
"""

from typing import Any

from api_builder import ApiBuilder, HttpMethod, HttpScheme
from api_builder.http_client import HttpClient


class RickAndMortyApi:
    def __init__(self, http_client: HttpClient | None = None):
        # Base path rides along with the host
        self.api = (
            ApiBuilder(http_client)
            .with_scheme(HttpScheme.HTTPS)
            .with_host("rickandmortyapi.com/api")
        )

    def get_characters(self) -> dict[str, Any]:
        """GET /api/character"""
        return self.api.with_method(HttpMethod.GET).with_path("/character").execute()

    def get_character(self, character_id: int) -> dict[str, Any]:
        """GET /api/character/{id}"""
        return (
            self.api.with_method(HttpMethod.GET).with_path(f"/character/{character_id}").execute()
        )
