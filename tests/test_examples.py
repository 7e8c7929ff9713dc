"""
Tests for the example API clients

The examples reuse one builder per client, so state set by one call is
visible to later calls.
"""

import json

from conftest import make_response

from examples.jsonplaceholder_api import JsonPlaceholderApi
from examples.jwt_api import UsersApi
from examples.rickandmorty_api import RickAndMortyApi


class TestJsonPlaceholderApi:
    def test_get_posts(self, mock_http_client):
        mock_http_client.request.return_value = make_response(200, [{"id": 1}])

        posts = JsonPlaceholderApi(mock_http_client).get_posts()

        assert posts == [{"id": 1}]
        mock_http_client.request.assert_called_once_with(
            "GET", "https://jsonplaceholder.typicode.com/posts", headers=None, data=None
        )

    def test_get_user_posts(self, mock_http_client):
        JsonPlaceholderApi(mock_http_client).get_user_posts({"userId": 1, "id": None})

        assert (
            mock_http_client.request.call_args[0][1]
            == "https://jsonplaceholder.typicode.com/posts?userId=1"
        )

    def test_create_post(self, mock_http_client):
        body = {"title": "foo", "body": "bar", "userId": 1}

        JsonPlaceholderApi(mock_http_client).create_post(body)

        call_args = mock_http_client.request.call_args
        assert call_args[0][0] == "POST"
        assert json.loads(call_args[1]["data"]) == body
        assert call_args[1]["headers"] == {"Content-type": "application/json; charset=UTF-8"}

    def test_update_post(self, mock_http_client):
        JsonPlaceholderApi(mock_http_client).update_post(1, {"title": "new"})

        assert mock_http_client.request.call_args[0] == (
            "PUT",
            "https://jsonplaceholder.typicode.com/posts/1",
        )

    def test_delete_post_carries_earlier_state(self, mock_http_client):
        """Query and body parameters from earlier calls are still sent"""
        client = JsonPlaceholderApi(mock_http_client)
        client.get_user_posts({"userId": 2})
        client.create_post({"title": "foo"})

        client.delete_post(3)

        call_args = mock_http_client.request.call_args
        assert call_args[0] == (
            "DELETE",
            "https://jsonplaceholder.typicode.com/posts/3?userId=2",
        )
        assert json.loads(call_args[1]["data"]) == {"title": "foo"}


class TestRickAndMortyApi:
    def test_get_characters(self, mock_http_client):
        mock_http_client.request.return_value = make_response(200, {"results": []})

        assert RickAndMortyApi(mock_http_client).get_characters() == {"results": []}
        assert (
            mock_http_client.request.call_args[0][1] == "https://rickandmortyapi.com/api/character"
        )

    def test_get_character(self, mock_http_client):
        RickAndMortyApi(mock_http_client).get_character(42)

        assert (
            mock_http_client.request.call_args[0][1]
            == "https://rickandmortyapi.com/api/character/42"
        )


class TestUsersApi:
    def test_bearer_header_sent(self, mock_http_client):
        UsersApi("jwt-token", http_client=mock_http_client).get_users()

        call_args = mock_http_client.request.call_args
        assert call_args[0] == ("GET", "https://api.example.com/users")
        assert call_args[1]["headers"] == {"Authorization": "Bearer jwt-token"}
