"""
Pytest configuration and shared fixtures
"""

from unittest.mock import Mock

import pytest

from api_builder.config import Config


def make_response(status_code: int = 200, json_data=None, text: str = "") -> Mock:
    """Build a mock requests.Response"""
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text
    response.json.return_value = json_data
    return response


@pytest.fixture
def mock_http_client():
    """Mock HTTP client answering 200 with an empty JSON object"""
    client = Mock()
    client.request.return_value = make_response(200, {})
    return client


@pytest.fixture
def test_config():
    """Config with two profiles and default headers"""
    return Config(
        {
            "api": {
                "defaults": {"headers": {"User-Agent": "api-builder-test/1.0"}},
                "profiles": {
                    "local": {"scheme": "http", "host": "localhost", "port": 8080},
                    "example": {
                        "scheme": "https",
                        "host": "api.example.com",
                        "headers": {"Accept": "application/json"},
                    },
                },
            },
            "cli": {"output": {"indent": None}},
        }
    )
