"""
Tests for the HttpClient abstraction

These tests verify that the HttpClient wrapper correctly delegates to requests
and supports dependency injection for testing.
"""

from unittest.mock import Mock, patch

from api_builder.http_client import HttpClient


class TestHttpClient:
    """Test HttpClient wrapper functionality"""

    @patch("api_builder.http_client.requests.request")
    def test_basic_request(self, mock_request):
        """Should make a basic request via requests.request"""
        mock_response = Mock()
        mock_response.status_code = 200
        mock_request.return_value = mock_response

        client = HttpClient()
        response = client.request("GET", "https://example.com")

        mock_request.assert_called_once_with(
            "GET", "https://example.com", headers=None, data=None, timeout=None
        )
        assert response == mock_response

    @patch("api_builder.http_client.requests.request")
    def test_request_with_headers(self, mock_request):
        """Should pass headers to requests.request"""
        mock_request.return_value = Mock()

        client = HttpClient()
        headers = {"Authorization": "Bearer token", "Accept": "application/json"}
        client.request("GET", "https://example.com", headers=headers)

        call_kwargs = mock_request.call_args[1]
        assert call_kwargs["headers"] == headers

    @patch("api_builder.http_client.requests.request")
    def test_request_with_body(self, mock_request):
        """Should pass the serialized body as data"""
        mock_request.return_value = Mock()

        client = HttpClient()
        client.request("POST", "https://api.example.com", data='{"key": "value"}')

        call_args = mock_request.call_args
        assert call_args[0][0] == "POST"
        assert call_args[1]["data"] == '{"key": "value"}'

    @patch("api_builder.http_client.requests.request")
    def test_request_with_timeout(self, mock_request):
        """Should pass timeout to requests.request"""
        mock_request.return_value = Mock()

        client = HttpClient()
        client.request("GET", "https://example.com", timeout=30)

        call_kwargs = mock_request.call_args[1]
        assert call_kwargs["timeout"] == 30

    @patch("api_builder.http_client.requests.request")
    def test_request_with_additional_kwargs(self, mock_request):
        """Should pass additional kwargs to requests.request"""
        mock_request.return_value = Mock()

        client = HttpClient()
        client.request("GET", "https://example.com", verify=False, allow_redirects=True)

        call_kwargs = mock_request.call_args[1]
        assert not call_kwargs["verify"]
        assert call_kwargs["allow_redirects"]
