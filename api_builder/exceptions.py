"""
Custom exceptions for api-builder
"""


class ApiBuilderError(Exception):
    """Base exception for all api-builder errors"""

    pass


class UriConstructionError(ApiBuilderError):
    """Raised when scheme, host or port is missing while building a URI"""

    def __init__(self, message: str = "Missing components necessary to construct URI"):
        super().__init__(message)


class ApiRequestError(ApiBuilderError):
    """
    Raised when a request could not be completed.

    This includes:
    - Connection failures and other transport errors
    - Response bodies that are not valid JSON
    """

    pass


class RequestFailedError(ApiRequestError):
    """
    Raised when the server answers with a non-ok status code.

    Includes the status code and raw response text to enable better user guidance.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_text: str | None = None,
    ):
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(message)

    def get_user_guidance(self) -> str:
        """Get user-friendly guidance based on status code"""
        if self.status_code in (401, 403):
            return "Authentication failed. Please check the access token passed with --auth."
        elif self.status_code == 404:
            return "Resource not found. Please check the host and path."
        elif self.status_code == 429:
            return "Rate limit exceeded. Please wait a few moments and try again."
        elif self.status_code and self.status_code >= 500:
            return "Server error. This is usually temporary.\nPlease try again in a few moments."
        else:
            return "Please check the request parameters and try again."


class ConfigurationError(ApiBuilderError):
    """
    Raised when required configuration values are missing or invalid.

    Missing required values are caught early rather than silently falling back
    to hardcoded defaults.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")
