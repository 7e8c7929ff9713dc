"""HTTP method and scheme enumerations"""

from enum import Enum


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value


class HttpScheme(str, Enum):
    HTTP = "http"
    HTTPS = "https"

    def __str__(self) -> str:
        return self.value


# Ports that are left implicit in a URI
DEFAULT_PORTS = {HttpScheme.HTTP: 80, HttpScheme.HTTPS: 443}
