"""Exceptions raised by :mod:`jsonrest`."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ApiResponse, RequestSpec


class ApiClientError(Exception):
    """Base class for every error raised by the client."""


class InvalidBaseURL(ApiClientError, ValueError):
    """The base URL given to the client could not be parsed."""


class InvalidRequest(ApiClientError, ValueError):
    """A call could not be turned into a request (bad header value, unusable URL)."""


class ApiHTTPError(ApiClientError):
    """The server answered with a status code of 400 or above."""

    def __init__(self, response: "ApiResponse") -> None:
        self.response = response
        super().__init__(f"HTTP {response.status_code}")

    @property
    def status_code(self) -> int:
        return self.response.status_code


class ApiTransportError(ApiClientError):
    """No complete response was received (connection refused, DNS, timeout...)."""

    def __init__(self, request: "RequestSpec", message: str) -> None:
        self.request = request
        super().__init__(f"{request.method} {request.url} failed: {message}")
