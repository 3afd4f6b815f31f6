"""
jsonrest - Main Package

A small client for JSON REST APIs built on top of :mod:`requests`.
"""

from .client import ApiClient
from .errors import ApiClientError, ApiHTTPError, ApiTransportError, InvalidBaseURL, InvalidRequest
from .models import ApiResponse, ClientConfig, RequestSpec

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "ApiResponse",
    "ClientConfig",
    "RequestSpec",
    "ApiClientError",
    "ApiHTTPError",
    "ApiTransportError",
    "InvalidBaseURL",
    "InvalidRequest",
]
