"""
Models module for jsonrest.

Passive values shared by the client, its helpers and the CLI.
"""

from .api_models import ApiResponse, ClientConfig, RequestSpec

__all__ = ["ApiResponse", "ClientConfig", "RequestSpec"]
