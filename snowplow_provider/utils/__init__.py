"""Utility helpers for HTTP transport and configuration layering."""

from .config import env_str, merge_with_fallback
from .http_client import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    ConsoleError,
    HttpClient,
    MalformedResponseError,
    TrackingError,
    TransportError,
)

__all__ = [
    "HttpClient",
    "ConsoleError",
    "ConfigurationError",
    "AuthenticationError",
    "ApiError",
    "MalformedResponseError",
    "TransportError",
    "TrackingError",
    "env_str",
    "merge_with_fallback",
]
