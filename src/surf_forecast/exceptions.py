"""
Exception hierarchy for the surf forecast pipeline.
"""

from typing import Optional
import requests


class SurfForecastError(Exception):
    """Base class for all surf forecast errors."""
    def __init__(self, message: str, response: Optional[requests.Response] = None):
        """Initialize the error.

        Args:
            message: Error message
            response: Optional response object that caused the error
        """
        self.message = message
        self.response = response
        super().__init__(self.message)


class NetworkError(SurfForecastError):
    """Raised when a request never produced an HTTP response."""


class UpstreamError(SurfForecastError):
    """Raised when an upstream service answers with a non-OK status."""
    def __init__(self, message: str, status_code: int, body: Optional[str] = None,
                 response: Optional[requests.Response] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message, response=response)


class ParseError(SurfForecastError):
    """Raised when a response body does not have the expected shape."""


class EmptyResultError(SurfForecastError):
    """Raised when a spot name resolves to no coordinates."""


class TimestampFormatError(SurfForecastError):
    """Raised when a forecast timestamp cannot be parsed."""
    def __init__(self, timestamp: str):
        self.timestamp = timestamp
        super().__init__(f"Invalid forecast timestamp: {timestamp!r}")


class ConfigError(SurfForecastError):
    """Raised when a settings file cannot be loaded."""
