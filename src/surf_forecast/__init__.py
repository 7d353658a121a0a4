"""Surf Forecast: hourly wave conditions for a named surf spot."""

from .exceptions import (
    SurfForecastError,
    NetworkError,
    UpstreamError,
    ParseError,
    EmptyResultError,
    TimestampFormatError,
    ConfigError,
)
from .models import Coordinates, HourlyForecast, measurement_at

__version__ = "0.1.0"
__all__ = [
    'SurfForecastError',
    'NetworkError',
    'UpstreamError',
    'ParseError',
    'EmptyResultError',
    'TimestampFormatError',
    'ConfigError',
    'Coordinates',
    'HourlyForecast',
    'measurement_at',
]
