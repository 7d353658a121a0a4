"""
Surf Forecast Core Functionality.

This module provides the HTTP clients for the geocoding and marine
forecast services.
"""

from .geocoder_client import GeocoderClient
from .marine_client import MarineForecastClient

__all__ = [
    'GeocoderClient',
    'MarineForecastClient'
]
