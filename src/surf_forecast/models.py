"""
Data shapes returned by the geocoding and marine forecast services.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .exceptions import ParseError

logger = logging.getLogger(__name__)

# Hourly measurement series. None means the service omitted the variable;
# None inside the list means no reading for that hour.
Series = Optional[List[Optional[float]]]

COORDINATE_FIELDS = ('lat', 'lon', 'name', 'display_name')
MEASUREMENTS = ('wave_height', 'wave_direction', 'wave_period')


@dataclass(frozen=True)
class Coordinates:
    """A geocoded candidate location."""
    lat: str
    lon: str
    name: str
    display_name: str

    @classmethod
    def from_record(cls, record: Any) -> 'Coordinates':
        """Build coordinates from one geocoder search result.

        Raises:
            ParseError: If the record is not an object or lacks a string field.
        """
        if not isinstance(record, dict):
            raise ParseError(f"Expected a location object, got {type(record).__name__}")
        for field in COORDINATE_FIELDS:
            if not isinstance(record.get(field), str):
                raise ParseError(f"Location record is missing string field '{field}'")
        return cls(
            lat=record['lat'],
            lon=record['lon'],
            name=record['name'],
            display_name=record['display_name'],
        )


def _to_number(value: Any) -> Optional[float]:
    # bool is an int subclass but not a reading
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _parse_series(hourly: Dict[str, Any], key: str) -> Series:
    values = hourly.get(key)
    if values is None:
        return None
    if not isinstance(values, list):
        raise ParseError(f"Expected '{key}' to be a list, got {type(values).__name__}")
    return [_to_number(v) for v in values]


@dataclass
class HourlyForecast:
    """Index-aligned hourly wave series for one location."""
    times: List[str]
    wave_height: Series = None
    wave_direction: Series = None
    wave_period: Series = None

    @classmethod
    def from_payload(cls, payload: Any) -> 'HourlyForecast':
        """Build a forecast from a marine API response body.

        Args:
            payload: Decoded JSON with an 'hourly' object

        Raises:
            ParseError: If 'hourly' or its 'time' list is missing or malformed.
        """
        if not isinstance(payload, dict) or not isinstance(payload.get('hourly'), dict):
            raise ParseError("Response has no 'hourly' object")
        hourly = payload['hourly']

        times = hourly.get('time')
        if not isinstance(times, list) or not all(isinstance(t, str) for t in times):
            raise ParseError("Expected 'hourly.time' to be a list of strings")

        series = {key: _parse_series(hourly, key) for key in MEASUREMENTS}
        missing = [key for key, values in series.items() if values is None]
        if missing:
            logger.debug(f"Forecast omits hourly variables: {missing}")

        return cls(times=list(times), **series)


def measurement_at(series: Series, index: int) -> float:
    """Return the reading at index, or 0.0 when the series or reading is missing."""
    if series is None or index >= len(series):
        return 0.0
    value = series[index]
    return 0.0 if value is None else value
