import os
import sys
from datetime import date

import pytest

# Add the src directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

SAMPLE_LOCATIONS = [
    {
        "place_id": 123,
        "lat": "21.6650",
        "lon": "-158.0530",
        "name": "Banzai Pipeline",
        "display_name": "Banzai Pipeline, Pupukea, Honolulu County, Hawaii, United States"
    },
    {
        "place_id": 456,
        "lat": "-33.8915",
        "lon": "151.2767",
        "name": "Pipeline",
        "display_name": "Pipeline, Bondi, Sydney, New South Wales, Australia"
    }
]

SAMPLE_FORECAST = {
    "latitude": 21.625,
    "longitude": -158.125,
    "hourly_units": {"time": "iso8601", "wave_height": "m", "wave_period": "s"},
    "hourly": {
        "time": [
            "2024-02-29T23:00",
            "2024-03-01T00:00",
            "2024-03-01T09:00",
            "2024-03-01T14:00",
            "2024-03-02T06:00",
            "2024-03-03T12:00"
        ],
        "wave_height": [0.8, 1.0, 1.2, 1.5, None, 2.0],
        "wave_direction": [300, 305, 310, None, 290, 295],
        "wave_period": [9.5, 10.0, None, 11.25, 12.0, 8]
    }
}


@pytest.fixture
def reference_date():
    """A Friday."""
    return date(2024, 3, 1)


@pytest.fixture
def sample_locations():
    """Geocoder search results for an ambiguous spot name."""
    return [dict(record) for record in SAMPLE_LOCATIONS]


@pytest.fixture
def sample_forecast():
    """Marine API response body spanning several days."""
    return {
        **SAMPLE_FORECAST,
        "hourly": {key: list(values) for key, values in SAMPLE_FORECAST["hourly"].items()}
    }
