"""
Open-Meteo Marine API client for hourly wave forecasts.
"""

import logging
import requests

from ..config import MARINE_URL, REQUEST_TIMEOUT, USER_AGENT
from ..exceptions import NetworkError, ParseError, UpstreamError
from ..models import HourlyForecast, MEASUREMENTS

logger = logging.getLogger(__name__)


class MarineForecastClient:
    """Client for the Open-Meteo marine forecast endpoint."""

    def __init__(self, marine_url: str = MARINE_URL, user_agent: str = USER_AGENT,
                 timeout: float = REQUEST_TIMEOUT):
        """Initialize the marine forecast client.

        Args:
            marine_url: Full URL of the marine endpoint
            user_agent: Value sent in the User-Agent header
            timeout: Seconds to wait for the service before giving up
        """
        self.marine_url = marine_url
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({'User-Agent': user_agent})

    def fetch(self, lat: str, lon: str) -> HourlyForecast:
        """
        Fetch hourly wave height, direction and period for a location.

        Args:
            lat: Latitude as returned by the geocoder
            lon: Longitude as returned by the geocoder

        Returns:
            HourlyForecast with whichever wave series the service provided

        Raises:
            NetworkError: If the request could not be completed
            UpstreamError: If the service returns a status other than 200;
                the response body is kept for diagnostics
            ParseError: If the body does not contain an hourly time series
        """
        params = {
            'latitude': lat,
            'longitude': lon,
            'hourly': ','.join(MEASUREMENTS),
        }
        logger.debug(f"Marine forecast request to {self.marine_url} with params {params}")

        try:
            response = self._session.get(self.marine_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.debug(f"Marine forecast request failed for {lat},{lon}: {e}")
            raise NetworkError(f"Marine forecast request failed: {e}")

        logger.debug(f"Marine forecast response status code: {response.status_code}")
        if response.status_code != 200:
            raise UpstreamError(
                f"Status code: {response.status_code}. Reason: {response.text}",
                status_code=response.status_code,
                body=response.text,
                response=response,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError(f"Invalid marine forecast response: {e}", response=response)

        forecast = HourlyForecast.from_payload(payload)
        logger.debug(f"Marine forecast holds {len(forecast.times)} hourly entries")
        return forecast
