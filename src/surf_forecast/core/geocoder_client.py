"""
Geocoding client for resolving spot names to coordinates via Nominatim.
"""

from typing import List
import logging
import requests

from ..config import GEOCODER_URL, REQUEST_TIMEOUT, USER_AGENT
from ..exceptions import NetworkError, ParseError, UpstreamError
from ..models import Coordinates

logger = logging.getLogger(__name__)


class GeocoderClient:
    """Client for the OpenStreetMap Nominatim search endpoint."""

    def __init__(self, search_url: str = GEOCODER_URL, user_agent: str = USER_AGENT,
                 timeout: float = REQUEST_TIMEOUT):
        """Initialize the geocoder client.

        Args:
            search_url: Full URL of the search endpoint
            user_agent: Value sent in the User-Agent header
            timeout: Seconds to wait for the service before giving up
        """
        self.search_url = search_url
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update({'User-Agent': user_agent})

    def lookup(self, query: str) -> List[Coordinates]:
        """
        Search for places matching a free-text query.

        Args:
            query: Spot name, e.g. "Banzai Pipeline"

        Returns:
            Candidate locations in the order the service ranks them. An empty
            list means nothing matched.

        Raises:
            NetworkError: If the request could not be completed
            UpstreamError: If the service returns a status other than 200
            ParseError: If the body is not a list of location records
        """
        params = {'q': query, 'format': 'json'}
        logger.debug(f"Geocoding request to {self.search_url} with params {params}")

        try:
            response = self._session.get(self.search_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.debug(f"Geocoding request failed for '{query}': {e}")
            raise NetworkError(f"Geocoding request failed: {e}")

        logger.debug(f"Geocoding response status code: {response.status_code}")
        if response.status_code != 200:
            raise UpstreamError(
                f"Unexpected status code: {response.status_code}",
                status_code=response.status_code,
                response=response,
            )

        try:
            records = response.json()
        except ValueError as e:
            raise ParseError(f"Invalid geocoding response: {e}", response=response)

        if not isinstance(records, list):
            raise ParseError("Expected a list of locations", response=response)

        candidates = [Coordinates.from_record(record) for record in records]
        logger.debug(f"Geocoder returned {len(candidates)} candidates for '{query}'")
        return candidates
