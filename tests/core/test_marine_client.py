"""
Tests for the marine forecast client.
"""

import pytest
import requests
import responses
from responses import matchers
from unittest.mock import patch

from surf_forecast.config import MARINE_URL
from surf_forecast.core.marine_client import MarineForecastClient
from surf_forecast.exceptions import NetworkError, ParseError, UpstreamError


@pytest.fixture
def client():
    """Create a MarineForecastClient instance for testing."""
    return MarineForecastClient()


class TestMarineForecastClient:
    """Test suite for MarineForecastClient class."""

    def test_init_default_values(self):
        client = MarineForecastClient()
        assert client.marine_url == "https://marine-api.open-meteo.com/v1/marine"
        assert client.timeout == 30

    @responses.activate
    def test_fetch_success(self, client, sample_forecast):
        """Test coordinates and hourly variables are requested and parsed."""
        responses.add(
            responses.GET,
            MARINE_URL,
            json=sample_forecast,
            status=200,
            match=[
                matchers.query_param_matcher({
                    'latitude': '21.6650',
                    'longitude': '-158.0530',
                    'hourly': 'wave_height,wave_direction,wave_period',
                }),
                matchers.header_matcher({'User-Agent': 'surf-forecast'}),
            ]
        )

        forecast = client.fetch("21.6650", "-158.0530")
        assert len(forecast.times) == 6
        assert forecast.times[0] == "2024-02-29T23:00"
        assert forecast.wave_height == [0.8, 1.0, 1.2, 1.5, None, 2.0]
        assert forecast.wave_direction == [300.0, 305.0, 310.0, None, 290.0, 295.0]
        assert forecast.wave_period[2] is None

    @responses.activate
    def test_fetch_missing_series(self, client):
        """Test the service may omit measurement arrays entirely."""
        responses.add(
            responses.GET,
            MARINE_URL,
            json={"hourly": {"time": ["2024-03-01T09:00"], "wave_height": [1.2]}},
            status=200
        )

        forecast = client.fetch("1", "2")
        assert forecast.wave_height == [1.2]
        assert forecast.wave_direction is None
        assert forecast.wave_period is None

    @responses.activate
    def test_fetch_error_includes_body(self, client):
        """Test a non-200 status keeps the response body for diagnostics."""
        responses.add(
            responses.GET,
            MARINE_URL,
            body='{"error":true,"reason":"Latitude must be in range of -90 to 90°."}',
            status=400
        )

        with pytest.raises(UpstreamError) as exc_info:
            client.fetch("123", "0")
        assert exc_info.value.status_code == 400
        assert "Latitude must be in range" in exc_info.value.body
        assert str(exc_info.value).startswith("Status code: 400. Reason: ")

    @responses.activate
    def test_missing_hourly(self, client):
        responses.add(responses.GET, MARINE_URL, json={"latitude": 1.0}, status=200)

        with pytest.raises(ParseError):
            client.fetch("1", "2")

    @responses.activate
    def test_invalid_json_response(self, client):
        responses.add(responses.GET, MARINE_URL, body="<html>", status=200)

        with pytest.raises(ParseError):
            client.fetch("1", "2")

    @responses.activate
    def test_connection_failure(self, client):
        responses.add(
            responses.GET,
            MARINE_URL,
            body=requests.exceptions.ConnectionError("connection reset")
        )

        with pytest.raises(NetworkError):
            client.fetch("1", "2")

    @responses.activate
    def test_timeout(self, client):
        """Test a timed out request surfaces as NetworkError."""
        responses.add(
            responses.GET,
            MARINE_URL,
            body=requests.exceptions.ConnectTimeout("connect timed out")
        )

        with pytest.raises(NetworkError):
            client.fetch("1", "2")

    def test_configured_timeout_sent(self):
        """Test the client's timeout is passed on every request."""
        client = MarineForecastClient(timeout=5)
        with patch.object(requests.Session, 'get') as mock_get:
            mock_get.return_value.status_code = 200
            mock_get.return_value.json.return_value = {"hourly": {"time": []}}

            forecast = client.fetch("21.6650", "-158.0530")

        assert forecast.times == []
        mock_get.assert_called_once()
        assert mock_get.call_args.kwargs['timeout'] == 5
