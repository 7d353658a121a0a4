"""
Command line interface for the surf forecast.

Looks up a surf spot by name, fetches its hourly marine forecast and prints
wave height and period for today, or for the coming week with --week:

    surf-forecast "Banzai Pipeline" --week
"""

import argparse
import logging
import sys
from datetime import date, datetime, timezone
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import load_settings
from .core import GeocoderClient, MarineForecastClient
from .exceptions import ConfigError, EmptyResultError, SurfForecastError, TimestampFormatError
from .formatter import render_day, render_week
from .models import Coordinates

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if verbose:
        logging.getLogger('surf_forecast').setLevel(logging.DEBUG)


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='surf-forecast',
        description='Show hourly wave height and period for a surf spot'
    )

    parser.add_argument(
        'spot',
        help='Name of the surf spot; quote names with spaces, e.g. "Banzai Pipeline"'
    )

    parser.add_argument(
        '-w', '--week',
        action='store_true',
        help='List a weekly surf forecast'
    )

    parser.add_argument(
        '--config',
        type=Path,
        help='YAML settings file overriding the default endpoints and timeout'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(argv)


def utc_today() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def resolve_spot(geocoder: GeocoderClient, spot: str) -> Coordinates:
    """Return the first geocoding candidate for a spot name.

    Raises:
        EmptyResultError: If the geocoder found nothing.
    """
    candidates = geocoder.lookup(spot)
    if not candidates:
        raise EmptyResultError("No coordinates found. Maybe you misspelled the spot name?")
    first = candidates[0]
    logger.info(f"Using {first.display_name} ({first.lat}, {first.lon})")
    return first


def main(argv: Optional[List[str]] = None, today: Optional[date] = None):
    """Main execution function."""
    args = parse_args(argv)
    setup_logging(args.verbose)
    today = today or utc_today()

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        logger.error(f"Error loading settings: {e}")
        sys.exit(1)

    api = settings['api']
    geocoder = GeocoderClient(api['geocoder_url'], api['user_agent'], api['timeout'])
    marine = MarineForecastClient(api['marine_url'], api['user_agent'], api['timeout'])

    try:
        spot = resolve_spot(geocoder, args.spot)
    except EmptyResultError as e:
        logger.error(str(e))
        sys.exit(1)
    except SurfForecastError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    try:
        forecast = marine.fetch(spot.lat, spot.lon)
    except SurfForecastError as e:
        logger.error(f"Error fetching forecast: {e}")
        sys.exit(1)

    try:
        if args.week:
            render_week(forecast, today, days=settings['forecast']['week_days'])
        else:
            render_day(forecast, today)
    except TimestampFormatError as e:
        logger.error(f"Error rendering forecast: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
