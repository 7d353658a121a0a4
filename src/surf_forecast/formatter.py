"""
Plain-text rendering of hourly wave forecasts.

Both modes share one row selection: every series entry whose timestamp falls
on the target calendar day is printed, in series order, as

    ⏰: {hour}, 🌊: {wave_height}, ⏱️: {wave_period}

under a ``DAY: {weekday} {day}`` header.
"""

import logging
import sys
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import List, Optional, TextIO

from .config import WEEK_DAYS
from .exceptions import TimestampFormatError
from .models import HourlyForecast, measurement_at

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"

# Fixed English names, independent of the process locale
WEEKDAY_ABBR = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')


def parse_timestamp(value: str) -> datetime:
    """Parse a naive minute-precision timestamp such as '2024-03-01T14:00'."""
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        raise TimestampFormatError(value)


def format_number(value: float) -> str:
    """Shortest positional form of a reading; whole numbers lose their fraction."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{Decimal(repr(value)):f}"


def format_header(day: date) -> str:
    return f"DAY: {WEEKDAY_ABBR[day.weekday()]} {day.day:2d}"


def format_row(hour: int, wave_height: float, wave_period: float) -> str:
    return f"⏰: {hour}, 🌊: {format_number(wave_height)}, ⏱️: {format_number(wave_period)}"


def _parse_times(forecast: HourlyForecast) -> List[datetime]:
    # Everything is parsed up front so a bad timestamp aborts before any output
    return [parse_timestamp(t) for t in forecast.times]


def _day_lines(forecast: HourlyForecast, times: List[datetime], day: date) -> List[str]:
    lines = [format_header(day)]
    for index, moment in enumerate(times):
        if moment.date() != day:
            continue
        lines.append(format_row(
            moment.hour,
            measurement_at(forecast.wave_height, index),
            measurement_at(forecast.wave_period, index),
        ))
    logger.debug(f"{len(lines) - 1} hourly rows for {day.isoformat()}")
    return lines


def render_day(forecast: HourlyForecast, day: date, out: Optional[TextIO] = None) -> None:
    """
    Print the forecast rows for a single calendar day.

    Args:
        forecast: Hourly wave series
        day: Calendar day to display
        out: Stream to write to (defaults to stdout)

    Raises:
        TimestampFormatError: If any timestamp in the series is malformed.
    """
    out = out or sys.stdout
    times = _parse_times(forecast)
    for line in _day_lines(forecast, times, day):
        print(line, file=out)


def render_week(forecast: HourlyForecast, start: date, out: Optional[TextIO] = None,
                days: int = WEEK_DAYS) -> None:
    """
    Print the forecast rows for consecutive days starting at start.

    Args:
        forecast: Hourly wave series
        start: First calendar day to display (inclusive)
        out: Stream to write to (defaults to stdout)
        days: Number of days to display

    Raises:
        TimestampFormatError: If any timestamp in the series is malformed.
    """
    out = out or sys.stdout
    times = _parse_times(forecast)
    for offset in range(days):
        for line in _day_lines(forecast, times, start + timedelta(days=offset)):
            print(line, file=out)
