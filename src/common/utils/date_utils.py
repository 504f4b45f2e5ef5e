"""Utility functions for date manipulation."""

import logging
from datetime import datetime

import pytz

from src.common.config.settings import settings

logger = logging.getLogger(__name__)


def now_in_configured_timezone() -> datetime:
    """Returns the current time as an aware datetime in the configured timezone."""
    try:
        tz = pytz.timezone(settings.TIMEZONE)
    except pytz.UnknownTimeZoneError:
        logger.warning(f"Unknown TIMEZONE setting '{settings.TIMEZONE}', falling back to UTC")
        tz = pytz.utc
    return datetime.now(tz)


def format_datetime_for_display(dt: datetime | None) -> str | None:
    """Formats a datetime for console output."""
    if not dt:
        return None
    return dt.strftime("%Y-%m-%d %H:%M:%S %Z").strip()
