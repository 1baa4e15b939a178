"""
Time formatting utilities for displaying human-readable timestamps.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Mapping, Optional, Union

from friendly_dates.config import settings
from friendly_dates.models.options import FormatOptions
from friendly_dates.utils.app_logger import logger
from friendly_dates.utils.timestamps import Timestamp, is_absent, to_datetime, to_local


def time_format(options: FormatOptions) -> str:
    """strftime pattern for the time of day under the given options"""
    if options.hour12:
        return "%I:%M:%S %p" if options.full else "%I:%M %p"
    return "%H:%M:%S" if options.full else "%H:%M"


def is_same_day(d1: datetime, d2: datetime, tz: tzinfo) -> bool:
    """Whether both instants fall on the same calendar day in tz"""
    return d1.astimezone(tz).date() == d2.astimezone(tz).date()


def is_same_year(d1: datetime, d2: datetime, tz: tzinfo) -> bool:
    """Whether both instants fall in the same calendar year in tz"""
    return d1.astimezone(tz).year == d2.astimezone(tz).year


def full_date(date: datetime, now: datetime, options: FormatOptions) -> str:
    """
    Render month, day and time, with the year when it differs from now.

    Args:
        date: Instant to render
        now: Reference instant
        options: Formatting options

    Returns:
        String like "Mar 15, 14:05" or "2023 Dec 25, 15:45"
    """
    tz = options.get_timezone()
    local = to_local(date, date, tz)
    time_str = local.strftime(time_format(options))
    month = local.strftime("%b")

    if is_same_year(date, now, tz):
        return f"{month} {local.day}, {time_str}"
    return f"{local.year:04d} {month} {local.day}, {time_str}"


def format_date(
    timestamp: Timestamp,
    options: Union[FormatOptions, Mapping[str, Any], bool, None] = None,
    *,
    now: Optional[datetime] = None,
) -> str:
    """
    Convert a timestamp to an easy-to-read string.

    Args:
        timestamp: datetime, milliseconds since epoch, or nanoseconds since epoch as a string
        options: FormatOptions, a mapping of option flags, or a bool meaning ``full``
        now: Reference instant; defaults to the current time

    Returns:
        String like "just now", "2 minutes ago", "Yesterday at 14:05", "Mar 13, 10:30"

    Raises:
        InvalidTimestamp: If the timestamp cannot be parsed or displayed in the timezone
    """
    if is_absent(timestamp):
        return ""

    options = FormatOptions.coerce(options)
    date = to_datetime(timestamp)

    # Read the clock once so every comparison below agrees
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    tz = options.get_timezone()
    local = to_local(timestamp, date, tz)

    # Full date on request, and for anything in the future
    if options.full or date > now:
        logger.rule_applied("full_date")
        return full_date(date, now, options)

    diff_seconds = (now - date) // timedelta(seconds=1)
    diff_minutes = diff_seconds // 60

    if diff_seconds < settings.JUST_NOW_SECONDS:
        logger.rule_applied("just_now", diff_seconds)
        return "just now"
    if diff_seconds < settings.MOMENT_AGO_SECONDS:
        logger.rule_applied("moment_ago", diff_seconds)
        return "a moment ago"
    if diff_minutes < settings.RELATIVE_MINUTES:
        logger.rule_applied("minutes_ago", diff_seconds)
        if diff_minutes == 1:
            return "a minute ago"
        return f"{diff_minutes} minutes ago"

    time_str = local.strftime(time_format(options))
    yesterday = now.astimezone(tz).date() - timedelta(days=1)

    if is_same_day(date, now, tz):
        logger.rule_applied("today", diff_seconds)
        if options.today:
            return f"Today at {time_str}"
        return time_str
    if local.date() == yesterday:
        logger.rule_applied("yesterday", diff_seconds)
        return f"Yesterday at {time_str}"

    logger.rule_applied("full_date", diff_seconds)
    return full_date(date, now, options)
