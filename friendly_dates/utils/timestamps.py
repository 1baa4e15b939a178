"""
Timestamp normalization.

A timestamp reaches the formatter in one of three shapes:

- a ``datetime`` (naive values are read as UTC),
- a number of milliseconds since the epoch,
- a string holding a number of nanoseconds since the epoch.

Nanosecond counts routinely exceed what a float can hold exactly, so string
input is parsed with ``int`` and reduced to milliseconds by integer division.
"""

import math
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Union

from friendly_dates.errors import InvalidTimestamp
from friendly_dates.utils.app_logger import logger

Timestamp = Union[datetime, int, float, str]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
NANOS_PER_MILLI = 1_000_000

# ASCII digits only: int() would also take "1_000" and non-ASCII digits
NANOS_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


def is_absent(timestamp) -> bool:
    """True for the empty inputs (None, 0, "") that render as an empty string"""
    return not timestamp


def nanos_to_millis(nanos: int) -> int:
    """Convert nanoseconds to milliseconds, truncating toward zero."""
    millis = abs(nanos) // NANOS_PER_MILLI
    return millis if nanos >= 0 else -millis


def _from_millis(timestamp, millis: int) -> datetime:
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise _reject(timestamp, "outside the supported date range") from e


def _reject(timestamp, reason: str) -> InvalidTimestamp:
    logger.timestamp_rejected(timestamp, reason)
    return InvalidTimestamp(timestamp, reason)


def to_datetime(timestamp: Timestamp) -> datetime:
    """
    Resolve a timestamp to a timezone-aware datetime.

    Args:
        timestamp: datetime, milliseconds since epoch, or nanoseconds since epoch as a string

    Returns:
        Aware datetime for the same instant

    Raises:
        InvalidTimestamp: If the value has an unsupported type or cannot be parsed
    """
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            return timestamp.replace(tzinfo=timezone.utc)
        return timestamp

    # bool is an int subclass but never a meaningful instant
    if isinstance(timestamp, bool):
        raise _reject(timestamp, "booleans are not timestamps")

    if isinstance(timestamp, int):
        return _from_millis(timestamp, timestamp)

    if isinstance(timestamp, float):
        if not math.isfinite(timestamp):
            raise _reject(timestamp, "milliseconds must be finite")
        return _from_millis(timestamp, math.trunc(timestamp))

    if isinstance(timestamp, str):
        if not NANOS_PATTERN.fullmatch(timestamp):
            raise _reject(timestamp, "expected an integer count of nanoseconds")
        try:
            nanos = int(timestamp)
        except ValueError as e:
            raise _reject(timestamp, "expected an integer count of nanoseconds") from e
        return _from_millis(timestamp, nanos_to_millis(nanos))

    raise _reject(timestamp, f"unsupported type {type(timestamp).__name__}")


def to_local(timestamp: Timestamp, date: datetime, tz: tzinfo) -> datetime:
    """
    Convert a resolved timestamp to the display timezone.

    Raises:
        InvalidTimestamp: If the shifted value leaves the supported date range
    """
    try:
        return date.astimezone(tz)
    except OverflowError as e:
        raise _reject(timestamp, "outside the supported date range") from e
