"""
Jinja2 template filters for rendering timestamps in pages.

Register once per templates object:

    templates = Jinja2Templates(directory="app/templates")
    register_filters(templates)

then use ``{{ message.timestamp | friendly_date(today=True) }}``.
"""

from typing import Any, Optional

from jinja2 import Environment

from friendly_dates.errors import InvalidTimestamp
from friendly_dates.models.options import FormatOptions
from friendly_dates.utils.time_formatting import format_date


def friendly_date(
    value: Any,
    full: bool = False,
    hour12: bool = False,
    today: bool = False,
    tz: Optional[str] = None,
) -> str:
    """
    Template filter wrapper around format_date.

    A malformed timestamp renders as its raw text instead of failing the page;
    the rejection is already logged by the normalizer.
    """
    options = FormatOptions(full=full, hour12=hour12, today=today, tz=tz)
    try:
        return format_date(value, options)
    except InvalidTimestamp:
        return str(value)


def register_filters(target) -> Environment:
    """
    Install the timestamp filters.

    Args:
        target: A jinja2 Environment, or a templates wrapper exposing one as ``.env``

    Returns:
        The environment the filters were added to
    """
    env = getattr(target, "env", target)
    env.filters["friendly_date"] = friendly_date
    return env
