"""Tests for the Jinja2 template filters."""

from datetime import datetime, timedelta, timezone

from jinja2 import Environment

from friendly_dates.filters import friendly_date, register_filters


class _Templates:
    """Stand-in for a templates wrapper that exposes its environment as .env"""

    def __init__(self):
        self.env = Environment()


def recent(minutes: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(minutes=minutes)


class TestRegisterFilters:
    def test_environment(self):
        env = Environment()
        assert register_filters(env) is env
        assert env.filters["friendly_date"] is friendly_date

    def test_templates_wrapper(self):
        templates = _Templates()
        assert register_filters(templates) is templates.env
        assert "friendly_date" in templates.env.filters


class TestFriendlyDateFilter:
    def test_renders_in_template(self):
        env = register_filters(Environment())
        template = env.from_string("{{ ts | friendly_date }}")
        assert template.render(ts=recent(2)) == "2 minutes ago"

    def test_options_as_keywords(self):
        env = register_filters(Environment())
        template = env.from_string("{{ ts | friendly_date(full=True) }}")
        assert template.render(ts=datetime(2020, 5, 17, 9, 3, 4)) == "2020 May 17, 09:03:04"

    def test_empty_value(self):
        assert friendly_date(None) == ""

    def test_malformed_value_renders_raw(self):
        assert friendly_date("not-a-timestamp") == "not-a-timestamp"
