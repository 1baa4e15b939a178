"""Shared fixtures for the formatter tests."""

import pytest

from friendly_dates.config import settings


@pytest.fixture
def legacy_thresholds(monkeypatch):
    """Relative phrasing windows of the older formatter (60 s, 3 min)."""
    monkeypatch.setattr(settings, "JUST_NOW_SECONDS", 60)
    monkeypatch.setattr(settings, "MOMENT_AGO_SECONDS", 60)
    monkeypatch.setattr(settings, "RELATIVE_MINUTES", 3)
