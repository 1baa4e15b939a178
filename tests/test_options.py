"""Tests for the formatting options model."""

from datetime import timedelta, timezone

import pytest
from pydantic import ValidationError

from friendly_dates.models.options import FormatOptions


class TestCoerce:
    def test_none_gives_defaults(self):
        options = FormatOptions.coerce(None)
        assert (options.full, options.hour12, options.today) == (False, False, False)
        assert options.tz is None

    def test_boolean_is_full(self):
        assert FormatOptions.coerce(True).full is True
        assert FormatOptions.coerce(False).full is False

    def test_mapping(self):
        options = FormatOptions.coerce({"hour12": True, "today": True})
        assert options.hour12 and options.today
        assert not options.full

    def test_instance_passes_through(self):
        options = FormatOptions(full=True)
        assert FormatOptions.coerce(options) is options

    def test_options_are_immutable(self):
        options = FormatOptions()
        with pytest.raises(ValidationError):
            options.full = True


class TestTimezone:
    def test_defaults_to_display_timezone(self):
        assert FormatOptions().get_timezone() == timezone.utc

    def test_tzinfo_instance(self):
        tz = timezone(timedelta(hours=-5))
        assert FormatOptions(tz=tz).get_timezone() is tz

    def test_utc_name(self):
        assert FormatOptions(tz="utc").get_timezone() == timezone.utc

    def test_unknown_name_rejected(self):
        with pytest.raises(ValidationError):
            FormatOptions(tz="Mars/Olympus_Mons")


class TestStrictInput:
    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            FormatOptions.coerce({"ful": True})

    def test_non_mapping_rejected(self):
        with pytest.raises(ValidationError):
            FormatOptions.coerce("full")
