"""Tests for CronBuilder and the built-in presets."""

import pytest

from quartzcron import CronBuilder, CronParseError, PRESETS, get_preset, list_presets
from quartzcron.presets import (
    BUSINESS_HOURS_15MIN,
    DAILY,
    END_OF_QUARTER,
    EVERY_SECOND,
    FIRST_MONDAY,
    LAST_FRIDAY,
    LAST_OF_MONTH,
    LAST_WEEKDAY_OF_MONTH,
    MAINTENANCE_WINDOW,
    MIDNIGHT,
    QUARTERLY,
    WEEKDAYS_9AM,
    WEEKLY,
)


# =============================================================================
# CronBuilder Tests
# =============================================================================


class TestCronBuilder:
    """Tests for fluent expression construction."""

    def test_default(self):
        """Test the default is every minute on second 0."""
        assert CronBuilder().to_string() == "0 * * * * ?"
        assert CronBuilder().build().second.values == (0,)

    def test_at_time(self):
        """Test at_time sets second, minute and hour."""
        expr = CronBuilder().at_time(9, 30).build()
        assert str(expr) == "0 30 9 * * ?"

    def test_weekdays(self):
        """Test on_weekdays clears day-of-month."""
        expr = CronBuilder().at_minute(0, 30).at_hour(9, 17).on_weekdays().build()
        assert str(expr) == "0 0,30 9,17 ? * MON-FRI"
        assert expr.day_of_month.is_unspecified

    def test_weekends(self):
        """Test on_weekends."""
        assert CronBuilder().on_weekends().build().day_of_week.values == (1, 7)

    def test_last_day_setter_wins(self):
        """Test the other day field becomes '?'."""
        builder = CronBuilder().on_days_of_month(1, 15).on_days_of_week("mon")
        assert builder.to_string() == "0 * * ? * MON"
        builder.on_days_of_month(1)
        assert builder.to_string() == "0 * * 1 * ?"

    def test_steps(self):
        """Test every_* helpers."""
        expr = CronBuilder().every_seconds(15).every_minutes(10, start=5).build()
        assert expr.second.values == (0, 15, 30, 45)
        assert expr.minute.values == (5, 15, 25, 35, 45, 55)

    def test_every_hours(self):
        """Test every_hours pins the minute."""
        expr = CronBuilder().every_hours(6).build()
        assert expr.minute.values == (0,)
        assert expr.hour.values == (0, 6, 12, 18)

    def test_last_day_of_month(self):
        """Test with and without an offset."""
        assert CronBuilder().on_last_day_of_month().build().markers.last_day_of_month
        assert CronBuilder().on_last_day_of_month(2).build().markers.last_day_offset == 2

    def test_nearest_weekday(self):
        """Test on_nearest_weekday."""
        expr = CronBuilder().on_nearest_weekday(15).build()
        assert expr.day_of_month.values == (15,)
        assert expr.markers.nearest_weekday

    def test_nth_and_last_day_of_week(self):
        """Test '#' and 'L' weekday helpers."""
        assert CronBuilder().on_nth_day_of_week("mon", 2).build().markers.nth_day_of_week == 2
        assert CronBuilder().on_last_day_of_week(6).build().markers.last_day_of_week

    def test_months_and_years(self):
        """Test in_months and in_years."""
        builder = CronBuilder().in_months("jan", 7).in_years(2030, 2031)
        assert builder.to_string() == "0 * * * JAN,7 ? 2030,2031"
        expr = builder.build()
        assert expr.month.values == (1, 7)
        assert expr.year.values == (2030, 2031)

    def test_every_day(self):
        """Test every_day resets both day fields."""
        builder = CronBuilder().on_days_of_week(2).every_day()
        assert builder.to_string() == "0 * * * * ?"

    def test_empty_values(self):
        """Test setters need at least one value."""
        with pytest.raises(ValueError):
            CronBuilder().at_hour()

    def test_invalid_build(self):
        """Test invalid values surface as parse errors."""
        with pytest.raises(CronParseError):
            CronBuilder().at_hour(25).build()


# =============================================================================
# Preset Tests
# =============================================================================


class TestPresets:
    """Tests for preset expressions."""

    def test_aliases(self):
        """Test alias presets are the same object."""
        assert MIDNIGHT is DAILY
        assert get_preset("annually") is get_preset("yearly")

    def test_preset_values(self):
        """Test a sample of preset field sets."""
        assert WEEKLY.day_of_week.values == (1,)
        assert WEEKDAYS_9AM.day_of_week.values == (2, 3, 4, 5, 6)
        assert BUSINESS_HOURS_15MIN.minute.values == (0, 15, 30, 45)
        assert EVERY_SECOND.second.is_wildcard
        assert QUARTERLY.month.values == (1, 4, 7, 10)
        assert MAINTENANCE_WINDOW.hour.values == (0, 1, 2, 22, 23)

    def test_marker_presets(self):
        """Test presets built on 'L', 'W' and '#'."""
        assert LAST_OF_MONTH.markers.last_day_of_month
        assert LAST_WEEKDAY_OF_MONTH.markers.nearest_weekday
        assert FIRST_MONDAY.markers.nth_day_of_week == 1
        assert LAST_FRIDAY.markers.last_day_of_week
        assert END_OF_QUARTER.markers.last_day_of_month

    def test_every_preset_has_one_day_field_unspecified(self):
        """Test presets respect day-field exclusivity."""
        for expr in PRESETS.values():
            assert expr.day_of_month.is_unspecified != expr.day_of_week.is_unspecified

    def test_get_preset(self):
        """Test lookup is case-insensitive and accepts dashes."""
        assert get_preset("DAILY") is DAILY
        assert get_preset("weekdays-9am") is WEEKDAYS_9AM
        assert get_preset("fortnightly") is None

    def test_list_presets(self):
        """Test listing names."""
        names = list_presets()
        assert "daily" in names
        assert len(names) == len(PRESETS)
