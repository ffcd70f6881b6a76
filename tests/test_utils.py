"""Tests for utility functions (tick conversions)."""

from datetime import datetime, timedelta, timezone

import pytest

from tabster_data.utils import datetime_to_ticks, ticks_to_datetime, utcnow


class TestTickConversions:
    """Test datetime <-> tick conversions."""

    def test_unix_epoch(self):
        """Test the well-known tick count of 1970-01-01."""
        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert datetime_to_ticks(epoch) == 621355968000000000

    def test_minimum(self):
        assert datetime_to_ticks(datetime(1, 1, 1, tzinfo=timezone.utc)) == 0
        assert ticks_to_datetime(0) == datetime(1, 1, 1, tzinfo=timezone.utc)

    def test_round_trip_conversion(self):
        """Test that converting back and forth preserves microseconds."""
        test_dates = [
            datetime(2000, 1, 1, tzinfo=timezone.utc),
            datetime(2013, 7, 4, 18, 30, 45, 999999, tzinfo=timezone.utc),
            datetime(2024, 12, 25, 18, 0, 0, 1, tzinfo=timezone.utc),
        ]
        for value in test_dates:
            assert ticks_to_datetime(datetime_to_ticks(value)) == value

    def test_other_timezone_normalised(self):
        value = datetime(2020, 6, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert ticks_to_datetime(datetime_to_ticks(value)) == datetime(2020, 6, 1, 10, 0, tzinfo=timezone.utc)

    def test_sub_microsecond_dropped(self):
        assert ticks_to_datetime(15) == datetime(1, 1, 1, 0, 0, 0, 1, tzinfo=timezone.utc)

    def test_negative_ticks(self):
        with pytest.raises(ValueError):
            ticks_to_datetime(-1)

    def test_utcnow_is_aware(self):
        assert utcnow().tzinfo == timezone.utc
