"""
Tests for Chart Data Preparation

Run with: pytest tests/test_charts.py -v
"""

import pandas as pd
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from app.components.charts import records_to_frame, to_local_datetime


TOKYO = timezone(timedelta(hours=9))
NEW_YORK = ZoneInfo("America/New_York")


class TestLocalDatetime:
    """Epoch seconds are shown as wall-clock time, not UTC."""

    def test_midnight_east_of_utc_keeps_its_date(self):
        """Tokyo midnight is 15:00 the previous day in UTC."""
        midnight = int(datetime(2024, 6, 12, tzinfo=TOKYO).timestamp())

        result = to_local_datetime(pd.Series([midnight]), tz=TOKYO)

        assert result[0] == pd.Timestamp(2024, 6, 12)
        assert result.dt.date[0] == date(2024, 6, 12)

    def test_dst_midnights(self):
        midnights = [
            int(datetime(2024, 3, day, tzinfo=NEW_YORK).timestamp())
            for day in (9, 10, 11)
        ]

        result = to_local_datetime(pd.Series(midnights), tz=NEW_YORK)

        assert list(result.dt.date) == [date(2024, 3, 9), date(2024, 3, 10), date(2024, 3, 11)]
        assert (result.dt.hour == 0).all()

    def test_host_zone_by_default(self):
        midnight = int(datetime(2024, 6, 12).timestamp())

        assert to_local_datetime(pd.Series([midnight]))[0] == pd.Timestamp(2024, 6, 12)


class TestRecordsToFrame:
    """Tests for wire records to DataFrame conversion."""

    def test_daily_records(self):
        midnight = int(datetime(2024, 6, 12).timestamp())
        df = records_to_frame([{"date": midnight, "shotCount": 3}], time_key="date")

        assert df["time"].dt.date[0] == date(2024, 6, 12)
        assert df["shotCount"][0] == 3

    def test_empty(self):
        assert records_to_frame([]).empty
