"""
Tests for Usage Profiles

Run with: pytest tests/test_profiles.py -v
"""

import pytest
from datetime import date
from engine.profiles import (
    ACTIVE_BREWING,
    ACTIVITY_SPIKE,
    BASELINE_STANDBY,
    BREW_WINDOWS,
    COOLING,
    IDLE_HOT,
    Band,
    DayType,
    UsageProfile,
    WarmUpTaper,
    classify_day,
    pick_branch,
    session_branch_table,
)


class FixedRandom:
    """Random source pinned to the low end of every range."""

    def random(self):
        return 0.0

    def uniform(self, a, b):
        return a

    def randint(self, a, b):
        return a


class TestPickBranch:
    """Tests for branch-table selection."""

    def setup_method(self):
        self.table = ((0.4, "a"), (0.6, "b"), (1.0, "c"))

    def test_first_branch(self):
        assert pick_branch(self.table, 0.0) == "a"
        assert pick_branch(self.table, 0.399) == "a"

    def test_threshold_is_exclusive(self):
        """A draw equal to a threshold falls into the next branch."""
        assert pick_branch(self.table, 0.4) == "b"
        assert pick_branch(self.table, 0.6) == "c"

    def test_falls_back_to_last(self):
        assert pick_branch(self.table, 1.0) == "c"

    def test_brew_windows_cover_unit_interval(self):
        assert BREW_WINDOWS[-1][0] == 1.0
        thresholds = [t for t, _ in BREW_WINDOWS]
        assert thresholds == sorted(thresholds)


class TestClassifyDay:
    """Tests for calendar classification."""

    @pytest.mark.parametrize("day,expected", [
        (date(2024, 6, 8), DayType.WEEKEND),   # Saturday
        (date(2024, 6, 9), DayType.WEEKEND),   # Sunday
        (date(2024, 6, 7), DayType.FRIDAY),
        (date(2024, 6, 10), DayType.WEEKDAY),  # Monday
        (date(2024, 6, 13), DayType.WEEKDAY),  # Thursday
    ])
    def test_classify(self, day, expected):
        assert classify_day(day) == expected


class TestBands:
    """Tests for numeric bands and power states."""

    def test_degenerate_band_returns_low(self):
        assert Band(2, 2).draw(FixedRandom()) == 2

    def test_band_uses_uniform(self):
        assert Band(17.0, 21.0).draw(FixedRandom()) == 17.0

    @pytest.mark.parametrize("band", [ACTIVE_BREWING, IDLE_HOT, COOLING,
                                      ACTIVITY_SPIKE, BASELINE_STANDBY])
    def test_peak_band_above_average_band(self, band):
        assert band.max.low >= band.avg.high

    def test_session_table_scales_with_intensity(self):
        table = session_branch_table(0.8)

        assert table[0][0] == pytest.approx(0.48)
        assert table[0][1] == ACTIVE_BREWING
        assert pick_branch(table, 0.5) == IDLE_HOT
        assert pick_branch(table, 0.8) == COOLING


class TestWarmUpTaper:
    """Tests for the warm-up power ramp."""

    def setup_method(self):
        self.taper = WarmUpTaper()

    def test_start_of_warm_up(self):
        avg, peak = self.taper.draw(0, FixedRandom())

        assert avg == pytest.approx(1400)
        assert peak == pytest.approx(2000)

    def test_halfway(self):
        avg, peak = self.taper.draw(10, FixedRandom())

        assert avg == pytest.approx(1200)
        assert peak == pytest.approx(1850)


class TestUsageProfile:
    """Tests for session lookup and night hours."""

    def setup_method(self):
        self.profile = UsageProfile()

    def test_morning_session(self):
        session = self.profile.session_at(7.0)

        assert session is not None
        assert session.start_hour == 6.5
        assert session.minutes_into(7.0) == pytest.approx(30)

    def test_session_end_is_exclusive(self):
        assert self.profile.session_at(9.0) is None
        assert self.profile.session_at(16.0) is None

    def test_outside_sessions(self):
        assert self.profile.session_at(11.0) is None

    def test_night_hours(self):
        assert self.profile.is_night(23.0)
        assert self.profile.is_night(4.9)
        assert not self.profile.is_night(5.0)
        assert not self.profile.is_night(21.9)

    def test_off_schedule_table(self):
        table = self.profile.off_schedule_table()

        assert pick_branch(table, 0.0) == ACTIVITY_SPIKE
        assert pick_branch(table, 0.08) == BASELINE_STANDBY
