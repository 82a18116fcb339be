"""
Tests for Static Demo Content

Run with: pytest tests/test_demo_content.py -v
"""

from datetime import datetime
from engine.demo_content import (
    EVERY_DAY_MASK,
    WEEKDAYS_MASK,
    WEEKEND_MASK,
    get_demo_logs,
    get_demo_schedules,
    schedule_days,
)


NOW = 1_718_193_600


class TestDemoLogs:
    """Tests for the demo log sequence."""

    def setup_method(self):
        self.logs = get_demo_logs(now=NOW)

    def test_oldest_first(self):
        ids = [log["id"] for log in self.logs]

        assert len(ids) == 10
        assert ids == sorted(ids)

    def test_anchored_to_now(self):
        assert self.logs[0]["id"] == (NOW - 300) * 1000
        assert self.logs[-1]["id"] == (NOW - 10) * 1000

    def test_time_matches_id(self):
        for log in self.logs:
            parsed = datetime.fromisoformat(log["time"])
            assert int(parsed.timestamp() * 1000) == log["id"]

    def test_sources(self):
        assert {log["source"] for log in self.logs} == {"esp32", "pico"}
        assert self.logs[0]["message"] == "Machine powered on"


class TestDemoSchedules:
    """Tests for demo schedules and day masks."""

    def test_schedules(self):
        data = get_demo_schedules()

        assert len(data["schedules"]) == 3
        assert data["autoPowerOffEnabled"] is True
        assert data["autoPowerOffMinutes"] == 120
        assert [s["action"] for s in data["schedules"]] == ["on", "on", "off"]

    def test_schedule_days(self):
        assert schedule_days(WEEKDAYS_MASK) == ["Mon", "Tue", "Wed", "Thu", "Fri"]
        assert schedule_days(WEEKEND_MASK) == ["Sun", "Sat"]
        assert len(schedule_days(EVERY_DAY_MASK)) == 7
        assert schedule_days(0) == []
