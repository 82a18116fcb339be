"""
Synthetic Telemetry Generator for an Espresso Machine

Generates a plausible, internally consistent set of usage data for
demo mode, when no real machine is connected.

Features:
- Brew history over the last 3 weeks with day-type habits
- 24 hours of 5-minute power samples with warm-up, brewing, idle
  and standby phases
- 30 days of daily rollups
- Weekly and hourly shot distributions
- A multi-period statistics snapshot
- Export to JSON or CSV

Every collection is regenerated on each call. Nothing here performs
I/O except the optional export helpers.
"""

import csv
import io
import json
import math
import random
import time
from datetime import date, datetime, time as dt_time, timedelta, tzinfo
from typing import Any, Callable, Dict, List, Optional, Sequence

from .profiles import (
    AVG_FLOW_RATE_GPS,
    AVG_TEMPERATURE_C,
    BREW_RATIO,
    BREW_SHOTS_BY_DAY,
    BREW_SHOTS_TODAY,
    BREW_WINDOWS,
    DAILY_BASE_SHOTS,
    DOSE_GRAMS,
    DURATION_MS,
    HIGH_RATING_PROBABILITY,
    HOURLY_PATTERN,
    NIGHT_STANDBY,
    PEAK_PRESSURE_BAR,
    RATED_PROBABILITY,
    TYPICAL_BREW_HOURS,
    WEEKDAY_NAMES,
    DayType,
    RandomSource,
    UsageProfile,
    classify_day,
    pick_branch,
    session_branch_table,
)
from .records import (
    BrewRecord,
    DailySummary,
    ExtendedStats,
    HourlyPoint,
    LifetimeStats,
    MaintenanceCounters,
    PeriodStats,
    PowerSample,
    Statistics,
    WeeklyPoint,
)

DAY = 86400
HOUR = 3600

# Today's bar on the weekly chart shows the live count
TODAY_WEEKLY_SHOTS = 3


class TelemetrySynthesizer:
    """
    Generator for synthetic espresso-machine telemetry.

    The only inputs are the clock and a random source. Both can be
    injected, which makes every branch reachable from tests:

    - rng: any object with random(), uniform() and randint()
    - clock: callable returning epoch seconds
    - tz: calendar used for hour-of-day and midnight (local if None)

    Example:
        synth = TelemetrySynthesizer()
        brews = synth.generate_brew_history()
        power = synth.generate_power_history()

        # Reproducible data for screenshots
        synth = TelemetrySynthesizer(random_seed=42)
        bundle = synth.generate_extended_stats().to_dict()
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        random_seed: Optional[int] = None,
        clock: Callable[[], float] = time.time,
        tz: Optional[tzinfo] = None,
        profile: Optional[UsageProfile] = None
    ):
        """
        Initialize the synthesizer.

        Args:
            rng: Random source (a new random.Random if None)
            random_seed: Seed for the default random source
            clock: Wall-clock function returning epoch seconds
            tz: Time zone for calendar calculations
            profile: Usage profile (uses defaults if None)
        """
        self.rng = rng if rng is not None else random.Random(random_seed)
        self.clock = clock
        self.tz = tz
        self.profile = profile or UsageProfile()

    # =========================================
    # Brew History
    # =========================================

    def generate_brew_history(self) -> List[BrewRecord]:
        """
        Generate individual brews over the trailing days, newest first.

        Each brew's time of day is an offset from the same clock time
        one day earlier, plus up to an hour of jitter either way. That
        keeps every timestamp inside the window and in the past.

        Returns:
            Non-empty list of BrewRecord sorted by timestamp descending
        """
        rng = self.rng
        now = self._now()
        today = self._local(now).date()
        brews: List[BrewRecord] = []

        for days_ago in range(self.profile.brew_history_days):
            day_type = classify_day(today - timedelta(days=days_ago))

            if days_ago == 0:
                low, high = BREW_SHOTS_TODAY
            else:
                low, high = BREW_SHOTS_BY_DAY[day_type]
            num_brews = rng.randint(low, high)

            # Some days see no coffee at all, but never today
            if days_ago > 0 and rng.random() < self.profile.empty_brew_day_probability:
                continue

            for _ in range(num_brews):
                brew_hour = self._draw_brew_hour()
                jitter = int(rng.uniform(-HOUR, HOUR))
                timestamp = now - (days_ago + 1) * DAY + int(brew_hour * HOUR) + jitter
                brews.append(self._draw_brew(timestamp))

        brews.sort(key=lambda b: b.timestamp, reverse=True)
        return brews

    def _draw_brew_hour(self) -> float:
        window = pick_branch(BREW_WINDOWS, self.rng.random())
        if window.hours is not None:
            return window.hours.draw(self.rng)
        return TYPICAL_BREW_HOURS[self.rng.randint(0, len(TYPICAL_BREW_HOURS) - 1)]

    def _draw_brew(self, timestamp: int) -> BrewRecord:
        rng = self.rng

        duration_ms = rng.randint(*DURATION_MS)
        dose = round(DOSE_GRAMS.draw(rng), 1)
        ratio = round(BREW_RATIO.draw(rng), 1)

        rating = 0
        if rng.random() < RATED_PROBABILITY:
            if rng.random() < HIGH_RATING_PROBABILITY:
                rating = rng.randint(4, 5)
            else:
                rating = 3

        return BrewRecord(
            timestamp=timestamp,
            duration_ms=duration_ms,
            dose_weight=dose,
            yield_weight=round(dose * ratio, 1),
            ratio=ratio,
            peak_pressure=round(PEAK_PRESSURE_BAR.draw(rng), 1),
            avg_temperature=round(AVG_TEMPERATURE_C.draw(rng), 1),
            avg_flow_rate=round(AVG_FLOW_RATE_GPS.draw(rng), 1),
            rating=rating,
        )

    # =========================================
    # Power History
    # =========================================

    def generate_power_history(self) -> List[PowerSample]:
        """
        Generate power samples for the trailing 24 hours, oldest first.

        Returns:
            Exactly profile.power_sample_count samples, the last one at now
        """
        profile = self.profile
        interval = profile.power_interval_seconds
        now = self._now()
        samples: List[PowerSample] = []

        for i in range(profile.power_sample_count - 1, -1, -1):
            timestamp = now - i * interval
            local = self._local(timestamp)
            hour_of_day = local.hour + local.minute / 60

            avg_watts, max_watts = self._draw_power(hour_of_day)

            avg_watts = round(avg_watts)
            max_watts = max(round(max_watts), avg_watts)

            samples.append(PowerSample(
                timestamp=timestamp,
                avg_watts=avg_watts,
                max_watts=max_watts,
                kwh_consumed=round(avg_watts * interval / 3_600_000, 4),
            ))

        return samples

    def _draw_power(self, hour_of_day: float):
        rng = self.rng
        profile = self.profile

        session = profile.session_at(hour_of_day)
        if session is not None:
            minutes_in = session.minutes_into(hour_of_day)
            if minutes_in < profile.warm_up.minutes:
                return profile.warm_up.draw(minutes_in, rng)
            band = pick_branch(session_branch_table(session.intensity), rng.random())
        elif profile.is_night(hour_of_day):
            band = NIGHT_STANDBY
        else:
            band = pick_branch(profile.off_schedule_table(), rng.random())

        return band.avg.draw(rng), band.max.draw(rng)

    # =========================================
    # Daily History
    # =========================================

    def generate_daily_history(self) -> List[DailySummary]:
        """
        Generate daily rollups for the trailing days, oldest first.

        Returns:
            List of DailySummary; days without shots carry standby
            energy only and no brew time
        """
        rng = self.rng
        now = self._now()
        today = self._local(now).date()
        summaries: List[DailySummary] = []

        for days_ago in range(self.profile.daily_history_days):
            day = today - timedelta(days=days_ago)
            midnight = self._midnight(day)
            day_type = classify_day(day)

            low, high = DAILY_BASE_SHOTS[day_type]
            base_shots = rng.randint(low, high)

            no_usage = days_ago > 0 and rng.random() < self.profile.empty_daily_probability
            if no_usage:
                shot_count = 0
            else:
                # Today gets more activity
                shot_count = base_shots + (2 if days_ago == 0 else 0) + rng.randint(0, 1)

            if shot_count == 0:
                summaries.append(DailySummary(
                    date=midnight,
                    shot_count=0,
                    total_brew_time_ms=0,
                    avg_brew_time_ms=0,
                    total_kwh=round(0.05 + rng.uniform(0, 0.05), 2),
                    on_time_minutes=rng.randint(0, 19),  # brief accidental on
                    steam_cycles=0,
                ))
                continue

            summaries.append(self._draw_active_day(midnight, shot_count, day_type))

        summaries.reverse()
        return summaries

    def _draw_active_day(self, date: int, shot_count: int, day_type: DayType) -> DailySummary:
        rng = self.rng

        avg_brew_time_ms = 27000 + rng.randint(0, 5999)
        total_brew_time_ms = shot_count * avg_brew_time_ms

        # Warm-up and idle, per-shot heating, longer sessions
        base_kwh = rng.uniform(0.25, 0.40)
        per_shot_kwh = rng.uniform(0.06, 0.10)
        session_bonus = (shot_count - 4) * 0.02 if shot_count > 4 else 0
        total_kwh = base_kwh + shot_count * per_shot_kwh + session_bonus + rng.uniform(0, 0.15)

        warmup_minutes = rng.randint(15, 24)
        brew_minutes = math.ceil(total_brew_time_ms / 60000)
        idle_minutes = (shot_count - 1) * rng.randint(10, 19) if shot_count > 1 else 0
        on_time_minutes = warmup_minutes + brew_minutes + idle_minutes + rng.randint(0, 19)

        steam_probability = 0.6 if day_type == DayType.WEEKEND else 0.3
        if rng.random() < steam_probability:
            steam_cycles = rng.randint(1, 4 if shot_count > 3 else 2)
        else:
            steam_cycles = rng.randint(0, 1)

        return DailySummary(
            date=date,
            shot_count=shot_count,
            total_brew_time_ms=total_brew_time_ms,
            avg_brew_time_ms=avg_brew_time_ms,
            total_kwh=round(total_kwh, 2),
            on_time_minutes=on_time_minutes,
            steam_cycles=steam_cycles,
        )

    # =========================================
    # Distributions
    # =========================================

    def generate_weekly_data(self) -> List[WeeklyPoint]:
        """Shots per weekday, Monday first."""
        today = self._local(self._now()).weekday()
        points = []

        for index, name in enumerate(WEEKDAY_NAMES):
            if index == today:
                points.append(WeeklyPoint(name, TODAY_WEEKLY_SHOTS))
                continue
            base_shots = 5 if index >= 5 else 3
            points.append(WeeklyPoint(name, max(1, base_shots + self.rng.randint(-1, 1))))

        return points

    def generate_hourly_distribution(self) -> List[HourlyPoint]:
        """Typical shots per hour of day (0-23)."""
        return [
            HourlyPoint(hour, max(0, HOURLY_PATTERN.get(hour, 0) + self.rng.randint(-1, 1)))
            for hour in range(24)
        ]

    # =========================================
    # Statistics Snapshot
    # =========================================

    def generate_statistics(self) -> Statistics:
        """Fixed plausible statistics, with timestamps relative to now."""
        now = self._now()

        return Statistics(
            lifetime=LifetimeStats(
                total_shots=1247,
                total_steam_cycles=234,
                total_kwh=89.3,
                total_on_time_minutes=15420,
                total_brew_time_ms=35539500,
                avg_brew_time_ms=28500,
                min_brew_time_ms=18000,
                max_brew_time_ms=42000,
                first_shot_timestamp=now - 180 * DAY,
            ),
            daily=PeriodStats(3, 85500, 28500, 26000, 31000, 0.95),
            weekly=PeriodStats(28, 798000, 28500, 22000, 35000, 7.2),
            monthly=PeriodStats(124, 3534000, 28500, 21000, 38000, 28.5),
            maintenance=MaintenanceCounters(
                shots_since_backflush=45,
                shots_since_group_clean=12,
                shots_since_descale=145,
                last_backflush_timestamp=now - 7 * DAY,
                last_group_clean_timestamp=now - 2 * DAY,
                last_descale_timestamp=now - 30 * DAY,
            ),
            session_shots=3,
            session_start_timestamp=now - 45 * 60,
        )

    def generate_extended_stats(self) -> ExtendedStats:
        """Generate every synthetic view as one bundle."""
        return ExtendedStats(
            stats=self.generate_statistics(),
            weekly=self.generate_weekly_data(),
            hourly_distribution=self.generate_hourly_distribution(),
            brew_history=self.generate_brew_history(),
            power_history=self.generate_power_history(),
            daily_history=self.generate_daily_history(),
        )

    # =========================================
    # Time Helpers
    # =========================================

    def _now(self) -> int:
        return int(self.clock())

    def _local(self, timestamp: int) -> datetime:
        return datetime.fromtimestamp(timestamp, tz=self.tz)

    def _midnight(self, day: date) -> int:
        # Naive when tz is None; timestamp() then reads it as local time
        return int(datetime.combine(day, dt_time(), tzinfo=self.tz).timestamp())


# =========================================
# Export Helpers
# =========================================

def records_to_json(
    records: Sequence[Any],
    filepath: Optional[str] = None,
    indent: int = 2
) -> str:
    """
    Serialize records (anything with to_dict()) as JSON.

    Args:
        records: Generated records
        filepath: Optional file path to save JSON
        indent: JSON indentation (default 2)

    Returns:
        JSON string
    """
    json_str = json.dumps([r.to_dict() for r in records], indent=indent)

    if filepath:
        with open(filepath, 'w') as f:
            f.write(json_str)

    return json_str


def records_to_csv(records: Sequence[Any], filepath: Optional[str] = None) -> str:
    """
    Serialize records as CSV with wire-name headers.

    Args:
        records: Generated records
        filepath: Optional file path to save CSV

    Returns:
        CSV text (empty string when there are no records)
    """
    rows = [r.to_dict() for r in records]
    if not rows:
        return ""

    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(rows[0].keys()))
    writer.writeheader()
    writer.writerows(rows)
    csv_text = buffer.getvalue()

    if filepath:
        with open(filepath, 'w', newline='') as f:
            f.write(csv_text)

    return csv_text


# =========================================
# Convenience Functions
# =========================================

def get_demo_extended_stats(random_seed: Optional[int] = None) -> Dict[str, Any]:
    """
    Generate the complete demo bundle in wire format.

    Args:
        random_seed: Optional seed for reproducible output

    Returns:
        {stats, weekly, hourlyDistribution, brewHistory, powerHistory, dailyHistory}
    """
    return TelemetrySynthesizer(random_seed=random_seed).generate_extended_stats().to_dict()
