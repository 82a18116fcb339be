"""
Usage Profiles for Synthetic Espresso Telemetry

Describes how a typical home espresso machine is used over a day and
a week: when shots are pulled, how many per day type, and how much
power the machine draws in each phase of a usage session.

All weighted choices are expressed as branch tables: ordered lists of
(threshold, outcome) pairs. A uniform draw u in [0, 1) selects the
first outcome whose threshold is greater than u. Keeping the tables
as data makes every probability visible in one place and lets tests
drive a specific branch by injecting a scripted random source.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Protocol, Sequence, Tuple, TypeVar


T = TypeVar("T")


class RandomSource(Protocol):
    """Subset of random.Random used by the synthesizer."""

    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...

    def randint(self, a: int, b: int) -> int: ...


# =========================================
# Bands and Branch Tables
# =========================================

@dataclass(frozen=True)
class Band:
    """Closed numeric range sampled uniformly."""
    low: float
    high: float

    def draw(self, rng: RandomSource) -> float:
        if self.low == self.high:
            return self.low
        return rng.uniform(self.low, self.high)


@dataclass(frozen=True)
class PowerBand:
    """
    Average and peak wattage ranges for one machine state.

    The peak band always sits at or above the average band, so a
    sample drawn from one PowerBand satisfies max >= avg.
    """
    name: str
    avg: Band
    max: Band


BranchTable = Sequence[Tuple[float, T]]


def pick_branch(table: BranchTable, u: float) -> T:
    """
    Select the outcome of a branch table for a uniform draw.

    Args:
        table: (threshold, outcome) pairs in ascending threshold order
        u: Uniform draw in [0, 1)

    Returns:
        The first outcome whose threshold exceeds u (the last outcome
        if none does)
    """
    for threshold, outcome in table:
        if u < threshold:
            return outcome
    return table[-1][1]


# =========================================
# Calendar
# =========================================

class DayType(Enum):
    """Calendar classes with distinct usage habits."""
    WEEKDAY = "weekday"
    FRIDAY = "friday"
    WEEKEND = "weekend"


def classify_day(day: date) -> DayType:
    """Classify a calendar day (Saturday and Sunday are weekend)."""
    weekday = day.weekday()
    if weekday >= 5:
        return DayType.WEEKEND
    if weekday == 4:
        return DayType.FRIDAY
    return DayType.WEEKDAY


# Inclusive shot-count ranges for individual brew events
BREW_SHOTS_TODAY: Tuple[int, int] = (3, 5)
BREW_SHOTS_BY_DAY: Dict[DayType, Tuple[int, int]] = {
    DayType.WEEKEND: (4, 7),   # more relaxed, more time
    DayType.FRIDAY: (3, 5),
    DayType.WEEKDAY: (2, 5),
}

# Inclusive base shot counts for daily summaries
DAILY_BASE_SHOTS: Dict[DayType, Tuple[int, int]] = {
    DayType.WEEKEND: (4, 6),
    DayType.FRIDAY: (3, 4),
    DayType.WEEKDAY: (2, 4),
}


# =========================================
# Time of Day
# =========================================

# Hours that commonly see a shot (morning rush, lunch, afternoon, evening)
TYPICAL_BREW_HOURS: Tuple[float, ...] = (
    6.5, 7, 7.5, 8, 8.5, 9,
    12, 12.5, 13,
    14, 14.5, 15, 15.5, 16,
    17, 17.5, 18, 18.5, 19,
)


@dataclass(frozen=True)
class BrewWindow:
    """Time-of-day window in fractional hours; None means pick a typical hour."""
    name: str
    hours: Optional[Band]


BREW_WINDOWS: BranchTable = (
    (0.40, BrewWindow("morning", Band(6.5, 9.0))),
    (0.60, BrewWindow("early_afternoon", Band(14.0, 16.0))),
    (0.85, BrewWindow("evening", Band(17.0, 19.0))),
    (1.00, BrewWindow("typical_hour", None)),
)

# Typical shots per hour of day, peaking 07:00-09:00
HOURLY_PATTERN: Dict[int, int] = {
    6: 3, 7: 12, 8: 15, 9: 8, 10: 4, 11: 2, 12: 3, 13: 2,
    14: 5, 15: 7, 16: 4, 17: 3, 18: 4, 19: 2, 20: 1,
}

WEEKDAY_NAMES: Tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


# =========================================
# Brew Parameters
# =========================================

DURATION_MS = (25000, 34999)
DOSE_GRAMS = Band(17.0, 21.0)
BREW_RATIO = Band(1.8, 2.5)
PEAK_PRESSURE_BAR = Band(8.2, 10.0)
AVG_TEMPERATURE_C = Band(92.5, 96.0)
AVG_FLOW_RATE_GPS = Band(1.8, 3.0)

RATED_PROBABILITY = 0.25
HIGH_RATING_PROBABILITY = 0.8


# =========================================
# Power States
# =========================================

ACTIVE_BREWING = PowerBand("active_brewing", Band(1200, 1700), Band(1800, 2200))
IDLE_HOT = PowerBand("idle_hot", Band(250, 450), Band(500, 750))
COOLING = PowerBand("cooling", Band(100, 200), Band(250, 400))
NIGHT_STANDBY = PowerBand("night_standby", Band(1, 3), Band(3, 6))
ACTIVITY_SPIKE = PowerBand("activity_spike", Band(150, 300), Band(300, 500))
BASELINE_STANDBY = PowerBand("standby", Band(2, 2), Band(5, 5))


def session_branch_table(intensity: float) -> BranchTable:
    """Power states after warm-up for a session of the given intensity."""
    return (
        (intensity * 0.6, ACTIVE_BREWING),
        (intensity, IDLE_HOT),
        (1.0, COOLING),
    )


@dataclass(frozen=True)
class WarmUpTaper:
    """
    Heater draw while the boiler comes up to temperature.

    Power falls linearly from the start to the end level over the
    warm-up window; noise is added on top and is never negative.
    """
    minutes: float = 20.0
    avg_start: float = 1400.0
    avg_end: float = 1000.0
    avg_noise: float = 300.0
    max_start: float = 2000.0
    max_end: float = 1700.0
    max_noise: float = 200.0

    def draw(self, minutes_in: float, rng: RandomSource) -> Tuple[float, float]:
        progress = minutes_in / self.minutes
        avg = self.avg_start - progress * (self.avg_start - self.avg_end)
        avg += rng.uniform(0, self.avg_noise)
        peak = self.max_start - progress * (self.max_start - self.max_end)
        peak += rng.uniform(0, self.max_noise)
        return avg, peak


@dataclass(frozen=True)
class UsageSession:
    """A daily period during which the machine is switched on."""
    start_hour: float
    duration_hours: float
    intensity: float

    def contains(self, hour_of_day: float) -> bool:
        return self.start_hour <= hour_of_day < self.start_hour + self.duration_hours

    def minutes_into(self, hour_of_day: float) -> float:
        return (hour_of_day - self.start_hour) * 60


DEFAULT_SESSIONS: Tuple[UsageSession, ...] = (
    UsageSession(6.5, 2.5, 0.8),    # Morning: 06:30-09:00
    UsageSession(14.0, 2.0, 0.5),   # Afternoon: 14:00-16:00
    UsageSession(18.0, 2.0, 0.6),   # Evening: 18:00-20:00
)


@dataclass
class UsageProfile:
    """
    Tunables for a synthetic household.

    Defaults describe one espresso drinker with a morning routine,
    an afternoon pick-me-up and an evening shot.
    """
    sessions: List[UsageSession] = field(default_factory=lambda: list(DEFAULT_SESSIONS))
    warm_up: WarmUpTaper = field(default_factory=WarmUpTaper)

    brew_history_days: int = 21
    daily_history_days: int = 30
    power_sample_count: int = 288
    power_interval_seconds: int = 300

    empty_brew_day_probability: float = 0.05
    empty_daily_probability: float = 0.10
    activity_spike_probability: float = 0.08

    # Hours in [night_start, 24) or [0, night_end) are machine-off hours
    night_start_hour: float = 22.0
    night_end_hour: float = 5.0

    def session_at(self, hour_of_day: float) -> Optional[UsageSession]:
        """Return the first session covering the hour, if any."""
        for session in self.sessions:
            if session.contains(hour_of_day):
                return session
        return None

    def is_night(self, hour_of_day: float) -> bool:
        return hour_of_day >= self.night_start_hour or hour_of_day < self.night_end_hour

    def off_schedule_table(self) -> BranchTable:
        return (
            (self.activity_spike_probability, ACTIVITY_SPIKE),
            (1.0, BASELINE_STANDBY),
        )
