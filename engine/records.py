"""
Synthetic Telemetry Records

Value objects produced by the synthesizer. Field names are Pythonic;
to_dict() emits the wire names used by the machine's stats API so the
REST layer and the dashboard can consume either form.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class BrewRecord:
    """One simulated extraction."""
    timestamp: int             # epoch seconds
    duration_ms: int
    dose_weight: float         # g
    yield_weight: float        # g
    ratio: float               # yield / dose
    peak_pressure: float       # bar
    avg_temperature: float     # °C
    avg_flow_rate: float       # g/s
    rating: int = 0            # 0 = unrated, else 1-5

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "durationMs": self.duration_ms,
            "doseWeight": self.dose_weight,
            "yieldWeight": self.yield_weight,
            "ratio": self.ratio,
            "peakPressure": self.peak_pressure,
            "avgTemperature": self.avg_temperature,
            "avgFlowRate": self.avg_flow_rate,
            "rating": self.rating,
        }


@dataclass(frozen=True)
class PowerSample:
    """One 5-minute power bucket."""
    timestamp: int
    avg_watts: int
    max_watts: int
    kwh_consumed: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "avgWatts": self.avg_watts,
            "maxWatts": self.max_watts,
            "kwhConsumed": self.kwh_consumed,
        }


@dataclass(frozen=True)
class DailySummary:
    """One calendar day's usage rollup."""
    date: int                  # local midnight, epoch seconds
    shot_count: int
    total_brew_time_ms: int
    avg_brew_time_ms: int
    total_kwh: float
    on_time_minutes: int
    steam_cycles: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "shotCount": self.shot_count,
            "totalBrewTimeMs": self.total_brew_time_ms,
            "avgBrewTimeMs": self.avg_brew_time_ms,
            "totalKwh": self.total_kwh,
            "onTimeMinutes": self.on_time_minutes,
            "steamCycles": self.steam_cycles,
        }


@dataclass(frozen=True)
class WeeklyPoint:
    day: str
    shots: int

    def to_dict(self) -> Dict[str, Any]:
        return {"day": self.day, "shots": self.shots}


@dataclass(frozen=True)
class HourlyPoint:
    hour: int
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"hour": self.hour, "count": self.count}


# =========================================
# Statistics Snapshot
# =========================================

@dataclass(frozen=True)
class PeriodStats:
    """Shot and energy rollup for a day, week or month."""
    shot_count: int
    total_brew_time_ms: int
    avg_brew_time_ms: int
    min_brew_time_ms: int
    max_brew_time_ms: int
    total_kwh: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shotCount": self.shot_count,
            "totalBrewTimeMs": self.total_brew_time_ms,
            "avgBrewTimeMs": self.avg_brew_time_ms,
            "minBrewTimeMs": self.min_brew_time_ms,
            "maxBrewTimeMs": self.max_brew_time_ms,
            "totalKwh": self.total_kwh,
        }


@dataclass(frozen=True)
class LifetimeStats:
    total_shots: int
    total_steam_cycles: int
    total_kwh: float
    total_on_time_minutes: int
    total_brew_time_ms: int
    avg_brew_time_ms: int
    min_brew_time_ms: int
    max_brew_time_ms: int
    first_shot_timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalShots": self.total_shots,
            "totalSteamCycles": self.total_steam_cycles,
            "totalKwh": self.total_kwh,
            "totalOnTimeMinutes": self.total_on_time_minutes,
            "totalBrewTimeMs": self.total_brew_time_ms,
            "avgBrewTimeMs": self.avg_brew_time_ms,
            "minBrewTimeMs": self.min_brew_time_ms,
            "maxBrewTimeMs": self.max_brew_time_ms,
            "firstShotTimestamp": self.first_shot_timestamp,
        }


@dataclass(frozen=True)
class MaintenanceCounters:
    shots_since_backflush: int
    shots_since_group_clean: int
    shots_since_descale: int
    last_backflush_timestamp: int
    last_group_clean_timestamp: int
    last_descale_timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shotsSinceBackflush": self.shots_since_backflush,
            "shotsSinceGroupClean": self.shots_since_group_clean,
            "shotsSinceDescale": self.shots_since_descale,
            "lastBackflushTimestamp": self.last_backflush_timestamp,
            "lastGroupCleanTimestamp": self.last_group_clean_timestamp,
            "lastDescaleTimestamp": self.last_descale_timestamp,
        }


@dataclass(frozen=True)
class Statistics:
    """
    Multi-period statistics snapshot.

    These figures are generated independently of the brew and daily
    histories and are not expected to add up to them.
    """
    lifetime: LifetimeStats
    daily: PeriodStats
    weekly: PeriodStats
    monthly: PeriodStats
    maintenance: MaintenanceCounters
    session_shots: int
    session_start_timestamp: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lifetime": self.lifetime.to_dict(),
            "daily": self.daily.to_dict(),
            "weekly": self.weekly.to_dict(),
            "monthly": self.monthly.to_dict(),
            "maintenance": self.maintenance.to_dict(),
            "sessionShots": self.session_shots,
            "sessionStartTimestamp": self.session_start_timestamp,
        }


@dataclass(frozen=True)
class ExtendedStats:
    """Every synthetic view needed to render the statistics screens."""
    stats: Statistics
    weekly: List[WeeklyPoint]
    hourly_distribution: List[HourlyPoint]
    brew_history: List[BrewRecord]
    power_history: List[PowerSample]
    daily_history: List[DailySummary]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stats": self.stats.to_dict(),
            "weekly": [w.to_dict() for w in self.weekly],
            "hourlyDistribution": [h.to_dict() for h in self.hourly_distribution],
            "brewHistory": [b.to_dict() for b in self.brew_history],
            "powerHistory": [s.to_dict() for s in self.power_history],
            "dailyHistory": [d.to_dict() for d in self.daily_history],
        }
