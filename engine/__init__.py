"""
Engine Module - Synthetic Telemetry Generation

This module provides synthetic espresso-machine data for demo mode,
used whenever no real machine is connected.

Key Components:
- TelemetrySynthesizer: Generates brew, power and daily histories
- UsageProfile: Tunable household habits and power sessions
- demo_content: Fixed demo logs and schedules

Usage:
    from engine import TelemetrySynthesizer

    synth = TelemetrySynthesizer()
    bundle = synth.generate_extended_stats()

    # Wire-format dictionary for the UI
    payload = bundle.to_dict()
"""

from .profiles import (
    Band,
    DayType,
    PowerBand,
    UsageProfile,
    UsageSession,
    classify_day,
    pick_branch,
)
from .records import (
    BrewRecord,
    DailySummary,
    ExtendedStats,
    HourlyPoint,
    PowerSample,
    Statistics,
    WeeklyPoint,
)
from .generator import (
    TelemetrySynthesizer,
    get_demo_extended_stats,
    records_to_csv,
    records_to_json,
)
from .demo_content import get_demo_logs, get_demo_schedules

__all__ = [
    # Profiles
    "Band",
    "DayType",
    "PowerBand",
    "UsageProfile",
    "UsageSession",
    "classify_day",
    "pick_branch",

    # Records
    "BrewRecord",
    "DailySummary",
    "ExtendedStats",
    "HourlyPoint",
    "PowerSample",
    "Statistics",
    "WeeklyPoint",

    # Generator
    "TelemetrySynthesizer",
    "get_demo_extended_stats",
    "records_to_csv",
    "records_to_json",

    # Static content
    "get_demo_logs",
    "get_demo_schedules",
]

__version__ = "0.1.0"
