"""
Pydantic Models for API Request/Response Validation

This module defines all the data models used by the API for:
- Response serialization in the machine's camelCase wire format
- Documentation generation (OpenAPI/Swagger)

All models use Pydantic v2. Fields are declared in snake_case and
serialized through camelCase aliases; either form is accepted on
input.
"""

from datetime import datetime
from typing import Optional, List, Dict
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =========================================
# Enums
# =========================================

class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


class LogSource(str, Enum):
    ESP32 = "esp32"
    PICO = "pico"


class ScheduleAction(str, Enum):
    ON = "on"
    OFF = "off"


# =========================================
# Demo Mode Models
# =========================================

class DemoStatusResponse(BaseModel):
    """Effective demo state after consuming navigation parameters."""
    active: bool = Field(..., description="Whether demo mode is active")
    location: Optional[str] = Field(
        default=None,
        description="Location with consumed demo parameters removed"
    )
    message: str = ""

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "active": True,
            "location": "/api/v1/demo/status",
            "message": "Demo mode is active"
        }
    })


class LogEntry(BaseModel):
    """One machine log line."""
    id: int
    time: datetime
    level: LogLevel
    message: str
    source: Optional[LogSource] = None


class Schedule(WireModel):
    id: int
    enabled: bool
    name: str
    days: int = Field(..., description="Bitmask, bit 0 = Sunday", ge=0, le=127)
    hour: int = Field(..., ge=0, le=23)
    minute: int = Field(..., ge=0, le=59)
    action: ScheduleAction
    strategy: int = 0


class ScheduleListResponse(WireModel):
    schedules: List[Schedule]
    auto_power_off_enabled: bool
    auto_power_off_minutes: int


# =========================================
# Telemetry Models
# =========================================

class BrewRecordModel(WireModel):
    """One extraction."""
    timestamp: int = Field(..., description="Epoch seconds")
    duration_ms: int
    dose_weight: float = Field(..., description="Dose (g)")
    yield_weight: float = Field(..., description="Yield (g)")
    ratio: float
    peak_pressure: float = Field(..., description="Peak pressure (bar)")
    avg_temperature: float = Field(..., description="Average temperature (°C)")
    avg_flow_rate: float = Field(..., description="Average flow (g/s)")
    rating: int = Field(default=0, ge=0, le=5)


class PowerSampleModel(WireModel):
    """One 5-minute power bucket."""
    timestamp: int
    avg_watts: int
    max_watts: int
    kwh_consumed: float


class DailySummaryModel(WireModel):
    """One day's usage rollup."""
    date: int = Field(..., description="Midnight, epoch seconds")
    shot_count: int
    total_brew_time_ms: int
    avg_brew_time_ms: int
    total_kwh: float
    on_time_minutes: int
    steam_cycles: int


class WeeklyPointModel(WireModel):
    day: str
    shots: int = Field(..., ge=1)


class HourlyPointModel(WireModel):
    hour: int = Field(..., ge=0, le=23)
    count: int = Field(..., ge=0)


class PeriodStatsModel(WireModel):
    shot_count: int
    total_brew_time_ms: int
    avg_brew_time_ms: int
    min_brew_time_ms: int
    max_brew_time_ms: int
    total_kwh: float


class LifetimeStatsModel(WireModel):
    total_shots: int
    total_steam_cycles: int
    total_kwh: float
    total_on_time_minutes: int
    total_brew_time_ms: int
    avg_brew_time_ms: int
    min_brew_time_ms: int
    max_brew_time_ms: int
    first_shot_timestamp: int


class MaintenanceModel(WireModel):
    shots_since_backflush: int
    shots_since_group_clean: int
    shots_since_descale: int
    last_backflush_timestamp: int
    last_group_clean_timestamp: int
    last_descale_timestamp: int


class StatisticsModel(WireModel):
    """Multi-period statistics snapshot."""
    lifetime: LifetimeStatsModel
    daily: PeriodStatsModel
    weekly: PeriodStatsModel
    monthly: PeriodStatsModel
    maintenance: MaintenanceModel
    session_shots: int
    session_start_timestamp: Optional[int] = None


class ExtendedStatsResponse(WireModel):
    """Everything the statistics screens render, in one payload."""
    stats: StatisticsModel
    weekly: List[WeeklyPointModel]
    hourly_distribution: List[HourlyPointModel]
    brew_history: List[BrewRecordModel]
    power_history: List[PowerSampleModel]
    daily_history: List[DailySummaryModel]


# =========================================
# System Status Models
# =========================================

class SystemHealth(BaseModel):
    """System health check response."""
    status: str = Field(..., description="ok, degraded, or error")
    version: str = Field(..., description="API version")
    timestamp: datetime = Field(..., description="Current server time")
    database: str = Field(..., description="Database connection status")
    components: Dict[str, str] = Field(
        default_factory=dict,
        description="Status of system components"
    )


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: bool = True
    message: str
    status_code: Optional[int] = None
    detail: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.utcnow)
