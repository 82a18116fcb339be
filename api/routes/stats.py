"""
Statistics Endpoints

This module serves the synthetic statistics that stand in for a live
machine while demo mode is active. Every request regenerates its data.

Key Features:
- Full statistics bundle for the stats screens
- Individual collections (brew, power, daily, weekly, hourly)
- CSV/JSON export of the history collections

All endpoints answer 503 when demo mode is off, because there is no
live machine behind this service.
"""

import logging
from enum import Enum
from typing import List

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from api.dependencies import get_synthesizer, require_demo_mode
from api.models import (
    BrewRecordModel,
    ErrorResponse,
    DailySummaryModel,
    ExtendedStatsResponse,
    HourlyPointModel,
    PowerSampleModel,
    StatisticsModel,
    WeeklyPointModel,
)
from engine.generator import TelemetrySynthesizer, records_to_csv, records_to_json

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/stats",
    tags=["Statistics"],
    dependencies=[Depends(require_demo_mode)],
    responses={503: {"model": ErrorResponse, "description": "Demo mode is off"}}
)


class HistoryCollection(str, Enum):
    BREW_HISTORY = "brew-history"
    POWER_HISTORY = "power-history"
    DAILY_HISTORY = "daily-history"


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"


# =========================================
# Bundle
# =========================================

@router.get(
    "",
    response_model=ExtendedStatsResponse,
    summary="Get extended statistics",
    description="""
    Get every statistics view in one payload:
    `stats`, `weekly`, `hourlyDistribution`, `brewHistory`,
    `powerHistory` and `dailyHistory`.

    The `stats` snapshot is generated independently of the histories,
    so its totals are not expected to match them.
    """
)
async def get_extended_stats(
    synth: TelemetrySynthesizer = Depends(get_synthesizer)
):
    """Get the complete statistics bundle."""
    bundle = synth.generate_extended_stats()
    logger.info(
        f"Generated demo stats: {len(bundle.brew_history)} brews, "
        f"{len(bundle.power_history)} power samples, "
        f"{len(bundle.daily_history)} days"
    )
    return bundle.to_dict()


@router.get("/summary", response_model=StatisticsModel, summary="Statistics snapshot")
async def get_summary(synth: TelemetrySynthesizer = Depends(get_synthesizer)):
    """Lifetime, daily, weekly and monthly totals plus maintenance counters."""
    return synth.generate_statistics().to_dict()


# =========================================
# Collections
# =========================================

@router.get(
    "/brew-history",
    response_model=List[BrewRecordModel],
    summary="Brew history",
    description="Brews over the last 21 days, most recent first."
)
async def get_brew_history(synth: TelemetrySynthesizer = Depends(get_synthesizer)):
    return [b.to_dict() for b in synth.generate_brew_history()]


@router.get(
    "/power-history",
    response_model=List[PowerSampleModel],
    summary="Power history",
    description="288 five-minute samples covering the last 24 hours, oldest first."
)
async def get_power_history(synth: TelemetrySynthesizer = Depends(get_synthesizer)):
    return [s.to_dict() for s in synth.generate_power_history()]


@router.get(
    "/daily-history",
    response_model=List[DailySummaryModel],
    summary="Daily history",
    description="Daily rollups for the last 30 days, oldest first."
)
async def get_daily_history(synth: TelemetrySynthesizer = Depends(get_synthesizer)):
    return [d.to_dict() for d in synth.generate_daily_history()]


@router.get("/weekly", response_model=List[WeeklyPointModel], summary="Shots per weekday")
async def get_weekly(synth: TelemetrySynthesizer = Depends(get_synthesizer)):
    return [w.to_dict() for w in synth.generate_weekly_data()]


@router.get("/hourly", response_model=List[HourlyPointModel], summary="Shots per hour of day")
async def get_hourly(synth: TelemetrySynthesizer = Depends(get_synthesizer)):
    return [h.to_dict() for h in synth.generate_hourly_distribution()]


# =========================================
# Export
# =========================================

@router.get(
    "/export/{collection}",
    response_class=PlainTextResponse,
    summary="Export a history collection",
    description="Download a freshly generated history collection as CSV or JSON."
)
async def export_collection(
    collection: HistoryCollection,
    format: ExportFormat = Query(default=ExportFormat.CSV, description="csv or json"),
    synth: TelemetrySynthesizer = Depends(get_synthesizer)
):
    """Export one history collection."""
    generators = {
        HistoryCollection.BREW_HISTORY: synth.generate_brew_history,
        HistoryCollection.POWER_HISTORY: synth.generate_power_history,
        HistoryCollection.DAILY_HISTORY: synth.generate_daily_history,
    }
    records = generators[collection]()

    if format == ExportFormat.JSON:
        body = records_to_json(records)
        media_type = "application/json"
    else:
        body = records_to_csv(records)
        media_type = "text/csv"

    filename = f"brewos_{collection.value}.{format.value}"
    return PlainTextResponse(
        content=body,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )
