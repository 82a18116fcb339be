"""
Demo Mode Endpoints

This module exposes the demo-mode switch and the fixed demo content
(logs and schedules) that the UI shows on first paint.

Key Features:
- Resolve demo state from ?demo=true / ?exitDemo=true
- Explicit activate / deactivate
- Demo logs and schedules
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_demo_controller
from api.models import DemoStatusResponse, ErrorResponse, LogEntry, ScheduleListResponse
from core.demo_mode import DemoModeController
from engine.demo_content import get_demo_logs, get_demo_schedules

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/demo", tags=["Demo Mode"])


def _status_message(active: bool) -> str:
    return "Demo mode is active" if active else "Demo mode is inactive"


@router.get(
    "/status",
    response_model=DemoStatusResponse,
    summary="Resolve demo mode",
    description="""
    Resolve the effective demo state for the current request.

    **Query parameters (consumed and removed from `location`):**
    - `demo=true`: enter demo mode and remember it
    - `exitDemo=true`: leave demo mode (always wins over `demo=true`)

    Without either parameter the stored state is returned unchanged.
    """
)
async def get_demo_status(
    controller: DemoModeController = Depends(get_demo_controller)
):
    """Resolve and report demo state."""
    active = controller.is_active()
    return DemoStatusResponse(
        active=active,
        location=controller.context.location,
        message=_status_message(active)
    )


@router.post(
    "/activate",
    response_model=DemoStatusResponse,
    responses={503: {"model": ErrorResponse}},
    summary="Enable demo mode"
)
async def activate_demo(
    controller: DemoModeController = Depends(get_demo_controller)
):
    """Persist demo mode as enabled."""
    if not controller.activate():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Demo state store unavailable"
        )
    return DemoStatusResponse(active=True, message=_status_message(True))


@router.post(
    "/deactivate",
    response_model=DemoStatusResponse,
    responses={503: {"model": ErrorResponse}},
    summary="Disable demo mode"
)
async def deactivate_demo(
    controller: DemoModeController = Depends(get_demo_controller)
):
    """Persist demo mode as disabled."""
    if not controller.deactivate():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Demo state store unavailable"
        )
    return DemoStatusResponse(active=False, message=_status_message(False))


@router.get(
    "/logs",
    response_model=List[LogEntry],
    summary="Demo log entries",
    description="Ten log lines covering the last five minutes: boot, heat-up and one shot."
)
async def get_logs():
    """Get demo log entries, oldest first."""
    return get_demo_logs()


@router.get(
    "/schedules",
    response_model=ScheduleListResponse,
    summary="Demo power schedules"
)
async def get_schedules():
    """Get demo schedules and auto power-off settings."""
    return get_demo_schedules()
