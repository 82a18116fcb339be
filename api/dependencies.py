"""
Shared FastAPI Dependencies

Wires the demo-state store and the synthesizer into route handlers.
Tests replace these through app.dependency_overrides.
"""

import os
import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from api.database import SqlDemoStateStore
from core.demo_mode import DemoModeController, DemoStateStore, UrlNavigationContext
from engine.generator import TelemetrySynthesizer

logger = logging.getLogger(__name__)


def get_demo_store() -> DemoStateStore:
    """Durable demo flag backed by the settings table."""
    return SqlDemoStateStore()


def get_random_seed() -> Optional[int]:
    """Optional seed for reproducible demo data (DEMO_RANDOM_SEED)."""
    seed = os.getenv("DEMO_RANDOM_SEED")
    if seed is None or seed == "":
        return None
    try:
        return int(seed)
    except ValueError:
        logger.warning(f"Ignoring non-integer DEMO_RANDOM_SEED: {seed!r}")
        return None


def get_synthesizer() -> TelemetrySynthesizer:
    """A fresh synthesizer per request; data is never cached."""
    return TelemetrySynthesizer(random_seed=get_random_seed())


def get_demo_controller(
    request: Request,
    store: DemoStateStore = Depends(get_demo_store)
) -> DemoModeController:
    """Controller bound to the request's URL as navigation context."""
    return DemoModeController(store, UrlNavigationContext(str(request.url)))


def require_demo_mode(
    controller: DemoModeController = Depends(get_demo_controller)
) -> DemoModeController:
    """
    Reject telemetry requests when demo mode is off.

    This service has no live machine behind it, so real telemetry
    is unavailable.
    """
    if not controller.is_active():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No machine connected. Enable demo mode with ?demo=true"
        )
    return controller
