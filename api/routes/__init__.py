"""
API Routes Module

This module contains all API endpoint implementations organized by function:
- demo.py: Demo-mode switch, demo logs and schedules
- stats.py: Synthetic statistics and history exports

All routers are combined in main.py to create the complete API.
"""

from .demo import router as demo_router
from .stats import router as stats_router

__all__ = [
    "demo_router",
    "stats_router",
]
