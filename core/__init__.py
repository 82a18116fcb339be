"""
Core Module - BrewOS Demo Engine

Framework-agnostic demo-mode state management, shared by the API
and the Streamlit dashboard.
"""

from .demo_mode import (
    DemoDecision,
    DemoModeController,
    DemoStateStore,
    DemoStateUnavailableError,
    InMemoryDemoStateStore,
    NavigationContext,
    UrlNavigationContext,
    decide_demo_state,
)

__all__ = [
    "DemoDecision",
    "DemoModeController",
    "DemoStateStore",
    "DemoStateUnavailableError",
    "InMemoryDemoStateStore",
    "NavigationContext",
    "UrlNavigationContext",
    "decide_demo_state",
]

__version__ = "0.1.0"
