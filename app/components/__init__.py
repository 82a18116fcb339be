"""
Dashboard Components Module

Reusable UI components for the Streamlit dashboard.

Components:
- charts: Plotly-based visualization components
- cards: Stat cards, demo banner and maintenance panel
- logs: Log viewer
"""

from .charts import (
    create_power_chart,
    create_brew_scatter,
    create_daily_chart,
    create_weekly_chart,
    create_hourly_chart,
)
from .cards import (
    render_demo_banner,
    render_stat_card,
    render_maintenance_panel,
)
from .logs import render_log_viewer

__all__ = [
    # Charts
    "create_power_chart",
    "create_brew_scatter",
    "create_daily_chart",
    "create_weekly_chart",
    "create_hourly_chart",

    # Cards
    "render_demo_banner",
    "render_stat_card",
    "render_maintenance_panel",

    # Logs
    "render_log_viewer",
]
