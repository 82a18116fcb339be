"""
Card and Banner Components

This module provides visual components for displaying single values
with context: stat cards, the demo-mode banner and the maintenance
panel.
"""

import time
import streamlit as st
from typing import Optional, Tuple


# =========================================
# Formatting Utilities
# =========================================

def format_brew_time(ms: float) -> str:
    """Format milliseconds as seconds with one decimal."""
    return f"{ms / 1000:.1f}s"


def format_ago(timestamp: Optional[int], now: Optional[float] = None) -> str:
    """Format an epoch timestamp as a coarse relative time."""
    if not timestamp:
        return "never"
    seconds = int((now if now is not None else time.time()) - timestamp)
    if seconds < 3600:
        return f"{max(seconds // 60, 0)} min ago"
    if seconds < 86400:
        return f"{seconds // 3600} h ago"
    days = seconds // 86400
    return "1 day ago" if days == 1 else f"{days} days ago"


def get_maintenance_status(shots: int, limit: int) -> Tuple[str, str]:
    """
    Get status label and color for a maintenance counter.

    Returns:
        Tuple of (label, color)
    """
    if shots >= limit:
        return ("Due", "#EF4444")
    elif shots >= limit * 0.8:
        return ("Soon", "#FBBF24")
    return ("OK", "#10B981")


# Shot intervals recommended between maintenance tasks
MAINTENANCE_LIMITS = {
    "backflush": 50,
    "group_clean": 20,
    "descale": 200,
}


# =========================================
# Demo Banner
# =========================================

def render_demo_banner(exit_url: str = "?exitDemo=true") -> None:
    """
    Render the sticky demo-mode banner with an exit link.

    Args:
        exit_url: Target of the "Exit Demo" link
    """
    st.markdown(f"""
    <div style="
        display: flex;
        justify-content: space-between;
        align-items: center;
        padding: 0.6rem 1rem;
        margin-bottom: 1rem;
        border-radius: 10px;
        background: linear-gradient(90deg, #4C1D95, #581C87, #4C1D95);
        border: 1px solid rgba(139, 92, 246, 0.5);
    ">
        <div>
            <span style="
                font-size: 0.75rem;
                font-weight: 700;
                text-transform: uppercase;
                letter-spacing: 1px;
                color: #DDD6FE;
                background: rgba(139, 92, 246, 0.25);
                padding: 2px 10px;
                border-radius: 999px;
            ">▶ Demo Mode</span>
            <span style="color: #C4B5FD; margin-left: 0.75rem; font-size: 0.9rem;">
                Explore BrewOS with simulated machine data
            </span>
        </div>
        <a href="{exit_url}" target="_self" style="
            color: #DDD6FE;
            text-decoration: none;
            font-size: 0.9rem;
            padding: 4px 12px;
            border-radius: 8px;
            border: 1px solid rgba(167, 139, 250, 0.4);
        ">Exit Demo</a>
    </div>
    """, unsafe_allow_html=True)


# =========================================
# Stat Card Component
# =========================================

def render_stat_card(
    title: str,
    value: str,
    caption: Optional[str] = None,
    color: str = "#D97706"
) -> None:
    """
    Render a stat card with a headline value.

    Args:
        title: Card title
        value: Preformatted value
        caption: Optional small text under the value
        color: Accent color
    """
    caption_html = ""
    if caption:
        caption_html = f"""
        <div style="font-size: 0.8rem; color: #9CA3AF; margin-top: 0.25rem;">{caption}</div>
        """

    st.markdown(f"""
    <div style="
        padding: 1rem;
        background: rgba(31, 41, 55, 0.6);
        border-radius: 10px;
        border: 1px solid {color}40;
    ">
        <div style="
            font-size: 0.8rem;
            color: #9CA3AF;
            text-transform: uppercase;
            letter-spacing: 1px;
        ">{title}</div>
        <div style="font-size: 1.8rem; font-weight: bold; color: {color};">{value}</div>
        {caption_html}
    </div>
    """, unsafe_allow_html=True)


# =========================================
# Maintenance Panel
# =========================================

def render_maintenance_panel(maintenance: dict) -> None:
    """
    Render maintenance counters with due/soon/ok badges.

    Args:
        maintenance: Wire-format maintenance counters
    """
    st.markdown("### 🧽 Maintenance")

    rows = [
        ("Backflush", "backflush", maintenance.get("shotsSinceBackflush", 0),
         maintenance.get("lastBackflushTimestamp")),
        ("Group clean", "group_clean", maintenance.get("shotsSinceGroupClean", 0),
         maintenance.get("lastGroupCleanTimestamp")),
        ("Descale", "descale", maintenance.get("shotsSinceDescale", 0),
         maintenance.get("lastDescaleTimestamp")),
    ]

    cols = st.columns(len(rows))
    for col, (label, key, shots, last) in zip(cols, rows):
        status, color = get_maintenance_status(shots, MAINTENANCE_LIMITS[key])
        with col:
            render_stat_card(
                label,
                f"{shots} shots",
                caption=f"{status} · last {format_ago(last)}",
                color=color
            )
