"""
Log Viewer Component

Renders machine log lines with level colours and source badges.
"""

import streamlit as st
from datetime import datetime
from typing import List, Dict, Any


LEVEL_COLORS = {
    "error": "#F87171",
    "warn": "#FBBF24",
    "warning": "#FBBF24",
    "info": "#60A5FA",
    "debug": "#9CA3AF",
}

SOURCE_COLORS = {
    "pico": "#C084FC",
    "esp32": "#93C5FD",
}


def get_log_color(level: str) -> str:
    """Get text color for a log level."""
    return LEVEL_COLORS.get(level.lower(), "#D1D5DB")


def format_log_time(value: str) -> str:
    """Format an ISO timestamp as local HH:MM:SS."""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).astimezone().strftime("%H:%M:%S")
    except ValueError:
        return value


def render_log_viewer(logs: List[Dict[str, Any]], connected: bool = True) -> None:
    """
    Render log entries in a monospace panel.

    Args:
        logs: Log entries (time, level, message, optional source)
        connected: Whether a machine (or demo mode) is feeding logs
    """
    if not logs:
        st.markdown("**No logs available**")
        if not connected:
            st.warning("⚠️ Device not connected")
        st.caption(
            "Logs appear here when system events occur "
            "(WiFi connection, temperature changes, brewing events, etc.)"
        )
        return

    lines = []
    for log in logs:
        level = log.get("level", "info")
        source = log.get("source")
        source_html = ""
        if source:
            source_html = (
                f'<span style="color: {SOURCE_COLORS.get(source, "#93C5FD")}; '
                f'margin-left: 0.5rem;">{source.upper()}</span>'
            )
        lines.append(
            f'<div style="padding: 2px 0; border-bottom: 1px solid #374151;">'
            f'<span style="color: #9CA3AF;">{format_log_time(log.get("time", ""))}</span>'
            f'<span style="color: {get_log_color(level)}; margin-left: 0.5rem;">[{level.upper()}]</span>'
            f'{source_html}'
            f'<span style="color: #F9FAFB; margin-left: 0.5rem;">{log.get("message", "")}</span>'
            f'</div>'
        )

    st.markdown(
        '<div style="font-family: monospace; font-size: 0.8rem; padding: 1rem; '
        'background: rgba(31, 41, 55, 0.6); border-radius: 10px;">'
        + "".join(lines)
        + "</div>",
        unsafe_allow_html=True
    )
