"""
Chart Components for Dashboard

This module provides Plotly-based chart components for visualizing
espresso machine usage and power data.

All charts take wire-format records (camelCase dicts as served by
the API) and are designed to be:
- Responsive and interactive
- Consistent in styling
- Color-coded for quick interpretation
"""

import plotly.graph_objects as go
import plotly.express as px
import pandas as pd
from datetime import datetime, tzinfo
from typing import List, Dict, Any, Optional


# =========================================
# Color Schemes
# =========================================

COLORS = {
    "primary": "#D97706",    # Amber - coffee
    "secondary": "#6B7280",  # Gray
    "accent": "#8B5CF6",     # Violet - demo
    "power": "#F59E0B",
    "peak": "#EF4444",
    "steam": "#38BDF8",
    "background": "#1F2937",
    "text": "#F9FAFB",
    "grid": "#374151",
}

RATING_COLORS = {
    0: "#6B7280",
    3: "#FBBF24",
    4: "#34D399",
    5: "#10B981",
}


def get_default_layout(title: str = "", height: int = 400) -> dict:
    """Get default chart layout settings."""
    return {
        "title": {
            "text": title,
            "font": {"size": 16, "color": COLORS["text"]},
            "x": 0.5,
            "xanchor": "center"
        },
        "paper_bgcolor": "rgba(0,0,0,0)",
        "plot_bgcolor": "rgba(0,0,0,0)",
        "height": height,
        "margin": {"l": 60, "r": 40, "t": 60, "b": 60},
        "font": {"color": COLORS["text"], "size": 12},
        "xaxis": {
            "gridcolor": COLORS["grid"],
            "showgrid": True,
            "zeroline": False,
        },
        "yaxis": {
            "gridcolor": COLORS["grid"],
            "showgrid": True,
            "zeroline": False,
        },
        "legend": {
            "bgcolor": "rgba(0,0,0,0.5)",
            "bordercolor": COLORS["grid"],
            "font": {"color": COLORS["text"]}
        },
        "hovermode": "x unified",
    }


def to_local_datetime(epoch_seconds: pd.Series, tz: Optional[tzinfo] = None) -> pd.Series:
    """Epoch seconds to naive wall-clock datetimes in tz (the host zone if None)."""
    return pd.to_datetime(
        epoch_seconds.map(lambda ts: datetime.fromtimestamp(ts, tz=tz).replace(tzinfo=None))
    )


def records_to_frame(records: List[Dict[str, Any]], time_key: str = "timestamp") -> pd.DataFrame:
    """
    Convert wire records to a DataFrame with a local datetime column.

    Args:
        records: List of wire-format dicts
        time_key: Epoch-seconds field to convert

    Returns:
        DataFrame with an added "time" column (empty frame if no records)
    """
    df = pd.DataFrame(records)
    if df.empty:
        return df
    df["time"] = to_local_datetime(df[time_key])
    return df


# =========================================
# Power Chart
# =========================================

def create_power_chart(
    samples: List[Dict[str, Any]],
    title: str = "Power (last 24 hours)",
    height: int = 380
) -> go.Figure:
    """
    Create an average/peak power chart.

    Args:
        samples: Power samples (timestamp, avgWatts, maxWatts)
        title: Chart title
        height: Chart height in pixels

    Returns:
        Plotly Figure object
    """
    df = records_to_frame(samples)
    fig = go.Figure()

    if not df.empty:
        fig.add_trace(go.Scatter(
            x=df["time"],
            y=df["maxWatts"],
            mode="lines",
            name="Peak",
            line={"color": COLORS["peak"], "width": 1, "dash": "dot"},
        ))
        fig.add_trace(go.Scatter(
            x=df["time"],
            y=df["avgWatts"],
            mode="lines",
            name="Average",
            fill="tozeroy",
            line={"color": COLORS["power"], "width": 2},
        ))

    fig.update_layout(**get_default_layout(title, height))
    fig.update_yaxes(title_text="W")
    return fig


# =========================================
# Brew Charts
# =========================================

def create_brew_scatter(
    brews: List[Dict[str, Any]],
    title: str = "Shots: dose vs. yield",
    height: int = 380
) -> go.Figure:
    """Dose against yield, coloured by rating."""
    df = pd.DataFrame(brews)
    if df.empty:
        fig = go.Figure()
        fig.update_layout(**get_default_layout(title, height))
        return fig

    df["ratingLabel"] = df["rating"].map(lambda r: f"{r}★" if r else "unrated")
    fig = px.scatter(
        df,
        x="doseWeight",
        y="yieldWeight",
        color="ratingLabel",
        hover_data=["ratio", "peakPressure", "avgTemperature", "durationMs"],
        color_discrete_map={
            "unrated": RATING_COLORS[0],
            "3★": RATING_COLORS[3],
            "4★": RATING_COLORS[4],
            "5★": RATING_COLORS[5],
        },
    )
    layout = get_default_layout(title, height)
    layout["hovermode"] = "closest"
    fig.update_layout(**layout)
    fig.update_xaxes(title_text="Dose (g)")
    fig.update_yaxes(title_text="Yield (g)")
    return fig


def create_daily_chart(
    summaries: List[Dict[str, Any]],
    title: str = "Daily shots and energy",
    height: int = 380
) -> go.Figure:
    """Shots per day as bars with energy as a line on a second axis."""
    df = records_to_frame(summaries, time_key="date")
    fig = go.Figure()

    if not df.empty:
        fig.add_trace(go.Bar(
            x=df["time"],
            y=df["shotCount"],
            name="Shots",
            marker_color=COLORS["primary"],
        ))
        fig.add_trace(go.Scatter(
            x=df["time"],
            y=df["totalKwh"],
            name="kWh",
            yaxis="y2",
            mode="lines+markers",
            line={"color": COLORS["steam"], "width": 2},
        ))

    layout = get_default_layout(title, height)
    layout["yaxis"]["title"] = {"text": "Shots"}
    layout["yaxis2"] = {
        "overlaying": "y",
        "side": "right",
        "showgrid": False,
        "title": {"text": "kWh"},
    }
    fig.update_layout(**layout)
    return fig


def create_weekly_chart(points: List[Dict[str, Any]], height: int = 300) -> go.Figure:
    """Shots per weekday."""
    fig = go.Figure(go.Bar(
        x=[p["day"] for p in points],
        y=[p["shots"] for p in points],
        marker_color=COLORS["primary"],
    ))
    fig.update_layout(**get_default_layout("This week", height))
    return fig


def create_hourly_chart(points: List[Dict[str, Any]], height: int = 300) -> go.Figure:
    """Typical shots per hour of day."""
    fig = go.Figure(go.Bar(
        x=[f"{p['hour']:02d}:00" for p in points],
        y=[p["count"] for p in points],
        marker_color=COLORS["accent"],
    ))
    fig.update_layout(**get_default_layout("When you brew", height))
    return fig
