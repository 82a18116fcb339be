"""
BrewOS - Streamlit Dashboard

Dashboard for exploring espresso machine usage. Without a connected
machine it runs in demo mode, showing synthesized telemetry.

Features:
- Usage overview with weekly and hourly patterns
- Brew history with dose/yield and rating
- 24-hour power trace
- Daily rollups with energy use
- Machine logs and schedules

Demo mode is entered with ?demo=true and left with ?exitDemo=true.

Run with: streamlit run app/dashboard.py
"""

import os
import logging
import streamlit as st
import pandas as pd
from typing import Dict, Any, Optional

from app.components.charts import (
    create_power_chart,
    create_brew_scatter,
    create_daily_chart,
    create_weekly_chart,
    create_hourly_chart,
    to_local_datetime,
)
from app.components.cards import (
    format_brew_time,
    render_demo_banner,
    render_stat_card,
    render_maintenance_panel,
)
from app.components.logs import render_log_viewer
from app.data_sources import (
    ApiDataSource,
    ApiDemoStateStore,
    StreamlitNavigationContext,
)
from core.demo_mode import DemoModeController, DemoStateStore
from engine.demo_content import get_demo_schedules, schedule_days

logger = logging.getLogger(__name__)


# =========================================
# Configuration
# =========================================

API_URL = os.getenv("API_URL", "http://localhost:8000")

CUSTOM_CSS = """
<style>
    .main .block-container {
        padding-top: 2rem;
        padding-bottom: 2rem;
    }

    h1, h2, h3 {
        color: #F9FAFB !important;
    }

    [data-testid="stMetric"] {
        background: rgba(31, 41, 55, 0.6);
        border-radius: 10px;
        padding: 15px;
        border: 1px solid #374151;
    }

    [data-testid="stSidebar"] {
        background: linear-gradient(180deg, #1F2937 0%, #111827 100%);
    }

    .stButton > button {
        background: linear-gradient(90deg, #D97706, #B45309);
        color: white;
        border: none;
        border-radius: 8px;
        font-weight: 600;
    }

    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
</style>
"""

PAGES = ["☕ Overview", "📋 Brew History", "⚡ Power", "📅 Daily History", "🧾 Logs"]


def configure_page() -> None:
    """Page config and styling. Must run before any other st call."""
    st.set_page_config(
        page_title="BrewOS",
        page_icon="☕",
        layout="wide",
        initial_sidebar_state="expanded"
    )
    st.markdown(CUSTOM_CSS, unsafe_allow_html=True)


# =========================================
# Data Loading
# =========================================

def load_bundle(data_source, refresh: bool = False) -> Optional[Dict[str, Any]]:
    """
    Get the statistics bundle, cached for the browser session.

    A refresh draws a new bundle; otherwise the cached one is reused so
    charts do not reshuffle on every interaction.
    """
    if refresh or st.session_state.get("bundle") is None:
        st.session_state.bundle = data_source.fetch_extended_stats()
    return st.session_state.bundle


def to_csv(records) -> str:
    return pd.DataFrame(records).to_csv(index=False)


# =========================================
# Sidebar
# =========================================

def render_sidebar(demo_active: bool, source_label: str) -> str:
    """Render the sidebar and return the selected page."""
    with st.sidebar:
        st.markdown("## ☕ BrewOS")
        st.markdown("---")

        if demo_active:
            st.info("🎭 Demo mode: simulated data")
        else:
            st.warning("🔌 No machine connected")
        st.caption(f"Source: {source_label}")

        st.markdown("---")

        if demo_active and st.button("🔄 Regenerate Data", use_container_width=True):
            st.session_state.refresh = True
            st.rerun()

        st.markdown("---")
        st.subheader("📍 Navigation")

        return st.radio("Go to", PAGES, label_visibility="collapsed")


# =========================================
# Pages
# =========================================

def render_disconnected_page():
    """Shown when there is neither a machine nor demo mode."""
    st.title("☕ BrewOS")
    st.markdown("""
    No espresso machine is connected.

    You can explore the dashboard with simulated data in demo mode.
    """)
    st.markdown(
        '<a href="?demo=true" target="_self">▶ Try demo mode</a>',
        unsafe_allow_html=True
    )


def render_overview_page(bundle: Dict[str, Any]):
    """Headline numbers, weekly and hourly patterns, maintenance."""
    st.title("☕ Overview")

    stats = bundle["stats"]
    lifetime = stats["lifetime"]
    daily = stats["daily"]
    weekly = stats["weekly"]

    cols = st.columns(4)
    with cols[0]:
        render_stat_card("Today", str(daily["shotCount"]),
                         caption=f"avg {format_brew_time(daily['avgBrewTimeMs'])}")
    with cols[1]:
        render_stat_card("This week", str(weekly["shotCount"]),
                         caption=f"{weekly['totalKwh']:.1f} kWh")
    with cols[2]:
        render_stat_card("Lifetime shots", f"{lifetime['totalShots']:,}",
                         caption=f"{lifetime['totalSteamCycles']} steam cycles")
    with cols[3]:
        render_stat_card("Energy", f"{lifetime['totalKwh']:.1f} kWh",
                         caption=f"{lifetime['totalOnTimeMinutes'] // 60} h powered on",
                         color="#F59E0B")

    st.markdown("---")

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(create_weekly_chart(bundle["weekly"]), use_container_width=True)
    with col2:
        st.plotly_chart(create_hourly_chart(bundle["hourlyDistribution"]), use_container_width=True)

    st.markdown("---")
    render_maintenance_panel(stats["maintenance"])


def render_brew_history_page(bundle: Dict[str, Any]):
    """Individual shots from the trailing three weeks."""
    st.title("📋 Brew History")

    brews = bundle["brewHistory"]
    if not brews:
        st.info("No shots recorded")
        return

    rated = [b for b in brews if b["rating"]]
    cols = st.columns(3)
    with cols[0]:
        st.metric("Shots", len(brews))
    with cols[1]:
        st.metric("Avg ratio", f"1:{sum(b['ratio'] for b in brews) / len(brews):.2f}")
    with cols[2]:
        st.metric("Rated", f"{len(rated)}/{len(brews)}")

    st.plotly_chart(create_brew_scatter(brews), use_container_width=True)

    df = pd.DataFrame(brews)
    df["time"] = to_local_datetime(df["timestamp"])
    df["seconds"] = df["durationMs"] / 1000
    st.dataframe(
        df[["time", "seconds", "doseWeight", "yieldWeight", "ratio",
            "peakPressure", "avgTemperature", "avgFlowRate", "rating"]],
        use_container_width=True,
        hide_index=True
    )
    st.download_button("⬇️ Export CSV", to_csv(brews), file_name="brew-history.csv",
                       mime="text/csv")


def render_power_page(bundle: Dict[str, Any]):
    """Power draw over the trailing 24 hours."""
    st.title("⚡ Power")

    samples = bundle["powerHistory"]
    if samples:
        cols = st.columns(3)
        with cols[0]:
            st.metric("Energy (24 h)", f"{sum(s['kwhConsumed'] for s in samples):.2f} kWh")
        with cols[1]:
            st.metric("Peak", f"{max(s['maxWatts'] for s in samples)} W")
        with cols[2]:
            st.metric("Average", f"{sum(s['avgWatts'] for s in samples) / len(samples):.0f} W")

    st.plotly_chart(create_power_chart(samples), use_container_width=True)
    if samples:
        st.download_button("⬇️ Export CSV", to_csv(samples), file_name="power-history.csv",
                           mime="text/csv")


def render_daily_history_page(bundle: Dict[str, Any]):
    """Per-day rollups, oldest first."""
    st.title("📅 Daily History")

    days = bundle["dailyHistory"]
    st.plotly_chart(create_daily_chart(days), use_container_width=True)

    if days:
        df = pd.DataFrame(days)
        df["date"] = to_local_datetime(df["date"]).dt.date
        df["avgSeconds"] = df["avgBrewTimeMs"] / 1000
        st.dataframe(
            df[["date", "shotCount", "avgSeconds", "totalKwh", "onTimeMinutes", "steamCycles"]],
            use_container_width=True,
            hide_index=True
        )
        st.download_button("⬇️ Export CSV", to_csv(days), file_name="daily-history.csv",
                           mime="text/csv")


def render_logs_page(data_source):
    """Machine logs and power schedules."""
    st.title("🧾 Logs")
    render_log_viewer(data_source.fetch_logs())

    st.markdown("### ⏰ Schedules")
    schedules = get_demo_schedules()
    if schedules["autoPowerOffEnabled"]:
        st.caption(f"Auto power-off after {schedules['autoPowerOffMinutes']} min idle")
    for schedule in schedules["schedules"]:
        icon = "🟢" if schedule["action"] == "on" else "⚪"
        days = ", ".join(schedule_days(schedule["days"]))
        status = "" if schedule["enabled"] else " *(disabled)*"
        st.markdown(
            f"{icon} **{schedule['name']}**: {schedule['action']} at "
            f"{schedule['hour']:02d}:{schedule['minute']:02d} on {days}{status}"
        )


# =========================================
# Main Application
# =========================================

def run_dashboard(store: DemoStateStore, data_source, source_label: str):
    """
    Resolve demo mode from the URL and render the selected page.

    Args:
        store: Where the demo flag persists between visits
        data_source: Provides fetch_extended_stats() and fetch_logs()
        source_label: Shown in the sidebar
    """
    configure_page()

    controller = DemoModeController(store, StreamlitNavigationContext())
    controller.initialize_from_context()
    demo_active = controller.is_active()

    page = render_sidebar(demo_active, source_label)

    if not demo_active:
        st.session_state.bundle = None
        render_disconnected_page()
        return

    render_demo_banner()

    bundle = load_bundle(data_source, refresh=st.session_state.pop("refresh", False))
    if bundle is None:
        st.error(f"Could not load statistics from {source_label}")
        return

    if page == PAGES[0]:
        render_overview_page(bundle)
    elif page == PAGES[1]:
        render_brew_history_page(bundle)
    elif page == PAGES[2]:
        render_power_page(bundle)
    elif page == PAGES[3]:
        render_daily_history_page(bundle)
    elif page == PAGES[4]:
        render_logs_page(data_source)


def main():
    """Dashboard backed by the BrewOS demo API."""
    run_dashboard(
        ApiDemoStateStore(API_URL),
        ApiDataSource(API_URL),
        source_label=API_URL
    )


if __name__ == "__main__":
    main()
