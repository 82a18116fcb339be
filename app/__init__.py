"""
Streamlit Dashboard Application

This module provides the web-based dashboard for BrewOS usage data.
Built with Streamlit for rapid development and easy deployment.

Components:
- dashboard.py: Main dashboard application
- data_sources.py: API and in-process data adapters
- components/: Reusable UI components
  - charts.py: Plotly chart components
  - cards.py: Stat cards, demo banner, maintenance panel
  - logs.py: Log viewer

Features:
- Demo mode via ?demo=true / ?exitDemo=true
- Usage overview and brew history
- Power and daily energy charts
- Machine logs and schedules
"""

__version__ = "0.1.0"
