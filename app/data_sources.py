"""
Dashboard Data Sources

Adapters that connect the dashboard to demo state and telemetry:

- StreamlitNavigationContext: st.query_params as the navigation context
- ApiDemoStateStore: demo flag held by the API
- ApiDataSource: statistics fetched from the API
- LocalDataSource: statistics synthesized in-process (no API needed)
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

import requests
import streamlit as st

from core.demo_mode import DemoStateUnavailableError
from engine.demo_content import get_demo_logs
from engine.generator import get_demo_extended_stats

logger = logging.getLogger(__name__)


class StreamlitNavigationContext:
    """
    Navigation context backed by the browser URL.

    Deleting from st.query_params rewrites the address bar in place,
    without adding a browser history entry.
    """

    def params(self) -> Mapping[str, str]:
        return st.query_params.to_dict()

    def remove_params(self, names: Iterable[str]) -> None:
        for name in names:
            if name in st.query_params:
                del st.query_params[name]


class ApiDemoStateStore:
    """Demo flag persisted by the API's settings table."""

    def __init__(self, api_url: str, timeout: float = 5):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str) -> Dict[str, Any]:
        try:
            response = requests.request(
                method, f"{self.api_url}/api/v1/demo{path}", timeout=self.timeout
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            raise DemoStateUnavailableError(str(e)) from e

    def get(self) -> bool:
        return bool(self._request("GET", "/status").get("active"))

    def set(self) -> None:
        self._request("POST", "/activate")

    def clear(self) -> None:
        self._request("POST", "/deactivate")


class ApiDataSource:
    """Telemetry served by the BrewOS demo API."""

    def __init__(self, api_url: str, timeout: float = 10):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def _get(self, endpoint: str) -> Optional[Any]:
        try:
            response = requests.get(f"{self.api_url}{endpoint}", timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"API request failed for {endpoint}: {e}")
            return None

    def fetch_extended_stats(self) -> Optional[Dict[str, Any]]:
        return self._get("/api/v1/stats")

    def fetch_logs(self) -> List[Dict[str, Any]]:
        return self._get("/api/v1/demo/logs") or []


class LocalDataSource:
    """Telemetry synthesized in the dashboard process."""

    def __init__(self, random_seed: Optional[int] = None):
        self.random_seed = random_seed

    def fetch_extended_stats(self) -> Optional[Dict[str, Any]]:
        return get_demo_extended_stats(random_seed=self.random_seed)

    def fetch_logs(self) -> List[Dict[str, Any]]:
        return get_demo_logs()
