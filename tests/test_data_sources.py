"""
Tests for Dashboard Data Sources

HTTP calls and st.query_params are patched; nothing here needs a
running API or Streamlit server.

Run with: pytest tests/test_data_sources.py -v
"""

import pytest
import requests
from unittest.mock import MagicMock, patch

from app import data_sources
from app.data_sources import (
    ApiDataSource,
    ApiDemoStateStore,
    LocalDataSource,
    StreamlitNavigationContext,
)
from core.demo_mode import DemoModeController, DemoStateUnavailableError


class FakeQueryParams(dict):
    """Dict with the to_dict() accessor of st.query_params."""

    def to_dict(self):
        return dict(self)


def ok_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


class TestStreamlitNavigationContext:
    """Tests for the query-params navigation context."""

    def setup_method(self):
        self.params = FakeQueryParams(demo="true", page="power")
        self.patcher = patch.object(data_sources.st, "query_params", self.params)
        self.patcher.start()

    def teardown_method(self):
        self.patcher.stop()

    def test_params(self):
        assert StreamlitNavigationContext().params() == {"demo": "true", "page": "power"}

    def test_remove_params(self):
        StreamlitNavigationContext().remove_params(["demo", "exitDemo"])

        assert self.params == {"page": "power"}


class TestApiDemoStateStore:
    """Tests for the API-backed demo flag."""

    def setup_method(self):
        self.store = ApiDemoStateStore("http://api:8000/")

    def test_get(self):
        with patch.object(data_sources.requests, "request",
                          return_value=ok_response({"active": True})) as request:
            assert self.store.get() is True

        request.assert_called_once_with(
            "GET", "http://api:8000/api/v1/demo/status", timeout=5
        )

    def test_set_and_clear(self):
        with patch.object(data_sources.requests, "request",
                          return_value=ok_response({"active": True})) as request:
            self.store.set()
            self.store.clear()

        urls = [call.args[1] for call in request.call_args_list]
        assert urls == [
            "http://api:8000/api/v1/demo/activate",
            "http://api:8000/api/v1/demo/deactivate",
        ]

    def test_connection_error_is_unavailable(self):
        with patch.object(data_sources.requests, "request",
                          side_effect=requests.exceptions.ConnectionError("refused")):
            with pytest.raises(DemoStateUnavailableError):
                self.store.get()

    def test_controller_inactive_when_api_down(self):
        with patch.object(data_sources.requests, "request",
                          side_effect=requests.exceptions.Timeout("slow")):
            assert DemoModeController(self.store).is_active() is False


class TestApiDataSource:
    """Tests for fetching statistics over HTTP."""

    def test_fetch_bundle(self):
        source = ApiDataSource("http://api:8000")
        with patch.object(data_sources.requests, "get",
                          return_value=ok_response({"stats": {}})) as get:
            assert source.fetch_extended_stats() == {"stats": {}}

        assert get.call_args.args[0] == "http://api:8000/api/v1/stats"

    def test_fetch_failure_returns_none(self):
        source = ApiDataSource("http://api:8000")
        with patch.object(data_sources.requests, "get",
                          side_effect=requests.exceptions.ConnectionError("refused")):
            assert source.fetch_extended_stats() is None
            assert source.fetch_logs() == []


class TestLocalDataSource:
    """Tests for in-process synthesis."""

    def test_bundle(self):
        bundle = LocalDataSource(random_seed=3).fetch_extended_stats()

        assert len(bundle["powerHistory"]) == 288
        assert bundle["brewHistory"]

    def test_logs(self):
        assert len(LocalDataSource().fetch_logs()) == 10
