"""
Tests for the REST API

The demo-flag store and the synthesizer are replaced through
dependency overrides, so no database or wall-clock randomness is
involved in the assertions.

Run with: pytest tests/test_api.py -v
"""

import json
import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_demo_store, get_synthesizer
from api.main import app
from core.demo_mode import DemoStateUnavailableError, InMemoryDemoStateStore
from engine.generator import TelemetrySynthesizer


class BrokenStore:
    def get(self):
        raise DemoStateUnavailableError("down")

    def set(self):
        raise DemoStateUnavailableError("down")

    def clear(self):
        raise DemoStateUnavailableError("down")


@pytest.fixture
def store():
    return InMemoryDemoStateStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_demo_store] = lambda: store
    app.dependency_overrides[get_synthesizer] = lambda: TelemetrySynthesizer(random_seed=7)
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestSystemEndpoints:
    """Tests for root and health endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["api_base"] == "/api/v1"

    def test_live(self, client):
        assert client.get("/live").json() == {"alive": True}

    def test_health(self, client):
        data = client.get("/health").json()

        assert data["status"] == "ok"
        assert data["components"]["api"] == "ok"


class TestDemoEndpoints:
    """Tests for the demo-mode switch."""

    def test_status_default_inactive(self, client):
        data = client.get("/api/v1/demo/status").json()

        assert data["active"] is False
        assert data["location"] == "/api/v1/demo/status"

    def test_enter_via_query(self, client, store):
        data = client.get("/api/v1/demo/status?demo=true&tab=power").json()

        assert data["active"] is True
        assert data["location"] == "/api/v1/demo/status?tab=power"
        assert store.get() is True

    def test_state_persists_between_requests(self, client):
        client.get("/api/v1/demo/status?demo=true")

        assert client.get("/api/v1/demo/status").json()["active"] is True

    def test_exit_wins(self, client, store):
        store.set()
        data = client.get("/api/v1/demo/status?demo=true&exitDemo=true").json()

        assert data["active"] is False
        assert data["location"] == "/api/v1/demo/status"
        assert store.get() is False

    def test_activate_and_deactivate(self, client, store):
        assert client.post("/api/v1/demo/activate").json()["active"] is True
        assert store.get() is True

        assert client.post("/api/v1/demo/deactivate").json()["active"] is False
        assert store.get() is False

    def test_logs(self, client):
        logs = client.get("/api/v1/demo/logs").json()

        assert len(logs) == 10
        assert {"id", "time", "level", "message", "source"} <= set(logs[0])

    def test_schedules(self, client):
        data = client.get("/api/v1/demo/schedules").json()

        assert len(data["schedules"]) == 3
        assert data["autoPowerOffMinutes"] == 120


class TestStoreUnavailable:
    """The API degrades to inactive when the flag store is down."""

    def setup_method(self):
        app.dependency_overrides[get_demo_store] = lambda: BrokenStore()
        self.client = TestClient(app)

    def teardown_method(self):
        app.dependency_overrides.clear()

    def test_status_inactive(self):
        assert self.client.get("/api/v1/demo/status?demo=true").json()["active"] is False

    def test_activate_fails(self):
        response = self.client.post("/api/v1/demo/activate")

        assert response.status_code == 503
        assert response.json()["error"] is True


class TestStatsEndpoints:
    """Tests for the statistics endpoints."""

    def test_requires_demo_mode(self, client):
        response = client.get("/api/v1/stats")

        assert response.status_code == 503
        assert "demo" in response.json()["message"]

    def test_error_envelope(self, client):
        body = client.get("/api/v1/stats").json()

        assert body["error"] is True
        assert body["status_code"] == 503
        assert body["detail"] is None
        assert "timestamp" in body

    def test_error_envelope_documented(self, client):
        schema = client.get("/openapi.json").json()
        response = schema["paths"]["/api/v1/stats"]["get"]["responses"]["503"]

        assert response["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")

    def test_bundle(self, client, store):
        store.set()
        data = client.get("/api/v1/stats").json()

        assert set(data) == {
            "stats", "weekly", "hourlyDistribution",
            "brewHistory", "powerHistory", "dailyHistory",
        }
        assert len(data["powerHistory"]) == 288
        assert len(data["dailyHistory"]) == 30
        assert data["stats"]["lifetime"]["totalShots"] == 1247

    def test_bundle_with_demo_param(self, client):
        """A shared ?demo=true link works on the stats endpoint itself."""
        response = client.get("/api/v1/stats?demo=true")

        assert response.status_code == 200

    def test_collections(self, client, store):
        store.set()

        brews = client.get("/api/v1/stats/brew-history").json()
        assert brews
        assert "yieldWeight" in brews[0]

        assert len(client.get("/api/v1/stats/weekly").json()) == 7
        assert len(client.get("/api/v1/stats/hourly").json()) == 24
        assert "maintenance" in client.get("/api/v1/stats/summary").json()

        samples = client.get("/api/v1/stats/power-history").json()
        assert all(s["maxWatts"] >= s["avgWatts"] for s in samples)

    def test_export_csv(self, client, store):
        store.set()
        response = client.get("/api/v1/stats/export/daily-history")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "daily-history.csv" in response.headers["content-disposition"]
        assert response.text.splitlines()[0].startswith("date,shotCount")

    def test_export_json(self, client, store):
        store.set()
        response = client.get("/api/v1/stats/export/power-history?format=json")

        assert response.status_code == 200
        assert len(json.loads(response.text)) == 288

    def test_export_unknown_collection(self, client, store):
        store.set()

        assert client.get("/api/v1/stats/export/weekly").status_code == 422
