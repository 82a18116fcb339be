"""
Tests for API Wire Models

Run with: pytest tests/test_models.py -v
"""

import pytest
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from api.models import BrewRecordModel, ErrorResponse, WeeklyPointModel, WireModel


BREW = {
    "timestamp": 1718193600,
    "durationMs": 28000,
    "doseWeight": 18.0,
    "yieldWeight": 36.0,
    "ratio": 2.0,
    "peakPressure": 9.0,
    "avgTemperature": 93.5,
    "avgFlowRate": 2.1,
    "rating": 4,
}


class TestWireModel:
    """camelCase on the wire, snake_case in Python."""

    def test_config(self):
        assert WireModel.model_config["alias_generator"] is to_camel
        assert WireModel.model_config["populate_by_name"] is True

    def test_accepts_camel_case(self):
        model = BrewRecordModel(**BREW)

        assert model.dose_weight == 18.0
        assert model.model_dump(by_alias=True) == BREW

    def test_accepts_snake_case(self):
        model = BrewRecordModel(
            timestamp=1, duration_ms=25000, dose_weight=17.0, yield_weight=34.0,
            ratio=2.0, peak_pressure=9.0, avg_temperature=93.0, avg_flow_rate=2.0
        )

        assert model.model_dump(by_alias=True)["durationMs"] == 25000
        assert model.rating == 0

    def test_weekly_floor(self):
        with pytest.raises(ValidationError):
            WeeklyPointModel(day="Mon", shots=0)


class TestErrorResponse:
    """Tests for the error envelope."""

    def test_defaults(self):
        body = ErrorResponse(message="nope", status_code=503).model_dump(mode="json")

        assert body["error"] is True
        assert body["status_code"] == 503
        assert body["detail"] is None
        assert isinstance(body["timestamp"], str)
