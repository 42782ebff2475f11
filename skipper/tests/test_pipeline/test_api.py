"""Tests for the FastAPI adapter."""

from datetime import UTC, datetime
from unittest.mock import MagicMock

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from skipper.advisory.composer import AdvisoryComposer
from skipper.advisory.gemini_client import GeminiClient
from skipper.api import create_app
from skipper.catalog import ConfigRouteCatalog
from skipper.config.credentials import StaticCredentials
from skipper.ingest.owm_client import OpenWeatherClient
from skipper.pipeline.analysis import COORDINATES_MISSING, AnalysisOrchestrator

T0 = 1784073600
T1 = 1784095200
OWM_URL = "https://test-owm.example.com/forecast"
GEMINI_URL = "https://test-gemini.example.com/models/test-model:generateContent"


@pytest.fixture
def client(default_config) -> TestClient:
    orchestrator = AnalysisOrchestrator(
        default_config,
        ConfigRouteCatalog(default_config),
        StaticCredentials("owm-key", "txt-key"),
        OpenWeatherClient(base_url="https://test-owm.example.com"),
        AdvisoryComposer(
            GeminiClient(base_url="https://test-gemini.example.com", model="test-model")
        ),
        now=lambda: datetime(2026, 7, 14, 12, 0, tzinfo=UTC),
    )
    return TestClient(create_app(default_config, orchestrator))


def _gemini_ok(text: str) -> httpx.Response:
    return httpx.Response(
        200, json={"candidates": [{"content": {"parts": [{"text": text}]}}]}
    )


class TestAnalyzeEndpoint:
    @respx.mock
    def test_success(self, client: TestClient, owm_forecast: dict):
        respx.get(OWM_URL).mock(return_value=httpx.Response(200, json=owm_forecast))
        respx.post(GEMINI_URL).mock(return_value=_gemini_ok("<b>Rough at 06:00</b>"))

        resp = client.post(
            "/api/analyze", json={"route_id": "peyia-sea-caves", "target_timestamp": T1}
        )

        assert resp.status_code == 200
        body = resp.json()
        assert body["analysis"] == "<b>Rough at 06:00</b>"
        assert body["seasickness_risk"] == 75
        assert body["weather_condition"] == "rain"
        assert body["coordinates"] == {"lat": 34.9, "lon": 32.3}
        assert body["climate_mode"] is False

    @respx.mock
    def test_advisory_down_still_succeeds(self, client: TestClient, owm_forecast: dict):
        respx.get(OWM_URL).mock(return_value=httpx.Response(200, json=owm_forecast))
        respx.post(GEMINI_URL).mock(side_effect=httpx.ConnectError("down"))

        resp = client.post(
            "/api/analyze", json={"route_id": "peyia-sea-caves", "target_timestamp": T0}
        )

        assert resp.status_code == 200
        assert "Captain's Radio is down" in resp.json()["analysis"]
        assert resp.json()["seasickness_risk"] == 5

    def test_missing_coordinates(self, client: TestClient):
        with respx.mock(assert_all_called=False) as router:
            owm = router.get(OWM_URL).mock(
                return_value=httpx.Response(200, json={"list": []})
            )
            gemini = router.post(GEMINI_URL).mock(return_value=_gemini_ok("x"))

            resp = client.post(
                "/api/analyze", json={"route_id": "unmapped", "target_timestamp": T0}
            )

        assert resp.status_code == 400
        assert resp.json() == {"message": COORDINATES_MISSING}
        assert owm.call_count == 0
        assert gemini.call_count == 0

    @respx.mock
    def test_upstream_failure(self, client: TestClient):
        respx.get(OWM_URL).mock(return_value=httpx.Response(500))

        resp = client.post(
            "/api/analyze", json={"route_id": "peyia-sea-caves", "target_timestamp": T0}
        )

        assert resp.status_code == 502
        assert resp.json() == {"message": "Could not retrieve weather data."}

    def test_unknown_route(self, client: TestClient):
        resp = client.post(
            "/api/analyze", json={"route_id": "atlantis", "target_timestamp": T0}
        )
        assert resp.status_code == 404
        assert "atlantis" in resp.json()["message"]

    def test_rejects_date_string(self, client: TestClient):
        resp = client.post(
            "/api/analyze",
            json={"route_id": "peyia-sea-caves", "target_timestamp": "2026-07-15T06:00"},
        )
        assert resp.status_code == 422

    @pytest.mark.parametrize("ts", [-1, 10**13])
    def test_rejects_out_of_range_timestamp(self, client: TestClient, ts: int):
        resp = client.post(
            "/api/analyze", json={"route_id": "peyia-sea-caves", "target_timestamp": ts}
        )
        assert resp.status_code == 422


class TestOtherEndpoints:
    def test_health(self, client: TestClient):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_routes(self, client: TestClient):
        resp = client.get("/api/routes")
        assert resp.status_code == 200
        ids = [r["route_id"] for r in resp.json()]
        assert "peyia-sea-caves" in ids
        assert "unmapped" in ids


class TestCreateApp:
    def test_builds_from_config(self, default_config):
        app = create_app(default_config)
        assert app.title == "AI Skipper"

    def test_orchestrator_is_injected(self, default_config):
        orchestrator = MagicMock(spec=AnalysisOrchestrator)
        orchestrator.catalog = ConfigRouteCatalog(default_config)
        client = TestClient(create_app(default_config, orchestrator))
        assert client.get("/api/routes").status_code == 200
