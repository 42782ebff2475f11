"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from skipper.config.defaults import DEFAULT_ROUTES
from skipper.config.schema import RouteConfig, SkipperConfig
from skipper.ingest.owm_client import parse_forecast
from skipper.models.forecast import ForecastSeries

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def default_config() -> SkipperConfig:
    """Default config plus one route without coordinates."""
    routes = list(DEFAULT_ROUTES) + [
        RouteConfig(route_id="unmapped", name="Unmapped Cove"),
    ]
    return SkipperConfig(routes=routes)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "weather": {"timeout_seconds": 10},
        "advisory": {"max_words": 60},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def owm_forecast() -> dict:
    with open(FIXTURE_DIR / "owm_forecast_paphos.json") as f:
        return json.load(f)


@pytest.fixture
def paphos_series(owm_forecast: dict) -> ForecastSeries:
    return parse_forecast(owm_forecast)
