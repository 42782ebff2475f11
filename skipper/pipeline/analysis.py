"""Analysis pipeline: one sailing-comfort request end to end."""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from skipper.advisory.composer import AdvisoryComposer
from skipper.catalog import ConfigRouteCatalog, RouteCatalog
from skipper.climate import seasonal
from skipper.config.credentials import CredentialsProvider, EnvCredentials
from skipper.config.schema import SkipperConfig
from skipper.errors import ConfigurationMissing, RouteNotFound, SkipperError
from skipper.ingest.owm_client import OpenWeatherClient
from skipper.models.analysis import (
    AnalysisRequest,
    AnalysisResult,
    Route,
    RouteCoordinates,
)
from skipper.models.common import format_utc, utc_now
from skipper.models.forecast import ForecastSeries
from skipper.risk import scorer
from skipper.selection import slots

logger = logging.getLogger(__name__)

COORDINATES_MISSING = "Route coordinates missing. Please contact admin."
CREDENTIALS_MISSING = "Weather service is not configured. Please contact admin."


class AnalysisOrchestrator:
    """Stateless across calls: one instance can serve concurrent requests."""

    def __init__(
        self,
        config: SkipperConfig,
        catalog: RouteCatalog,
        credentials: CredentialsProvider,
        forecast_client: OpenWeatherClient,
        composer: AdvisoryComposer,
        now: Callable[[], datetime] = utc_now,
    ):
        self.config = config
        self.catalog = catalog
        self.credentials = credentials
        self.forecast_client = forecast_client
        self.composer = composer
        self.now = now

    @classmethod
    def from_config(
        cls,
        config: SkipperConfig,
        credentials: CredentialsProvider | None = None,
        catalog: RouteCatalog | None = None,
    ) -> "AnalysisOrchestrator":
        forecast_client = OpenWeatherClient(
            base_url=config.weather.base_url,
            units=config.weather.units,
            timeout=config.weather.timeout_seconds,
            max_retries=config.weather.max_retries,
            retry_base_delay=config.weather.retry_base_delay,
        )
        return cls(
            config,
            catalog or ConfigRouteCatalog(config),
            credentials or EnvCredentials(config),
            forecast_client,
            AdvisoryComposer.from_config(config.advisory),
        )

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """Run one analysis. Raises SkipperError subclasses on fatal failures."""
        target_ts = request.target_timestamp

        # 1. VALIDATE
        route = self.catalog.get(request.route_id)
        if route is None:
            raise RouteNotFound(f"Unknown route: {request.route_id}")
        coords = _require_coordinates(route)
        weather_key = self.credentials.get_weather_api_key()
        text_key = self.credentials.get_text_api_key()
        if not weather_key or not text_key:
            raise ConfigurationMissing(CREDENTIALS_MISSING)

        # 2. MODE
        is_seasonal = seasonal.is_beyond_horizon(
            target_ts, self.now().timestamp(), self.config.forecast.horizon_days
        )
        logger.info(
            "Analyzing %s for %s (%s mode)",
            route.route_id, format_utc(target_ts),
            "seasonal" if is_seasonal else "live",
        )

        # 3. SELECT SLOT
        series: ForecastSeries = []
        if is_seasonal:
            selected = seasonal.synthesize(target_ts)
        else:
            series = self.forecast_client.fetch(
                coords.latitude, coords.longitude, weather_key
            )
            selected = slots.closest_slot(series, target_ts)

        # 4. ALTERNATIVE
        alternative = None
        if not is_seasonal and scorer.is_bad_weather(selected):
            alternative = slots.better_alternative(series, selected.timestamp)
            if alternative is not None:
                logger.info(
                    "Bad weather at %s, suggesting %s",
                    format_utc(selected.timestamp), format_utc(alternative.timestamp),
                )

        # 5. ADVISORY
        advisory = self.composer.compose(
            selected, alternative, target_ts, is_seasonal, text_key
        )

        # 6. RISK
        risk = scorer.score(selected.wind_speed, selected.condition)

        # 7. RESULT
        return AnalysisResult(
            advisory_html=advisory,
            weather_condition=selected.condition,
            wind_speed=selected.wind_speed,
            seasick_risk=risk,
            coordinates=coords,
            route_name=route.name,
            climate_mode=is_seasonal,
            selected=selected,
            alternative=alternative,
        )

    def handle(self, request: AnalysisRequest) -> tuple[bool, dict[str, Any]]:
        """Host-facing entry point: (success, payload) with {message} on failure."""
        try:
            result = self.analyze(request)
        except SkipperError as e:
            logger.warning("Analysis failed for %s: %s", request.route_id, e.message)
            return False, {"message": e.message}
        return True, result.to_payload()


def _require_coordinates(route: Route) -> RouteCoordinates:
    coords = route.coordinates
    if coords is None:
        raise ConfigurationMissing(COORDINATES_MISSING)
    try:
        return RouteCoordinates(
            latitude=float(coords.latitude), longitude=float(coords.longitude)
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationMissing(COORDINATES_MISSING) from e
