"""Request, route and result models for a single sailing analysis."""

from dataclasses import dataclass
from typing import Any

from skipper.models.forecast import ForecastPoint


@dataclass(frozen=True)
class RouteCoordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Route:
    route_id: str
    name: str
    coordinates: RouteCoordinates | None


@dataclass(frozen=True)
class AnalysisRequest:
    route_id: str
    target_timestamp: int  # UTC epoch seconds


@dataclass(frozen=True)
class AnalysisResult:
    advisory_html: str
    weather_condition: str
    wind_speed: float
    seasick_risk: int
    coordinates: RouteCoordinates
    route_name: str
    climate_mode: bool
    selected: ForecastPoint
    alternative: ForecastPoint | None = None

    def to_payload(self) -> dict[str, Any]:
        """Success payload returned to the host boundary."""
        alternative = None
        if self.alternative is not None:
            alternative = {
                "timestamp": self.alternative.timestamp,
                "wind_speed": self.alternative.wind_speed,
                "weather_condition": self.alternative.condition,
            }
        return {
            "analysis": self.advisory_html,
            "weather_condition": self.weather_condition,
            "wind_speed": self.wind_speed,
            "seasickness_risk": self.seasick_risk,
            "coordinates": {
                "lat": self.coordinates.latitude,
                "lon": self.coordinates.longitude,
            },
            "route_name": self.route_name,
            "climate_mode": self.climate_mode,
            "alternative": alternative,
        }
