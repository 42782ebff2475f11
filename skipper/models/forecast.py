"""Forecast data models."""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class ForecastPoint:
    timestamp: int  # epoch seconds, UTC
    temperature: float  # degC
    wind_speed: float  # m/s
    sky_main: str  # Clear, Clouds, Rain, Thunderstorm, ...
    sky_description: str
    cloud_cover: int  # percent
    wind_gust: float | None = None
    feels_like: float | None = None
    seasonal: bool = False

    @property
    def condition(self) -> str:
        return self.sky_main.lower()


# Chronological, as delivered by the provider. Not deduplicated.
ForecastSeries: TypeAlias = list[ForecastPoint]
