"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field


class RouteConfig(BaseModel):
    model_config = {"extra": "forbid"}

    route_id: str
    name: str
    # Left empty when an operator has not filled in the coordinates yet.
    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)


class WeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openweathermap.org/data/2.5"
    units: str = "metric"
    timeout_seconds: float = Field(default=15.0, gt=0.0)
    max_retries: int = Field(default=0, ge=0, le=5)
    retry_base_delay: float = Field(default=2.0, ge=0.0)
    api_key_env: str = "OWM_API_KEY"


class AdvisoryConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = "gemini-3.0-flash"
    timeout_seconds: float = Field(default=15.0, gt=0.0)
    max_words: int = Field(default=80, ge=20, le=200)
    company_name: str = "DolphinBoatSafari.com"
    region: str = "Cyprus"
    api_key_env: str = "GEMINI_API_KEY"


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    horizon_days: float = Field(default=5.0, gt=0.0)


class SkipperConfig(BaseModel):
    model_config = {"extra": "forbid"}

    weather: WeatherConfig = WeatherConfig()
    advisory: AdvisoryConfig = AdvisoryConfig()
    forecast: ForecastConfig = ForecastConfig()
    routes: list[RouteConfig] = []
