"""OpenWeatherMap 5-day / 3-hour forecast client."""

import logging
import time

import httpx

from skipper.errors import UpstreamUnavailable
from skipper.models.forecast import ForecastPoint, ForecastSeries

logger = logging.getLogger(__name__)

OWM_BASE_URL = "https://api.openweathermap.org/data/2.5"
FORECAST_UNAVAILABLE = "Could not retrieve weather data."


class OpenWeatherClient:
    def __init__(
        self,
        base_url: str = OWM_BASE_URL,
        units: str = "metric",
        timeout: float = 15.0,
        max_retries: int = 0,
        retry_base_delay: float = 2.0,
    ):
        self.base_url = base_url
        self.units = units
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def fetch(self, lat: float, lon: float, api_key: str) -> ForecastSeries:
        """Fetch the forecast series for a coordinate.

        Raises UpstreamUnavailable on transport errors, non-2xx statuses and
        bodies without a usable `list` field. Retries on 503/429 and
        transport errors only when max_retries > 0.
        """
        raw = self._get_forecast(lat, lon, api_key)
        return parse_forecast(raw)

    def _get_forecast(self, lat: float, lon: float, api_key: str) -> dict:
        url = f"{self.base_url}/forecast"
        params = {"lat": lat, "lon": lon, "appid": api_key, "units": self.units}

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, params=params, timeout=self.timeout)
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "OWM request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                logger.error("OWM request failed for %s,%s: %s", lat, lon, e)
                raise UpstreamUnavailable(FORECAST_UNAVAILABLE) from e

            if resp.status_code in (503, 429) and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "OWM returned %d, retrying in %.1fs (attempt %d/%d)",
                    resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue

            if resp.status_code >= 400:
                logger.error(
                    "OWM returned %d for %s,%s", resp.status_code, lat, lon
                )
                raise UpstreamUnavailable(FORECAST_UNAVAILABLE)

            try:
                return resp.json()
            except ValueError as e:
                logger.error("OWM returned a non-JSON body: %s", e)
                raise UpstreamUnavailable(FORECAST_UNAVAILABLE) from e

        raise UpstreamUnavailable(FORECAST_UNAVAILABLE)


def parse_forecast(raw: dict) -> ForecastSeries:
    """Convert an OWM forecast body into ForecastPoints, keeping provider order."""
    entries = raw.get("list") if isinstance(raw, dict) else None
    if not isinstance(entries, list):
        logger.error("OWM response has no 'list' field")
        raise UpstreamUnavailable(FORECAST_UNAVAILABLE)

    series: ForecastSeries = []
    for entry in entries:
        try:
            series.append(_parse_entry(entry))
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.error("Malformed OWM forecast entry: %r", entry)
            raise UpstreamUnavailable(FORECAST_UNAVAILABLE) from e
    return series


def _parse_entry(entry: dict) -> ForecastPoint:
    main = entry["main"]
    wind = entry["wind"]
    sky = entry["weather"][0]
    gust = wind.get("gust")
    feels_like = main.get("feels_like")
    return ForecastPoint(
        timestamp=int(entry["dt"]),
        temperature=float(main["temp"]),
        wind_speed=float(wind["speed"]),
        sky_main=str(sky["main"]),
        sky_description=str(sky.get("description", "")),
        cloud_cover=int((entry.get("clouds") or {}).get("all", 0)),
        wind_gust=float(gust) if gust is not None else None,
        feels_like=float(feels_like) if feels_like is not None else None,
    )
