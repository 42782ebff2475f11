"""Seasonal fallback: synthesize a forecast point from monthly averages.

Used when the requested slot lies beyond the live forecast horizon. The
variation around the monthly mean is derived from the target's day of month
and hour, so the same timestamp always produces the same point.
"""

from skipper.climate.profiles import MONTHLY_PROFILES, ClimateProfile
from skipper.models.common import SECONDS_PER_DAY, from_epoch
from skipper.models.forecast import ForecastPoint

MIN_SEASONAL_WIND = 2.0

_DESCRIPTIONS = {"Clear": "clear sky", "Rain": "light rain"}
_CLOUD_COVER = {"Clear": 5, "Clouds": 40, "Rain": 75}


def is_beyond_horizon(target_ts: int, now_ts: float, horizon_days: float = 5.0) -> bool:
    """True when the target lies strictly more than horizon_days after now."""
    return (target_ts - now_ts) / SECONDS_PER_DAY > horizon_days


def variation_seed(target_ts: int) -> int:
    dt = from_epoch(target_ts)
    return dt.day + dt.hour


def profile_for(target_ts: int) -> ClimateProfile:
    return MONTHLY_PROFILES[from_epoch(target_ts).month]


def synthesize(target_ts: int) -> ForecastPoint:
    """Build the synthetic seasonal point for a UTC target timestamp."""
    profile = profile_for(target_ts)
    seed = variation_seed(target_ts)

    temp_offset = (seed % 7) - 3  # [-3, +3]
    temperature = profile.temp_mean + temp_offset * profile.temp_variance / 3

    wind_offset = (seed % 5) - 2  # [-2, +2]
    wind = profile.wind_mean + wind_offset * profile.wind_variance / 2
    wind = max(MIN_SEASONAL_WIND, wind)

    roll = (seed * 37) % 100
    if roll < profile.rain_chance:
        sky_main = "Rain"
    else:
        sky_main = profile.conditions[(seed * 7) % 3]

    return ForecastPoint(
        timestamp=target_ts,
        temperature=round(temperature, 1),
        wind_speed=round(wind, 1),
        sky_main=sky_main,
        sky_description=_DESCRIPTIONS.get(sky_main, "scattered clouds"),
        cloud_cover=_CLOUD_COVER.get(sky_main, 40),
        seasonal=True,
    )
