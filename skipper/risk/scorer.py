"""Seasickness risk scoring and the bad-weather predicate."""

from skipper.models.forecast import ForecastPoint

# (upper bound inclusive, base risk); the last bracket is open-ended.
WIND_BRACKETS: list[tuple[float, int]] = [
    (3.0, 5),
    (5.0, 15),
    (7.0, 35),
    (10.0, 60),
]
MAX_WIND_RISK = 85

# Checked in order, first match only.
CONDITION_PENALTIES: list[tuple[str, int]] = [
    ("storm", 30),
    ("rain", 15),
    ("cloud", 5),
]

# Independent of WIND_BRACKETS; not derived from score().
BAD_WIND_THRESHOLD = 6.0


def base_risk(wind_speed: float) -> int:
    for upper, risk in WIND_BRACKETS:
        if wind_speed <= upper:
            return risk
    return MAX_WIND_RISK


def condition_penalty(sky_main_lower: str) -> int:
    for keyword, penalty in CONDITION_PENALTIES:
        if keyword in sky_main_lower:
            return penalty
    return 0


def score(wind_speed: float, sky_main_lower: str) -> int:
    """Seasickness risk in [0, 100] from wind bracket plus sky penalty."""
    risk = base_risk(wind_speed) + condition_penalty(sky_main_lower.lower())
    return max(0, min(100, risk))


def is_bad_weather(point: ForecastPoint) -> bool:
    return point.wind_speed > BAD_WIND_THRESHOLD or "rain" in point.condition
