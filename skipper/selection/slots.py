"""Forecast slot selection: closest slot and nearest good-weather alternative."""

from skipper.errors import NoData
from skipper.models.forecast import ForecastPoint, ForecastSeries

GOOD_WIND_THRESHOLD = 5.0


def is_good_weather(point: ForecastPoint) -> bool:
    return point.wind_speed < GOOD_WIND_THRESHOLD and "rain" not in point.condition


def closest_slot(series: ForecastSeries, target_ts: int) -> ForecastPoint:
    """Return the point nearest in time to target_ts; first wins on ties."""
    closest = _nearest(series, target_ts)
    if closest is None:
        raise NoData("No forecast data available for this route.")
    return closest


def better_alternative(series: ForecastSeries, bad_ts: int) -> ForecastPoint | None:
    """Nearest good-weather point to bad_ts, in either direction, or None.

    Earlier and later slots are treated alike: only the absolute distance
    counts.
    """
    return _nearest([p for p in series if is_good_weather(p)], bad_ts)


def _nearest(points: ForecastSeries, ts: int) -> ForecastPoint | None:
    best: ForecastPoint | None = None
    best_diff: int | None = None
    for p in points:
        diff = abs(p.timestamp - ts)
        if best_diff is None or diff < best_diff:
            best, best_diff = p, diff
    return best
