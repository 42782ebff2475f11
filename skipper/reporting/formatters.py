"""Output formatters for analysis results."""

import json
import re

from skipper.models.analysis import AnalysisResult
from skipper.models.common import format_utc

_TAG = re.compile(r"<[^>]+>")


def strip_html(html: str) -> str:
    text = html.replace("<br>", "\n").replace("<br/>", "\n").replace("<br />", "\n")
    return _TAG.sub("", text).strip()


def format_result_text(r: AnalysisResult) -> str:
    """Plain text result for the terminal."""
    mode = "seasonal estimate" if r.climate_mode else "live forecast"
    lines = [
        f"=== {r.route_name} | {format_utc(r.selected.timestamp)} ({mode}) ===",
        f"Sky: {r.selected.sky_description} ({r.weather_condition})",
        f"Wind: {r.wind_speed} m/s | Temp: {r.selected.temperature}°C",
        f"Seasickness risk: {r.seasick_risk}/100",
    ]
    if r.alternative is not None:
        lines.append(
            f"Better slot: {format_utc(r.alternative.timestamp)} "
            f"(wind {r.alternative.wind_speed} m/s, {r.alternative.condition})"
        )
    lines.append("")
    lines.append(strip_html(r.advisory_html))
    return "\n".join(lines)


def format_result_json(r: AnalysisResult) -> str:
    """JSON payload, identical to the HTTP response body."""
    return json.dumps(r.to_payload(), indent=2)
