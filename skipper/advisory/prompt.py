"""Prompt builder for the skipper advisory."""

from skipper.models.common import format_utc
from skipper.models.forecast import ForecastPoint
from skipper.risk.scorer import BAD_WIND_THRESHOLD

LIVE_SOURCE = "Live forecast (5-day / 3-hour model)"
SEASONAL_SOURCE = (
    "SEASONAL ESTIMATE based on historical monthly averages "
    "(the date is beyond the live forecast range)"
)


def build_prompt(
    selected: ForecastPoint,
    alternative: ForecastPoint | None,
    target_ts: int,
    is_seasonal: bool,
    company_name: str = "DolphinBoatSafari.com",
    region: str = "Cyprus",
    max_words: int = 80,
) -> str:
    """Build the captain prompt.

    All dates are rendered from UTC epoch seconds; nothing here depends on
    the server's local timezone.
    """
    gust = f"{selected.wind_gust} m/s" if selected.wind_gust is not None else "n/a"
    source = SEASONAL_SOURCE if is_seasonal else LIVE_SOURCE

    lines = [
        f"You are an experienced local boat captain for {company_name} in {region}.",
        f"A customer wants to book a trip on {format_utc(target_ts)}.",
        "",
        "Weather data:",
        f"- Sky: {selected.sky_description}",
        f"- Temperature: {selected.temperature}°C",
        f"- Wind speed: {selected.wind_speed} m/s",
        f"- Wind gusts: {gust}",
        f"- Data source: {source}",
    ]

    if alternative is not None:
        lines += [
            "",
            "Better slot found:",
            f"- Date/time: {format_utc(alternative.timestamp)}",
            f"- Wind speed: {alternative.wind_speed} m/s",
            f"- Sky: {alternative.sky_description}",
        ]

    lines += [
        "",
        "Tasks:",
        "1. If the data source is a seasonal estimate, say clearly that this "
        "is an estimate from historical averages, not a live forecast.",
        f"2. If wind speed is above {BAD_WIND_THRESHOLD:g} m/s, warn the customer "
        "explicitly about rough sea conditions.",
    ]
    if alternative is not None:
        lines.append(
            "3. Recommend the better slot above and explain why "
            "(calmer wind, no rain)."
        )
    else:
        lines.append("3. There is no alternative slot to recommend.")
    lines += [
        "4. If none of the above applies, tell the customer conditions look perfect.",
        "",
        "Format:",
        "Use only inline HTML (<b>, <i>, <br>); no headings, lists or scripts. "
        f"Keep it under {max_words} words. Friendly, professional tone.",
    ]
    return "\n".join(lines)
