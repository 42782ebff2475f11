"""Monthly climate profiles for the Cyprus coast (historical averages)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClimateProfile:
    temp_mean: float  # degC
    temp_variance: float  # degC swing at the extreme seed offset
    wind_mean: float  # m/s
    wind_variance: float  # m/s swing at the extreme seed offset
    rain_chance: int  # percent
    conditions: tuple[str, str, str]


# Keyed by calendar month (1 = January). Summer leans Clear, winter leans Rain.
MONTHLY_PROFILES: dict[int, ClimateProfile] = {
    1: ClimateProfile(17.0, 3.0, 6.5, 2.5, 40, ("Rain", "Clouds", "Clear")),
    2: ClimateProfile(17.0, 3.0, 6.2, 2.5, 35, ("Rain", "Clouds", "Clear")),
    3: ClimateProfile(19.0, 3.0, 5.8, 2.0, 25, ("Clouds", "Clear", "Rain")),
    4: ClimateProfile(22.0, 3.0, 5.0, 2.0, 15, ("Clear", "Clouds", "Clouds")),
    5: ClimateProfile(26.0, 3.0, 4.5, 1.5, 8, ("Clear", "Clear", "Clouds")),
    6: ClimateProfile(29.0, 2.0, 4.0, 1.5, 3, ("Clear", "Clear", "Clouds")),
    7: ClimateProfile(31.0, 2.0, 3.5, 1.5, 2, ("Clear", "Clear", "Clouds")),
    8: ClimateProfile(31.0, 2.0, 3.5, 1.5, 2, ("Clear", "Clear", "Clouds")),
    9: ClimateProfile(29.0, 2.0, 4.0, 1.5, 5, ("Clear", "Clear", "Clouds")),
    10: ClimateProfile(25.0, 3.0, 4.8, 2.0, 15, ("Clear", "Clouds", "Clouds")),
    11: ClimateProfile(21.0, 3.0, 5.5, 2.0, 30, ("Clouds", "Rain", "Clear")),
    12: ClimateProfile(18.0, 3.0, 6.3, 2.5, 40, ("Rain", "Clouds", "Clouds")),
}
