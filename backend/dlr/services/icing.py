"""Icing and snow heuristics.

Icing builds around freezing with little wind and little sun to warm
the conductor surface. Snow accretion is flagged in a narrower band
just below/around 0 °C.
"""

from dlr.schemas.rating import IcingLevel, IcingSnowState, SnowOutlook


def _icing_level(air_temp_c: float, irradiance_w_m2: float, effective_wind_ms: float) -> IcingLevel:
    if -10 <= air_temp_c <= 1 and effective_wind_ms <= 3 and irradiance_w_m2 < 150:
        return IcingLevel.HIGH
    if -15 <= air_temp_c <= 2 and effective_wind_ms <= 5 and irradiance_w_m2 < 60:
        return IcingLevel.MODERATE
    return IcingLevel.LOW


def _snow_outlook(air_temp_c: float, irradiance_w_m2: float) -> SnowOutlook:
    if -5 <= air_temp_c <= 2 and irradiance_w_m2 < 200:
        return SnowOutlook.POSSIBLE
    return SnowOutlook.UNLIKELY


def classify(air_temp_c: float, irradiance_w_m2: float, effective_wind_ms: float) -> IcingSnowState:
    return IcingSnowState(
        icing=_icing_level(air_temp_c, irradiance_w_m2, effective_wind_ms),
        snow=_snow_outlook(air_temp_c, irradiance_w_m2),
    )
