"""Operating risk of the line from ambient state and loading.

Rules are evaluated in order and the first match wins:
Critical -> Elevated -> Optimal -> Normal.
"""

from dlr.config import settings
from dlr.schemas.rating import RiskLevel


def classify(
    air_temp_c: float,
    effective_wind_ms: float,
    conductor_temp_c: float,
    current_a: float,
    ampacity_a: float,
) -> RiskLevel:
    if (
        current_a >= settings.risk_critical_load_ratio * ampacity_a
        or conductor_temp_c >= settings.risk_critical_temp_c
    ):
        return RiskLevel.CRITICAL

    calm = effective_wind_ms < settings.risk_calm_wind_ms
    if (
        (air_temp_c > settings.risk_hot_air_temp_c and calm)
        or (conductor_temp_c > settings.risk_hot_conductor_temp_c and calm)
        or current_a >= settings.risk_elevated_load_ratio * ampacity_a
    ):
        return RiskLevel.ELEVATED

    if (
        air_temp_c < settings.risk_optimal_air_temp_c
        and effective_wind_ms > settings.risk_optimal_wind_ms
        and current_a <= settings.risk_optimal_load_ratio * ampacity_a
    ):
        return RiskLevel.OPTIMAL

    return RiskLevel.NORMAL
