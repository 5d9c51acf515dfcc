import math
from dataclasses import dataclass

from dlr.config import settings


@dataclass(frozen=True)
class ConductorParameters:
    name: str
    diameter_m: float
    resistance_ref_ohm_m: float  # ohm per metre at resistance_ref_temp_c
    resistance_ref_temp_c: float
    resistance_temp_coeff: float  # 1/K
    emissivity: float
    absorptivity: float
    max_temp_c: float  # design limit the ampacity search targets
    min_delta_c: float = -5.0  # lower bound is air temperature + min_delta_c

    @property
    def perimeter_m(self) -> float:
        """Heat exchange surface per metre of conductor."""
        return math.pi * self.diameter_m


@dataclass(frozen=True)
class ReferenceCondition:
    """Conservative static case the dynamic rating is compared against."""

    air_temp_c: float
    wind_ms: float
    irradiance_w_m2: float


def default_conductor() -> ConductorParameters:
    return ConductorParameters(
        name=settings.conductor_name,
        diameter_m=settings.conductor_diameter_m,
        resistance_ref_ohm_m=settings.conductor_resistance_ref_ohm_m,
        resistance_ref_temp_c=settings.conductor_resistance_ref_temp_c,
        resistance_temp_coeff=settings.conductor_resistance_temp_coeff,
        emissivity=settings.conductor_emissivity,
        absorptivity=settings.conductor_absorptivity,
        max_temp_c=settings.conductor_max_temp_c,
        min_delta_c=settings.conductor_min_delta_c,
    )


def reference_condition() -> ReferenceCondition:
    return ReferenceCondition(
        air_temp_c=settings.reference_air_temp_c,
        wind_ms=settings.reference_wind_ms,
        irradiance_w_m2=settings.reference_irradiance_w_m2,
    )
