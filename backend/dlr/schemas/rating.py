from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from dlr.schemas.conditions import ConvectionModelKind, EnvironmentalState


class RiskLevel(str, Enum):
    NORMAL = "Normal"
    ELEVATED = "Elevated"
    CRITICAL = "Critical"
    OPTIMAL = "Optimal"


class IcingLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class SnowOutlook(str, Enum):
    UNLIKELY = "unlikely"
    POSSIBLE = "possible"


class IcingSnowState(BaseModel):
    icing: IcingLevel = IcingLevel.LOW
    snow: SnowOutlook = SnowOutlook.UNLIKELY


class HeatBalanceBreakdown(BaseModel):
    """Per-metre heat fluxes [W/m] at the solved conductor temperature."""

    joule_w_m: float
    solar_w_m: float
    convective_w_m: float
    radiative_w_m: float
    resistance_ohm_m: float

    @property
    def inflow_w_m(self) -> float:
        return self.joule_w_m + self.solar_w_m

    @property
    def outflow_w_m(self) -> float:
        return self.convective_w_m + self.radiative_w_m


class LineRating(BaseModel):
    convection_model: ConvectionModelKind
    effective_wind_ms: float
    conductor_temp_c: float
    temp_limit_c: float
    ampacity_a: float
    reference_ampacity_a: float
    rating_pct: float  # 0-300
    capacity_delta_pct: float
    risk_level: RiskLevel
    icing: IcingLevel
    snow: SnowOutlook
    sag_px: float
    converged: bool = True
    saturated: bool = False
    hot_spot_warning: bool = False
    heat_balance: HeatBalanceBreakdown


class ModelComparison(BaseModel):
    heuristic: LineRating
    split: LineRating
    temperature_spread_c: float
    ampacity_spread_a: float


SweepParameter = Literal[
    "air_temp_c", "wind_mean_ms", "wind_gust_ms", "irradiance_w_m2", "current_a",
]


class SweepRequest(BaseModel):
    base: EnvironmentalState
    parameter: SweepParameter
    values: list[float] = Field(min_length=1)


class SweepPoint(BaseModel):
    value: float
    rating: LineRating


class SweepResponse(BaseModel):
    parameter: SweepParameter
    reference_ampacity_a: float
    points: list[SweepPoint] = []


class EvaluationRecordSchema(BaseModel):
    id: int
    evaluated_at: datetime
    convection_model: str
    air_temp_c: float
    wind_mean_ms: float
    wind_gust_ms: float
    irradiance_w_m2: float
    current_a: float
    effective_wind_ms: float
    conductor_temp_c: float
    ampacity_a: float
    reference_ampacity_a: float
    rating_pct: float
    risk_level: str
    icing: str
    snow: str
    sag_px: float

    model_config = {"from_attributes": True}
