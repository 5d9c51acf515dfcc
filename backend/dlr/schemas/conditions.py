from enum import Enum

from pydantic import BaseModel, Field


class ConvectionModelKind(str, Enum):
    HEURISTIC = "heuristic"  # single empirical coefficient h(v)
    SPLIT = "split"  # natural + forced terms


class EnvironmentalState(BaseModel):
    model_config = {"frozen": True}

    air_temp_c: float
    wind_mean_ms: float = Field(default=0.0, ge=0)
    wind_gust_ms: float = Field(default=0.0, ge=0)
    irradiance_w_m2: float = Field(default=0.0, ge=0)
    current_a: float = Field(default=0.0, ge=0)
    convection_model: ConvectionModelKind = ConvectionModelKind.HEURISTIC


class ConductorOverrides(BaseModel):
    """Per-request replacements for the configured conductor constants."""

    diameter_m: float | None = Field(default=None, gt=0)
    resistance_ref_ohm_m: float | None = Field(default=None, gt=0)
    resistance_ref_temp_c: float | None = None
    resistance_temp_coeff: float | None = Field(default=None, ge=0)
    emissivity: float | None = Field(default=None, ge=0, le=1)
    absorptivity: float | None = Field(default=None, ge=0, le=1)
    max_temp_c: float | None = None


class EvaluationRequest(BaseModel):
    state: EnvironmentalState
    conductor: ConductorOverrides | None = None
