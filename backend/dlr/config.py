from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "DLR_"}

    # Database
    database_url: str = Field(default="sqlite:///./dlr.db")

    # Conductor (illustrative ACSR-like values, not a datasheet)
    conductor_name: str = Field(default="ACSR-28mm")
    conductor_diameter_m: float = Field(default=0.028)
    conductor_resistance_ref_ohm_m: float = Field(default=3.0e-5)  # ~0.03 ohm/km
    conductor_resistance_ref_temp_c: float = Field(default=20.0)
    conductor_resistance_temp_coeff: float = Field(default=0.0039)  # 1/K
    conductor_emissivity: float = Field(default=0.8)
    conductor_absorptivity: float = Field(default=0.5)
    conductor_max_temp_c: float = Field(default=80.0)
    conductor_min_delta_c: float = Field(default=-5.0)  # Tc >= Ta - 5

    # Heuristic convection: h(v) = base + wind_coeff * sqrt(v + offset)  [W/m²K]
    heuristic_base_coeff: float = Field(default=5.0)
    heuristic_wind_coeff: float = Field(default=8.0)
    heuristic_wind_offset_ms: float = Field(default=0.1)

    # Split convection: natural + forced, both scaled by D^0.75
    split_natural_coeff: float = Field(default=3.8)
    split_forced_coeff: float = Field(default=3.0)
    split_delta_exponent: float = Field(default=1.25)
    split_wind_exponent: float = Field(default=0.6)
    split_diameter_exponent: float = Field(default=0.75)
    split_slope_probe_c: float = Field(default=0.5)

    # Wind blending
    gust_share: float = Field(default=0.35)

    # Static reference case for the rating percentage
    reference_air_temp_c: float = Field(default=35.0)
    reference_wind_ms: float = Field(default=0.6)
    reference_irradiance_w_m2: float = Field(default=800.0)

    # Risk thresholds
    risk_critical_load_ratio: float = Field(default=0.98)
    risk_critical_temp_c: float = Field(default=78.0)
    risk_elevated_load_ratio: float = Field(default=0.9)
    risk_hot_air_temp_c: float = Field(default=30.0)
    risk_hot_conductor_temp_c: float = Field(default=60.0)
    risk_calm_wind_ms: float = Field(default=2.0)
    risk_optimal_air_temp_c: float = Field(default=5.0)
    risk_optimal_wind_ms: float = Field(default=3.0)
    risk_optimal_load_ratio: float = Field(default=0.7)

    # Hot-spot marker (hot conductor in calm air)
    hot_spot_temp_c: float = Field(default=75.0)
    hot_spot_wind_ms: float = Field(default=2.0)

    # Sag display metric (px)
    sag_ref_px: float = Field(default=50.0)
    sag_ref_temp_c: float = Field(default=25.0)
    sag_temp_coeff: float = Field(default=0.005)
    sag_wind_lift_px: float = Field(default=0.5)
    sag_min_px: float = Field(default=30.0)
    sag_max_px: float = Field(default=120.0)

    # Batch sweeps
    max_sweep_points: int = Field(default=200)

    # History endpoint
    history_default_limit: int = Field(default=50)

    # CORS
    cors_origins: str = Field(default="http://localhost:5173,http://localhost:3000")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",")]


settings = Settings()
