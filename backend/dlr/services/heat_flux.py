"""Per-metre heat balance of an overhead conductor.

    q_joule(I, Tc) + q_solar(G)  =  q_conv(v, Ta, Tc) + q_rad(Ta, Tc)      [W/m]

q_joule = I² · R(Tc),  R(Tc) = R_ref · (1 + α_R · (Tc - T_ref))
q_solar = absorptivity · G · D          (projected area per metre ≈ D)
q_rad   = ε · σ · (TcK⁴ - TaK⁴) · π·D

Convection has two interchangeable variants:

- heuristic: q_conv = h(v) · (Tc - Ta) · π·D with h(v) = 5 + 8·√(v + 0.1)
- split:     q_conv = Cn·ΔT^n·D^0.75 + Cf·v^m·ΔT^n·D^0.75, ΔT floored at 0

Parameters are illustrative and not calibrated to a specific conductor.
"""

import math
from dataclasses import dataclass
from typing import Protocol

from dlr.conductor.definitions import ConductorParameters
from dlr.config import settings
from dlr.schemas.conditions import ConvectionModelKind
from dlr.schemas.rating import HeatBalanceBreakdown

STEFAN_BOLTZMANN = 5.670374419e-8  # W/(m²·K⁴)
KELVIN_OFFSET = 273.15

# Floor for R(Tc), keeps the resistance strictly positive on any clamped domain
_MIN_RESISTANCE_OHM_M = 1e-12


def c_to_k(temp_c: float) -> float:
    return temp_c + KELVIN_OFFSET


def resistance(conductor: ConductorParameters, conductor_temp_c: float) -> float:
    """Conductor resistance [ohm/m] with a linear temperature coefficient."""
    r = conductor.resistance_ref_ohm_m * (
        1 + conductor.resistance_temp_coeff * (conductor_temp_c - conductor.resistance_ref_temp_c)
    )
    return max(_MIN_RESISTANCE_OHM_M, r)


def joule_flux(conductor: ConductorParameters, current_a: float, conductor_temp_c: float) -> float:
    return current_a * current_a * resistance(conductor, conductor_temp_c)


def solar_flux(conductor: ConductorParameters, irradiance_w_m2: float) -> float:
    return conductor.absorptivity * max(0.0, irradiance_w_m2) * conductor.diameter_m


def radiative_flux(conductor: ConductorParameters, air_temp_c: float, conductor_temp_c: float) -> float:
    tk = c_to_k(conductor_temp_c)
    tak = c_to_k(air_temp_c)
    return conductor.emissivity * STEFAN_BOLTZMANN * (tk ** 4 - tak ** 4) * conductor.perimeter_m


def radiative_slope(conductor: ConductorParameters, conductor_temp_c: float) -> float:
    """d(q_rad)/d(Tc) [W/(m·K)]."""
    return 4 * conductor.emissivity * STEFAN_BOLTZMANN * c_to_k(conductor_temp_c) ** 3 * conductor.perimeter_m


class ConvectionModel(Protocol):
    kind: ConvectionModelKind

    def convective_flux(
        self, effective_wind_ms: float, air_temp_c: float, conductor_temp_c: float, diameter_m: float,
    ) -> float: ...

    def outflow_slope(
        self, balance: "HeatBalance", effective_wind_ms: float, air_temp_c: float, conductor_temp_c: float,
    ) -> float: ...


@dataclass(frozen=True)
class HeuristicConvection:
    base_coeff: float = 5.0
    wind_coeff: float = 8.0
    wind_offset_ms: float = 0.1
    kind: ConvectionModelKind = ConvectionModelKind.HEURISTIC

    def coefficient(self, effective_wind_ms: float) -> float:
        """h(v) [W/(m²·K)], a coarse empirical fit."""
        return self.base_coeff + self.wind_coeff * math.sqrt(max(0.0, effective_wind_ms) + self.wind_offset_ms)

    def convective_flux(
        self, effective_wind_ms: float, air_temp_c: float, conductor_temp_c: float, diameter_m: float,
    ) -> float:
        return self.coefficient(effective_wind_ms) * (conductor_temp_c - air_temp_c) * math.pi * diameter_m

    def outflow_slope(
        self, balance: "HeatBalance", effective_wind_ms: float, air_temp_c: float, conductor_temp_c: float,
    ) -> float:
        conductor = balance.conductor
        return (
            self.coefficient(effective_wind_ms) * conductor.perimeter_m
            + radiative_slope(conductor, conductor_temp_c)
        )


@dataclass(frozen=True)
class SplitConvection:
    natural_coeff: float = 3.8
    forced_coeff: float = 3.0
    delta_exponent: float = 1.25
    wind_exponent: float = 0.6
    diameter_exponent: float = 0.75
    slope_probe_c: float = 0.5
    kind: ConvectionModelKind = ConvectionModelKind.SPLIT

    def natural_flux(self, air_temp_c: float, conductor_temp_c: float, diameter_m: float) -> float:
        delta = max(0.0, conductor_temp_c - air_temp_c)
        return self.natural_coeff * delta ** self.delta_exponent * diameter_m ** self.diameter_exponent

    def forced_flux(
        self, effective_wind_ms: float, air_temp_c: float, conductor_temp_c: float, diameter_m: float,
    ) -> float:
        delta = max(0.0, conductor_temp_c - air_temp_c)
        wind = max(0.0, effective_wind_ms)
        return (
            self.forced_coeff
            * wind ** self.wind_exponent
            * delta ** self.delta_exponent
            * diameter_m ** self.diameter_exponent
        )

    def convective_flux(
        self, effective_wind_ms: float, air_temp_c: float, conductor_temp_c: float, diameter_m: float,
    ) -> float:
        return (
            self.natural_flux(air_temp_c, conductor_temp_c, diameter_m)
            + self.forced_flux(effective_wind_ms, air_temp_c, conductor_temp_c, diameter_m)
        )

    def outflow_slope(
        self, balance: "HeatBalance", effective_wind_ms: float, air_temp_c: float, conductor_temp_c: float,
    ) -> float:
        # Forward difference over the whole outflow (convective + radiative)
        probe = self.slope_probe_c
        upper = balance.outflow(air_temp_c, effective_wind_ms, conductor_temp_c + probe)
        lower = balance.outflow(air_temp_c, effective_wind_ms, conductor_temp_c)
        return (upper - lower) / probe


@dataclass(frozen=True)
class HeatBalance:
    """Heat balance of one conductor under one convection variant."""

    conductor: ConductorParameters
    convection: ConvectionModel

    @property
    def temp_limit_c(self) -> float:
        return self.conductor.max_temp_c

    def lower_bound_c(self, air_temp_c: float) -> float:
        # Air hotter than the limit pins the conductor at the limit
        return min(air_temp_c + self.conductor.min_delta_c, self.conductor.max_temp_c)

    def inflow(self, irradiance_w_m2: float, current_a: float, conductor_temp_c: float) -> float:
        return (
            joule_flux(self.conductor, current_a, conductor_temp_c)
            + solar_flux(self.conductor, irradiance_w_m2)
        )

    def outflow(self, air_temp_c: float, effective_wind_ms: float, conductor_temp_c: float) -> float:
        return (
            self.convection.convective_flux(
                effective_wind_ms, air_temp_c, conductor_temp_c, self.conductor.diameter_m,
            )
            + radiative_flux(self.conductor, air_temp_c, conductor_temp_c)
        )

    def residual(
        self,
        air_temp_c: float,
        effective_wind_ms: float,
        irradiance_w_m2: float,
        current_a: float,
        conductor_temp_c: float,
    ) -> float:
        """Net heating [W/m]; positive means the conductor would still warm up."""
        return (
            self.inflow(irradiance_w_m2, current_a, conductor_temp_c)
            - self.outflow(air_temp_c, effective_wind_ms, conductor_temp_c)
        )

    def outflow_slope(self, air_temp_c: float, effective_wind_ms: float, conductor_temp_c: float) -> float:
        return self.convection.outflow_slope(self, effective_wind_ms, air_temp_c, conductor_temp_c)

    def breakdown(
        self,
        air_temp_c: float,
        effective_wind_ms: float,
        irradiance_w_m2: float,
        current_a: float,
        conductor_temp_c: float,
    ) -> HeatBalanceBreakdown:
        return HeatBalanceBreakdown(
            joule_w_m=joule_flux(self.conductor, current_a, conductor_temp_c),
            solar_w_m=solar_flux(self.conductor, irradiance_w_m2),
            convective_w_m=self.convection.convective_flux(
                effective_wind_ms, air_temp_c, conductor_temp_c, self.conductor.diameter_m,
            ),
            radiative_w_m=radiative_flux(self.conductor, air_temp_c, conductor_temp_c),
            resistance_ohm_m=resistance(self.conductor, conductor_temp_c),
        )


def get_convection_model(kind: ConvectionModelKind | str) -> HeuristicConvection | SplitConvection:
    """Configured instance of the requested convection variant."""
    kind = ConvectionModelKind(kind)
    if kind is ConvectionModelKind.SPLIT:
        return SplitConvection(
            natural_coeff=settings.split_natural_coeff,
            forced_coeff=settings.split_forced_coeff,
            delta_exponent=settings.split_delta_exponent,
            wind_exponent=settings.split_wind_exponent,
            diameter_exponent=settings.split_diameter_exponent,
            slope_probe_c=settings.split_slope_probe_c,
        )
    return HeuristicConvection(
        base_coeff=settings.heuristic_base_coeff,
        wind_coeff=settings.heuristic_wind_coeff,
        wind_offset_ms=settings.heuristic_wind_offset_ms,
    )
