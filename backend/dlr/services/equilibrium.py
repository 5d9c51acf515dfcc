"""Steady-state conductor temperature for a given current.

Damped Newton-style iteration on the heat balance residual: each step
divides the net heating by the slope of the outgoing flux and the
result is clamped to [Ta - 5 °C, temperature limit]. A result pinned
at a bound after the iteration budget is a saturated estimate, not an
error.
"""

import logging
from dataclasses import dataclass

from dlr.services.heat_flux import HeatBalance

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 60
STEP_TOLERANCE_C = 0.02
INITIAL_OFFSET_C = 10.0
MIN_SLOPE = 1e-6  # W/(m·K)


@dataclass(frozen=True)
class EquilibriumResult:
    temperature_c: float
    iterations: int
    converged: bool
    saturated: bool = False  # pinned at the limit, balance still heating there


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def solve_conductor_temperature(
    balance: HeatBalance,
    air_temp_c: float,
    effective_wind_ms: float,
    irradiance_w_m2: float,
    current_a: float,
) -> EquilibriumResult:
    lo = balance.lower_bound_c(air_temp_c)
    hi = balance.temp_limit_c
    current_a = max(0.0, current_a)

    tc = _clamp(air_temp_c + INITIAL_OFFSET_C, lo, hi)
    converged = False
    iterations = 0
    for iterations in range(1, MAX_ITERATIONS + 1):
        resid = balance.residual(air_temp_c, effective_wind_ms, irradiance_w_m2, current_a, tc)
        slope = balance.outflow_slope(air_temp_c, effective_wind_ms, tc)
        step = resid / max(MIN_SLOPE, slope)
        tc = _clamp(tc + step, lo, hi)
        if abs(step) < STEP_TOLERANCE_C:
            converged = True
            break

    saturated = tc >= hi and balance.residual(
        air_temp_c, effective_wind_ms, irradiance_w_m2, current_a, hi,
    ) > 0

    if not converged:
        logger.debug(
            "Conductor temperature not converged after %d iterations "
            "(Ta=%.1f, v=%.2f, G=%.0f, I=%.1f) -> %.2f C, saturated=%s",
            iterations, air_temp_c, effective_wind_ms, irradiance_w_m2, current_a, tc, saturated,
        )

    return EquilibriumResult(
        temperature_c=tc,
        iterations=iterations,
        converged=converged,
        saturated=saturated,
    )
