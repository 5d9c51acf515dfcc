"""Ampacity: the largest current keeping the conductor at its temperature limit.

Bisection on current over the equilibrium solver. Correctness relies on the
conductor temperature being non-decreasing in current for fixed ambient
conditions (more current only adds Joule heating, and R(Tc) grows with Tc).
This is not checked at runtime; the test suite asserts it for both
convection variants.

A midpoint "exceeds the limit" when its equilibrium is saturated, i.e. the
temperature is pinned at the limit while the balance is still heating.
The clamped temperature alone cannot tell a conductor sitting exactly at
the limit from one that would run far above it.
"""

import logging
from functools import lru_cache

from dlr.conductor.definitions import ReferenceCondition
from dlr.services.equilibrium import EquilibriumResult, solve_conductor_temperature
from dlr.services.heat_flux import HeatBalance

logger = logging.getLogger(__name__)

INITIAL_UPPER_A = 4000.0
GROWTH_FACTOR = 1.5
MAX_GROWTH_STEPS = 10
MAX_BISECTIONS = 40
TEMP_TOLERANCE_C = 0.05
CURRENT_TOLERANCE_A = 0.5


def _exceeds_limit(result: EquilibriumResult, limit_c: float) -> bool:
    return result.saturated or result.temperature_c > limit_c


def solve_ampacity(
    balance: HeatBalance,
    air_temp_c: float,
    effective_wind_ms: float,
    irradiance_w_m2: float,
) -> float:
    """Maximum current [A] such that the conductor settles at its limit.

    Returns 0.0 when the conductor is already within tolerance of the
    limit at zero current (sun and ambient alone leave no margin).
    """
    limit = balance.temp_limit_c

    def solve(current_a: float) -> EquilibriumResult:
        return solve_conductor_temperature(
            balance, air_temp_c, effective_wind_ms, irradiance_w_m2, current_a,
        )

    at_zero = solve(0.0)
    if at_zero.saturated or at_zero.temperature_c >= limit - TEMP_TOLERANCE_C:
        logger.debug(
            "No current margin at Ta=%.1f, v=%.2f, G=%.0f (Tc(0)=%.2f)",
            air_temp_c, effective_wind_ms, irradiance_w_m2, at_zero.temperature_c,
        )
        return 0.0

    lo = 0.0
    hi = INITIAL_UPPER_A
    growth = 0
    while not _exceeds_limit(solve(hi), limit) and growth < MAX_GROWTH_STEPS:
        hi *= GROWTH_FACTOR
        growth += 1

    for _ in range(MAX_BISECTIONS):
        mid = 0.5 * (lo + hi)
        result = solve(mid)
        if _exceeds_limit(result, limit):
            hi = mid
        else:
            lo = mid
        near_limit = not result.saturated and abs(result.temperature_c - limit) < TEMP_TOLERANCE_C
        if near_limit or (hi - lo) < CURRENT_TOLERANCE_A:
            return mid
    return 0.5 * (lo + hi)


@lru_cache(maxsize=64)
def reference_ampacity(balance: HeatBalance, reference: ReferenceCondition) -> float:
    """Ampacity at the static reference case.

    Memoized by its frozen inputs so every evaluation under the same
    conductor and convection variant shares one denominator.
    """
    value = solve_ampacity(balance, reference.air_temp_c, reference.wind_ms, reference.irradiance_w_m2)
    logger.info(
        "Reference ampacity for %s/%s: %.1f A (Ta=%.1f, v=%.2f, G=%.0f)",
        balance.conductor.name, balance.convection.kind.value, value,
        reference.air_temp_c, reference.wind_ms, reference.irradiance_w_m2,
    )
    return value
