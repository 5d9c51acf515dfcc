import math

MIN_REFERENCE_A = 1e-6
MAX_RATING_PCT = 300.0


def rating_percent(ampacity_a: float, reference_ampacity_a: float) -> float:
    """Dynamic rating as a percentage of the static reference ampacity, clamped to [0, 300]."""
    ratio = ampacity_a / max(MIN_REFERENCE_A, reference_ampacity_a)
    pct = 100.0 * ratio
    if not math.isfinite(pct):
        return 0.0
    return max(0.0, min(MAX_RATING_PCT, pct))


def capacity_delta_pct(rating_pct: float) -> float:
    """Gain (+) or loss (-) against the static rating, in percentage points."""
    return rating_pct - 100.0
