"""Line sag display metric.

Illustrative only: a bounded, monotone mapping from conductor temperature
and wind to a pixel offset for drawing the span. This is not a catenary
or mechanical sag calculation and must not be read as one.
"""

from dlr.config import settings


def estimate_sag(conductor_temp_c: float, effective_wind_ms: float) -> float:
    """Sag [px]: grows with conductor temperature, lifted slightly by wind."""
    sag = (
        settings.sag_ref_px * (1 + settings.sag_temp_coeff * (conductor_temp_c - settings.sag_ref_temp_c))
        - settings.sag_wind_lift_px * effective_wind_ms
    )
    return max(settings.sag_min_px, min(settings.sag_max_px, sag))
