"""Effective cooling wind from mean wind and gusts.

Gusts only partially raise the cooling wind: a fixed share of the
gust excess over the mean is added, approximating the turbulence
enhancement without a turbulence model.
"""

from dlr.config import settings


def effective_wind_speed(
    mean_ms: float,
    gust_ms: float,
    gust_share: float | None = None,
) -> float:
    """Blend mean and gust wind [m/s]. Never below the mean wind."""
    share = settings.gust_share if gust_share is None else gust_share
    mean_ms = max(0.0, mean_ms)
    gust_ms = max(0.0, gust_ms)
    if gust_ms <= mean_ms:
        return mean_ms
    return mean_ms + share * (gust_ms - mean_ms)
