from dlr.schemas.rating import IcingLevel, RiskLevel, SnowOutlook
from dlr.services import icing, risk, sag


# --- Risk ---

def test_risk_critical_near_ampacity():
    assert risk.classify(10, 5.0, 40, current_a=990, ampacity_a=1000) == RiskLevel.CRITICAL


def test_risk_critical_hot_conductor():
    assert risk.classify(10, 5.0, 78, current_a=100, ampacity_a=1000) == RiskLevel.CRITICAL


def test_risk_critical_when_no_ampacity():
    # Zero ampacity: any current (even 0) is at or above 98% of it
    assert risk.classify(40, 0.5, 79.9, current_a=0, ampacity_a=0) == RiskLevel.CRITICAL


def test_risk_elevated_hot_calm_air():
    assert risk.classify(32, 1.5, 45, current_a=300, ampacity_a=1000) == RiskLevel.ELEVATED


def test_risk_elevated_hot_conductor_calm():
    assert risk.classify(20, 1.0, 65, current_a=300, ampacity_a=1000) == RiskLevel.ELEVATED


def test_risk_elevated_high_loading():
    assert risk.classify(20, 6.0, 50, current_a=920, ampacity_a=1000) == RiskLevel.ELEVATED


def test_risk_optimal_cold_windy_light_load():
    assert risk.classify(0, 4.1, 7, current_a=600, ampacity_a=2200) == RiskLevel.OPTIMAL


def test_risk_optimal_requires_load_margin():
    # 75% loading: cold and windy but not optimal
    assert risk.classify(0, 4.1, 30, current_a=750, ampacity_a=1000) == RiskLevel.NORMAL


def test_risk_normal():
    assert risk.classify(15, 2.5, 30, current_a=500, ampacity_a=1200) == RiskLevel.NORMAL


def test_risk_first_match_wins():
    # Matches both Critical (Tc) and Elevated (hot calm air): Critical first
    assert risk.classify(35, 0.5, 79, current_a=100, ampacity_a=1000) == RiskLevel.CRITICAL


# --- Icing / snow ---

def test_icing_high():
    state = icing.classify(-2, 100, 2.0)
    assert state.icing == IcingLevel.HIGH
    assert state.snow == SnowOutlook.POSSIBLE


def test_icing_moderate():
    # Too windy for high, calm enough and dark enough for moderate
    state = icing.classify(-12, 30, 4.5)
    assert state.icing == IcingLevel.MODERATE
    assert state.snow == SnowOutlook.UNLIKELY


def test_icing_low_sunny():
    state = icing.classify(0, 400, 4.1)
    assert state.icing == IcingLevel.LOW
    assert state.snow == SnowOutlook.UNLIKELY


def test_icing_boundaries():
    assert icing.classify(1, 149, 3).icing == IcingLevel.HIGH
    assert icing.classify(1.5, 149, 3).icing == IcingLevel.LOW
    assert icing.classify(2, 59, 5).icing == IcingLevel.MODERATE
    assert icing.classify(-15, 59, 5).icing == IcingLevel.MODERATE
    assert icing.classify(-16, 0, 0).icing == IcingLevel.LOW


def test_snow_boundaries():
    assert icing.classify(-5, 199, 10).snow == SnowOutlook.POSSIBLE
    assert icing.classify(2, 0, 0).snow == SnowOutlook.POSSIBLE
    assert icing.classify(2.5, 0, 0).snow == SnowOutlook.UNLIKELY
    assert icing.classify(0, 200, 0).snow == SnowOutlook.UNLIKELY


# --- Sag display metric ---

def test_sag_reference_point():
    assert sag.estimate_sag(25, 0) == 50.0


def test_sag_increases_with_temperature():
    assert sag.estimate_sag(60, 2) > sag.estimate_sag(30, 2)


def test_sag_wind_lift():
    assert sag.estimate_sag(40, 10) < sag.estimate_sag(40, 0)


def test_sag_bounded():
    assert sag.estimate_sag(-300, 30) == 30.0
    assert sag.estimate_sag(500, 0) == 120.0
    for tc in range(-25, 81, 5):
        for v in (0, 4.1, 12):
            assert 30 <= sag.estimate_sag(tc, v) <= 120
