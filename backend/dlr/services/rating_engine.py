"""Rating engine: runs the thermal models for one set of ambient inputs.

effective wind -> conductor temperature at the given current -> ampacity
-> reference ampacity -> rating % -> risk, icing/snow, sag.

`evaluate` and `sweep` are pure; persistence lives in `record_evaluation`.
"""

import dataclasses
import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from dlr.conductor.definitions import (
    ConductorParameters,
    ReferenceCondition,
    default_conductor,
    reference_condition,
)
from dlr.config import settings
from dlr.database import SessionLocal
from dlr.models.evaluation import EvaluationRecord
from dlr.schemas.conditions import ConductorOverrides, ConvectionModelKind, EnvironmentalState
from dlr.schemas.rating import (
    EvaluationRecordSchema,
    LineRating,
    ModelComparison,
    SweepPoint,
    SweepResponse,
)
from dlr.services import icing, rating, risk, sag
from dlr.services.ampacity import reference_ampacity, solve_ampacity
from dlr.services.equilibrium import solve_conductor_temperature
from dlr.services.heat_flux import ConvectionModel, HeatBalance, get_convection_model
from dlr.services.wind import effective_wind_speed

logger = logging.getLogger(__name__)

SWEEP_PARAMETERS = ("air_temp_c", "wind_mean_ms", "wind_gust_ms", "irradiance_w_m2", "current_a")


def apply_overrides(
    conductor: ConductorParameters, overrides: ConductorOverrides | None,
) -> ConductorParameters:
    if overrides is None:
        return conductor
    changes = overrides.model_dump(exclude_none=True)
    if not changes:
        return conductor
    return dataclasses.replace(conductor, name=f"{conductor.name} (custom)", **changes)


def build_balance(
    kind: ConvectionModelKind,
    conductor: ConductorParameters | None = None,
    convection: ConvectionModel | None = None,
) -> HeatBalance:
    return HeatBalance(
        conductor=conductor or default_conductor(),
        convection=convection or get_convection_model(kind),
    )


def evaluate(
    state: EnvironmentalState,
    conductor: ConductorParameters | None = None,
    convection: ConvectionModel | None = None,
    reference: ReferenceCondition | None = None,
) -> LineRating:
    """Evaluate line rating, temperature and risk flags for one ambient state."""
    balance = build_balance(state.convection_model, conductor, convection)
    reference = reference or reference_condition()

    v_eff = effective_wind_speed(state.wind_mean_ms, state.wind_gust_ms)
    thermal = solve_conductor_temperature(
        balance, state.air_temp_c, v_eff, state.irradiance_w_m2, state.current_a,
    )
    tc = thermal.temperature_c

    ampacity = solve_ampacity(balance, state.air_temp_c, v_eff, state.irradiance_w_m2)
    ref_ampacity = reference_ampacity(balance, reference)
    pct = rating.rating_percent(ampacity, ref_ampacity)

    level = risk.classify(state.air_temp_c, v_eff, tc, state.current_a, ampacity)
    ice_snow = icing.classify(state.air_temp_c, state.irradiance_w_m2, v_eff)

    hot_spot = tc >= settings.hot_spot_temp_c and v_eff < settings.hot_spot_wind_ms

    return LineRating(
        convection_model=balance.convection.kind,
        effective_wind_ms=v_eff,
        conductor_temp_c=tc,
        temp_limit_c=balance.temp_limit_c,
        ampacity_a=ampacity,
        reference_ampacity_a=ref_ampacity,
        rating_pct=pct,
        capacity_delta_pct=rating.capacity_delta_pct(pct),
        risk_level=level,
        icing=ice_snow.icing,
        snow=ice_snow.snow,
        sag_px=sag.estimate_sag(tc, v_eff),
        converged=thermal.converged,
        saturated=thermal.saturated,
        hot_spot_warning=hot_spot,
        heat_balance=balance.breakdown(
            state.air_temp_c, v_eff, state.irradiance_w_m2, state.current_a, tc,
        ),
    )


def compare_models(
    state: EnvironmentalState, conductor: ConductorParameters | None = None,
) -> ModelComparison:
    """Evaluate the same state under both convection variants."""
    heuristic = evaluate(
        state.model_copy(update={"convection_model": ConvectionModelKind.HEURISTIC}), conductor,
    )
    split = evaluate(
        state.model_copy(update={"convection_model": ConvectionModelKind.SPLIT}), conductor,
    )
    return ModelComparison(
        heuristic=heuristic,
        split=split,
        temperature_spread_c=split.conductor_temp_c - heuristic.conductor_temp_c,
        ampacity_spread_a=split.ampacity_a - heuristic.ampacity_a,
    )


def sweep(
    base: EnvironmentalState,
    parameter: str,
    values: list[float],
    conductor: ConductorParameters | None = None,
) -> SweepResponse:
    """Evaluate one input axis over `values`, other inputs held at `base`.

    Raises ValueError for an unknown axis or more points than allowed.
    """
    if parameter not in SWEEP_PARAMETERS:
        raise ValueError(f"Unknown sweep parameter: {parameter}")
    if len(values) > settings.max_sweep_points:
        raise ValueError(
            f"Sweep has {len(values)} points, limit is {settings.max_sweep_points}"
        )

    points: list[SweepPoint] = []
    for value in values:
        # Re-validate so negative wind/irradiance/current are rejected like any input
        state = EnvironmentalState.model_validate({**base.model_dump(), parameter: value})
        points.append(SweepPoint(value=value, rating=evaluate(state, conductor)))

    balance = build_balance(base.convection_model, conductor)
    logger.info("Sweep over %s: %d points (%s model)", parameter, len(points), base.convection_model.value)
    return SweepResponse(
        parameter=parameter,
        reference_ampacity_a=reference_ampacity(balance, reference_condition()),
        points=points,
    )


def record_evaluation(
    state: EnvironmentalState,
    result: LineRating,
    conductor_name: str | None = None,
) -> int | None:
    """Persist one evaluation. Returns the record id, or None if the write failed."""
    db: Session = SessionLocal()
    try:
        record = EvaluationRecord(
            evaluated_at=datetime.now(timezone.utc),
            convection_model=result.convection_model.value,
            conductor_name=conductor_name or settings.conductor_name,
            air_temp_c=state.air_temp_c,
            wind_mean_ms=state.wind_mean_ms,
            wind_gust_ms=state.wind_gust_ms,
            irradiance_w_m2=state.irradiance_w_m2,
            current_a=state.current_a,
            effective_wind_ms=result.effective_wind_ms,
            conductor_temp_c=result.conductor_temp_c,
            ampacity_a=result.ampacity_a,
            reference_ampacity_a=result.reference_ampacity_a,
            rating_pct=result.rating_pct,
            risk_level=result.risk_level.value,
            icing=result.icing.value,
            snow=result.snow.value,
            sag_px=result.sag_px,
            saturated=result.saturated,
        )
        db.add(record)
        db.commit()
        return record.id
    except Exception as e:
        db.rollback()
        logger.error("Failed to persist evaluation: %s", e)
        return None
    finally:
        db.close()


def get_recent_evaluations(limit: int | None = None) -> list[EvaluationRecordSchema]:
    limit = limit or settings.history_default_limit
    db: Session = SessionLocal()
    try:
        rows = (
            db.query(EvaluationRecord)
            .order_by(EvaluationRecord.id.desc())
            .limit(limit)
            .all()
        )
        return [EvaluationRecordSchema.model_validate(r) for r in rows]
    finally:
        db.close()
