from fastapi import APIRouter, HTTPException, Query

from dlr.conductor.definitions import default_conductor, reference_condition
from dlr.config import settings
from dlr.schemas.conditions import ConvectionModelKind, EnvironmentalState, EvaluationRequest
from dlr.schemas.rating import (
    EvaluationRecordSchema,
    LineRating,
    ModelComparison,
    SweepRequest,
    SweepResponse,
)
from dlr.services import rating_engine
from dlr.services.ampacity import reference_ampacity

router = APIRouter(prefix="/rating", tags=["rating"])


@router.post("/evaluate", response_model=LineRating)
async def evaluate(req: EvaluationRequest, persist: bool = Query(False)):
    """Conductor temperature, ampacity and rating for one ambient state."""
    conductor = rating_engine.apply_overrides(default_conductor(), req.conductor)
    result = rating_engine.evaluate(req.state, conductor)
    if persist:
        rating_engine.record_evaluation(req.state, result, conductor.name)
    return result


@router.post("/compare", response_model=ModelComparison)
async def compare(req: EvaluationRequest):
    """Evaluate the state under both convection models."""
    conductor = rating_engine.apply_overrides(default_conductor(), req.conductor)
    return rating_engine.compare_models(req.state, conductor)


@router.post("/sweep", response_model=SweepResponse)
async def sweep(req: SweepRequest):
    try:
        return rating_engine.sweep(req.base, req.parameter, req.values)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/reference")
async def get_reference(model: ConvectionModelKind = Query(ConvectionModelKind.HEURISTIC)):
    """Static reference case and its ampacity for the given convection model."""
    ref = reference_condition()
    balance = rating_engine.build_balance(model)
    return {
        "convection_model": model.value,
        "air_temp_c": ref.air_temp_c,
        "wind_ms": ref.wind_ms,
        "irradiance_w_m2": ref.irradiance_w_m2,
        "ampacity_a": reference_ampacity(balance, ref),
    }


@router.get("/history", response_model=list[EvaluationRecordSchema])
async def get_history(limit: int = Query(settings.history_default_limit, ge=1, le=1000)):
    """Most recent persisted evaluations, newest first."""
    return rating_engine.get_recent_evaluations(limit)
