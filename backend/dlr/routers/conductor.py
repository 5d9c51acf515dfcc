import dataclasses

from fastapi import APIRouter

from dlr.conductor.definitions import default_conductor
from dlr.schemas.conditions import ConvectionModelKind
from dlr.services.heat_flux import get_convection_model

router = APIRouter(prefix="/conductor", tags=["conductor"])


@router.get("/")
async def get_conductor():
    """Configured conductor constants and convection coefficients."""
    conductor = default_conductor()
    return {
        **dataclasses.asdict(conductor),
        "perimeter_m": conductor.perimeter_m,
        "convection_models": {
            kind.value: dataclasses.asdict(get_convection_model(kind))
            for kind in ConvectionModelKind
        },
    }
