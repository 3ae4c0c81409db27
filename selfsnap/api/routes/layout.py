from fastapi import APIRouter, HTTPException

from selfsnap.models.layout import GridLayoutOptions, GridSlotsResponse
from selfsnap.services.filters import FilterMode, ctx_filter
from selfsnap.services.layout import InvalidDimensions, compute_4grid_slots

router = APIRouter(tags=["layout"])


@router.post("/layout/slots", response_model=GridSlotsResponse)
async def get_grid_slots(options: GridLayoutOptions):
    try:
        slots = compute_4grid_slots(options)
    except InvalidDimensions as e:
        raise HTTPException(status_code=400, detail=str(e))
    return GridSlotsResponse(slots=slots)


@router.get("/filters")
async def list_filters():
    return {mode.value: ctx_filter(mode) for mode in FilterMode}
