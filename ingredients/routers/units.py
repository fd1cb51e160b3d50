"""
Router for cup normalization.
"""

from fastapi import APIRouter, HTTPException

from ..errors import UnconvertibleUnit
from ..schemas import CupsRequest, CupsResponse
from ..services.ingredient_normalize import pluralize
from ..services.unit_conversion import WHOLE, cups_to_measure, estimate_weight, normalize_to_cups

router = APIRouter()


@router.post("/cups", response_model=CupsResponse)
def convert_to_cups(req: CupsRequest):
    """
    Convert an amount of an ingredient into cups, with a readable equivalent.
    """
    try:
        cups = normalize_to_cups(req.ingredient, req.unit, req.amount)
    except UnconvertibleUnit as e:
        raise HTTPException(status_code=422, detail=str(e))

    amount, measure, rendered = cups_to_measure(cups, req.ingredient)
    unit = measure
    if amount > 1 and measure != WHOLE:
        unit = pluralize(measure)
    return CupsResponse(
        cups=cups,
        weight=estimate_weight(req.ingredient, req.unit, req.amount, cups),
        display_amount=amount,
        display_unit=measure,
        display=f"{rendered} {unit}",
    )
