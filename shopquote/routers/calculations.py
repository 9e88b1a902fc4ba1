"""
Quote calculation endpoints.

POST /api/calculations/print — linear-meter print quote.
POST /api/calculations/laser — laser-cut quote against a catalog material.

Validation errors are collected from every rule before anything is priced.
"""

import logging

from fastapi import APIRouter, Depends

from .. import schemas
from ..calculators.print_quote import validate_roll_width
from ..calculators.registry import get_calculator
from ..config_store import LaserConfigStore, get_config_store, validate_config
from ..errors import ValidationError
from ..material_catalog import MaterialCatalog, get_catalog
from ..models import ConfigKey, LaserQuoteInput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculations", tags=["calculations"])

print_calculator = get_calculator("print")
laser_calculator = get_calculator("laser")


@router.post("/print", response_model=schemas.PrintQuoteResponse)
def calculate_print_quote(request: schemas.PrintQuoteRequest):
    errors = print_calculator.validate(request.width, request.height, request.material)
    errors += validate_roll_width(request.width, request.material, print_calculator.price_table)
    if errors:
        raise ValidationError(errors)

    result = print_calculator.calculate(
        request.width, request.height, request.material, request.is_promotion,
    )
    logger.info("Print quote: %s, %.1f cm high, total %.2f", result.material.value, result.height, result.total)
    return schemas.PrintQuoteResponse.model_validate(result)


@router.post("/laser", response_model=schemas.LaserQuoteResponse)
def calculate_laser_quote(
    request: schemas.LaserQuoteRequest,
    catalog: MaterialCatalog = Depends(get_catalog),
    config: LaserConfigStore = Depends(get_config_store),
):
    quantity = request.quantity
    if float(quantity).is_integer():
        quantity = int(quantity)

    quote_input = LaserQuoteInput(
        material_id=request.material_id,
        piece_width=request.piece_width,
        piece_height=request.piece_height,
        quantity=quantity,
        cutting_minutes=request.cutting_minutes,
        requires_assembly=request.requires_assembly,
        assembly_cost_per_piece=request.assembly_cost_per_piece,
    )

    # Validate before touching the catalog
    errors = laser_calculator.validate(quote_input)
    errors += validate_config({
        k: v for k, v in {
            "cutting_rate_per_minute": request.cutting_rate_per_minute,
            "profit_margin": request.profit_margin,
        }.items() if v is not None
    })
    if errors:
        raise ValidationError(errors)

    material = catalog.get_active_material_by_id(request.material_id)

    rate = request.cutting_rate_per_minute
    if rate is None:
        rate = config.get(ConfigKey.CUTTING_RATE_PER_MINUTE)
    margin = request.profit_margin
    if margin is None:
        margin = config.get(ConfigKey.PROFIT_MARGIN)

    result = laser_calculator.calculate(
        quote_input,
        material,
        cutting_rate_per_minute=rate,
        assembly_cost_per_piece=config.get(ConfigKey.ASSEMBLY_COST_PER_PIECE),
        profit_margin=margin,
    )
    logger.info("Laser quote: material %s x%d, total %.2f", material.id, result.quantity, result.total)
    return schemas.LaserQuoteResponse.model_validate(result)
