"""
Laser-cut calculator.

Stage order (margin is applied to the sum of direct costs, tax to the price
with margin):
  material (by area used) + cutting (minutes x rate) + assembly (per piece)
  -> + profit margin -> + tax

sheets_needed is an area ratio rounded up, for inventory only; it is not a
nesting result and does not feed material_cost.
"""

import logging
import math

from .base import BaseCalculator
from ..config import settings
from ..errors import MaterialIntegrityError, NotFoundError
from ..models import LaserQuoteInput, LaserQuoteResult, Material

logger = logging.getLogger(__name__)

DEFAULT_CUTTING_RATE_PER_MINUTE = 8.0
DEFAULT_ASSEMBLY_COST_PER_PIECE = 0.0
DEFAULT_PROFIT_MARGIN = 0.50


def pieces_per_sheet(piece_width: float, piece_height: float,
                     usable_width: float, usable_height: float) -> int:
    """Whole pieces that fit on one usable sheet, best of the two orientations."""
    upright = math.floor(usable_width / piece_width) * math.floor(usable_height / piece_height)
    rotated = math.floor(usable_width / piece_height) * math.floor(usable_height / piece_width)
    return max(upright, rotated)


class LaserQuoteCalculator(BaseCalculator):

    def __init__(self, max_piece_width: float = None, max_piece_height: float = None,
                 tax_rate: float = None):
        super().__init__(tax_rate=tax_rate)
        self.max_piece_width = (settings.LASER_MAX_PIECE_WIDTH_CM
                                if max_piece_width is None else max_piece_width)
        self.max_piece_height = (settings.LASER_MAX_PIECE_HEIGHT_CM
                                 if max_piece_height is None else max_piece_height)

    def validate(self, quote_input: LaserQuoteInput) -> list:
        errors = []
        width_ok = self.check_positive(errors, "piece_width", quote_input.piece_width)
        height_ok = self.check_positive(errors, "piece_height", quote_input.piece_height)
        self.check_whole_number(errors, "quantity", quote_input.quantity)
        self.check_positive(errors, "cutting_minutes", quote_input.cutting_minutes)

        # Machine bed limits (inclusive)
        if width_ok:
            self.check_max(errors, "piece_width", quote_input.piece_width, self.max_piece_width)
        if height_ok:
            self.check_max(errors, "piece_height", quote_input.piece_height, self.max_piece_height)
        return errors

    def check_material(self, material: Material):
        """Stored dimensions must be finite and positive, the price finite and non-negative."""
        dimensions = (material.sheet_width, material.sheet_height,
                      material.usable_width, material.usable_height,
                      material.sheet_area, material.usable_area)
        if not all(math.isfinite(v) and v > 0 for v in dimensions):
            raise MaterialIntegrityError(
                f"Material {material.id} has an invalid sheet or usable area "
                f"(sheet={material.sheet_area}, usable={material.usable_area})"
            )
        price = material.price_per_sheet
        if not math.isfinite(price) or price < 0:
            raise MaterialIntegrityError(
                f"Material {material.id} has an invalid price_per_sheet ({price})"
            )

    def calculate(self, quote_input: LaserQuoteInput, material: Material,
                  cutting_rate_per_minute: float = DEFAULT_CUTTING_RATE_PER_MINUTE,
                  assembly_cost_per_piece: float = DEFAULT_ASSEMBLY_COST_PER_PIECE,
                  profit_margin: float = DEFAULT_PROFIT_MARGIN) -> LaserQuoteResult:
        self.raise_if_invalid(self.validate(quote_input))

        if material is None or not material.is_active:
            raise NotFoundError(f"Material not found or inactive: {quote_input.material_id}")

        self.check_material(material)
        sheet_area = material.sheet_area
        usable_area = material.usable_area

        # 1. Material consumed
        piece_area = quote_input.piece_width * quote_input.piece_height
        total_area_needed = piece_area * quote_input.quantity
        price_per_cm2 = material.price_per_sheet / sheet_area
        sheets_needed = self.units_needed(total_area_needed, usable_area)

        # 2. Direct costs
        material_cost = total_area_needed * price_per_cm2
        cutting_cost = quote_input.cutting_minutes * cutting_rate_per_minute
        # A per-request override wins over the configured default, even 0
        per_piece = (quote_input.assembly_cost_per_piece
                     if quote_input.assembly_cost_per_piece is not None
                     else assembly_cost_per_piece)
        assembly_cost = quote_input.quantity * per_piece if quote_input.requires_assembly else 0.0
        direct_costs = material_cost + cutting_cost + assembly_cost

        # 3. Margin, then tax on the sale price
        profit = direct_costs * profit_margin
        price_without_tax = direct_costs + profit
        tax, total = self.apply_tax(price_without_tax)

        logger.debug(
            "Laser quote: %s x%d, %d sheet(s), direct=%.2f subtotal=%.2f total=%.2f",
            material.id, quote_input.quantity, sheets_needed, direct_costs, price_without_tax, total,
        )

        return LaserQuoteResult(
            material_id=quote_input.material_id,
            material=material,
            piece_width=quote_input.piece_width,
            piece_height=quote_input.piece_height,
            quantity=quote_input.quantity,
            cutting_minutes=quote_input.cutting_minutes,
            requires_assembly=quote_input.requires_assembly,
            assembly_cost_per_piece=per_piece,
            cutting_rate_per_minute=cutting_rate_per_minute,
            profit_margin=profit_margin,
            sheets_needed=sheets_needed,
            pieces_per_sheet=pieces_per_sheet(
                quote_input.piece_width, quote_input.piece_height,
                material.usable_width, material.usable_height,
            ),
            material_cost=material_cost,
            cutting_cost=cutting_cost,
            assembly_cost=assembly_cost,
            profit=profit,
            subtotal=price_without_tax,
            tax=tax,
            total=total,
        )
