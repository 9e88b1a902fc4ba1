"""
Large-format print calculator.

Priced by linear meters of roll consumed: only the height drives cost.
Width is validated for sanity but never enters the formula; whether it fits
on the roll is checked separately by validate_roll_width().
"""

import logging

from .base import BaseCalculator
from ..models import FieldError, PrintMaterialKind, PrintPrice, PrintQuoteResult

logger = logging.getLogger(__name__)

# MXN per linear meter. Roll widths in cm.
DEFAULT_PRINT_PRICES = {
    PrintMaterialKind.VINYL: PrintPrice(normal=150.0, promotional=120.0, max_width_cm=150.0),
    PrintMaterialKind.BANNER: PrintPrice(normal=135.0, promotional=120.0, max_width_cm=180.0),
    PrintMaterialKind.TRANSPARENT_VINYL: PrintPrice(normal=180.0, promotional=160.0, max_width_cm=150.0),
}


def parse_material_kind(material):
    """Returns the PrintMaterialKind for a kind or its string value, or None."""
    if isinstance(material, PrintMaterialKind):
        return material
    try:
        return PrintMaterialKind(material)
    except ValueError:
        return None


def validate_roll_width(width, material, price_table: dict = None) -> list:
    """Form-layer rule: the print must fit the material's roll."""
    table = price_table or DEFAULT_PRINT_PRICES
    kind = parse_material_kind(material)
    if kind is None or kind not in table:
        return []
    if isinstance(width, (int, float)) and width > table[kind].max_width_cm:
        return [FieldError(
            "width",
            f"width exceeds the {table[kind].max_width_cm:g} cm roll for {kind.value}",
        )]
    return []


class PrintQuoteCalculator(BaseCalculator):

    def __init__(self, price_table: dict = None, tax_rate: float = None):
        super().__init__(tax_rate=tax_rate)
        self.price_table = price_table or DEFAULT_PRINT_PRICES

    def validate(self, width, height, material) -> list:
        errors = []
        self.check_positive(errors, "width", width)
        self.check_positive(errors, "height", height)
        kind = parse_material_kind(material)
        if kind is None or kind not in self.price_table:
            valid = ", ".join(k.value for k in self.price_table)
            errors.append(FieldError("material", f"material must be one of: {valid}"))
        return errors

    def calculate(self, width, height, material, is_promotion: bool = False) -> PrintQuoteResult:
        self.raise_if_invalid(self.validate(width, height, material))
        kind = parse_material_kind(material)
        prices = self.price_table[kind]

        linear_meters = height / 100.0
        unit_price = prices.promotional if is_promotion else prices.normal
        subtotal = linear_meters * unit_price
        tax, total = self.apply_tax(subtotal)

        logger.debug("Print quote: %s %.2f m x %.2f = %.2f", kind.value, linear_meters, unit_price, total)

        return PrintQuoteResult(
            width=width,
            height=height,
            material=kind,
            is_promotion=bool(is_promotion),
            area=linear_meters,
            unit_price=unit_price,
            subtotal=subtotal,
            tax=tax,
            total=total,
            has_bulk_discount=False,
        )
