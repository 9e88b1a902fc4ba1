"""
Abstract base class for the quote calculators.

Validation accumulates every violated rule into a list of FieldError and never
raises mid-way; calculate() raises ValidationError once with the whole list.
Money is kept at full float precision: rounding to cents is a display concern.
"""

import logging
import math
from abc import ABC, abstractmethod

from ..config import settings
from ..errors import ValidationError
from ..models import FieldError

logger = logging.getLogger(__name__)


class BaseCalculator(ABC):
    """All quote calculators inherit from this."""

    def __init__(self, tax_rate: float = None):
        self.tax_rate = settings.TAX_RATE if tax_rate is None else tax_rate

    @abstractmethod
    def calculate(self, *args, **kwargs):
        pass

    # --- Helper methods for all calculators ---

    def apply_tax(self, subtotal: float) -> tuple:
        """Returns (tax, total). total is subtotal + tax so the pair always sums exactly."""
        tax = subtotal * self.tax_rate
        return tax, subtotal + tax

    def units_needed(self, needed: float, per_unit: float) -> int:
        """
        Whole stock units needed to cover an amount.
        Always rounds up — a partial sheet is still a sheet.
        """
        return math.ceil(needed / per_unit)

    def raise_if_invalid(self, errors: list):
        if errors:
            logger.info("%s rejected input: %s", type(self).__name__,
                        ", ".join(e.field for e in errors))
            raise ValidationError(errors)

    # --- Field checks: append to errors, never raise ---

    def check_positive(self, errors: list, field: str, value, message: str = None):
        if not _is_number(value) or not math.isfinite(value) or value <= 0:
            errors.append(FieldError(field, message or f"{field} must be greater than 0"))
            return False
        return True

    def check_max(self, errors: list, field: str, value: float, limit: float, unit: str = "cm"):
        if value > limit:
            errors.append(FieldError(field, f"{field} must be at most {limit:g} {unit}"))

    def check_whole_number(self, errors: list, field: str, value):
        if not _is_number(value) or not math.isfinite(value) or value != int(value) or value <= 0:
            errors.append(FieldError(field, f"{field} must be a positive whole number"))


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
