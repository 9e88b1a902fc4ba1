"""
Calculator registry — maps quote kinds to calculator classes.
"""

from .base import BaseCalculator
from .laser_quote import LaserQuoteCalculator
from .print_quote import PrintQuoteCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    "print": PrintQuoteCalculator,
    "laser": LaserQuoteCalculator,
}


def get_calculator(kind: str) -> BaseCalculator:
    """Returns an instance of the calculator for a quote kind, or raises ValueError."""
    if kind not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for quote kind: {kind}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[kind]()


def has_calculator(kind: str) -> bool:
    return kind in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    return list(CALCULATOR_REGISTRY.keys())
