"""
Admin-tunable laser pricing defaults.

Seeded from Settings; admins change them at runtime through the
/laser/config endpoint. Values are passed into LaserQuoteCalculator per call,
never read by the calculator itself.
"""

import logging
import math
import threading

from .config import settings
from .errors import ValidationError
from .models import ConfigKey, FieldError, LaserConfig

logger = logging.getLogger(__name__)


def validate_config(values: dict) -> list:
    errors = []
    for key, value in values.items():
        if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
            errors.append(FieldError(key, f"{key} must be a number"))
            continue
        if key == ConfigKey.PROFIT_MARGIN.value and not 0 <= value <= 1:
            errors.append(FieldError(key, "profit_margin must be between 0 and 1"))
        elif value < 0:
            errors.append(FieldError(key, f"{key} cannot be negative"))
    return errors


class LaserConfigStore:

    def __init__(self, cutting_rate_per_minute: float = None, profit_margin: float = None,
                 assembly_cost_per_piece: float = None):
        self._lock = threading.Lock()
        self._values = {
            ConfigKey.CUTTING_RATE_PER_MINUTE.value: (
                settings.CUTTING_RATE_PER_MINUTE if cutting_rate_per_minute is None
                else cutting_rate_per_minute),
            ConfigKey.PROFIT_MARGIN.value: (
                settings.PROFIT_MARGIN if profit_margin is None else profit_margin),
            ConfigKey.ASSEMBLY_COST_PER_PIECE.value: (
                settings.ASSEMBLY_COST_PER_PIECE if assembly_cost_per_piece is None
                else assembly_cost_per_piece),
        }
        errors = validate_config(self._values)
        if errors:
            raise ValidationError(errors)

    def get(self, key) -> float:
        key = key.value if isinstance(key, ConfigKey) else key
        if key not in self._values:
            raise ValueError(
                f"Unknown config key: {key}. Available: {list(self._values.keys())}"
            )
        return self._values[key]

    def snapshot(self) -> LaserConfig:
        with self._lock:
            return LaserConfig(**self._values)

    def update(self, **values) -> LaserConfig:
        """Validates every value first; applies all of them or none."""
        unknown = [k for k in values if k not in self._values]
        if unknown:
            raise ValidationError([FieldError(k, f"unknown config key: {k}") for k in unknown])
        errors = validate_config(values)
        if errors:
            raise ValidationError(errors)
        with self._lock:
            self._values.update({k: float(v) for k, v in values.items()})
            config = LaserConfig(**self._values)
        logger.info("Laser config updated: %s", values)
        return config


_store = LaserConfigStore()


def get_config_store() -> LaserConfigStore:
    """FastAPI dependency — the process-wide config store."""
    return _store
