"""
Error taxonomy for the quoting engine.

ValidationError carries every violated field rule, never just the first one.
NotFoundError means the referenced material is unknown or inactive.
"""

from .models import FieldError


class QuoteError(Exception):
    """Base class for all quoting errors."""


class ValidationError(QuoteError):

    def __init__(self, errors: list):
        self.errors = list(errors)
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in self.errors))

    def to_dict(self) -> dict:
        return {
            "detail": "Validation failed",
            "errors": [{"field": e.field, "message": e.message} for e in self.errors],
        }


class NotFoundError(QuoteError):
    pass


class MaterialIntegrityError(QuoteError):
    """A stored material has a sheet or usable area that is not positive."""


__all__ = [
    "FieldError",
    "QuoteError",
    "ValidationError",
    "NotFoundError",
    "MaterialIntegrityError",
]
