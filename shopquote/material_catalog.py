"""
Laser material catalog.

In-memory store seeded with the shop's standard sheets. Materials are frozen
values; updates replace the stored record. The calculators only ever see
active materials, resolved through get_active_material_by_id().
"""

import dataclasses
import logging
import math
import threading
import uuid

from .errors import NotFoundError, ValidationError
from .models import FieldError, Material

logger = logging.getLogger(__name__)

# Standard 122 x 244 cm sheets, 1 cm trimmed per edge for clamping
DEFAULT_MATERIALS = [
    {
        "id": "1",
        "name": "MDF 3mm Blanco",
        "thickness": 3.0,
        "sheet_width": 122.0,
        "sheet_height": 244.0,
        "usable_width": 120.0,
        "usable_height": 240.0,
        "price_per_sheet": 250.0,
        "color": "Blanco",
        "finish": "Mate",
    },
    {
        "id": "2",
        "name": "Acrílico 3mm Transparente",
        "thickness": 3.0,
        "sheet_width": 122.0,
        "sheet_height": 244.0,
        "usable_width": 120.0,
        "usable_height": 240.0,
        "price_per_sheet": 450.0,
        "color": "Transparente",
        "finish": "Brillante",
    },
]

_POSITIVE_FIELDS = ("thickness", "sheet_width", "sheet_height", "usable_width", "usable_height")
_EDITABLE_FIELDS = {f.name for f in dataclasses.fields(Material)} - {"id"}


def _is_finite_number(value) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


def validate_material(material: Material) -> list:
    """Physical/pricing sanity checks for a stored material. Accumulates every error."""
    errors = []
    if not str(material.name or "").strip():
        errors.append(FieldError("name", "name is required"))
    for field in _POSITIVE_FIELDS:
        value = getattr(material, field)
        if not _is_finite_number(value) or value <= 0:
            errors.append(FieldError(field, f"{field} must be greater than 0"))
    price = material.price_per_sheet
    if not _is_finite_number(price) or price < 0:
        errors.append(FieldError("price_per_sheet", "price_per_sheet must be a non-negative number"))
    if not errors:
        if material.usable_width > material.sheet_width:
            errors.append(FieldError("usable_width", "usable_width cannot exceed sheet_width"))
        if material.usable_height > material.sheet_height:
            errors.append(FieldError("usable_height", "usable_height cannot exceed sheet_height"))
    return errors


class MaterialCatalog:

    def __init__(self, materials: list = None):
        self._lock = threading.Lock()
        self._materials: dict[str, Material] = {}
        seed = DEFAULT_MATERIALS if materials is None else materials
        for data in seed:
            material = data if isinstance(data, Material) else Material(**data)
            self._materials[material.id] = material

    def get_material(self, material_id: str) -> Material:
        """Any material, active or not. Raises NotFoundError."""
        material = self._materials.get(str(material_id))
        if material is None:
            raise NotFoundError(f"Material not found: {material_id}")
        return material

    def get_active_material_by_id(self, material_id: str) -> Material:
        material = self._materials.get(str(material_id))
        if material is None or not material.is_active:
            raise NotFoundError(f"Material not found or inactive: {material_id}")
        return material

    def list_materials(self, include_inactive: bool = False) -> list:
        materials = sorted(self._materials.values(), key=lambda m: m.name)
        if include_inactive:
            return materials
        return [m for m in materials if m.is_active]

    def add_material(self, **data) -> Material:
        material_id = str(data.pop("id", None) or uuid.uuid4().hex)
        unknown = set(data) - _EDITABLE_FIELDS
        if unknown:
            raise ValidationError([FieldError(f, f"unknown field: {f}") for f in sorted(unknown)])
        missing = sorted((set(_POSITIVE_FIELDS) | {"name", "price_per_sheet"}) - set(data))
        if missing:
            raise ValidationError([FieldError(f, f"{f} is required") for f in missing])

        material = Material(id=material_id, **data)
        errors = validate_material(material)
        if errors:
            raise ValidationError(errors)
        with self._lock:
            if material_id in self._materials:
                raise ValidationError([FieldError("id", f"material {material_id} already exists")])
            self._materials[material_id] = material
        logger.info("Added material %s (%s)", material.id, material.name)
        return material

    def update_material(self, material_id: str, **changes) -> Material:
        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            raise ValidationError([FieldError(f, f"unknown field: {f}") for f in sorted(unknown)])
        with self._lock:
            current = self.get_material(material_id)
            updated = dataclasses.replace(current, **changes)
            errors = validate_material(updated)
            if errors:
                raise ValidationError(errors)
            self._materials[updated.id] = updated
        logger.info("Updated material %s: %s", material_id, ", ".join(sorted(changes)))
        return updated

    def deactivate_material(self, material_id: str) -> Material:
        return self.update_material(material_id, is_active=False)


_catalog = MaterialCatalog()


def get_catalog() -> MaterialCatalog:
    """FastAPI dependency — the process-wide catalog."""
    return _catalog
