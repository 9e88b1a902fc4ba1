from dataclasses import dataclass
from typing import Optional
import enum


# --- Enums ---

class PrintMaterialKind(str, enum.Enum):
    VINYL = "vinyl"
    BANNER = "banner"
    TRANSPARENT_VINYL = "transparent_vinyl"


class ConfigKey(str, enum.Enum):
    CUTTING_RATE_PER_MINUTE = "cutting_rate_per_minute"
    PROFIT_MARGIN = "profit_margin"
    ASSEMBLY_COST_PER_PIECE = "assembly_cost_per_piece"


# --- Value objects (frozen: created once, never mutated) ---

@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class PrintPrice:
    normal: float
    promotional: float
    max_width_cm: float


@dataclass(frozen=True)
class Material:
    """A laser-cut sheet stock. Dimensions in cm, thickness in mm."""
    id: str
    name: str
    thickness: float
    sheet_width: float
    sheet_height: float
    usable_width: float
    usable_height: float
    price_per_sheet: float
    is_active: bool = True
    color: Optional[str] = None
    finish: Optional[str] = None

    @property
    def sheet_area(self) -> float:
        return self.sheet_width * self.sheet_height

    @property
    def usable_area(self) -> float:
        return self.usable_width * self.usable_height


@dataclass(frozen=True)
class PrintQuoteResult:
    width: float
    height: float
    material: PrintMaterialKind
    is_promotion: bool
    area: float             # linear meters of roll
    unit_price: float
    subtotal: float
    tax: float
    total: float
    has_bulk_discount: bool = False


@dataclass(frozen=True)
class LaserQuoteInput:
    material_id: str
    piece_width: float
    piece_height: float
    quantity: int
    cutting_minutes: float
    requires_assembly: bool = False
    assembly_cost_per_piece: Optional[float] = None


@dataclass(frozen=True)
class LaserQuoteResult:
    material_id: str
    material: Material
    piece_width: float
    piece_height: float
    quantity: int
    cutting_minutes: float
    requires_assembly: bool
    assembly_cost_per_piece: float
    cutting_rate_per_minute: float
    profit_margin: float
    sheets_needed: int
    pieces_per_sheet: int
    material_cost: float
    cutting_cost: float
    assembly_cost: float
    profit: float
    subtotal: float         # includes margin, before tax
    tax: float
    total: float


@dataclass(frozen=True)
class LaserConfig:
    cutting_rate_per_minute: float
    profit_margin: float
    assembly_cost_per_piece: float
