from pydantic import BaseModel
from typing import Optional, List, Any
from .models import PrintMaterialKind


class FieldErrorOut(BaseModel):
    field: str
    message: str
    class Config:
        from_attributes = True


class ErrorResponse(BaseModel):
    detail: str
    errors: List[FieldErrorOut] = []


# --- Print ---

class PrintQuoteRequest(BaseModel):
    width: float
    height: float
    # Plain string so an unknown kind is reported with the other field errors
    material: Any
    is_promotion: bool = False


class PrintQuoteResponse(BaseModel):
    width: float
    height: float
    material: PrintMaterialKind
    is_promotion: bool
    area: float
    unit_price: float
    subtotal: float
    tax: float
    total: float
    has_bulk_discount: bool
    class Config:
        from_attributes = True


# --- Laser ---

class MaterialOut(BaseModel):
    id: str
    name: str
    thickness: float
    sheet_width: float
    sheet_height: float
    usable_width: float
    usable_height: float
    price_per_sheet: float
    is_active: bool
    color: Optional[str] = None
    finish: Optional[str] = None
    class Config:
        from_attributes = True


class LaserQuoteRequest(BaseModel):
    material_id: str
    piece_width: float
    piece_height: float
    # float so 2.5 reaches the quote validator instead of failing parsing
    quantity: float
    cutting_minutes: float
    requires_assembly: bool = False
    assembly_cost_per_piece: Optional[float] = None
    # Fall back to the config store when omitted
    cutting_rate_per_minute: Optional[float] = None
    profit_margin: Optional[float] = None


class LaserQuoteResponse(BaseModel):
    material_id: str
    material: MaterialOut
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
    subtotal: float
    tax: float
    total: float
    class Config:
        from_attributes = True


class LaserConfigOut(BaseModel):
    cutting_rate_per_minute: float
    profit_margin: float
    assembly_cost_per_piece: float
    class Config:
        from_attributes = True


class LaserConfigUpdate(BaseModel):
    cutting_rate_per_minute: Optional[float] = None
    profit_margin: Optional[float] = None
    assembly_cost_per_piece: Optional[float] = None


class MaterialCreate(BaseModel):
    id: Optional[str] = None
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


class MaterialUpdate(BaseModel):
    name: Optional[str] = None
    thickness: Optional[float] = None
    sheet_width: Optional[float] = None
    sheet_height: Optional[float] = None
    usable_width: Optional[float] = None
    usable_height: Optional[float] = None
    price_per_sheet: Optional[float] = None
    is_active: Optional[bool] = None
    color: Optional[str] = None
    finish: Optional[str] = None
