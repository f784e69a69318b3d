from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from .products import ProductRead


MovementType = Literal["in", "out"]


class StockMovementCreate(BaseModel):
    product_id: UUID
    type: MovementType
    quantity: int = Field(ge=1, strict=True)
    notes: Optional[str] = None

    @field_validator("notes")
    @classmethod
    def _strip_nullable(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None


class StockMovementRead(BaseModel):
    id: UUID
    product_id: UUID
    product_name: str
    product_sku: str
    type: MovementType
    quantity: int
    notes: Optional[str] = None
    timestamp: datetime


class StockMovementResult(BaseModel):
    movement: StockMovementRead
    product: ProductRead


class CategoryStat(BaseModel):
    category: str
    count: int
    quantity: int
    value: float


class LocationStat(BaseModel):
    location: str
    count: int
    quantity: int


class ReportSummary(BaseModel):
    total_value: float
    category_stats: List[CategoryStat]
    location_stats: List[LocationStat]
    low_stock_count: int
    out_of_stock_count: int


class DailyMovement(BaseModel):
    date: str  # YYYY-MM-DD (UTC)
    incoming: int
    outgoing: int


class DashboardSummary(BaseModel):
    total_products: int
    total_stock: int
    low_stock_count: int
    movement_count: int
    products_by_category: List[dict]
    recent_movements: List[StockMovementRead]
