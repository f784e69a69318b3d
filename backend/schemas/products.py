import re
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from core.config import settings


PRICE_PATTERN = re.compile(r"^\d+(\.\d{1,2})?$")


def _clean_price(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = str(v).strip()
    if not v:
        return None
    if not PRICE_PATTERN.match(v):
        raise ValueError("Price must be a valid decimal")
    return v


class ProductRead(BaseModel):
    id: UUID
    name: str
    sku: str
    description: Optional[str] = None
    quantity: int
    min_stock_level: int
    category: str
    location: str
    price: Optional[str] = None


class ProductCreate(BaseModel):
    name: str
    sku: str
    description: Optional[str] = None
    quantity: int = Field(default=0, ge=0, strict=True)
    min_stock_level: int = Field(default=settings.default_min_stock_level, ge=0, strict=True)
    category: str
    location: str
    price: Optional[str] = None

    @field_validator("name", "sku", "category", "location")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v

    @field_validator("price", mode="before")
    @classmethod
    def _price(cls, v):
        return _clean_price(v)


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    sku: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0, strict=True)
    min_stock_level: Optional[int] = Field(default=None, ge=0, strict=True)
    category: Optional[str] = None
    location: Optional[str] = None
    price: Optional[str] = None

    @field_validator("name", "sku", "category", "location")
    @classmethod
    def _strip_optional(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty")
        return v

    @field_validator("price", mode="before")
    @classmethod
    def _price_optional(cls, v):
        return _clean_price(v)
