import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    name: str
    sku: str
    category: str
    location: str
    quantity: int = 0
    min_stock_level: int = 10
    description: Optional[str] = None
    # decimal string, e.g. "12.99"
    price: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def unit_price(self) -> Decimal:
        return Decimal(self.price) if self.price else Decimal("0")

    @property
    def stock_value(self) -> Decimal:
        return self.unit_price * self.quantity

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.min_stock_level

    @property
    def is_out_of_stock(self) -> bool:
        return self.quantity == 0

    @property
    def to_schema(self):
        return {
            "id": self.id,
            "name": self.name,
            "sku": self.sku,
            "description": self.description,
            "quantity": self.quantity,
            "min_stock_level": self.min_stock_level,
            "category": self.category,
            "location": self.location,
            "price": self.price,
        }
