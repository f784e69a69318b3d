import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class StockMovement:
    """Append-only record of one stock change.

    product_name/product_sku are copied from the product when the movement is
    recorded and are not updated when the product is renamed or deleted.
    """

    product_id: uuid.UUID
    product_name: str
    product_sku: str
    type: str  # 'in' | 'out'
    quantity: int
    notes: Optional[str] = None
    timestamp: datetime = field(default_factory=_utcnow)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def signed_quantity(self) -> int:
        return self.quantity if self.type == "in" else -self.quantity

    @property
    def to_schema(self):
        return {
            "id": self.id,
            "product_id": self.product_id,
            "product_name": self.product_name,
            "product_sku": self.product_sku,
            "type": self.type,
            "quantity": self.quantity,
            "notes": self.notes,
            "timestamp": self.timestamp,
        }
