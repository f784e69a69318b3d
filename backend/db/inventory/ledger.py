import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from core.exceptions import InsufficientStockError, NotFoundError

from .movement import StockMovement

logger = logging.getLogger(__name__)

MOVEMENT_TYPES = ("in", "out")


def record_movement(
    store,
    product_id: UUID,
    type: str,
    quantity: int,
    notes: Optional[str] = None,
    *,
    timestamp: Optional[datetime] = None,
) -> StockMovement:
    """
    Append one stock movement and apply it to the product's quantity.

    Raises NotFoundError if the product does not exist and InsufficientStockError
    if an 'out' movement asks for more than is on hand. Both checks run before
    anything is written, so a failed call leaves the store untouched.

    Not synchronized: two concurrent callers on the same product can both pass
    the stock check.
    """
    if type not in MOVEMENT_TYPES:
        raise ValueError(f"type must be one of {MOVEMENT_TYPES}, got {type!r}")
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise ValueError("quantity must be a positive integer")

    product = store.get_product(product_id)
    if product is None:
        raise NotFoundError("Product", product_id)

    if type == "out" and quantity > product.quantity:
        logger.warning(
            "Rejected out movement for %s (%s): requested=%s available=%s",
            product.sku, product.id, quantity, product.quantity,
        )
        raise InsufficientStockError(requested=quantity, available=product.quantity)

    kwargs = {}
    if timestamp is not None:
        kwargs["timestamp"] = timestamp
    movement = StockMovement(
        product_id=product.id,
        product_name=product.name,
        product_sku=product.sku,
        type=type,
        quantity=quantity,
        notes=notes or None,
        **kwargs,
    )
    store.add_movement(movement)
    product.quantity += movement.signed_quantity

    logger.info(
        "Recorded %s movement of %s for %s (%s); quantity now %s",
        type, quantity, product.sku, product.id, product.quantity,
    )
    return movement
