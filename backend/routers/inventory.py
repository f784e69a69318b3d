import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from core.exceptions import InsufficientStockError, NotFoundError
from core.reports import low_stock_products, out_of_stock_products
from db.database import InventoryStore, get_store
from db.inventory.ledger import record_movement
from schemas.inventory import StockMovementCreate, StockMovementRead, StockMovementResult
from schemas.products import ProductRead

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/movements", response_model=List[StockMovementRead])
async def list_movements(
    q: Optional[str] = Query(None, description="Matches product name or SKU (case-insensitive)"),
    product_id: Optional[UUID] = None,
    type: Optional[str] = Query(None, pattern="^(in|out)$"),
    limit: int = Query(200, ge=1, le=1000),
    store: InventoryStore = Depends(get_store),
):
    movements = store.list_movements()
    if q:
        term = q.strip().lower()
        movements = [
            m for m in movements
            if term in m.product_name.lower() or term in m.product_sku.lower()
        ]
    if product_id:
        movements = [m for m in movements if m.product_id == product_id]
    if type:
        movements = [m for m in movements if m.type == type]
    return [StockMovementRead(**m.to_schema) for m in movements[:limit]]


@router.post("/movements", response_model=StockMovementResult, status_code=status.HTTP_201_CREATED)
async def create_movement(
    payload: StockMovementCreate,
    store: InventoryStore = Depends(get_store),
):
    """
    Record a stock movement and apply it to the product.

    - 'in' adds to the product quantity, 'out' subtracts.
    - An 'out' larger than the quantity on hand is rejected with 409 and nothing is written.
    """
    try:
        movement = record_movement(
            store,
            payload.product_id,
            payload.type,
            payload.quantity,
            payload.notes,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InsufficientStockError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.exception("create_movement failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create movement: {e}",
        )

    product = store.get_product(movement.product_id)
    return {
        "movement": movement.to_schema,
        "product": product.to_schema,
    }


@router.get("/alerts/low-stock", response_model=List[ProductRead])
async def low_stock_alerts(store: InventoryStore = Depends(get_store)):
    """Products whose quantity is at or below min_stock_level."""
    return [ProductRead(**p.to_schema) for p in low_stock_products(store.list_products())]


@router.get("/alerts/out-of-stock", response_model=List[ProductRead])
async def out_of_stock_alerts(store: InventoryStore = Depends(get_store)):
    return [ProductRead(**p.to_schema) for p in out_of_stock_products(store.list_products())]
