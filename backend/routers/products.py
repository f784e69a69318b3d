from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional
from uuid import UUID

from db.database import InventoryStore, get_store
from schemas.products import ProductCreate, ProductRead, ProductUpdate

router = APIRouter()


@router.get("/", response_model=List[ProductRead])
async def list_products(
    q: Optional[str] = Query(None, description="Matches name or SKU (case-insensitive)"),
    category: Optional[str] = None,
    store: InventoryStore = Depends(get_store),
):
    """List products, optionally filtered by search term and category"""
    products = store.list_products()
    if q:
        term = q.strip().lower()
        products = [p for p in products if term in p.name.lower() or term in p.sku.lower()]
    if category:
        products = [p for p in products if p.category == category]
    return [ProductRead(**p.to_schema) for p in products]


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: UUID, store: InventoryStore = Depends(get_store)):
    """Get a product by ID"""
    product = store.get_product(product_id)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with id {product_id} not found"
        )
    return ProductRead(**product.to_schema)


@router.post("/", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductCreate, store: InventoryStore = Depends(get_store)):
    """Create a new product (SKU must be unique, case-insensitive)"""
    if store.find_product_by_sku(payload.sku):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Product with SKU {payload.sku} already exists"
        )
    product = store.create_product(payload)
    return ProductRead(**product.to_schema)


@router.patch("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: UUID,
    payload: ProductUpdate,
    store: InventoryStore = Depends(get_store),
):
    """Apply the provided fields to an existing product"""
    product = store.update_product(product_id, payload)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with id {product_id} not found"
        )
    return ProductRead(**product.to_schema)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: UUID, store: InventoryStore = Depends(get_store)):
    """Delete a product; its stock movements are kept"""
    if not store.delete_product(product_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product with id {product_id} not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
