from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import List
from uuid import UUID

from db.database import InventoryStore, get_store
from schemas.categories import CategoryCreate, CategoryRead, CategoryUpdate

router = APIRouter()


@router.get("/", response_model=List[CategoryRead])
async def list_categories(store: InventoryStore = Depends(get_store)):
    return [CategoryRead(**c.to_schema) for c in store.list_categories()]


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(category_id: UUID, store: InventoryStore = Depends(get_store)):
    category = store.get_category(category_id)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return CategoryRead(**category.to_schema)


@router.post("/", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
async def create_category(payload: CategoryCreate, store: InventoryStore = Depends(get_store)):
    if store.find_category_by_name(payload.name):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Category already exists")

    category = store.create_category(payload)
    return CategoryRead(**category.to_schema)


@router.patch("/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: UUID,
    payload: CategoryUpdate,
    store: InventoryStore = Depends(get_store),
):
    category = store.update_category(category_id, payload)
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return CategoryRead(**category.to_schema)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: UUID, store: InventoryStore = Depends(get_store)):
    # Products keep their category string; there is no cascade.
    if not store.delete_category(category_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
