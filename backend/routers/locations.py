from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import List
from uuid import UUID

from db.database import InventoryStore, get_store
from schemas.locations import LocationCreate, LocationRead, LocationUpdate

router = APIRouter()


@router.get("/", response_model=List[LocationRead])
async def list_locations(store: InventoryStore = Depends(get_store)):
    """List storage locations (zone-shelf[-bin])."""
    return [LocationRead(**loc.to_schema) for loc in store.list_locations()]


@router.get("/{location_id}", response_model=LocationRead)
async def get_location(location_id: UUID, store: InventoryStore = Depends(get_store)):
    loc = store.get_location(location_id)
    if not loc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
    return LocationRead(**loc.to_schema)


@router.post("/", response_model=LocationRead, status_code=status.HTTP_201_CREATED)
async def create_location(payload: LocationCreate, store: InventoryStore = Depends(get_store)):
    loc = store.create_location(payload)
    return LocationRead(**loc.to_schema)


@router.patch("/{location_id}", response_model=LocationRead)
async def update_location(
    location_id: UUID,
    payload: LocationUpdate,
    store: InventoryStore = Depends(get_store),
):
    loc = store.update_location(location_id, payload)
    if not loc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
    return LocationRead(**loc.to_schema)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_location(location_id: UUID, store: InventoryStore = Depends(get_store)):
    if not store.delete_location(location_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
