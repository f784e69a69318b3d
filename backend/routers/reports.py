from fastapi import APIRouter, Depends, Query

from core.reports import build_dashboard, build_report, movements_by_day
from db.database import InventoryStore, get_store
from schemas.inventory import DailyMovement, DashboardSummary, ReportSummary
from typing import List

router = APIRouter()


@router.get("/reports", response_model=ReportSummary)
async def get_report(store: InventoryStore = Depends(get_store)):
    """Inventory value, per-category/location rollups and stock alert counts"""
    return build_report(store)


@router.get("/reports/movements-by-day", response_model=List[DailyMovement])
async def get_movements_by_day(
    days: int = Query(30, ge=1, le=365),
    store: InventoryStore = Depends(get_store),
):
    """Incoming/outgoing quantity per day for the trailing window"""
    return movements_by_day(store.list_movements(), days=days)


@router.get("/dashboard", response_model=DashboardSummary)
async def get_dashboard(store: InventoryStore = Depends(get_store)):
    return build_dashboard(store)
