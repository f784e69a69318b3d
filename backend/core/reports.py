from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Dict, List, Optional

from db.database import InventoryStore
from db.inventory.product import Product
from db.inventory.movement import StockMovement


def _money(value: Decimal) -> float:
    return float(value.quantize(Decimal("0.01")))


def low_stock_products(products: List[Product]) -> List[Product]:
    """Products at or below their minimum stock level"""
    return [p for p in products if p.is_low_stock]


def out_of_stock_products(products: List[Product]) -> List[Product]:
    """Products with nothing on hand"""
    return [p for p in products if p.is_out_of_stock]


def total_inventory_value(products: List[Product]) -> float:
    return _money(sum((p.stock_value for p in products), Decimal("0")))


def category_stats(products: List[Product]) -> List[Dict]:
    """Per-category count/quantity/value, in the order categories first appear"""
    stats: Dict[str, Dict] = {}
    for p in products:
        row = stats.setdefault(
            p.category,
            {"category": p.category, "count": 0, "quantity": 0, "value": Decimal("0")},
        )
        row["count"] += 1
        row["quantity"] += p.quantity
        row["value"] += p.stock_value
    return [{**row, "value": _money(row["value"])} for row in stats.values()]


def location_stats(products: List[Product]) -> List[Dict]:
    stats: Dict[str, Dict] = {}
    for p in products:
        row = stats.setdefault(p.location, {"location": p.location, "count": 0, "quantity": 0})
        row["count"] += 1
        row["quantity"] += p.quantity
    return list(stats.values())


def build_report(store: InventoryStore) -> Dict:
    products = store.list_products()
    return {
        "total_value": total_inventory_value(products),
        "category_stats": category_stats(products),
        "location_stats": location_stats(products),
        "low_stock_count": len(low_stock_products(products)),
        "out_of_stock_count": len(out_of_stock_products(products)),
    }


def movements_by_day(
    movements: List[StockMovement],
    days: int = 30,
    today: Optional[date] = None,
) -> List[Dict]:
    """
    Daily incoming/outgoing totals for the trailing `days` calendar days
    (UTC), oldest first. Days without movements are included with zeros.
    """
    today = today or datetime.now(timezone.utc).date()
    window = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    buckets = {d: {"incoming": 0, "outgoing": 0} for d in window}

    for m in movements:
        ts = m.timestamp
        if ts.tzinfo is not None:
            ts = ts.astimezone(timezone.utc)
        bucket = buckets.get(ts.date())
        if bucket is None:
            continue
        if m.type == "in":
            bucket["incoming"] += m.quantity
        else:
            bucket["outgoing"] += m.quantity

    return [{"date": d.isoformat(), **buckets[d]} for d in window]


def build_dashboard(store: InventoryStore, recent: int = 10) -> Dict:
    products = store.list_products()
    movements = store.list_movements()

    by_category: Dict[str, int] = {}
    for p in products:
        by_category[p.category] = by_category.get(p.category, 0) + 1

    return {
        "total_products": len(products),
        "total_stock": sum(p.quantity for p in products),
        "low_stock_count": len(low_stock_products(products)),
        "movement_count": len(movements),
        "products_by_category": [{"name": k, "value": v} for k, v in by_category.items()],
        "recent_movements": [m.to_schema for m in movements[:recent]],
    }
