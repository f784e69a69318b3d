"""
Demo data loaded into a fresh store at startup (SEED_DEMO_DATA=true).

Seeded movements are inserted as history only; product quantities below are
already the post-movement figures.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from db.category import Category
from db.database import InventoryStore
from db.inventory.movement import StockMovement
from db.inventory.product import Product
from db.location import Location

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedMovement:
    sku: str
    type: str
    quantity: int
    notes: Optional[str]
    days_ago: int


SEED_CATEGORIES: list[tuple[str, str]] = [
    ("Electronics", "Electronic devices and components"),
    ("Tools", "Hand and power tools"),
    ("Hardware", "Nuts, bolts, and fasteners"),
    ("Safety Equipment", "PPE and safety gear"),
]

SEED_LOCATIONS: list[tuple[str, str, Optional[str]]] = [
    ("A", "1", "A"),
    ("A", "1", "B"),
    ("A", "2", "A"),
    ("B", "1", None),
    ("B", "2", "A"),
    ("C", "1", None),
]

# (name, sku, description, quantity, min_stock_level, category, location, price)
SEED_PRODUCTS = [
    ("Wireless Mouse", "ELC-001", "Ergonomic wireless mouse with USB receiver", 45, 20, "Electronics", "A-1-A", "29.99"),
    ("USB-C Cable", "ELC-002", "2m USB-C to USB-A cable", 150, 50, "Electronics", "A-1-B", "12.99"),
    ("Power Drill", "TLS-001", "18V cordless power drill with battery", 8, 10, "Tools", "B-1", "89.99"),
    ("Screwdriver Set", "TLS-002", "12-piece precision screwdriver set", 25, 15, "Tools", "B-2-A", "24.99"),
    ("M6 Bolts (Box of 100)", "HRD-001", "Stainless steel M6 bolts", 5, 10, "Hardware", "A-2-A", "15.99"),
    ("Safety Goggles", "SFT-001", "Anti-fog safety goggles", 0, 20, "Safety Equipment", "C-1", "8.99"),
    ("Work Gloves", "SFT-002", "Cut-resistant work gloves (Size L)", 35, 25, "Safety Equipment", "C-1", "14.99"),
]

SEED_MOVEMENTS: list[SeedMovement] = [
    SeedMovement(sku="ELC-001", type="in", quantity=50, notes="Initial stock", days_ago=7),
    SeedMovement(sku="ELC-001", type="out", quantity=5, notes="Customer order #1234", days_ago=2),
    SeedMovement(sku="ELC-002", type="in", quantity=200, notes="Restocking", days_ago=5),
    SeedMovement(sku="ELC-002", type="out", quantity=50, notes="Bulk order", days_ago=1),
]


def seed_demo_data(store: InventoryStore, now: Optional[datetime] = None) -> None:
    now = now or datetime.now(timezone.utc)

    for name, description in SEED_CATEGORIES:
        category = Category(name=name, description=description)
        store.categories[category.id] = category

    for zone, shelf, bin_ in SEED_LOCATIONS:
        location = Location(zone=zone, shelf=shelf, bin=bin_)
        store.locations[location.id] = location

    by_sku = {}
    for name, sku, description, quantity, min_level, category, location, price in SEED_PRODUCTS:
        product = Product(
            name=name,
            sku=sku,
            description=description,
            quantity=quantity,
            min_stock_level=min_level,
            category=category,
            location=location,
            price=price,
        )
        store.products[product.id] = product
        by_sku[sku] = product

    for m in SEED_MOVEMENTS:
        product = by_sku[m.sku]
        store.add_movement(
            StockMovement(
                product_id=product.id,
                product_name=product.name,
                product_sku=product.sku,
                type=m.type,
                quantity=m.quantity,
                notes=m.notes,
                timestamp=now - timedelta(days=m.days_ago),
            )
        )

    logger.info(
        "Seeded demo data: %s categories, %s locations, %s products, %s movements",
        len(store.categories), len(store.locations), len(store.products), len(store.stock_movements),
    )
