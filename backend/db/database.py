from typing import Dict, List, Optional
from uuid import UUID

from fastapi import Request

from db.category import Category
from db.location import Location
from db.inventory.movement import StockMovement
from db.inventory.product import Product
from schemas.categories import CategoryCreate, CategoryUpdate
from schemas.locations import LocationCreate, LocationUpdate
from schemas.products import ProductCreate, ProductUpdate


class InventoryStore:
    """In-memory entity store: one dict per record type, keyed by id.

    Holds data only. Stock changes go through db.inventory.ledger.record_movement
    so the non-negative quantity check is never bypassed by a movement.
    """

    def __init__(self):
        self.products: Dict[UUID, Product] = {}
        self.stock_movements: Dict[UUID, StockMovement] = {}
        self.categories: Dict[UUID, Category] = {}
        self.locations: Dict[UUID, Location] = {}

    # ----------------------------
    # Products
    # ----------------------------

    def list_products(self) -> List[Product]:
        return list(self.products.values())

    def get_product(self, product_id: UUID) -> Optional[Product]:
        return self.products.get(product_id)

    def find_product_by_sku(self, sku: str) -> Optional[Product]:
        key = (sku or "").strip().lower()
        for p in self.products.values():
            if p.sku.lower() == key:
                return p
        return None

    def create_product(self, payload: ProductCreate) -> Product:
        product = Product(
            name=payload.name,
            sku=payload.sku,
            description=payload.description,
            quantity=payload.quantity,
            min_stock_level=payload.min_stock_level,
            category=payload.category,
            location=payload.location,
            price=payload.price,
        )
        self.products[product.id] = product
        return product

    def update_product(self, product_id: UUID, payload: ProductUpdate) -> Optional[Product]:
        product = self.products.get(product_id)
        if product is None:
            return None

        data = payload.model_dump(exclude_unset=True)
        if data.get("name") is not None:
            product.name = data["name"]
        if data.get("sku") is not None:
            product.sku = data["sku"]
        if "description" in data:
            product.description = data["description"]
        if data.get("quantity") is not None:
            product.quantity = data["quantity"]
        if data.get("min_stock_level") is not None:
            product.min_stock_level = data["min_stock_level"]
        if data.get("category") is not None:
            product.category = data["category"]
        if data.get("location") is not None:
            product.location = data["location"]
        if "price" in data:
            product.price = data["price"]
        return product

    def delete_product(self, product_id: UUID) -> bool:
        # Movements referencing the product are kept as history.
        return self.products.pop(product_id, None) is not None

    # ----------------------------
    # Stock movements
    # ----------------------------

    def list_movements(self) -> List[StockMovement]:
        """All movements, newest first; equal timestamps keep reverse insertion order."""
        oldest_first = sorted(self.stock_movements.values(), key=lambda m: m.timestamp)
        return oldest_first[::-1]

    def add_movement(self, movement: StockMovement) -> StockMovement:
        self.stock_movements[movement.id] = movement
        return movement

    # ----------------------------
    # Categories
    # ----------------------------

    def list_categories(self) -> List[Category]:
        return list(self.categories.values())

    def get_category(self, category_id: UUID) -> Optional[Category]:
        return self.categories.get(category_id)

    def find_category_by_name(self, name: str) -> Optional[Category]:
        key = (name or "").strip().lower()
        for c in self.categories.values():
            if c.name.lower() == key:
                return c
        return None

    def create_category(self, payload: CategoryCreate) -> Category:
        category = Category(name=payload.name, description=payload.description)
        self.categories[category.id] = category
        return category

    def update_category(self, category_id: UUID, payload: CategoryUpdate) -> Optional[Category]:
        category = self.categories.get(category_id)
        if category is None:
            return None

        data = payload.model_dump(exclude_unset=True)
        if data.get("name") is not None:
            category.name = data["name"]
        if "description" in data:
            category.description = data["description"]
        return category

    def delete_category(self, category_id: UUID) -> bool:
        return self.categories.pop(category_id, None) is not None

    # ----------------------------
    # Locations
    # ----------------------------

    def list_locations(self) -> List[Location]:
        return list(self.locations.values())

    def get_location(self, location_id: UUID) -> Optional[Location]:
        return self.locations.get(location_id)

    def create_location(self, payload: LocationCreate) -> Location:
        location = Location(zone=payload.zone, shelf=payload.shelf, bin=payload.bin)
        self.locations[location.id] = location
        return location

    def update_location(self, location_id: UUID, payload: LocationUpdate) -> Optional[Location]:
        location = self.locations.get(location_id)
        if location is None:
            return None

        data = payload.model_dump(exclude_unset=True)
        if data.get("zone") is not None:
            location.zone = data["zone"]
        if data.get("shelf") is not None:
            location.shelf = data["shelf"]
        if "bin" in data:
            location.bin = data["bin"]
        return location

    def delete_location(self, location_id: UUID) -> bool:
        return self.locations.pop(location_id, None) is not None


def get_store(request: Request) -> InventoryStore:
    return request.app.state.store
