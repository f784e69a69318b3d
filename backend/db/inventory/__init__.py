"""
Inventory records and the stock-movement ledger.

Models:
- Product (current quantity per SKU)
- StockMovement (append-only in/out events that update Product.quantity)
"""

from .product import Product
from .movement import StockMovement
from .ledger import record_movement

__all__ = ["Product", "StockMovement", "record_movement"]
