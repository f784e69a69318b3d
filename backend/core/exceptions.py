class InventoryError(Exception):
    """Base class for errors raised by the store and the movement ledger."""


class NotFoundError(InventoryError):
    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class InsufficientStockError(InventoryError):
    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for outgoing movement: requested={requested} available={available}"
        )
