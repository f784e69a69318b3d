import logging
import random
from uuid import uuid4

import pytest

from core.exceptions import InsufficientStockError, NotFoundError
from db.inventory.ledger import record_movement


def test_out_movement_decrements_quantity(store, make_product):
    product = make_product(quantity=10, min_stock_level=5)

    movement = record_movement(store, product.id, "out", 3)

    assert product.quantity == 7
    assert len(store.stock_movements) == 1
    assert movement.type == "out"
    assert movement.quantity == 3
    assert movement.product_id == product.id


def test_out_movement_over_stock_is_rejected_without_changes(store, make_product):
    product = make_product(quantity=10)
    record_movement(store, product.id, "out", 3)

    with pytest.raises(InsufficientStockError) as exc:
        record_movement(store, product.id, "out", 10)

    assert exc.value.requested == 10
    assert exc.value.available == 7
    assert product.quantity == 7
    assert len(store.stock_movements) == 1


def test_out_movement_can_empty_stock(store, make_product):
    product = make_product(quantity=4)
    record_movement(store, product.id, "out", 4)
    assert product.quantity == 0


def test_in_movement_increments_quantity(store, make_product):
    product = make_product(quantity=0)
    record_movement(store, product.id, "in", 25, "Restocking")
    assert product.quantity == 25
    (movement,) = store.list_movements()
    assert movement.notes == "Restocking"


def test_unknown_product_raises_not_found(store):
    missing = uuid4()
    with pytest.raises(NotFoundError) as exc:
        record_movement(store, missing, "in", 1)
    assert str(missing) in str(exc.value)
    assert store.stock_movements == {}


@pytest.mark.parametrize("type_, quantity", [("sideways", 1), ("in", 0), ("out", -2), ("in", 1.5)])
def test_invalid_input_is_rejected_before_lookup(store, make_product, type_, quantity):
    product = make_product(quantity=10)
    with pytest.raises(ValueError):
        record_movement(store, product.id, type_, quantity)
    assert product.quantity == 10
    assert store.stock_movements == {}


def test_movement_keeps_name_and_sku_from_creation_time(store, make_product):
    product = make_product(name="Old Name", sku="OLD-1", quantity=5)
    movement = record_movement(store, product.id, "in", 1)

    product.name = "New Name"
    product.sku = "NEW-1"

    assert movement.product_name == "Old Name"
    assert movement.product_sku == "OLD-1"


def test_blank_notes_are_stored_as_none(store, make_product):
    product = make_product()
    movement = record_movement(store, product.id, "in", 1, "")
    assert movement.notes is None


def test_quantity_matches_sum_of_accepted_movements(store, make_product):
    rng = random.Random(1234)
    product = make_product(quantity=20)
    expected = 20

    for _ in range(200):
        type_ = rng.choice(["in", "out"])
        qty = rng.randint(1, 15)
        try:
            record_movement(store, product.id, type_, qty)
        except InsufficientStockError:
            assert type_ == "out" and qty > expected
            continue
        expected += qty if type_ == "in" else -qty
        assert product.quantity >= 0

    accepted = store.list_movements()
    total = 20 + sum(m.quantity for m in accepted if m.type == "in") - sum(
        m.quantity for m in accepted if m.type == "out"
    )
    assert product.quantity == expected == total


def test_deleting_product_keeps_movements(store, make_product):
    product = make_product(quantity=5)
    record_movement(store, product.id, "out", 2)

    assert store.delete_product(product.id) is True

    (movement,) = store.list_movements()
    assert movement.product_id == product.id
    with pytest.raises(NotFoundError):
        record_movement(store, product.id, "in", 1)


def test_accepted_and_rejected_movements_are_logged(store, make_product, caplog):
    product = make_product(sku="LOG-1", quantity=2)

    with caplog.at_level(logging.INFO, logger="db.inventory.ledger"):
        record_movement(store, product.id, "in", 3)
        with pytest.raises(InsufficientStockError):
            record_movement(store, product.id, "out", 50)

    records = [r for r in caplog.records if r.name == "db.inventory.ledger"]
    assert [r.levelno for r in records] == [logging.INFO, logging.WARNING]
    assert "LOG-1" in records[0].getMessage()
    assert "requested=50 available=5" in records[1].getMessage()
