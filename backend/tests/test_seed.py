from datetime import datetime, timedelta, timezone

from db.seed import seed_demo_data


def test_seed_inserts_history_without_reapplying(store):
    now = datetime(2024, 5, 1, tzinfo=timezone.utc)
    seed_demo_data(store, now=now)

    mouse = next(p for p in store.list_products() if p.sku == "ELC-001")
    assert mouse.quantity == 45

    movements = store.list_movements()
    assert [m.timestamp for m in movements] == [
        now - timedelta(days=1),
        now - timedelta(days=2),
        now - timedelta(days=5),
        now - timedelta(days=7),
    ]
    assert {m.product_sku for m in movements} == {"ELC-001", "ELC-002"}


def test_seed_is_independent_per_store(store):
    from db.database import InventoryStore

    other = InventoryStore()
    seed_demo_data(store)
    seed_demo_data(other)

    assert set(store.categories).isdisjoint(other.categories)
    assert len(store.categories) == len(other.categories) == 4
