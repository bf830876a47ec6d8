# tests/test_store.py
import threading

import pytest
from pydantic import ValidationError

from services.store import EntityStore, Manufacturer, Vehicle


def test_seeded_store_holds_literal_dataset_in_order():
    store = EntityStore.seeded()
    assert [m.name for m in store.list_manufacturers()] == [
        "Ferrari", "Lamborghini", "BMW", "Mitsubishi Motors", "TVR", "Nissan",
    ]
    vehicles = store.list_vehicles()
    assert [v.id for v in vehicles] == list(range(1, 11))
    assert vehicles[0] == Vehicle(id=1, name="TVR Tuscan Speed Six", manufacturer_id=5)
    assert vehicles[-1] == Vehicle(id=10, name="3000GT", manufacturer_id=4)

def test_list_returns_copy():
    store = EntityStore.seeded()
    listed = store.list_vehicles()
    listed.clear()
    assert len(store.list_vehicles()) == 10

def test_append_keeps_order_and_skips_checks():
    store = EntityStore()
    store.append_vehicle(Vehicle(id=5, name="Orphan", manufacturer_id=42))
    store.append_vehicle(Vehicle(id=5, name="Same id", manufacturer_id=42))
    assert [v.name for v in store.list_vehicles()] == ["Orphan", "Same id"]

def test_id_counters_start_after_existing_ids():
    store = EntityStore.seeded()
    assert store.next_vehicle_id() == 11
    assert store.next_vehicle_id() == 12
    assert store.next_manufacturer_id() == 7
    assert EntityStore().next_manufacturer_id() == 1

def test_records_are_frozen():
    m = Manufacturer(id=1, name="Ferrari")
    assert m.revenue is None
    with pytest.raises(ValidationError):
        m.name = "Enzo"

def test_fresh_stores_are_isolated():
    a = EntityStore.seeded()
    b = EntityStore.seeded()
    a.append_manufacturer(Manufacturer(id=7, name="TestCo"))
    assert len(a.list_manufacturers()) == 7
    assert len(b.list_manufacturers()) == 6

def test_concurrent_id_allocation_is_unique():
    store = EntityStore()
    seen = []

    def worker():
        for _ in range(200):
            seen.append(store.next_vehicle_id())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(seen) == list(range(1, 1601))
