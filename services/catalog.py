# services/catalog.py
# Read and append entry points over an EntityStore.
from typing import List, Optional

from services.analytics import log_event, mutation_event
from services.store import EntityStore, Manufacturer, Vehicle


# -----------------------------
# Queries
# -----------------------------
def get_vehicle(store: EntityStore, vehicle_id: Optional[int]) -> Optional[Vehicle]:
    for v in store.list_vehicles():
        if v.id == vehicle_id:
            return v
    return None

def get_all_vehicles(store: EntityStore) -> List[Vehicle]:
    return store.list_vehicles()

def get_manufacturer(store: EntityStore, manufacturer_id: Optional[int]) -> Optional[Manufacturer]:
    for m in store.list_manufacturers():
        if m.id == manufacturer_id:
            return m
    return None

def get_all_manufacturers(store: EntityStore) -> List[Manufacturer]:
    return store.list_manufacturers()

# -----------------------------
# Mutations
# -----------------------------
def _audit(event: dict) -> None:
    # fire-and-forget; a broken log file must not fail the insert
    try:
        log_event(event)
    except OSError as e:
        print("analytics write failed:", e)

def add_vehicle(store: EntityStore, name: str, manufacturer_id: int) -> Vehicle:
    """
    Append a vehicle and return it. manufacturer_id is stored as given;
    a dangling reference simply resolves to no manufacturer later.
    """
    with store.lock:
        vehicle = Vehicle(id=store.next_vehicle_id(), name=name, manufacturer_id=manufacturer_id)
        store.append_vehicle(vehicle)
    _audit(mutation_event("add_vehicle", vehicle))
    return vehicle

def add_manufacturer(store: EntityStore, name: str, revenue: Optional[str] = None) -> Manufacturer:
    with store.lock:
        manufacturer = Manufacturer(id=store.next_manufacturer_id(), name=name, revenue=revenue)
        store.append_manufacturer(manufacturer)
    _audit(mutation_event("add_manufacturer", manufacturer))
    return manufacturer
