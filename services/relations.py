# services/relations.py
# Derived links between vehicles and manufacturers.
# Computed on every access by scanning the store; nothing is cached.
from typing import List, Optional

from services.store import EntityStore, Manufacturer, Vehicle


def resolve_manufacturer_of(store: EntityStore, vehicle: Vehicle) -> Optional[Manufacturer]:
    """First manufacturer whose id matches vehicle.manufacturer_id, else None."""
    for m in store.list_manufacturers():
        if m.id == vehicle.manufacturer_id:
            return m
    return None


def resolve_vehicles_of(store: EntityStore, manufacturer: Manufacturer) -> List[Vehicle]:
    """All vehicles pointing at this manufacturer, in store order ([] if none)."""
    return [v for v in store.list_vehicles() if v.manufacturer_id == manufacturer.id]
