# services/store.py
import itertools
import threading
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from services.seed import MANUFACTURERS, VEHICLES


class Manufacturer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    revenue: Optional[str] = None


class Vehicle(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    manufacturer_id: int


def _counter_after(ids: Iterable[int]) -> "itertools.count[int]":
    return itertools.count(max(ids, default=0) + 1)


class EntityStore:
    """
    In-memory holder of all manufacturers and vehicles.

    Both sequences only ever grow. Readers get copies; writers allocate an id
    and append while holding `lock`, so two concurrent inserts can't share an id.
    """

    def __init__(
        self,
        manufacturers: Optional[Iterable[Manufacturer]] = None,
        vehicles: Optional[Iterable[Vehicle]] = None,
    ):
        self._manufacturers: List[Manufacturer] = list(manufacturers or [])
        self._vehicles: List[Vehicle] = list(vehicles or [])
        self._manufacturer_ids = _counter_after(m.id for m in self._manufacturers)
        self._vehicle_ids = _counter_after(v.id for v in self._vehicles)
        self.lock = threading.RLock()

    @classmethod
    def seeded(cls) -> "EntityStore":
        return cls(
            manufacturers=[Manufacturer(**m) for m in MANUFACTURERS],
            vehicles=[Vehicle(**v) for v in VEHICLES],
        )

    # -----------------------------
    # Reads (full scan)
    # -----------------------------
    def list_vehicles(self) -> List[Vehicle]:
        return list(self._vehicles)

    def list_manufacturers(self) -> List[Manufacturer]:
        return list(self._manufacturers)

    # -----------------------------
    # Writes (append only)
    # -----------------------------
    def next_vehicle_id(self) -> int:
        with self.lock:
            return next(self._vehicle_ids)

    def next_manufacturer_id(self) -> int:
        with self.lock:
            return next(self._manufacturer_ids)

    def append_vehicle(self, vehicle: Vehicle) -> None:
        # no uniqueness / foreign-key check
        with self.lock:
            self._vehicles.append(vehicle)

    def append_manufacturer(self, manufacturer: Manufacturer) -> None:
        with self.lock:
            self._manufacturers.append(manufacturer)

    def __repr__(self) -> str:
        return f"EntityStore(manufacturers={len(self._manufacturers)}, vehicles={len(self._vehicles)})"
