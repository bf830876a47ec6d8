# api_graphql.py
from __future__ import annotations

import os
from typing import Annotated, List, Optional

import strawberry
from strawberry import UNSET
from strawberry.extensions import QueryDepthLimiter
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from services import catalog
from services.relations import resolve_manufacturer_of, resolve_vehicles_of
from services.store import EntityStore, Manufacturer, Vehicle
from dotenv import load_dotenv

# Load env for local dev; in production rely on host envs
load_dotenv()

GRAPHQL_DEBUG = os.getenv("GRAPHQL_DEBUG", "0") == "1"
# 0 turns the limiter off; selection depth is then the only bound on vehicle <-> manufacturer cycles
GRAPHQL_MAX_DEPTH = int(os.getenv("GRAPHQL_MAX_DEPTH") or 10)

def _dbg(*args):
    if GRAPHQL_DEBUG:
        print("[GRAPHQL]", *args)

def _store(info: Info) -> EntityStore:
    return info.context["store"]

# -----------------------------
# Object types
# -----------------------------
@strawberry.type(name="Vehicle", description="This represents a vehicle manufactured by a manufacturer")
class VehicleType:
    id: int
    name: str
    manufacturer_id: int
    record: strawberry.Private[Vehicle]

    @classmethod
    def from_record(cls, v: Vehicle) -> VehicleType:
        return cls(id=v.id, name=v.name, manufacturer_id=v.manufacturer_id, record=v)

    @strawberry.field
    def manufacturer(self, info: Info) -> Optional[ManufacturerType]:
        m = resolve_manufacturer_of(_store(info), self.record)
        return ManufacturerType.from_record(m) if m else None


@strawberry.type(name="Manufacturer", description="This represents a manufacturer of a vehicle")
class ManufacturerType:
    id: int
    name: str
    revenue: Optional[str]
    record: strawberry.Private[Manufacturer]

    @classmethod
    def from_record(cls, m: Manufacturer) -> ManufacturerType:
        return cls(id=m.id, name=m.name, revenue=m.revenue, record=m)

    @strawberry.field
    def vehicles(self, info: Info) -> List[Optional[VehicleType]]:
        return [VehicleType.from_record(v) for v in resolve_vehicles_of(_store(info), self.record)]

# -----------------------------
# Root types
# -----------------------------
# Nullability mirrors the published schema: nullable list items, nullable
# mutation results, optional `id` / `revenue` arguments without a default.
@strawberry.type(description="Root Query")
class Query:
    @strawberry.field(description="A single Vehicle")
    def vehicle(
        self, info: Info, vehicle_id: Annotated[Optional[int], strawberry.argument(name="id")] = UNSET
    ) -> Optional[VehicleType]:
        vehicle_id = None if vehicle_id is UNSET else vehicle_id
        v = catalog.get_vehicle(_store(info), vehicle_id)
        _dbg("vehicle", vehicle_id, "->", "hit" if v else "miss")
        return VehicleType.from_record(v) if v else None

    @strawberry.field(description="List of All Vehicles")
    def vehicles(self, info: Info) -> List[Optional[VehicleType]]:
        return [VehicleType.from_record(v) for v in catalog.get_all_vehicles(_store(info))]

    @strawberry.field(description="A single manufacturer")
    def manufacturer(
        self, info: Info, manufacturer_id: Annotated[Optional[int], strawberry.argument(name="id")] = UNSET
    ) -> Optional[ManufacturerType]:
        manufacturer_id = None if manufacturer_id is UNSET else manufacturer_id
        m = catalog.get_manufacturer(_store(info), manufacturer_id)
        _dbg("manufacturer", manufacturer_id, "->", "hit" if m else "miss")
        return ManufacturerType.from_record(m) if m else None

    @strawberry.field(description="return a  list of all car manufacturers")
    def manufacturers(self, info: Info) -> List[Optional[ManufacturerType]]:
        return [ManufacturerType.from_record(m) for m in catalog.get_all_manufacturers(_store(info))]


@strawberry.type(description="Root Mutation")
class Mutation:
    @strawberry.mutation(description="Add a vehicle")
    def add_vehicle(self, info: Info, name: str, manufacturer_id: int) -> Optional[VehicleType]:
        v = catalog.add_vehicle(_store(info), name=name, manufacturer_id=manufacturer_id)
        _dbg("addVehicle", v.model_dump())
        return VehicleType.from_record(v)

    @strawberry.mutation(description="Add a manufacturer")
    def add_manufacturer(self, info: Info, name: str, revenue: Optional[str] = UNSET) -> Optional[ManufacturerType]:
        revenue = None if revenue is UNSET else revenue
        m = catalog.add_manufacturer(_store(info), name=name, revenue=revenue)
        _dbg("addManufacturer", m.model_dump())
        return ManufacturerType.from_record(m)

# -----------------------------
# Schema + router
# -----------------------------
def build_schema(max_depth: int = GRAPHQL_MAX_DEPTH) -> strawberry.Schema:
    extensions = [lambda: QueryDepthLimiter(max_depth=max_depth)] if max_depth > 0 else []
    return strawberry.Schema(query=Query, mutation=Mutation, extensions=extensions)

def build_graphql_router(store: EntityStore, schema: Optional[strawberry.Schema] = None) -> GraphQLRouter:
    """
    GraphQL endpoint bound to one store. GET from a browser serves GraphiQL;
    POST (or GET ?query=) executes the document.
    """
    async def get_context():
        return {"store": store}

    return GraphQLRouter(schema or build_schema(), context_getter=get_context, graphql_ide="graphiql")
