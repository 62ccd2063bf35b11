"""
GraphQL Schema

Query and Mutation types for the vehicle inventory. Resolvers delegate to
InventoryService taken from the request context.
"""

from typing import List, Optional
import strawberry
from strawberry.types import Info
from strawberry.fastapi import GraphQLRouter

from vehicle_inventory.services.inventory_service import (
    InventoryService,
    get_inventory_service,
)

from .types import Part, Vehicle


def _service(info: Info) -> InventoryService:
    return info.context["inventory_service"]


# ============================================================
# Query Type
# ============================================================


@strawberry.type
class Query:
    """Read-only access to vehicles and parts."""

    @strawberry.field
    async def vehicles(self, info: Info) -> List[Vehicle]:
        """
        Get all vehicles with their parts and a joke.
        """
        return await _service(info).list_vehicles()

    @strawberry.field
    async def vehicle(self, info: Info, id: strawberry.ID) -> Optional[Vehicle]:
        """
        Get a single vehicle by ID with its parts and a joke.
        """
        return await _service(info).get_vehicle(id)

    @strawberry.field
    async def parts(self, info: Info) -> List[Part]:
        return await _service(info).list_parts()

    @strawberry.field
    async def vehicles_by_manufacturer(self, info: Info, manufacturer: str) -> List[Vehicle]:
        return await _service(info).vehicles_by_manufacturer(manufacturer)

    @strawberry.field
    async def parts_by_vehicle(self, info: Info, vehicle_id: strawberry.ID) -> List[Part]:
        return await _service(info).parts_by_vehicle(vehicle_id)

    @strawberry.field
    async def vehicles_by_year_range(
        self,
        info: Info,
        start_year: int,
        end_year: int,
    ) -> List[Vehicle]:
        """
        Get vehicles built between start_year and end_year, both inclusive.
        """
        return await _service(info).vehicles_by_year_range(start_year, end_year)


# ============================================================
# Mutation Type
# ============================================================


@strawberry.type
class Mutation:
    """Create, update and delete operations."""

    @strawberry.mutation
    async def add_vehicle(
        self,
        info: Info,
        name: str,
        manufacturer: str,
        year: int,
    ) -> Vehicle:
        return await _service(info).add_vehicle(name, manufacturer, year)

    @strawberry.mutation
    async def add_part(
        self,
        info: Info,
        name: str,
        price: float,
        vehicle_id: strawberry.ID,
    ) -> Part:
        return await _service(info).add_part(name, price, vehicle_id)

    @strawberry.mutation
    async def update_vehicle(
        self,
        info: Info,
        id: strawberry.ID,
        name: str,
        manufacturer: str,
        year: int,
    ) -> Optional[Vehicle]:
        """
        Overwrite name, manufacturer and year. Returns null if the vehicle does not exist.
        """
        return await _service(info).update_vehicle(id, name, manufacturer, year)

    @strawberry.mutation
    async def delete_part(self, info: Info, id: strawberry.ID) -> Optional[Part]:
        """
        Delete a part, returning it as it was before deletion. Returns null if it does not exist.
        """
        return await _service(info).delete_part(id)


schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router(
    service_factory=get_inventory_service,
) -> GraphQLRouter:
    """
    Create GraphQL router with context.

    Args:
        service_factory: Callable returning the InventoryService for a request

    Returns:
        GraphQLRouter instance
    """

    async def get_context():
        """Create GraphQL context with the inventory service."""
        return {
            "inventory_service": service_factory(),
        }

    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql",
    )
