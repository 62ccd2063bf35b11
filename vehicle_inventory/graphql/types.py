"""
GraphQL Type Definitions

Field names are snake_case here; strawberry exposes them camelCased
(vehicle_id -> vehicleId).
"""

from typing import List, Optional
import strawberry


@strawberry.type
class Part:
    """A part belonging to a vehicle."""

    id: strawberry.ID
    name: str
    price: float
    vehicle_id: strawberry.ID


@strawberry.type
class Vehicle:
    """
    A vehicle with its derived fields.

    parts and joke are computed on every read of vehicles/vehicle. Narrower
    projections (filtered queries, mutations) leave them null.
    """

    id: strawberry.ID
    name: str
    manufacturer: str
    year: int
    joke: Optional[str] = None
    parts: Optional[List[Part]] = None
