"""
Document Mappers

Convert stored documents into GraphQL types. Every exposed field is copied
explicitly, so stored fields outside the schema never leak into responses.
"""

from typing import List, Optional

from vehicle_inventory.core.identifiers import to_external
from vehicle_inventory.models.vehicle import Vehicle as VehicleDocument
from vehicle_inventory.models.part import Part as PartDocument

from .types import Part, Vehicle


def map_part(doc: PartDocument) -> Part:
    """Convert Part document to Part GraphQL type."""
    return Part(
        id=to_external(doc.id),
        name=doc.name,
        price=doc.price,
        vehicle_id=doc.vehicleId,
    )


def map_vehicle(
    doc: VehicleDocument,
    parts: Optional[List[Part]] = None,
    joke: Optional[str] = None,
) -> Vehicle:
    """Convert Vehicle document to Vehicle GraphQL type, attaching derived fields."""
    return Vehicle(
        id=to_external(doc.id),
        name=doc.name,
        manufacturer=doc.manufacturer,
        year=doc.year,
        parts=parts,
        joke=joke,
    )
