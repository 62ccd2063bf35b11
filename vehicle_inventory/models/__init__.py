"""
Database models package.
Import all document models here so beanie can register them.
"""
from vehicle_inventory.models.vehicle import Vehicle
from vehicle_inventory.models.part import Part

__all__ = [
    "Vehicle",
    "Part",
]
