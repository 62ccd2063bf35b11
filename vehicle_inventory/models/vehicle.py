from beanie import Document

from vehicle_inventory.core.config import settings


class Vehicle(Document):
    """
    Vehicle model.
    Only the three scalar fields are stored; parts and joke are computed on read.
    """
    name: str
    manufacturer: str
    year: int
    
    class Settings:
        name = settings.VEHICLES_COLLECTION
