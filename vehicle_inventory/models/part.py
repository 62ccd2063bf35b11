from beanie import Document

from vehicle_inventory.core.config import settings


class Part(Document):
    """
    Part model.
    vehicleId holds the string form of the owning Vehicle's id and is not
    checked against the vehicles collection.
    """
    name: str
    price: float
    vehicleId: str
    
    class Settings:
        name = settings.PARTS_COLLECTION
