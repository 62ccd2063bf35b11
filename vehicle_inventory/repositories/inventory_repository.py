from typing import Optional, List
from contextlib import contextmanager
import logging

from beanie import PydanticObjectId
from pymongo.errors import PyMongoError

from vehicle_inventory.core.exceptions import StorageUnavailable
from vehicle_inventory.models.vehicle import Vehicle
from vehicle_inventory.models.part import Part

# Logger setup
logger = logging.getLogger(__name__)


@contextmanager
def _storage_call(operation: str):
    """Translate driver failures into StorageUnavailable."""
    try:
        yield
    except PyMongoError as e:
        logger.error(f"Storage failure during {operation}: {e}")
        raise StorageUnavailable(f"Storage operation '{operation}' failed") from e


class InventoryRepository:
    """
    Repository for vehicle and part persistence (MongoDB/Beanie).
    
    Only single-document operations are exposed; the store gives no
    multi-document atomicity, so callers composing several calls see
    concurrent writes between them.
    """
    
    # ------------------------------------------------------------------
    # Vehicles
    # ------------------------------------------------------------------
    
    async def list_vehicles(self) -> List[Vehicle]:
        """All vehicles, in storage iteration order."""
        with _storage_call("list_vehicles"):
            return await Vehicle.find_all().to_list()
    
    async def get_vehicle(self, vehicle_id: PydanticObjectId) -> Optional[Vehicle]:
        with _storage_call("get_vehicle"):
            return await Vehicle.get(vehicle_id)
    
    async def find_vehicles_by_manufacturer(self, manufacturer: str) -> List[Vehicle]:
        with _storage_call("find_vehicles_by_manufacturer"):
            return await Vehicle.find({"manufacturer": manufacturer}).to_list()
    
    async def find_vehicles_by_year_range(self, start_year: int, end_year: int) -> List[Vehicle]:
        """Vehicles with start_year <= year <= end_year."""
        with _storage_call("find_vehicles_by_year_range"):
            return await Vehicle.find(
                {"year": {"$gte": start_year, "$lte": end_year}}
            ).to_list()
    
    async def insert_vehicle(self, name: str, manufacturer: str, year: int) -> Vehicle:
        vehicle = Vehicle(name=name, manufacturer=manufacturer, year=year)
        with _storage_call("insert_vehicle"):
            await vehicle.insert()
        return vehicle
    
    async def update_vehicle(
        self,
        vehicle_id: PydanticObjectId,
        name: str,
        manufacturer: str,
        year: int
    ) -> bool:
        """
        Overwrite name, manufacturer and year of one vehicle.
        
        Returns:
            True if a vehicle with this id exists, even when the stored
            values were already identical
        """
        with _storage_call("update_vehicle"):
            result = await Vehicle.get_motor_collection().update_one(
                {"_id": vehicle_id},
                {"$set": {"name": name, "manufacturer": manufacturer, "year": year}}
            )
        return result.matched_count > 0
    
    # ------------------------------------------------------------------
    # Parts
    # ------------------------------------------------------------------
    
    async def list_parts(self) -> List[Part]:
        with _storage_call("list_parts"):
            return await Part.find_all().to_list()
    
    async def find_parts_by_vehicle(self, vehicle_id: str) -> List[Part]:
        """Parts whose vehicleId equals the given external id string."""
        with _storage_call("find_parts_by_vehicle"):
            return await Part.find({"vehicleId": vehicle_id}).to_list()
    
    async def get_part(self, part_id: PydanticObjectId) -> Optional[Part]:
        with _storage_call("get_part"):
            return await Part.get(part_id)
    
    async def insert_part(self, name: str, price: float, vehicle_id: str) -> Part:
        part = Part(name=name, price=price, vehicleId=vehicle_id)
        with _storage_call("insert_part"):
            await part.insert()
        return part
    
    async def delete_part(self, part_id: PydanticObjectId) -> bool:
        """
        Remove one part.
        
        Returns:
            False when the part was already gone; this is not an error
        """
        with _storage_call("delete_part"):
            result = await Part.get_motor_collection().delete_one({"_id": part_id})
        return result.deleted_count > 0
