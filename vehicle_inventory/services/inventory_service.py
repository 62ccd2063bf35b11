"""
Inventory Service - Resolver Logic

Implements the six read operations and four write operations behind the
GraphQL schema by coordinating between:
- Inventory Repository (document storage)
- Joke Service (per-vehicle enrichment)
- Document Mappers (stored document -> GraphQL type)

Holds no per-request state, so one instance can serve concurrent requests.
"""
import asyncio
import logging
from typing import List, Optional

from vehicle_inventory.core.config import settings
from vehicle_inventory.core.exceptions import EnrichmentUnavailable, InvalidRange
from vehicle_inventory.core.identifiers import normalize, to_external, to_internal
from vehicle_inventory.graphql.mappers import map_part, map_vehicle
from vehicle_inventory.graphql.types import Part, Vehicle
from vehicle_inventory.repositories.inventory_repository import InventoryRepository
from vehicle_inventory.services.joke_service import JokeService, joke_service

logger = logging.getLogger(__name__)

FAILURE_POLICIES = ("fail", "degrade")


async def _gather_or_cancel(*aws):
    """
    Like asyncio.gather, but when one awaitable fails the others are
    cancelled and awaited before the error propagates.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


class InventoryService:
    """Service for vehicle and part queries and mutations (Async)"""
    
    def __init__(
        self,
        repository: Optional[InventoryRepository] = None,
        jokes: Optional[JokeService] = None,
        failure_policy: Optional[str] = None,
        max_joke_concurrency: Optional[int] = None
    ):
        self.repository = repository or InventoryRepository()
        self.jokes = jokes or joke_service
        self.failure_policy = failure_policy or settings.JOKE_FAILURE_POLICY
        if self.failure_policy not in FAILURE_POLICIES:
            raise ValueError(f"Unknown joke failure policy: {self.failure_policy!r}")
        
        if max_joke_concurrency is None:
            max_joke_concurrency = settings.JOKE_MAX_CONCURRENCY
        if max_joke_concurrency < 1:
            raise ValueError("max_joke_concurrency must be at least 1")
        self._joke_slots = asyncio.Semaphore(max_joke_concurrency)
    
    # ------------------------------------------------------------------
    # Enrichment
    # ------------------------------------------------------------------
    
    async def _fetch_joke(self, client=None) -> Optional[str]:
        """
        Fetch one joke, applying the configured failure policy.
        
        Every enriched read goes through here, so single and collection
        reads fail or degrade the same way. At most max_joke_concurrency
        calls are in flight per service.
        """
        try:
            async with self._joke_slots:
                return await self.jokes.fetch_joke(client)
        except EnrichmentUnavailable as e:
            if self.failure_policy != "degrade":
                raise
            logger.warning(f"Joke unavailable, returning vehicle without one: {e}")
            return None
    
    async def _enrich_vehicle(self, doc, client=None) -> Vehicle:
        """Attach parts and a joke to a stored vehicle, fetching both concurrently."""
        vehicle_id = to_external(doc.id)
        part_docs, joke = await _gather_or_cancel(
            self.repository.find_parts_by_vehicle(vehicle_id),
            self._fetch_joke(client)
        )
        return map_vehicle(doc, parts=[map_part(p) for p in part_docs], joke=joke)
    
    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    
    async def list_vehicles(self) -> List[Vehicle]:
        """
        All vehicles with parts and a joke each.
        
        Results keep storage order regardless of which enrichment finishes
        first. Any failure cancels the outstanding enrichments and fails
        the whole list. Joke calls share one HTTP client.
        """
        docs = await self.repository.list_vehicles()
        if not docs:
            return []
        
        async with self.jokes.open_client() as client:
            return list(await _gather_or_cancel(
                *(self._enrich_vehicle(doc, client) for doc in docs)
            ))
    
    async def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        """Single vehicle with parts and a joke, or None if it does not exist."""
        doc = await self.repository.get_vehicle(to_internal(vehicle_id))
        if doc is None:
            return None
        return await self._enrich_vehicle(doc)
    
    async def list_parts(self) -> List[Part]:
        docs = await self.repository.list_parts()
        return [map_part(doc) for doc in docs]
    
    async def vehicles_by_manufacturer(self, manufacturer: str) -> List[Vehicle]:
        """Exact manufacturer match; bare vehicle fields only."""
        docs = await self.repository.find_vehicles_by_manufacturer(manufacturer)
        return [map_vehicle(doc) for doc in docs]
    
    async def parts_by_vehicle(self, vehicle_id: str) -> List[Part]:
        docs = await self.repository.find_parts_by_vehicle(normalize(vehicle_id))
        return [map_part(doc) for doc in docs]
    
    async def vehicles_by_year_range(self, start_year: int, end_year: int) -> List[Vehicle]:
        """Vehicles with start_year <= year <= end_year; bare vehicle fields only."""
        if start_year > end_year:
            raise InvalidRange(start_year, end_year)
        docs = await self.repository.find_vehicles_by_year_range(start_year, end_year)
        return [map_vehicle(doc) for doc in docs]
    
    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    
    async def add_vehicle(self, name: str, manufacturer: str, year: int) -> Vehicle:
        doc = await self.repository.insert_vehicle(name, manufacturer, year)
        logger.info(f"Vehicle created: {doc.id}")
        return map_vehicle(doc)
    
    async def add_part(self, name: str, price: float, vehicle_id: str) -> Part:
        """
        Create a part.
        
        The vehicle id is format-checked and canonicalized but not looked up,
        so a part may reference a vehicle that does not exist.
        """
        doc = await self.repository.insert_part(name, price, normalize(vehicle_id))
        logger.info(f"Part created: {doc.id} (vehicle {doc.vehicleId})")
        return map_part(doc)
    
    async def update_vehicle(
        self,
        vehicle_id: str,
        name: str,
        manufacturer: str,
        year: int
    ) -> Optional[Vehicle]:
        """
        Overwrite all three vehicle fields.
        
        Returns None only when no vehicle has this id. On success the result
        is built from the arguments, not re-read from storage.
        """
        internal_id = to_internal(vehicle_id)
        matched = await self.repository.update_vehicle(internal_id, name, manufacturer, year)
        if not matched:
            return None
        
        logger.info(f"Vehicle updated: {internal_id}")
        return Vehicle(
            id=to_external(internal_id),
            name=name,
            manufacturer=manufacturer,
            year=year
        )
    
    async def delete_part(self, part_id: str) -> Optional[Part]:
        """
        Delete a part and return its pre-delete snapshot, or None if absent.
        
        Read and delete are separate operations; a concurrent delete landing
        in between is treated as success.
        """
        internal_id = to_internal(part_id)
        doc = await self.repository.get_part(internal_id)
        if doc is None:
            return None
        
        deleted = await self.repository.delete_part(internal_id)
        if deleted:
            logger.info(f"Part deleted: {internal_id}")
        else:
            logger.info(f"Part {internal_id} was already removed by a concurrent request")
        return map_part(doc)


def get_inventory_service() -> InventoryService:
    """
    Factory function to create InventoryService instance.
    """
    return InventoryService()
