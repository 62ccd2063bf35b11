import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie

from vehicle_inventory.core.config import settings

logger = logging.getLogger(__name__)

# Process-wide connection handle, created once at startup
_client: Optional[AsyncIOMotorClient] = None


async def init_db():
    """
    Initialize MongoDB connection and Beanie ODM.
    """
    global _client
    
    if _client is not None:
        return _client
    
    client = AsyncIOMotorClient(settings.MONGO_URL)
    
    # Fail before serving traffic if the server is unreachable
    await client.admin.command("ping")
    
    from vehicle_inventory.models import Vehicle, Part
    
    await init_beanie(
        database=client[settings.DATABASE_NAME],
        document_models=[
            Vehicle,
            Part
        ]
    )
    
    _client = client
    logger.info(
        f"Connected to MongoDB database '{settings.DATABASE_NAME}' "
        f"(collections: {settings.VEHICLES_COLLECTION}, {settings.PARTS_COLLECTION})"
    )
    return client


async def close_db():
    """Release the connection handle on shutdown."""
    global _client
    
    if _client is None:
        return
    
    _client.close()
    _client = None
    logger.info("MongoDB connection closed")
