import uvicorn

from vehicle_inventory.core.config import settings

if __name__ == "__main__":
    print(f"Starting {settings.APP_NAME} on {settings.HOST}:{settings.PORT}...")
    uvicorn.run("vehicle_inventory.main:app", host=settings.HOST, port=settings.PORT, reload=False)
