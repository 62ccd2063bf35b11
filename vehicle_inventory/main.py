import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from vehicle_inventory.core.config import settings
from vehicle_inventory.core.database import init_db, close_db
from vehicle_inventory.graphql.schema import create_graphql_router

# Setup Logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="GraphQL gateway for the vehicle and parts inventory",
    debug=settings.DEBUG,
)

# --------------------------------------------------------------------------
# CORS Middleware
# --------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# --------------------------------------------------------------------------
# Database Lifecycle (Startup / Shutdown Events)
# --------------------------------------------------------------------------
@app.on_event("startup")
async def on_startup():
    try:
        logger.info("Connecting to Database...")
        await init_db()
        logger.info("Database Connection Successful!")
    except Exception as e:
        logger.error(f"Database Connection FAILED: {e}")
        raise


@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# --------------------------------------------------------------------------
# Global Exception Handler (JSON body for failures outside GraphQL)
# --------------------------------------------------------------------------
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error at {request.url.path}")
    
    return JSONResponse(
        status_code=500,
        content={
            "message": "Internal Server Error",
            "detail": str(exc),
            "path": str(request.url)
        }
    )

# --------------------------------------------------------------------------
# Basic Routes
# --------------------------------------------------------------------------
@app.get("/")
async def root():
    return {
        "message": f"{settings.APP_NAME} is running",
        "version": settings.APP_VERSION,
        "graphql": "/graphql"
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

# --------------------------------------------------------------------------
# GraphQL Router
# --------------------------------------------------------------------------
app.include_router(create_graphql_router(), prefix="/graphql")
