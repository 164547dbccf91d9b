"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import router
from .factory import load_demo_fields

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("nfl_field")

# Create FastAPI app
app = FastAPI(
    title="NFL Field",
    description="Field geometry, boundary and zone queries for an NFL playing surface",
    version="0.1.0"
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routes
app.include_router(router)


@app.on_event("startup")
async def startup_event():
    """Startup tasks."""
    logger.info("NFL Field service starting up...")
    try:
        load_demo_fields()
    except OSError as e:
        logger.warning(f"Demo data not loaded: {e}")
    logger.info("API documentation available at http://localhost:8000/docs")


@app.on_event("shutdown")
async def shutdown_event():
    """Shutdown tasks."""
    logger.info("NFL Field service shutting down...")
