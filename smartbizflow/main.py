"""
SmartBizFlow HR Portal - Main Application Entry Point
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException

from smartbizflow.api.router import api_router
from smartbizflow.core.config import settings
from smartbizflow.core.errors import (
    http_exception_handler,
    validation_exception_handler,
    store_exception_handler,
    generic_exception_handler
)
from smartbizflow.core.exceptions import StoreError
from smartbizflow.core.logging import setup_logging
from smartbizflow.db.store import RecordStore

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open the record store on startup (creating and seeding the data file on
    first run) and flush it on shutdown.
    """
    store = RecordStore(settings.DATA_FILE, seed_demo_data=settings.SEED_DEMO_DATA)
    store.initialize()
    app.state.store = store
    logger.info("DATA_FILE (app): %s", store.path.resolve())
    try:
        yield
    finally:
        store.close()
        app.state.store = None


# Create FastAPI app
app = FastAPI(
    title="SmartBizFlow HR Portal",
    description="Employee, attendance, leave, payroll, training and benefits management",
    version=settings.VERSION or "1.0.0",
    lifespan=lifespan,
)

# Configure CORS - must be before other middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StoreError, store_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Include all API routes under /api/v1
app.include_router(api_router, prefix="/api/v1")
