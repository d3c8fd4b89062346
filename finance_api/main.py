"""
FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from finance_api.config import settings
from finance_api.database import engine, init_db
from finance_api.errors import register_error_handlers
from finance_api.logging_config import setup_logging
from finance_api.api.router import api_router

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    init_db(engine, strict=settings.schema_bootstrap_strict)
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=VERSION,
    description="CRUD API for personal income and expense transactions",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include API router
app.include_router(api_router)


@app.get("/")
def read_root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": VERSION,
        "status": "running"
    }


def run():
    """Serve the API with uvicorn."""
    setup_logging(settings.log_level)
    logger.info(f"Starting server on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
