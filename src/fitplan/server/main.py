"""
fitplan FastAPI server main entrypoint.
Handles CORS, error handling, health checks and API routers.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import psutil
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..catalog import get_catalog
from ..config import SETTINGS
from .routes.catalog import router as r_catalog
from .routes.plan import router as r_plan


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load the catalog up front so a broken data dir fails at startup
    try:
        catalog = get_catalog()
        logging.info(
            "Catalog ready: %d exercises, %d meals", len(catalog.exercises), len(catalog.meals)
        )
    except Exception as e:
        logging.exception("FastAPI startup failed: %s", e)
        raise
    yield
    logging.info("FastAPI server shutdown completed")


app = FastAPI(
    title="fitplan API",
    description="Personalized training, fasting and meal plans",
    version=__import__("fitplan").__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exc_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler: log and return a generic error response.
    """
    logging.exception("Unhandled error in %s: %s", request.url, exc)
    return JSONResponse(
        {"ok": False, "error": "internal_error", "message": "Internal server error"},
        status_code=500,
    )


@app.get("/healthz")
async def healthz() -> dict:
    """
    Health check endpoint with catalog and system status.
    """
    try:
        memory = psutil.virtual_memory()
        cpu_percent = psutil.cpu_percent(interval=0.1)
        catalog = get_catalog()
        catalog_ok = bool(catalog.exercises) and bool(catalog.meals)

        is_healthy = memory.percent < 90 and cpu_percent < 95 and catalog_ok

        return {
            "ok": is_healthy,
            "status": "healthy" if is_healthy else "degraded",
            "timestamp": datetime.now(UTC).isoformat(),
            "system": {
                "memory_percent": round(memory.percent, 1),
                "memory_available_mb": round(memory.available / 1024 / 1024, 1),
                "cpu_percent": round(cpu_percent, 1),
            },
            "catalog": {
                "exercises": len(catalog.exercises),
                "meals": len(catalog.meals),
            },
        }

    except Exception as e:
        logging.exception("Health check failed: %s", e)
        return {
            "ok": False,
            "status": "error",
            "timestamp": datetime.now(UTC).isoformat(),
            "error": str(e),
        }


@app.get("/")
async def root() -> dict:
    """
    Root endpoint with API information.
    """
    return {
        "ok": True,
        "name": "fitplan API",
        "version": app.version,
        "description": "Deterministic personalized training, fasting and meal plans",
    }


# Routers for API endpoints
app.include_router(r_plan, prefix=SETTINGS.API_PREFIX, tags=["plan"])
app.include_router(r_catalog, prefix=SETTINGS.API_PREFIX, tags=["catalog"])
