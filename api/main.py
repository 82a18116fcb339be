"""
BrewOS Demo Engine - FastAPI Application

This is the main entry point for the FastAPI backend.
It combines all route modules and provides system-wide endpoints.

Features:
- Demo-mode switch driven by shareable ?demo=true links
- Synthetic brew, power and daily statistics
- Demo logs and schedules
- Interactive API documentation (Swagger/OpenAPI)

Access Points:
- API Root: http://localhost:8000
- Swagger Docs: http://localhost:8000/docs
- ReDoc: http://localhost:8000/redoc
- OpenAPI JSON: http://localhost:8000/openapi.json
"""

import os
import logging
from datetime import datetime
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.database import check_database_health, init_database
from api.routes import demo_router, stats_router
from api.models import ErrorResponse, SystemHealth

API_VERSION = "0.1.0"

# =========================================
# Logging Configuration
# =========================================

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =========================================
# Application Lifespan
# =========================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown to manage resources.
    """
    logger.info("Starting BrewOS Demo API...")

    try:
        init_database()
        db_health = check_database_health()
        if db_health["status"] == "healthy":
            logger.info(f"Database connection verified ({db_health.get('backend')})")
        else:
            logger.warning(f"Database health check failed: {db_health}")
    except Exception as e:
        # Demo mode falls back to inactive while the store is down
        logger.error(f"Startup error: {e}")

    logger.info("BrewOS Demo API started")
    logger.info("API Documentation: http://localhost:8000/docs")

    yield

    logger.info("Shutting down BrewOS Demo API...")


# =========================================
# FastAPI Application
# =========================================

app = FastAPI(
    title="BrewOS Demo API",
    description="""
## Synthetic Telemetry for the BrewOS Espresso Controller

This API serves realistic, regenerated-on-demand machine data so the
BrewOS app can be explored without a connected machine.

### Demo Mode

- Open any URL with `?demo=true` to enter demo mode; the choice is
  remembered across requests.
- Use `?exitDemo=true` to leave it. Exit always wins.

### Data

- **Brew history**: 3 weeks of shots with dose, yield, pressure, temperature
- **Power history**: 24 hours of 5-minute samples
- **Daily history**: 30 days of shot, energy and on-time rollups
- **Distributions**: shots per weekday and per hour
- **Statistics**: lifetime, daily, weekly, monthly and maintenance counters

### Quick Start

1. **Enable demo mode**: `GET /api/v1/demo/status?demo=true`
2. **Get everything**: `GET /api/v1/stats`
3. **Leave demo mode**: `GET /api/v1/demo/status?exitDemo=true`
    """,
    version=API_VERSION,
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT"
    },
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)


# =========================================
# CORS Middleware
# =========================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:8501",  # Streamlit
        "http://localhost:5173",  # Vite dev server
        "http://127.0.0.1:8501",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =========================================
# Exception Handlers
# =========================================

@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    """Handle HTTP exceptions with consistent format."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            message=str(exc.detail),
            status_code=exc.status_code
        ).model_dump(mode="json")
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            message="An unexpected error occurred",
            detail=str(exc) if os.getenv("DEBUG", "false").lower() == "true" else None
        ).model_dump(mode="json")
    )


# =========================================
# Include Routers
# =========================================

app.include_router(demo_router, prefix="/api/v1")
app.include_router(stats_router, prefix="/api/v1")


# =========================================
# Root Endpoints
# =========================================

@app.get(
    "/",
    tags=["System"],
    summary="API Root",
    description="Welcome endpoint with API information"
)
async def root():
    """API root endpoint."""
    return {
        "name": "BrewOS Demo API",
        "version": API_VERSION,
        "description": "Synthetic espresso-machine telemetry for demo mode",
        "documentation": "/docs",
        "health_check": "/health",
        "api_base": "/api/v1"
    }


@app.get(
    "/health",
    response_model=SystemHealth,
    tags=["System"],
    summary="System Health Check",
    description="Check the health status of the API and its dependencies"
)
async def health_check():
    """System health check endpoint."""
    db_health = check_database_health()

    overall_status = "ok" if db_health["status"] == "healthy" else "degraded"

    return SystemHealth(
        status=overall_status,
        version=API_VERSION,
        timestamp=datetime.utcnow(),
        database=db_health["status"],
        components={
            "api": "ok",
            "database": db_health["status"],
            "settings_table": "ok" if db_health.get("settings_table_exists") else "missing",
            "synthesizer": "ok"
        }
    )


@app.get(
    "/ready",
    tags=["System"],
    summary="Readiness Check",
    description="Check if the API is ready to receive traffic"
)
async def readiness_check():
    """Kubernetes-style readiness check."""
    db_health = check_database_health()

    if db_health["status"] != "healthy":
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database not ready"
        )

    return {"ready": True}


@app.get(
    "/live",
    tags=["System"],
    summary="Liveness Check",
    description="Check if the API process is alive"
)
async def liveness_check():
    """Kubernetes-style liveness check."""
    return {"alive": True}


# =========================================
# Run with Uvicorn (for development)
# =========================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=os.getenv("API_HOST", "0.0.0.0"),
        port=int(os.getenv("API_PORT", 8000)),
        reload=os.getenv("API_RELOAD", "true").lower() == "true",
        log_level=os.getenv("LOG_LEVEL", "info").lower()
    )
