"""
Pet Directory - FastAPI Application
Serves the location hierarchy used by the directory pages
"""
from fastapi import FastAPI
from contextlib import asynccontextmanager

from petdirectory.database import init_db
from petdirectory.routers import locations
from petdirectory.config import get_settings

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    print("[START] Starting Pet Directory Locations API...")
    init_db()
    print("[OK] Database tables created/verified")
    yield
    print("[STOP] Shutting down...")


app = FastAPI(
    title=settings.app_name,
    description="""
    ## Pet Directory Locations API

    Read-only access to the countries, provinces and cities that the
    directory search and landing pages are built on. All lookups are by slug.
    """,
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# Include routers
app.include_router(locations.router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/healthz"
    }


@app.get("/healthz")
async def health():
    """Health check endpoint."""
    return {"ok": True, "status": "healthy"}
