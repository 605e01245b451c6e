"""
Task Distribution Service - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from task_distribution.api import employees
from task_distribution.api.errors import register_exception_handlers
from task_distribution.config import settings
from task_distribution.db import init_db, close_db
from task_distribution.version import __version__
import logging

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - handles startup and shutdown"""
    # Startup
    logger.info("🚀 Starting Task Distribution Service")
    logger.info(f"📦 Version: {__version__}")
    logger.info(f"📝 Environment: {settings.environment}")

    await init_db()

    logger.info("✅ Configuration loaded successfully")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await close_db()


app = FastAPI(
    title="Task Distribution Service",
    description="Distribute tasks among employees and track their status",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)


# NotFound -> 404, UnknownValue / validation / anything else -> 400
register_exception_handlers(app)


# ============================================
# CORS Middleware Configuration
# ============================================
# Set CORS_ORIGINS env var as comma-separated list: "https://example.com,https://www.example.com"

allowed_origins = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
allowed_origins.append("http://localhost:8000")
allowed_origins.append("http://127.0.0.1:8000")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info(f"✅ CORS configured for origins: {allowed_origins}")

# Register employee/task routes
app.include_router(employees.router, prefix="/api/v1", tags=["employees"])


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "app": "Task Distribution Service",
        "version": __version__,
        "status": "running",
        "environment": settings.environment,
    }


@app.get("/health")
async def health_check():
    """Liveness probe - no dependency checks"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("task_distribution.main:app", host=settings.host, port=settings.port)
