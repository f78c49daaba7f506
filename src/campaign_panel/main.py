import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campaign_panel.api import campaigns
from campaign_panel.api.errors import register_exception_handlers
from campaign_panel.core.config import settings
from campaign_panel.core.database import engine, init_models
from campaign_panel.middleware.metrics import PrometheusMiddleware, metrics_endpoint

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    logger.info("Starting application...")

    if settings.CREATE_TABLES_ON_STARTUP:
        logger.info("Ensuring database tables exist...")
        await init_models()

    yield

    logger.info("Disposing database engine")
    await engine.dispose()


app = FastAPI(
    title="Campaign Admin Panel",
    version="1.0.0",
    description="CRUD API for managing reward campaigns",
    lifespan=lifespan,
)

# Prometheus Metrics Middleware
app.add_middleware(PrometheusMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN] if settings.CORS_ORIGIN else [],
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(
    campaigns.router,
    prefix=f"{settings.API_PREFIX}/campaigns",
    tags=["campaigns"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Prometheus metrics endpoint
app.add_route("/metrics", metrics_endpoint)
