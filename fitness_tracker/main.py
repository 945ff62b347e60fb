"""
Fitness Tracker - FastAPI Application

Serves training reports over HTTP. Logging is configured on startup.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fitness_tracker import __version__
from fitness_tracker.api import reports
from fitness_tracker.core.config import settings
from fitness_tracker.core.logging import get_logger, setup_logging
from fitness_tracker.services.calories import supported_activities

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info(
        "Report service ready",
        version=__version__,
        report_locale=settings.REPORT_LOCALE,
        activities=supported_activities(),
    )
    yield
    logger.info("Report service stopped")


def create_app() -> FastAPI:
    """Build the report service with its routers and CORS policy."""
    application = FastAPI(
        title="Fitness Tracker API",
        description="Distance, speed and calorie reports for running, walking and swimming",
        version=__version__,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    application.include_router(reports.router, prefix="/api/reports", tags=["reports"])

    @application.get("/health")
    async def health_check():
        """Liveness check listing the activities a report can be built for."""
        return {
            "status": "healthy",
            "service": "fitness-tracker",
            "version": __version__,
            "activities": supported_activities(),
        }

    return application


app = create_app()
