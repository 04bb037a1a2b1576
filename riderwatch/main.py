"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from riderwatch.api import auth, reports, settings as fuel_settings, trips
from riderwatch.config import Settings, get_settings
from riderwatch.database import Database
from riderwatch.errors import register_exception_handlers

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the application around one Database, created here unless given."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        db = database or Database(settings.database_url)
        if settings.create_tables_on_startup:
            db.create_all()
        app.state.database = db
        logger.info(f"Rider Net Profit Watch API started ({settings.environment})")
        yield
        if database is None:
            db.dispose()

    app = FastAPI(
        title="Rider Net Profit Watch API",
        description="Trip earnings, net profit reports and fuel settings for ride-hailing drivers",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response

    register_exception_handlers(app)

    # Register routers
    app.include_router(auth.router)
    app.include_router(trips.router)
    app.include_router(reports.router)
    app.include_router(fuel_settings.router)

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok", "timestamp": datetime.now(UTC).isoformat()}

    return app


app = create_app()
