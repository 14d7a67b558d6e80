"""
Rentdesk API - Main Application
FastAPI application factory with storage lifecycle, error handling, middleware,
logging and the dashboard UI catch-all
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
import logging
import traceback

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import FileResponse, JSONResponse

from rentdesk.api.routes import (
    stats_router,
    properties_router,
    tenants_router,
    leases_router,
    payments_router,
    maintenance_router,
)
from rentdesk.core.config import Settings, settings as default_settings
from rentdesk.core.exceptions import NotFoundError
from rentdesk.database import Database


logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def run_migrations(database_url: str) -> None:
    """Upgrade the schema to the latest Alembic revision."""
    from alembic.config import Config
    from alembic import command

    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", database_url)
    logger.info("[STARTUP] Running database migrations...")
    command.upgrade(alembic_cfg, "head")
    logger.info("[STARTUP] Migrations complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    database = Database(settings.DATABASE_URL, enforce_foreign_keys=settings.ENFORCE_FOREIGN_KEYS)

    # ==================== STARTUP & SHUTDOWN ====================

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("=" * 70)
        logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION}")
        logger.info("=" * 70)

        database.open()
        if settings.RUN_MIGRATIONS:
            run_migrations(settings.DATABASE_URL)
        else:
            database.init_schema()

        # Seeding failures abort startup
        if settings.SEED_ON_STARTUP:
            if database.seed_if_empty():
                logger.info("[OK] Seed data written")

        logger.info("[OK] Application startup complete!")
        try:
            yield
        finally:
            logger.info("Shutting down application...")
            database.close()
            logger.info("Application shutdown complete")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.PROJECT_DESCRIPTION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # ==================== MIDDLEWARE ====================

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all incoming requests"""
        if request.url.path == "/health":
            return await call_next(request)

        start_time = datetime.now(timezone.utc)
        logger.info(f">> {request.method} {request.url.path}")

        try:
            response = await call_next(request)
            duration = (datetime.now(timezone.utc) - start_time).total_seconds()
            logger.info(f"<< {request.method} {request.url.path} - {response.status_code} ({duration:.2f}s)")
            return response
        except Exception as e:
            duration = (datetime.now(timezone.utc) - start_time).total_seconds()
            logger.error(f"[ERROR] {request.method} {request.url.path} - Error: {str(e)} ({duration:.2f}s)")
            raise

    # ==================== ERROR HANDLERS ====================

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Reject malformed request bodies before they reach storage"""
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "success": False,
                "detail": "Validation error",
                "errors": jsonable_encoder(exc.errors())
            }
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        logger.warning(f"{request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"success": False, "detail": str(exc)}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all unhandled exceptions, storage constraint violations included"""
        logger.error(f"Unhandled exception: {exc}\n{traceback.format_exc()}")

        error_message = str(exc) if settings.DEBUG else "Internal server error"

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "detail": error_message,
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        )

    # ==================== ROUTERS ====================

    app.include_router(stats_router, prefix="/api/stats", tags=["Stats"])
    app.include_router(properties_router, prefix="/api/properties", tags=["Properties"])
    app.include_router(tenants_router, prefix="/api/tenants", tags=["Tenants"])
    app.include_router(leases_router, prefix="/api/leases", tags=["Leases"])
    app.include_router(payments_router, prefix="/api/payments", tags=["Payments"])
    app.include_router(maintenance_router, prefix="/api/maintenance", tags=["Maintenance"])

    # ==================== HEALTH & VERSION ====================

    @app.get("/health", tags=["System"])
    async def health_check():
        """Health check endpoint"""
        connection_ok = database.test_connection()
        return JSONResponse(
            status_code=status.HTTP_200_OK if connection_ok else status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "success": connection_ok,
                "status": "healthy" if connection_ok else "unhealthy",
                "database": "connected" if connection_ok else "disconnected",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    @app.get("/api/version", tags=["System"])
    async def get_version():
        """Get API version information"""
        return {
            "success": True,
            "api_version": settings.VERSION,
            "app_name": settings.PROJECT_NAME,
        }

    # ==================== DASHBOARD UI ====================

    static_dir = Path(settings.STATIC_DIR).resolve()

    # Registered last so every API route wins
    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_dashboard(full_path: str):
        """Serve built UI assets, falling back to index.html for client-side routes"""
        if full_path == "api" or full_path.startswith("api/"):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")

        if full_path:
            candidate = (static_dir / full_path).resolve()
            if candidate.is_file() and static_dir in candidate.parents:
                return FileResponse(candidate)

        index_file = static_dir / "index.html"
        if index_file.is_file():
            return FileResponse(index_file)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Dashboard build not found")

    return app


app = create_app()
