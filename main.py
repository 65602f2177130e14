"""
TabSplit FastAPI Application
Main entry point: application factory, lifespan, middleware and routers
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import users, restaurants, menu_items, debts, health
from domain.models import Database
from app.config import Settings, settings as default_settings
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_exception_handler,
    storage_exception_handler,
    general_exception_handler,
)
from app.exceptions import ServiceError

_logger = logging.getLogger("tabsplit.main")


async def open_database(app: FastAPI, app_settings: Settings) -> Database:
    """
    Build the storage handle (unless one was injected) and create the schema,
    retrying while the database is still starting up.
    """
    database: Optional[Database] = getattr(app.state, "database", None)
    if database is None:
        database = Database(app_settings.database_url, echo=app_settings.db_echo)

    for attempt in range(1, app_settings.db_init_attempts + 1):
        try:
            # Run blocking init in a thread to avoid blocking the event loop
            await anyio.to_thread.run_sync(database.init)
            _logger.info("Database initialization succeeded")
            break
        except SQLAlchemyError as exc:
            _logger.warning(
                "Database init attempt %d/%d failed: %s",
                attempt,
                app_settings.db_init_attempts,
                exc,
            )
            if attempt < app_settings.db_init_attempts:
                await anyio.sleep(app_settings.db_init_delay_sec)
            else:
                _logger.error(
                    "Database initialization failed after %d attempts", attempt
                )
                database.close()
                raise

    app.state.database = database
    return database


def create_app(
    app_settings: Optional[Settings] = None, database: Optional[Database] = None
) -> FastAPI:
    """
    Application factory.

    ``database`` lets callers (tests, scripts) inject an already constructed
    storage handle; otherwise one is opened from ``database_url`` at startup.
    Either way it is closed at shutdown.
    """
    app_settings = app_settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _logger.info(f"Starting {app_settings.app_name} in {app_settings.environment.value} mode")
        db = await open_database(app, app_settings)
        try:
            yield
        finally:
            _logger.info(f"Shutting down {app_settings.app_name}")
            db.close()
            app.state.database = None

    app = FastAPI(
        title=app_settings.api_title,
        version=app_settings.app_version,
        description=app_settings.api_description,
        lifespan=lifespan,
        debug=app_settings.debug,
        openapi_url=(
            f"{app_settings.api_prefix}/openapi.json"
            if not app_settings.is_production()
            else None
        ),
        docs_url=(
            f"{app_settings.api_prefix}/docs" if not app_settings.is_production() else None
        ),
        redoc_url=(
            f"{app_settings.api_prefix}/redoc" if not app_settings.is_production() else None
        ),
    )
    app.state.settings = app_settings
    app.state.database = database

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=app_settings.cors_allow_credentials,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
    )

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ServiceError, service_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(users.router, prefix=app_settings.api_prefix)
    app.include_router(restaurants.router, prefix=app_settings.api_prefix)
    app.include_router(menu_items.router, prefix=app_settings.api_prefix)
    app.include_router(debts.router, prefix=app_settings.api_prefix)
    app.include_router(health.router, prefix=app_settings.api_prefix)

    return app


# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, default_settings.log_level.upper()),
    format=default_settings.log_format,
)

app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )
