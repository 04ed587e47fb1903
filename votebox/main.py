"""Main FastAPI application."""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from votebox.api.errors import register_exception_handlers
from votebox.api.routes import router
from votebox.bootstrap import initialize_schema, load_definitions
from votebox.core.config import Settings, settings as default_settings
from votebox.core.logging_config import get_logger, setup_logging
from votebox.core.rate_limit import limiter
from votebox.db import create_db_engine, make_session_factory
from votebox.middleware import LoggingMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Load the definition files, connect, create and seed the tables.

    Any failure here aborts startup. The connection pool is disposed on
    shutdown.
    """
    settings: Settings = app.state.settings

    definitions = load_definitions(settings.DATA_DIR)
    engine = create_db_engine(settings.get_database_url(), settings)
    try:
        registry = initialize_schema(engine, definitions)
    except SQLAlchemyError as e:
        logger.error("database_initialization_failed", error=str(e))
        engine.dispose()
        raise

    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    app.state.registry = registry

    logger.info(
        "application_started",
        database=engine.url.render_as_string(hide_password=True),
        polls=len(registry),
    )
    try:
        yield
    finally:
        engine.dispose()
        logger.info("application_stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; the database is touched only on startup."""
    if settings is None:
        settings = default_settings

    setup_logging(level=settings.LOG_LEVEL, json_logs=settings.ENVIRONMENT == "production")

    logger.info(
        "application_starting",
        app_title=settings.APP_TITLE,
        app_version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    app = FastAPI(
        title=settings.APP_TITLE,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Add rate limiter to app state
    app.state.limiter = limiter

    register_exception_handlers(app)
    app.add_middleware(LoggingMiddleware)
    app.include_router(router)

    return app


app = create_app()
