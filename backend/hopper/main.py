"""
Hopper Singers API

FastAPI application exercising a Cloud Spanner database through a
random insert/update workload on the Singers table.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from hopper.api import register_error_handlers, singers_router
from hopper.config import Settings, get_settings
from hopper.database import create_db_engine, create_session_factory, init_db
from hopper.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for ``settings``."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown events."""
        engine = create_db_engine(settings)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        if settings.auto_create_tables:
            # Spanner needs its own DDL for commit timestamp columns
            init_db(engine)
        logger.info(f"Connected to {engine.url.render_as_string(hide_password=True)}")
        yield
        engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="""
        Hopper Singers API

        Random write workload against the Singers table:
        - **random-insert**: batch insert of random singers
        - **random-update**: rename a random singer older than N days
        """,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings

    register_error_handlers(app)
    app.include_router(singers_router)

    @app.get("/", response_class=PlainTextResponse, tags=["health"])
    def root() -> str:
        """Root endpoint."""
        return "Hello World"

    @app.get("/health", tags=["health"])
    def health_check():
        """Health check endpoint for container orchestration."""
        return {"status": "healthy"}

    return app


app = create_app()


def main() -> None:
    """Serve the application with uvicorn."""
    settings = get_settings()
    logger.info(f"Listening on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
