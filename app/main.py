"""
FastAPI application factory.

Creates and configures the FastAPI application instance.  Shared
services (database, upload handler, settings) are constructed in the
lifespan and stored on ``app.state``; request handlers receive them
through dependencies.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.router import api_router
from app.core.config import Settings, settings
from app.core.log import configure_logging, logger
from app.db.init_db import init_db
from app.db.session import Database
from app.services.upload_service import UploadHandler


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Args:
        config: Settings to use; defaults to the environment-loaded settings

    Returns:
        Configured FastAPI instance
    """
    config = config or settings

    configure_logging(config.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Path(config.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
        database = Database(config.DATABASE_URL, echo=config.DEBUG)
        app.state.db = database
        init_db(database, config)
        logger.info("%s %s started", config.PROJECT_NAME, config.VERSION)
        try:
            yield
        finally:
            database.dispose()
            logger.info("Database connections closed")

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
        description=config.DESCRIPTION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan)

    app.state.settings = config
    app.state.uploads = UploadHandler(config.UPLOAD_DIR, config.UPLOAD_URL_PREFIX, config.MAX_UPLOAD_SIZE_BYTES)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"])

    register_exception_handlers(app)

    # Include API router
    app.include_router(api_router, prefix="/api")

    # Uploaded files; the directory is created in the lifespan
    app.mount(app.state.uploads.url_prefix, StaticFiles(directory=config.UPLOAD_DIR, check_dir=False),
              name="uploads")

    @app.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "message": config.PROJECT_NAME,
            "version": config.VERSION,
            "status": "healthy"
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "service": "portfolio-api",
            "version": config.VERSION
        }

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as JSON with a human-readable ``message``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        body = {"message": exc.detail}
        errors = getattr(exc, "errors", None)
        if errors:
            body["errors"] = errors
        return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                            content={"message": "Invalid data", "errors": jsonable_encoder(exc.errors())})

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            content={"message": "Internal server error"})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            content={"message": "Internal server error"})


app = create_app()
