#!/usr/bin/env python3

"""
Main application entry point for the GameHub backend.

Architecture: FastAPI application with an async SQLAlchemy database and bearer-token auth.
Key Features: Lifecycle management, database health checks, error handling, CORS configuration.
"""

import errno
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from gamehub.api.auth import router as auth_router
from gamehub.api.http import router as http_router
from gamehub.api.picture import router as picture_router
from gamehub.api.quiz import router as quiz_router
from gamehub.api.users import router as users_router
from gamehub.config import settings
from gamehub.db import check_db_connection, close_db, init_db
from gamehub.exceptions import GameHubError
from gamehub.utils.auth import get_token_service
from gamehub.utils.logger import setup_logger

logger = setup_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup...")
    try:
        # Refuse to run without a signing secret
        get_token_service()
        logger.info("Token service configured.")

        logger.info("Initializing database...")
        await init_db()
        logger.info("Database initialization complete.")

        logger.info("Checking database connectivity...")
        await check_db_connection()
        logger.info("Database connectivity confirmed.")
    except Exception as e:
        logger.critical(f"Startup error: {e}")
        raise SystemExit(f"Startup failed: {e}") from e

    logger.info("GameHub API startup successful.")
    yield

    logger.info("GameHub API shutdown...")
    await close_db()
    logger.info("Shutdown complete.")


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def create_app():
    app = FastAPI(title="GameHub API", lifespan=lifespan)

    @app.exception_handler(GameHubError)
    async def gamehub_exception_handler(request: Request, exc: GameHubError):
        if exc.status_code >= 500:
            logger.error(
                f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.__cause__!r}",
                exc_info=exc,
            )
        headers = None
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        # Field-level detail stays in the logs
        logger.info(
            f"Rejected payload on {request.method} {request.url.path}: {exc.errors()}"
        )
        return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request payload")

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            f"Database error on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")

    @app.exception_handler(OSError)
    async def oserror_exception_handler(request: Request, exc: OSError):
        logger.error(f"OSError caught: {exc}, errno: {exc.errno}", exc_info=exc)
        if exc.errno in (errno.ETIMEDOUT, errno.ECONNREFUSED):
            logger.error(
                f"Returning 503 due to DB connection issue: {settings.db_unavailable_hint}"
            )
            return _error_response(
                status.HTTP_503_SERVICE_UNAVAILABLE, settings.db_unavailable_hint
            )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")

    app.include_router(http_router)
    app.include_router(auth_router)
    app.include_router(quiz_router)
    app.include_router(picture_router)
    app.include_router(users_router)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    return app


app = create_app()


def main():
    """Start the GameHub API server."""
    port = int(settings.server_port)
    host = settings.server_host

    logger.info(f"Starting GameHub API server on {host}:{port}")

    try:
        uvicorn.run(app, host=host, port=port, workers=settings.server_workers)
    except Exception as e:
        logger.error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
