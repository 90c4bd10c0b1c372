"""
usersvc/main.py

Purpose: Application entry point

- Builds the FastAPI app (create_app)
- Loads configuration and logging
- Connects to MongoDB at startup unless a repository is injected
- Registers the users router under /users
- No business logic should be written here
"""

from contextlib import asynccontextmanager
from typing import Optional
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import ConfigurationError

from usersvc import __version__
from usersvc.api import health, users
from usersvc.core.config import settings
from usersvc.core.errors import add_exception_handlers
from usersvc.core.logging import setup_logging, get_logger
from usersvc.db.mongo import MongoConnection
from usersvc.repositories.user_repository import (
    MongoUserRepository,
    UnavailableUserRepository,
    UserRepository,
)

logger = get_logger(__name__)

USERS_PREFIX = "/users"


def create_app(repository: Optional[UserRepository] = None) -> FastAPI:
    """
    Builds the application.

    Args:
        repository: store to serve users from. When omitted, a MongoDB
            connection is opened from MONGO_URL at startup.
    """
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        connection = None
        if app.state.user_repository is None:
            try:
                connection = MongoConnection(
                    settings.MONGO_URL,
                    settings.MONGODB_DB_NAME,
                    users_collection=settings.MONGODB_USERS_COLLECTION,
                    server_selection_timeout_ms=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
                )
            except (ConfigurationError, ValueError) as e:
                # Unparseable URL: serve 503s instead of refusing to start
                logger.error(f"MongoDB Error: {e}")
                app.state.user_repository = UnavailableUserRepository(str(e))
            else:
                # Not fatal: the listener starts either way
                await connection.connect()
                app.state.user_repository = MongoUserRepository(connection.users_collection())

        logger.info(f"usersvc {__version__} started ({settings.ENVIRONMENT})")

        yield

        logger.info("Shutting down usersvc")
        if connection is not None:
            connection.close()
        if repository is None:
            app.state.user_repository = None

    app = FastAPI(
        title="usersvc",
        description="List and create users stored in MongoDB",
        version=__version__,
        lifespan=lifespan,
        debug=settings.DEBUG,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )
    app.state.user_repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        """Add processing time header to all responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        if process_time > settings.SLOW_REQUEST_SECONDS:
            logger.warning(
                f"Slow request detected: {request.method} {request.url.path}",
                extra={"process_time": process_time}
            )

        return response

    add_exception_handlers(app)

    app.include_router(users.router, prefix=USERS_PREFIX, tags=["Users"])
    app.include_router(health.router, tags=["Health"])

    return app


app = create_app()


def run():
    """Serve the application with uvicorn on HOST:PORT."""
    import uvicorn

    logger.info(f"Server running on port {settings.PORT}")
    uvicorn.run(
        "usersvc.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG and settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
