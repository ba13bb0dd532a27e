"""
FriendList API: FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes configuration, middleware registration, route mounting,
       and store lifecycle in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       bound to the DocumentStore it is given (MongoStore by default).
Who:   uvicorn imports `app.main:app`; tests call create_app(store=...).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌────────┐ ┌─────────┐ ┌──────────────┐ ┌──────┐   │
    │  │ Req ID │→│ Logging │→│ Sec. Headers │→│ CORS │   │
    │  └────────┘ └─────────┘ └──────────────┘ └──────┘   │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────┐ ┌─────────┐ ┌──────────┐ ┌────────┐       │
    │  │ GET /│ │ /health │ │ /friends │ │ /posts │       │
    │  └──────┘ └─────────┘ └──────────┘ └────────┘       │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ ValidationError / NotFoundError / StoreError │   │
    │  │   → exc.status_code, {"errorMessage": ...}   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:   logging, then a MongoDB ping. A failed ping is logged and the
               server starts anyway; requests fail until MongoDB is back.
    Shutdown:  the MongoDB client is closed.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.database import DocumentStore, MongoStore
from app.exceptions import FriendListError, NotFoundError, StoreError, ValidationError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.routes import friends, health, posts

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] app.main: message
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access log replaces uvicorn's; pymongo logs every heartbeat at DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Ping the store on startup; close it on shutdown."""
    setup_logging()
    store: DocumentStore = app.state.store

    try:
        await store.connect()
        logger.info("Successfully connected to the %s database", store.database_name)
    except StoreError as e:
        # Not fatal: the API stays up and store-backed requests answer 500
        logger.error("Database Connection Failed: %s", e.context.get("error", e.message))

    logger.info("API running on http://localhost:%d.", settings.port)

    yield

    logger.info("FriendList API shutting down...")
    await store.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(exc: FriendListError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"errorMessage": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to JSON error responses.

    Every handler answers with the status code carried by the exception and
    {"errorMessage": exc.message}. They differ only in how they log:
        ValidationError   → WARNING (client error)
        NotFoundError     → no log (normal outcome)
        StoreError        → ERROR with driver context (server-side only)
        Exception         → ERROR with traceback, generic 500
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(exc)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(exc)

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        rid = request_id_var.get("")
        logger.error("[%s] Store error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(exc)

    @app.exception_handler(FriendListError)
    async def handle_app_error(request: Request, exc: FriendListError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return error_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"errorMessage": "An unexpected error occurred"},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_store() -> MongoStore:
    """MongoStore configured from settings. Constructing it does no I/O."""
    return MongoStore(
        url=settings.mongo_url,
        database_name=settings.mongo_database,
        server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
    )


def create_app(store: Optional[DocumentStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: The document store every request uses. Defaults to a MongoStore
               built from settings; tests pass an in-memory store.
    """
    app = FastAPI(
        title="FriendList API",
        description="CRUD API for a friends list and blog posts, backed by MongoDB.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else create_store()

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → SecurityHeaders → CORS → route
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(friends.router)
    app.include_router(posts.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn on settings.host:port."""
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


# uvicorn expects `app.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    run()
