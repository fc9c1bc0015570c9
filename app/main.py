"""
Campus Records API - FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers
       and returns the app; uvicorn serves the module-level `app`
       (uvicorn app.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌────────┐ ┌──────────┐  │
    │  │  Req ID  │→│ Logging  │→│  GZip  │→│   CORS   │  │
    │  └──────────┘ └──────────┘ └────────┘ └──────────┘  │
    │                                                     │
    │  Routers (role guard per endpoint):                 │
    │  menu items │ organizations │ recommendation reqs   │
    │  help requests │ articles │ /health                 │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ 400 Validation │ 403 Forbidden │ 404 NotFound│   │
    │  │ 409 Duplicate  │ 500 Database  │ 500 other   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, validate configuration, log readiness
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import (
    CampusRecordsError,
    DatabaseError,
    DuplicateEntityError,
    EntityNotFoundError,
    ForbiddenError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import (
    articles,
    health,
    help_request,
    ucsb_dining_commons_menu_item,
    ucsb_organization,
    ucsb_recommendation_request,
)
from app.security import enforce_route_guards

logger = logging.getLogger(__name__)

VALIDATION_ERROR_TYPE = "ValidationException"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] app.services.entity_service: Created ...

    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Campus Records API %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Not fatal: /health keeps answering and /api answers 403.
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Campus Records API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_body(
    error_type: str,
    message: str,
    details: Optional[Any] = None,
) -> Dict[str, Any]:
    """Builds the ErrorResponse payload shared by every handler."""
    body: Dict[str, Any] = {
        "type": error_type,
        "message": message,
        "request_id": request_id_var.get("") or None,
    }
    if details is not None:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and response bodies.

    Handler table:
        RequestValidationError → 403 when the route guard rejects the caller,
                                 else 400 ValidationException
        ForbiddenError         → 403 AccessDeniedException
        EntityNotFoundError    → 404 EntityNotFoundException
        DuplicateEntityError   → 409 EntityExistsException
        DatabaseError          → 500 DatabaseException (generic message)
        CampusRecordsError     → 500 (catch-all for custom)
        Exception              → 500 InternalServerError

    5xx responses never include exception context or stack traces; those
    are logged server-side.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Missing or unparseable query parameter / body field."""
        try:
            enforce_route_guards(request)
        except ForbiddenError as denied:
            return JSONResponse(
                status_code=403,
                content=error_body(denied.error_type, denied.message),
            )

        errors = jsonable_encoder(exc.errors())
        fields = [".".join(str(p) for p in err.get("loc", ())[1:]) for err in errors]
        logger.info("[%s] Request validation failed on %s: %s",
                    request_id_var.get(""), request.url.path, fields)
        return JSONResponse(
            status_code=400,
            content=error_body(
                VALIDATION_ERROR_TYPE,
                "Invalid or missing request fields: " + ", ".join(fields),
                details=errors,
            ),
        )

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(request: Request, exc: ForbiddenError):
        return JSONResponse(
            status_code=403,
            content=error_body(exc.error_type, exc.message),
        )

    @app.exception_handler(EntityNotFoundError)
    async def handle_not_found(request: Request, exc: EntityNotFoundError):
        return JSONResponse(
            status_code=404,
            content=error_body(exc.error_type, exc.message),
        )

    @app.exception_handler(DuplicateEntityError)
    async def handle_duplicate(request: Request, exc: DuplicateEntityError):
        return JSONResponse(
            status_code=409,
            content=error_body(exc.error_type, exc.message),
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=error_body(exc.error_type, exc.message),
        )

    @app.exception_handler(CampusRecordsError)
    async def handle_app_error(request: Request, exc: CampusRecordsError):
        rid = request_id_var.get("")
        logger.error("[%s] Unhandled application error: %s | Context: %s",
                     rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=error_body(exc.error_type, exc.message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all for truly unexpected errors; stack trace is logged only."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=error_body(
                "InternalServerError",
                "An unexpected error occurred. Please try again or contact support.",
            ),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns a fresh instance each call, so tests can build an app with
    their own dependency overrides.
    """
    app = FastAPI(
        title="Campus Records API",
        description=(
            "CRUD backend for the course-management demo: dining commons menu items, "
            "organizations, recommendation requests, help requests and articles. "
            "Reads need the USER role, writes need ADMIN."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(ucsb_dining_commons_menu_item.router)
    app.include_router(ucsb_organization.router)
    app.include_router(ucsb_recommendation_request.router)
    app.include_router(help_request.router)
    app.include_router(articles.router)
    app.include_router(health.router)

    return app


app = create_app()
