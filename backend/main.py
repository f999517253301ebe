# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
FastAPI application factory.

Responsibilities
----------------
* Instantiate the FastAPI app and attach the storage backend and the
  contact-form mailer chosen from configuration (tests inject their own).
* Register CORS and request-logging middleware.
* Map validation failures to 400 and unhandled errors to a generic 500.
* Mount the feature routers (auth, content, contact).
* Bootstrap the data store on startup (default admin, default settings).
* Mount the built frontend, if present, so a single ``uvicorn`` process
  serves both the API and the site.
* Expose a /health endpoint for container liveness checks.

Run with::

    uvicorn main:app --app-dir backend
"""

import time
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from auth.router import router as auth_router
from contact.mailer import Mailer, build_mailer
from contact.router import router as contact_router
from content.router import router as content_router
from core.config import settings
from core.logger import logger
from storage.base import Storage
from storage.factory import build_storage


# ---------------------------------------------------------------------------
# Request-logging middleware
# ---------------------------------------------------------------------------
# Logs every inbound request: method, path, client IP, status, latency.
# Request bodies (login payload, contact messages) are NOT echoed – only the
# URL and metadata are recorded.


class _RequestLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, client IP, response status and latency (ms)."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        client_ip = request.client.host if request.client else "unknown"

        logger.info(
            "%s %s | client=%s status=%d latency=%.1fms",
            request.method,
            request.url.path,
            client_ip,
            response.status_code,
            elapsed_ms,
        )
        return response


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    """400 with one entry per invalid field, e.g. {"field": "level", "message": ...}."""
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        errors.append({"field": ".".join(loc), "message": err.get("msg", "Invalid value")})
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid data format", "errors": errors},
    )


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

# Built frontend (client/dist) – optional
_FRONTEND_DIR = Path(__file__).resolve().parent.parent / "client" / "dist"


def create_app(storage: Optional[Storage] = None, mailer: Optional[Mailer] = None) -> FastAPI:
    """
    Build the application.  *storage* and *mailer* default to the backends
    selected by configuration; tests pass their own instances.
    """
    app = FastAPI(title="Portfolio API", version="1.0.0")

    app.state.storage = storage if storage is not None else build_storage(settings)
    app.state.mailer = mailer if mailer is not None else build_mailer(settings)

    # In development the Vite dev server runs on its own origin.  Tighten
    # CORS_ORIGINS to the production domain before deploying.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
    )
    app.add_middleware(_RequestLogMiddleware)

    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(auth_router)
    app.include_router(content_router)
    app.include_router(contact_router)

    @app.on_event("startup")
    def _on_startup():
        logger.info(
            "Portfolio service starting up (storage=%s)",
            type(app.state.storage).__name__,
        )
        app.state.storage.initialize_database(
            settings.first_admin_username,
            settings.first_admin_password,
        )

    @app.on_event("shutdown")
    def _on_shutdown():
        logger.info("Portfolio service shutting down")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # Mounted *after* the API routers so that /api/* is handled by FastAPI
    # first.  ``html=True`` serves index.html for directory requests.
    if _FRONTEND_DIR.is_dir():
        app.mount("/", StaticFiles(directory=str(_FRONTEND_DIR), html=True), name="frontend")

    return app


app = create_app()
