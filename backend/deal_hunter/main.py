"""FPV Deal Hunter Backend -- FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from deal_hunter import __version__
from deal_hunter.api.router import api_router
from deal_hunter.config import settings
from deal_hunter.core.exceptions import SerializationError
from deal_hunter.schemas import ErrorDetail, ErrorResponse
from deal_hunter.scrapers.vendors import list_vendors, validate_registry

# Configure logging
logging.basicConfig(
    level=logging.INFO if settings.DEBUG else logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DASHBOARD_HTML = (Path(__file__).parent / "static" / "dashboard.html").read_text(encoding="utf-8")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    logger.info("Starting FPV Deal Hunter API server...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    # Refuse to start on a broken vendor table rather than fail per request
    vendors = list_vendors()
    validate_registry(vendors)
    logger.info(f"Vendor registry validated: {len(vendors)} vendors")

    backend_hosts = settings.get_backend_hosts()
    if backend_hosts:
        logger.info(f"Backend host overrides: {sorted(backend_hosts)}")

    yield

    logger.info("Shutting down FPV Deal Hunter API server...")


app = FastAPI(
    title="FPV Deal Hunter API",
    description="Live clearance-deal aggregator for FPV storefronts",
    version=__version__,
    # Only the dashboard and /api routes are served; everything else is 404
    openapi_url=None,
    docs_url=None,
    redoc_url=None,
    redirect_slashes=False,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(api_router, prefix="/api")


@app.exception_handler(SerializationError)
async def serialization_error_handler(request: Request, exc: SerializationError):
    """Rendering the aggregate failed: the only 500 the deals feed returns."""
    logger.error(f"Serialization failed for {request.url.path}: {exc.message}")
    body = ErrorResponse(
        error=ErrorDetail(code="serialization_failed", message=exc.message),
    )
    return JSONResponse(status_code=500, content=body.model_dump())


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Unknown paths and unsupported methods both answer 404."""
    if exc.status_code == 405 or (exc.status_code == 404 and exc.detail == "Not Found"):
        return PlainTextResponse("404 Not Found", status_code=404)
    return await http_exception_handler(request, exc)


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def dashboard():
    """Serve the static dashboard page."""
    return HTMLResponse(DASHBOARD_HTML)
