"""
Landing CMS - Main Application

Single-process FastAPI application that serves:
- The landing page and the editor dashboard (static HTML)
- Static assets and uploaded gallery images
- REST API endpoints to read and replace the page content
- Editor login check and image upload
- Health check endpoint

All page content lives in one JSON file that is loaded on startup and
rewritten on every update.
"""

import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from landing_cms.auth import AuthStrategy, BasicAuthStrategy
from landing_cms.config import (
    APP_ENV,
    APP_HOST,
    APP_PORT,
    APP_VERSION,
    ASSETS_URL_PREFIX,
    AUTH_PASSWORD,
    AUTH_USERNAME,
    CONTENT_FILE,
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_ORIGIN,
    DEBUG,
    LOG_LEVEL,
    SITE_DIR,
    UPLOADS_DIR,
    UPLOADS_URL_PREFIX,
    ensure_directories,
)
from landing_cms.content_store import ContentLoadError, ContentStore
from landing_cms.routes.api import router as api_router
from landing_cms.routes.pages import router as pages_router

# ---------------------------------------------------------------------------
# Logging setup — stdout only
# ---------------------------------------------------------------------------
logger.remove()

logger.add(
    sys.stdout,
    level="DEBUG" if DEBUG else LOG_LEVEL,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    colorize=True,
)

# Methods advertised in CORS headers, per path
CORS_METHODS = {
    "/api/content": "GET, POST, OPTIONS",
    "/api/authenticate": "POST, OPTIONS",
    "/api/upload-image": "POST, OPTIONS",
}
CORS_DEFAULT_METHODS = "GET, OPTIONS"

# Paths whose successful hits are not logged at INFO
QUIET_PREFIXES = (ASSETS_URL_PREFIX, UPLOADS_URL_PREFIX)


def cors_headers(path: str) -> dict[str, str]:
    """Build the CORS headers for a request path."""
    return {
        "Access-Control-Allow-Origin": CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": CORS_METHODS.get(path, CORS_DEFAULT_METHODS),
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
    }


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    On startup:
        1. Create the content and uploads directories
        2. Load the content document (seeding the default if absent)

    A content file that exists but cannot be parsed is fatal: the error is
    logged and re-raised so the server does not start with empty content.
    """
    store: ContentStore = app.state.content_store

    # --- Startup ---
    logger.info("🚀 Starting Landing CMS v{}", APP_VERSION)
    logger.info("📋 Environment: {} | Debug: {}", APP_ENV, DEBUG)

    if AUTH_PASSWORD:
        logger.info("🔒 Editor account '{}' enabled", AUTH_USERNAME)
    else:
        logger.warning("🔓 No AUTH_PASSWORD set — all updates will be rejected")

    ensure_directories(store.path, app.state.uploads_dir)
    logger.info("📁 Directories initialized")

    try:
        store.load()
    except ContentLoadError as e:
        logger.critical("❌ Failed to load content: {}", e)
        raise

    logger.success("✅ Application ready — listening on {}:{}", APP_HOST, APP_PORT)

    yield

    # --- Shutdown ---
    logger.info("👋 Shutdown complete")


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------
def create_app(
    content_file: Optional[Path] = None,
    uploads_dir: Optional[Path] = None,
    site_dir: Optional[Path] = None,
    auth_strategy: Optional[AuthStrategy] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Paths default to the values from configuration; tests pass their own.
    """
    content_file = Path(content_file or CONTENT_FILE)
    uploads_dir = Path(uploads_dir or UPLOADS_DIR)
    site_dir = Path(site_dir or SITE_DIR)

    app = FastAPI(
        title="Landing CMS",
        description=(
            "Content backend for a single-page marketing site. "
            "Serves the page content as JSON and accepts authenticated updates "
            "and gallery image uploads."
        ),
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if DEBUG else None,
        redoc_url="/redoc" if DEBUG else None,
    )

    app.state.content_store = ContentStore(content_file)
    app.state.auth_strategy = auth_strategy or BasicAuthStrategy()
    app.state.uploads_dir = uploads_dir
    app.state.site_dir = site_dir

    # ------------------------------------------------------------------
    # Static files (allow-listed directories only)
    # ------------------------------------------------------------------
    app.mount(
        UPLOADS_URL_PREFIX,
        StaticFiles(directory=str(uploads_dir), check_dir=False),
        name="uploads",
    )
    assets_dir = site_dir / "assets"
    if assets_dir.is_dir():
        app.mount(ASSETS_URL_PREFIX, StaticFiles(directory=str(assets_dir)), name="assets")
    else:
        logger.warning("⚠️  No assets directory at {} — /assets disabled", assets_dir)

    # ------------------------------------------------------------------
    # Errors are returned as plain text
    # ------------------------------------------------------------------
    @app.exception_handler(StarletteHTTPException)
    async def plain_text_http_exception(request: Request, exc: StarletteHTTPException):
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    # ------------------------------------------------------------------
    # CORS middleware
    # ------------------------------------------------------------------
    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        """Answer OPTIONS directly and add CORS headers to every response."""
        headers = cors_headers(request.url.path)
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=headers)

        response = await call_next(request)
        response.headers.update(headers)
        return response

    # ------------------------------------------------------------------
    # Request logging middleware
    # ------------------------------------------------------------------
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every incoming HTTP request with timing information."""
        start = time.time()
        try:
            response = await call_next(request)
        except Exception as exc:
            duration = round(time.time() - start, 3)
            logger.error(
                "❌ {method} {path} — unhandled error after {duration}s: {exc}",
                method=request.method,
                path=request.url.path,
                duration=duration,
                exc=exc,
            )
            raise

        duration = round(time.time() - start, 3)
        status = response.status_code

        if status >= 500:
            logger.error(
                "📤 {method} {path} — {status} [{duration}s]",
                method=request.method,
                path=request.url.path,
                status=status,
                duration=duration,
            )
        elif status >= 400:
            logger.warning(
                "📤 {method} {path} — {status} [{duration}s]",
                method=request.method,
                path=request.url.path,
                status=status,
                duration=duration,
            )
        elif not request.url.path.startswith(QUIET_PREFIXES):
            logger.info(
                "📤 {method} {path} — {status} [{duration}s]",
                method=request.method,
                path=request.url.path,
                status=status,
                duration=duration,
            )

        return response

    # ------------------------------------------------------------------
    # Register routers
    # ------------------------------------------------------------------
    app.include_router(api_router)  # /api/*  — JSON endpoints
    app.include_router(pages_router)  # /, /dashboard

    return app


# ---------------------------------------------------------------------------
# Create the app instance (used by Uvicorn)
# ---------------------------------------------------------------------------
app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "landing_cms.main:app",
        host=APP_HOST,
        port=APP_PORT,
        reload=DEBUG,
        log_level="debug" if DEBUG else "info",
    )


# ---------------------------------------------------------------------------
# Direct execution (development)
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    run()
