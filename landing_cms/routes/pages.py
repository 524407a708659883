"""
Landing CMS - Page Routes

Serves the two HTML pages of the site: the public landing page and the
editor dashboard.  Both are plain static files; the landing page fetches
its text from /api/content and the dashboard gates editing on the client
side via /api/authenticate.
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse
from loguru import logger

from landing_cms.config import DASHBOARD_PAGE, INDEX_PAGE

router = APIRouter(tags=["Pages"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _page_response(request: Request, name: str) -> FileResponse:
    """Return a page from the site directory, or 404 if it is missing."""
    site_dir: Path = request.app.state.site_dir
    page = site_dir / name
    if not page.is_file():
        logger.warning("⚠️  Page {} not found in {}", name, site_dir)
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(page, media_type="text/html")


# ---------------------------------------------------------------------------
# Landing page
# ---------------------------------------------------------------------------
@router.get("/")
async def index(request: Request):
    return _page_response(request, INDEX_PAGE)


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------
@router.get("/dashboard")
async def dashboard(request: Request):
    """Editor dashboard.  The page itself is public; its API calls are not."""
    return _page_response(request, DASHBOARD_PAGE)
