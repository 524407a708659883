"""
Landing CMS - JSON API Routes

Provides the REST API endpoints for:
- Reading the page content (public)
- Replacing the page content (editor only)
- Checking editor credentials for the dashboard login form
- Uploading gallery images (editor only)
- Health check
"""

import os
import time
import uuid
from pathlib import Path
from urllib.parse import quote

import aiofiles
import aiofiles.os
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from landing_cms.auth import require_auth, verify_credentials
from landing_cms.config import (
    APP_VERSION,
    MAX_UPLOAD_SIZE_BYTES,
    MAX_UPLOAD_SIZE_MB,
    UPLOAD_CHUNK_SIZE,
    UPLOAD_FIELD_NAME,
    UPLOADS_URL_PREFIX,
)
from landing_cms.content_store import ContentSaveError, ContentStore
from landing_cms.models import ContentDocument, LoginRequest

router = APIRouter(prefix="/api", tags=["API"])

# Track startup time for health check
_START_TIME = time.time()


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------
def get_content_store(request: Request) -> ContentStore:
    return request.app.state.content_store


def get_uploads_dir(request: Request) -> Path:
    return request.app.state.uploads_dir


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@router.get("/health")
async def health_check(store: ContentStore = Depends(get_content_store)):
    """Health check endpoint for the service."""
    uptime = round(time.time() - _START_TIME, 2)
    content_ok = store.loaded and store.path.exists()

    return {
        "status": "ok" if content_ok else "degraded",
        "content_file": "ok" if content_ok else "missing",
        "uptime_seconds": uptime,
        "version": APP_VERSION,
    }


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------
@router.get("/content", response_model=ContentDocument)
async def api_get_content(store: ContentStore = Depends(get_content_store)):
    """Return the current page content.  No authentication required."""
    return await run_in_threadpool(store.get)


@router.post("/content")
async def api_update_content(
    request: Request,
    user: str = Depends(require_auth),
    store: ContentStore = Depends(get_content_store),
):
    """
    Replace the page content with the request body.

    This is a full replace, not a merge: any field missing from the body is
    reset to its empty value.
    """
    body = await request.body()
    try:
        document = ContentDocument.model_validate_json(body)
    except ValidationError as e:
        logger.warning("⚠️  Rejected content update from '{}': {}", user, e.error_count())
        raise HTTPException(status_code=400, detail="Invalid request body")

    try:
        await run_in_threadpool(store.replace, document)
    except ContentSaveError:
        raise HTTPException(status_code=500, detail="Failed to save content")

    logger.info("✏️  Content updated by '{}'", user)
    return {"status": "success", "message": "Content updated successfully"}


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------
@router.post("/authenticate")
async def api_authenticate(request: Request):
    """Check a username/password pair sent as JSON by the dashboard login form."""
    body = await request.body()
    try:
        creds = LoginRequest.model_validate_json(body)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Invalid request body")

    if verify_credentials(creds.username, creds.password):
        logger.info("🔓 Editor '{}' logged in", creds.username)
        return {"success": True}

    logger.warning("🔒 Failed login attempt for '{}'", creds.username)
    return JSONResponse(status_code=401, content={"success": False})


# ---------------------------------------------------------------------------
# Image upload
# ---------------------------------------------------------------------------
@router.post("/upload-image")
async def api_upload_image(
    request: Request,
    user: str = Depends(require_auth),
    uploads_dir: Path = Depends(get_uploads_dir),
):
    """
    Store an uploaded gallery image and return its public path.

    The file keeps its original name (directory parts dropped); uploading a
    file with the same name replaces the earlier one.  The content is not
    inspected.
    """
    form = await request.form()
    upload = form.get(UPLOAD_FIELD_NAME)
    if not isinstance(upload, UploadFile):
        raise HTTPException(status_code=400, detail="Error retrieving file")

    filename = Path(upload.filename or "").name
    if filename in ("", ".", ".."):
        raise HTTPException(status_code=400, detail="Error retrieving file")

    dest_path = uploads_dir / filename
    # Fixed-length name so any filename that fits on disk also fits as a temp
    temp_path = uploads_dir / f".{uuid.uuid4().hex}.part"
    total_size = 0

    try:
        await aiofiles.os.makedirs(uploads_dir, exist_ok=True)
        async with aiofiles.open(temp_path, "wb") as f:
            while chunk := await upload.read(UPLOAD_CHUNK_SIZE):
                total_size += len(chunk)
                if total_size > MAX_UPLOAD_SIZE_BYTES:
                    raise HTTPException(
                        status_code=413,
                        detail=f"File too large. Maximum size is {MAX_UPLOAD_SIZE_MB}MB.",
                    )
                await f.write(chunk)

        await aiofiles.os.replace(temp_path, dest_path)
    except HTTPException:
        raise
    except OSError as e:
        logger.exception(f"❌ Failed to store upload {filename}: {e}")
        raise HTTPException(status_code=500, detail="Error saving file")
    finally:
        try:
            os.remove(temp_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("⚠️  Could not remove temp upload {}: {}", temp_path, e)
        await upload.close()

    image_path = f"{UPLOADS_URL_PREFIX}/{quote(filename)}"
    logger.info(f"📤 Image uploaded by '{user}': {filename} ({total_size} bytes)")
    return {
        "status": "success",
        "message": "Image uploaded successfully",
        "imagePath": image_path,
    }
