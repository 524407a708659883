"""
Landing CMS - Configuration
All settings loaded from environment variables with sensible defaults.

The site content lives in a single JSON file next to the process; uploaded
gallery images are written to a local uploads directory.  Nothing else is
persisted.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
_ = load_dotenv()

# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "8085"))
APP_ENV = os.getenv("APP_ENV", "development")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

# ---------------------------------------------------------------------------
# Authentication (single editor account)
# ---------------------------------------------------------------------------
AUTH_USERNAME = os.getenv("AUTH_USERNAME", "nikma")
AUTH_PASSWORD = os.getenv("AUTH_PASSWORD", "")  # MUST be set in .env

if APP_ENV == "production" and not AUTH_PASSWORD:
    raise RuntimeError(
        "AUTH_PASSWORD must be set in production. "
        "Without it every content update and upload is rejected."
    )

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent

# The JSON document holding all page content (rewritten on every update)
CONTENT_FILE = Path(os.getenv("CONTENT_FILE", "content.json"))

# Uploaded gallery images, served back under /uploads
UPLOADS_DIR = Path(os.getenv("UPLOADS_DIR", "uploads"))
UPLOADS_URL_PREFIX = "/uploads"

# Public site: index.html, dashboard.html and the assets/ directory.
# Only these are served; the working directory is never exposed.
SITE_DIR = Path(os.getenv("SITE_DIR", str(BASE_DIR / "site")))
ASSETS_URL_PREFIX = "/assets"
INDEX_PAGE = "index.html"
DASHBOARD_PAGE = "dashboard.html"

# ---------------------------------------------------------------------------
# Logging - stdout only
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
CORS_ALLOW_ORIGIN = os.getenv("CORS_ALLOW_ORIGIN", "*")
CORS_ALLOW_HEADERS = "Content-Type, Authorization"

# ---------------------------------------------------------------------------
# Upload limits
# ---------------------------------------------------------------------------
MAX_UPLOAD_SIZE_MB = int(os.getenv("MAX_UPLOAD_SIZE_MB", "10"))
MAX_UPLOAD_SIZE_BYTES = MAX_UPLOAD_SIZE_MB * 1024 * 1024
UPLOAD_CHUNK_SIZE = 65536
UPLOAD_FIELD_NAME = "image"


def ensure_directories(
    content_file: Path = CONTENT_FILE, uploads_dir: Path = UPLOADS_DIR
) -> None:
    """Create the content file's parent directory and the uploads directory."""
    content_file.parent.mkdir(parents=True, exist_ok=True)
    uploads_dir.mkdir(parents=True, exist_ok=True)
