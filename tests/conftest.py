"""
Landing CMS - Pytest Configuration & Shared Fixtures

Provides reusable fixtures for:
- Temporary content file, uploads directory and site directory
- A configured editor account (patched into the auth module)
- An application instance and a started TestClient
- Basic-Auth header helpers
- A complete sample content document that differs from the default
"""

import base64
import copy
from pathlib import Path
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from landing_cms.main import create_app

EDITOR_USERNAME = "editor"
EDITOR_PASSWORD = "s3cret-pass"

INDEX_HTML = "<!doctype html><html><body><h1>Landing</h1></body></html>"
DASHBOARD_HTML = "<!doctype html><html><body><h1>Dashboard</h1></body></html>"
SITE_CSS = "body { color: #333; }"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def basic_auth(username: str, password: str) -> Dict[str, str]:
    """Build an Authorization header for HTTP Basic credentials."""
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


# ---------------------------------------------------------------------------
# Editor account
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def editor_account(monkeypatch):
    """Configure a known editor account for every test."""
    monkeypatch.setattr("landing_cms.auth.AUTH_USERNAME", EDITOR_USERNAME)
    monkeypatch.setattr("landing_cms.auth.AUTH_PASSWORD", EDITOR_PASSWORD)


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    """Valid Basic-Auth headers for the editor account."""
    return basic_auth(EDITOR_USERNAME, EDITOR_PASSWORD)


# ---------------------------------------------------------------------------
# Filesystem fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def content_file(tmp_path: Path) -> Path:
    """Path of the content document (not created yet)."""
    return tmp_path / "data" / "content.json"


@pytest.fixture
def uploads_dir(tmp_path: Path) -> Path:
    """Uploads directory (not created yet, the app creates it on startup)."""
    return tmp_path / "uploads"


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """
    Create a minimal site directory with:
    - index.html
    - dashboard.html
    - assets/css/site.css
    """
    site = tmp_path / "site"
    (site / "assets" / "css").mkdir(parents=True)
    (site / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (site / "dashboard.html").write_text(DASHBOARD_HTML, encoding="utf-8")
    (site / "assets" / "css" / "site.css").write_text(SITE_CSS, encoding="utf-8")
    return site


# ---------------------------------------------------------------------------
# Application fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app(content_file: Path, uploads_dir: Path, site_dir: Path):
    """An application wired to the temporary paths."""
    return create_app(
        content_file=content_file,
        uploads_dir=uploads_dir,
        site_dir=site_dir,
    )


@pytest.fixture
def client(app):
    """A TestClient with the lifespan started (content loaded)."""
    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# Sample content
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    """A complete content document in wire format, distinct from the default."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


SAMPLE_DOCUMENT: Dict[str, Any] = {
    "hero": {
        "title": "Les Privat Sains",
        "subtitle": "Belajar IPA jadi mudah",
        "description": "Kelas kecil, hasil besar.",
        "whatsappNumber": "6289999999999",
        "whatsappMessage": "Halo, saya mau daftar.",
    },
    "about": {
        "title": "Tentang Kami",
        "description1": "<b>Pengajar</b> berpengalaman.",
        "description2": "Metode terstruktur.",
        "description3": "Fokus konsep.",
    },
    "program": {
        "title": "Program",
        "sd": {
            "title": "SD",
            "description": "Dasar-dasar.",
            "features": ["Hitung cepat", "Membaca"],
        },
        "smp": {
            "title": "SMP",
            "description": "Lanjutan.",
            "features": ["Aljabar"],
        },
    },
    "gallery": {
        "title": "Galeri",
        "items": [
            {"title": "Kelas", "image": "/uploads/kelas.jpg"},
        ],
    },
    "testimonials": {
        "title": "Testimoni",
        "items": [
            {"text": "Bagus sekali!", "author": "Ortu"},
            {"text": "Anak saya suka.", "author": "Ibu Rina"},
        ],
    },
    "contact": {
        "title": "Kontak",
        "description": "Hubungi kami.",
        "serviceArea": "Online",
        "buttonText": "Chat",
    },
    "footer": {
        "text": "&copy; 2026 Les Privat Sains.",
    },
}
