"""
Landing CMS - Content Store

Owns the single content document:
- Loading it from the JSON file at startup (or seeding the built-in default)
- Serving copies of it to readers
- Replacing it wholesale and persisting the result

One lock covers both the in-memory document and the file, so a reader never
sees a half-applied update and two writers never interleave on disk.
"""

import os
import tempfile
import threading
from pathlib import Path
from typing import Optional

from loguru import logger
from pydantic import ValidationError

from landing_cms.defaults import default_document
from landing_cms.models import ContentDocument


class ContentStoreError(Exception):
    """Base class for content store failures."""


class ContentLoadError(ContentStoreError):
    """The persisted document exists but could not be read or parsed."""


class ContentSaveError(ContentStoreError):
    """The document could not be written to disk."""


class ContentStore:
    """In-memory content document backed by a JSON file."""

    def __init__(self, path: Path):
        self._path = Path(path)
        self._lock = threading.Lock()
        self._document: Optional[ContentDocument] = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def loaded(self) -> bool:
        return self._document is not None

    # ------------------------------------------------------------------
    # Startup
    # ------------------------------------------------------------------
    def load(self) -> ContentDocument:
        """
        Load the document from disk.

        If the file does not exist, the built-in default document is used and
        written out immediately.  Raises ContentLoadError if the file exists
        but is unreadable or does not match the document shape.
        """
        with self._lock:
            if not self._path.exists():
                logger.info(
                    "📄 No content file at {} — seeding default content", self._path
                )
                document = default_document()
                self._write(document)
                self._document = document
                return document.model_copy(deep=True)

            try:
                raw = self._path.read_text(encoding="utf-8")
            except OSError as e:
                raise ContentLoadError(f"Cannot read {self._path}: {e}") from e

            try:
                document = ContentDocument.model_validate_json(raw)
            except ValidationError as e:
                raise ContentLoadError(
                    f"Content file {self._path} is not a valid content document: {e}"
                ) from e

            self._document = document
            logger.info("📄 Content loaded from {}", self._path)
            return document.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def get(self) -> ContentDocument:
        """Return a copy of the current document."""
        with self._lock:
            if self._document is None:
                return default_document()
            return self._document.model_copy(deep=True)

    def replace(self, document: ContentDocument) -> None:
        """
        Replace the whole document and persist it.

        The new document only becomes current once it is on disk; if the
        write fails, ContentSaveError is raised and the previous document
        stays in place.
        """
        new_document = document.model_copy(deep=True)
        with self._lock:
            self._write(new_document)
            self._document = new_document
        logger.info("💾 Content replaced and saved to {}", self._path)

    def save(self) -> None:
        """Write the current document back to disk."""
        with self._lock:
            document = self._document if self._document is not None else default_document()
            self._write(document)

    # ------------------------------------------------------------------
    # Persistence (caller holds the lock)
    # ------------------------------------------------------------------
    def _write(self, document: ContentDocument) -> None:
        """Write to a temp file beside the target, then rename over it."""
        data = document.to_json()
        tmp_path = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=str(self._path.parent),
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = tmp.name
                tmp.write(data)
            os.replace(tmp_path, self._path)
        except OSError as e:
            if tmp_path is not None:
                try:
                    os.remove(tmp_path)
                except FileNotFoundError:
                    pass
            logger.error("❌ Failed to save content to {}: {}", self._path, e)
            raise ContentSaveError(f"Failed to save content to {self._path}: {e}") from e

        logger.debug("💾 Wrote {} bytes to {}", len(data.encode("utf-8")), self._path)
