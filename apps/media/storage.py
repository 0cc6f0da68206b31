"""
Physical media storage.

Uploads are written through a Django storage backend (``default_storage``
unless one is injected) under ``<role>s/<kind>/`` folders, named with a
random hex identifier that keeps the original extension.  Profiles keep
only the resulting storage-relative *reference*, e.g.
``musicians/photos/3f2a….jpg``; clients see it prefixed with MEDIA_URL.

Deletion is best-effort: a missing file or a filesystem error is logged
and never propagates, so storage cleanup cannot block the business
operation that triggered it.
"""

import logging
import os
import uuid
from urllib.parse import urlsplit

from django.conf import settings
from django.core.files.storage import default_storage

from .validators import validate_upload

logger = logging.getLogger(__name__)


def normalize_reference(reference):
    """
    Reduce a media reference to its canonical storage-relative form.

    Accepts what clients send back: the stored form, the MEDIA_URL-prefixed
    path, or a fully-qualified URL.  Scheme and host are dropped, Windows
    separators become ``/``, leading slashes and the MEDIA_URL prefix are
    stripped::

        https://api.example.com/uploads/musicians/photos/a.jpg
        /uploads/musicians/photos/a.jpg          -> musicians/photos/a.jpg
        musicians/photos/a.jpg
    """
    if not reference:
        return ""
    path = urlsplit(str(reference).strip().replace("\\", "/")).path
    path = path.lstrip("/")
    prefix = settings.MEDIA_URL.strip("/")
    if prefix and path.startswith(prefix + "/"):
        path = path[len(prefix) + 1:]
    return path


def media_url(reference):
    """Public URL path for a stored reference (blank stays blank)."""
    if not reference:
        return ""
    return f"{settings.MEDIA_URL}{reference}"


class MediaStore:
    """Writes validated uploads to storage and deletes stored references."""

    def __init__(self, storage=None):
        self.storage = storage if storage is not None else default_storage

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def save_upload(self, folder, upload, rule):
        """Validate and store a single upload, returning its reference."""
        return self.save_uploads(folder, [upload], rule)[0]

    def save_uploads(self, folder, uploads, rule):
        """
        Validate every upload, then store them in submission order.

        Validation runs for the whole batch before anything is written.  If
        a write fails part-way, the files already written for this batch
        are deleted before the error propagates.
        """
        for upload in uploads:
            validate_upload(upload, rule)

        references = []
        try:
            for upload in uploads:
                extension = os.path.splitext(upload.name or "")[1].lower()
                name = f"{folder}/{uuid.uuid4().hex}{extension}"
                references.append(self.storage.save(name, upload))
        except Exception:
            self.delete_many(references)
            raise

        logger.info("Stored %d file(s) under %s", len(references), folder)
        return references

    # ------------------------------------------------------------------
    # Deletes (best-effort)
    # ------------------------------------------------------------------
    def delete(self, reference):
        """
        Delete the file behind ``reference``.

        Returns ``True`` if a file was removed.  Missing files and storage
        errors are logged, never raised.
        """
        name = normalize_reference(reference)
        if not name:
            return False

        try:
            if not self.storage.exists(name):
                logger.warning(
                    "File not found for deletion: %s (original: %s)",
                    name, reference,
                )
                return False
            self.storage.delete(name)
        except OSError as exc:
            logger.error("Error deleting file %s: %s", name, exc)
            return False

        logger.info("File deleted: %s", name)
        return True

    def delete_many(self, references):
        """Delete every reference; returns how many files were removed."""
        return sum(1 for reference in references if self.delete(reference))

    def exists(self, reference):
        name = normalize_reference(reference)
        return bool(name) and self.storage.exists(name)
