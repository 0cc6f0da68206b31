"""
Pre-storage checks for uploaded media.

Each media kind has an ``UploadRule`` naming the accepted content types,
the accepted file extensions, and a size limit.  A file is accepted when
either its content type or its extension matches (mobile clients often
send ``application/octet-stream``), and it must be within the size limit.
"""

import os
from dataclasses import dataclass

from rest_framework.exceptions import ValidationError


class UploadValidationError(ValidationError):
    """Raised when an uploaded file fails pre-storage checks."""


@dataclass(frozen=True)
class UploadRule:
    kind: str
    content_type_prefixes: tuple
    extensions: frozenset
    max_size: int

    @property
    def max_size_mb(self):
        return self.max_size // (1024 * 1024)


MB = 1024 * 1024

IMAGE_EXTENSIONS = frozenset(
    [".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".svg"]
)

IMAGE = UploadRule(
    kind="image",
    content_type_prefixes=("image/",),
    extensions=IMAGE_EXTENSIONS,
    max_size=5 * MB,
)
VIDEO = UploadRule(
    kind="video",
    content_type_prefixes=("video/",),
    extensions=frozenset(
        [".mp4", ".mov", ".avi", ".mkv", ".webm", ".m4v", ".flv", ".wmv", ".3gp"]
    ),
    max_size=100 * MB,
)
AUDIO = UploadRule(
    kind="audio",
    content_type_prefixes=("audio/",),
    extensions=frozenset([".mp3", ".wav", ".ogg", ".m4a", ".aac", ".flac", ".wma"]),
    max_size=50 * MB,
)
DOCUMENT = UploadRule(
    kind="document",
    content_type_prefixes=("application/pdf",),
    extensions=frozenset([".pdf", ".doc", ".docx", ".txt", ".jpg", ".jpeg", ".png"]),
    max_size=10 * MB,
)


def validate_upload(upload, rule):
    """
    Validate an ``UploadedFile`` against ``rule``.

    Raises
    ------
    UploadValidationError
        If neither content type nor extension is acceptable, or the file
        is larger than the rule allows.
    """
    name = getattr(upload, "name", "") or ""
    content_type = getattr(upload, "content_type", "") or ""
    extension = os.path.splitext(name)[1].lower()

    type_ok = any(content_type.startswith(p) for p in rule.content_type_prefixes)
    if not type_ok and extension not in rule.extensions:
        allowed = ", ".join(sorted(rule.extensions))
        raise UploadValidationError(
            f"Invalid {rule.kind} file '{name}'. Allowed: {allowed}"
        )

    if upload.size > rule.max_size:
        raise UploadValidationError(
            f"File '{name}' ({upload.size:,} bytes) exceeds "
            f"the {rule.max_size_mb} MB limit."
        )
