"""Local-disk implementation of ImageStore.

Files are written under the upload directory with a random name; the
returned path is the public URL path the web server serves them from.
"""

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path

from werkzeug.utils import secure_filename

from ecomarket.domain.exceptions import DataAccessError, ValidationError
from ecomarket.domain.repository.image_store import ImageStore

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/uploads/products"


class LocalImageStore(ImageStore):

    def __init__(self, upload_dir: Path, public_prefix: str = PUBLIC_PREFIX) -> None:
        self._upload_dir = upload_dir
        self._public_prefix = public_prefix.rstrip("/")

    def save(self, payload: bytes, content_type: str, filename: str) -> str:
        if not (content_type or "").startswith("image/"):
            raise ValidationError(f"Unsupported image type: {content_type!r}")

        extension = os.path.splitext(secure_filename(filename or ""))[1].lower()
        stored_name = f"{uuid.uuid4()}{extension}"
        try:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
            (self._upload_dir / stored_name).write_bytes(payload)
        except OSError as exc:
            logger.error("Error uploading file %s: %s", filename, exc)
            raise DataAccessError("Failed to upload file") from exc

        return f"{self._public_prefix}/{stored_name}"
