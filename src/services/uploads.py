"""Image upload validation and storage."""

import logging
import secrets
import time
from pathlib import Path

from fastapi import UploadFile

from src.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Allowed media types and the extension used when the upload name has no image extension
ALLOWED_IMAGE_TYPES: dict[str, str] = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})

DEFAULT_MAX_UPLOAD_BYTES = 2 * 1024 * 1024  # 2MB

UPLOADS_URL_PATH = "/uploads"

# Attempts at finding a free filename before giving up
MAX_NAME_ATTEMPTS = 5


def normalize_content_type(content_type: str | None) -> str:
    """Lower-case a media type and drop any parameters."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def validate_image(content_type: str | None, size: int, max_bytes: int) -> None:
    """Reject uploads that are not an allowed image type or exceed ``max_bytes``."""
    if normalize_content_type(content_type) not in ALLOWED_IMAGE_TYPES:
        raise ValidationError("Only images are allowed (jpg, jpeg, png, gif, webp)")
    if size > max_bytes:
        raise ValidationError(f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB.")


def generate_filename(original_filename: str | None, content_type: str | None) -> str:
    """Build ``<epoch millis>-<random hex><ext>`` for an uploaded file."""
    ext = Path(original_filename or "").suffix.lower()
    # Only image extensions are kept from the client name
    if ext not in IMAGE_EXTENSIONS:
        ext = ALLOWED_IMAGE_TYPES.get(normalize_content_type(content_type), "")
    return f"{int(time.time() * 1000)}-{secrets.token_hex(8)}{ext}"


class ImageStorage:
    """Stores uploaded images on local disk and builds their public URLs."""

    def __init__(
        self,
        upload_dir: str | Path,
        public_base_url: str,
        max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
    ):
        self.upload_dir = Path(upload_dir)
        self.public_base_url = public_base_url.rstrip("/")
        self.max_bytes = max_bytes

    def public_url(self, filename: str) -> str:
        return f"{self.public_base_url}{UPLOADS_URL_PATH}/{filename}"

    async def process_upload(self, file: UploadFile | None) -> str:
        """Validate an uploaded file, write it to disk and return its public URL.

        Note: This must stay async because UploadFile.read() is async.
        """
        if file is None or not file.filename:
            raise ValidationError("No file was uploaded")

        # Type is checked before reading so non-images are rejected regardless of size
        validate_image(file.content_type, 0, self.max_bytes)

        # Read one byte past the limit to detect oversized files without loading them fully
        data = await file.read(self.max_bytes + 1)
        if not data:
            raise ValidationError("No file was uploaded")
        validate_image(file.content_type, len(data), self.max_bytes)

        filename = self.save(data, file.filename, file.content_type)
        return self.public_url(filename)

    def save(self, data: bytes, original_filename: str | None, content_type: str | None) -> str:
        """Write ``data`` under a freshly generated name and return that name."""
        self.upload_dir.mkdir(parents=True, exist_ok=True)

        for _ in range(MAX_NAME_ATTEMPTS):
            filename = generate_filename(original_filename, content_type)
            try:
                # "x" mode fails instead of overwriting an existing file
                with open(self.upload_dir / filename, "xb") as f:
                    f.write(data)
            except FileExistsError:
                logger.warning(f"Upload filename collision on {filename}, retrying")
                continue
            logger.info(f"Stored upload {filename} ({len(data)} bytes)")
            return filename

        raise RuntimeError("Could not generate a unique upload filename")
