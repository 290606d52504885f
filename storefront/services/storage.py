"""Image uploads: validation and storage under ``settings.UPLOAD_DIR``."""

import io
import logging
import os
import uuid

from PIL import Image, UnidentifiedImageError
from slugify import slugify

from storefront.config import settings
from storefront.errors import ValidationError

logger = logging.getLogger(__name__)

# extension -> Pillow format name
ALLOWED_EXTENSIONS = {
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".png": "PNG",
    ".gif": "GIF",
    ".webp": "WEBP",
}

CONTENT_TYPES = {
    "JPEG": {"image/jpeg", "image/jpg", "image/pjpeg"},
    "PNG": {"image/png"},
    "GIF": {"image/gif"},
    "WEBP": {"image/webp"},
}

PUBLIC_PREFIX = "/uploads"


def _detect_format(data: bytes) -> str | None:
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.verify()
            return img.format
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError):
        return None


def _storage_name(original: str, ext: str) -> str:
    stem = slugify(os.path.splitext(os.path.basename(original))[0]) or "image"
    return f"{stem[:60]}-{uuid.uuid4().hex[:12]}{ext}"


def save_image(original_filename: str | None, content_type: str | None, data: bytes) -> str:
    """Validate an uploaded image and write it to disk. Returns the stored file name."""
    if not original_filename:
        raise ValidationError("Please select a file")

    ext = os.path.splitext(original_filename)[1].lower()
    expected_format = ALLOWED_EXTENSIONS.get(ext)
    if not expected_format:
        raise ValidationError(
            "Unsupported file extension; allowed: " + ", ".join(sorted(ALLOWED_EXTENSIONS))
        )

    declared = (content_type or "").split(";")[0].strip().lower()
    if declared not in CONTENT_TYPES[expected_format]:
        raise ValidationError("Content type does not match the file extension")

    if not data:
        raise ValidationError("Uploaded file is empty")
    if len(data) > settings.MAX_UPLOAD_BYTES:
        raise ValidationError("Uploaded file is too large")

    detected = _detect_format(data)
    if detected != expected_format:
        logger.warning(
            "Rejected upload %r: content is %s, extension says %s",
            original_filename,
            detected,
            expected_format,
        )
        raise ValidationError("File content is not a valid image")

    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    name = _storage_name(original_filename, ext)
    path = os.path.join(settings.UPLOAD_DIR, name)
    with open(path, "wb") as out:
        out.write(data)
    logger.info("Stored upload %s (%d bytes)", name, len(data))
    return name


def public_url(name: str) -> str:
    return f"{PUBLIC_PREFIX}/{name}"
