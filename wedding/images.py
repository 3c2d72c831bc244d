"""
Client-style image compression before upload.
"""

from __future__ import annotations

import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE_MB = 2.0
BINGO_MAX_SIZE_MB = 1.5
DEFAULT_MAX_DIMENSION = 2048
DEFAULT_INITIAL_QUALITY = 85
MIN_QUALITY = 40
QUALITY_STEP = 10


def compress_image(
    data: bytes,
    max_size_mb: float = DEFAULT_MAX_SIZE_MB,
    max_dimension: int = DEFAULT_MAX_DIMENSION,
    initial_quality: int = DEFAULT_INITIAL_QUALITY,
) -> bytes:
    """
    Re-encode an uploaded image as JPEG within the size and dimension limits.

    Quality drops in steps until the output fits `max_size_mb`; if it never
    fits, the smallest encoding (at MIN_QUALITY) is returned.
    """
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ValueError("File is not a readable image") from exc

    image = ImageOps.exif_transpose(image)
    if image.mode != "RGB":
        image = image.convert("RGB")
    image.thumbnail((max_dimension, max_dimension))

    max_bytes = int(max_size_mb * 1024 * 1024)
    quality = initial_quality
    while True:
        buffer = io.BytesIO()
        image.save(buffer, format="JPEG", quality=quality, optimize=True)
        encoded = buffer.getvalue()
        if len(encoded) <= max_bytes or quality <= MIN_QUALITY:
            break
        quality = max(MIN_QUALITY, quality - QUALITY_STEP)

    logger.debug(
        "Compressed image %d -> %d bytes (quality %d, %dx%d)",
        len(data),
        len(encoded),
        quality,
        image.width,
        image.height,
    )
    return encoded
