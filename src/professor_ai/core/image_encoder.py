"""
image_encoder.py: Load an image file, shrink it and return a base64-encoded JPEG string.

Supports input formats JPEG, PNG, and HEIC (requires pillow-heif).
"""

import base64
import io
from pathlib import Path
from typing import Union

from PIL import Image

from ..utils.log_utils import get_logger

logger = get_logger(__name__)

try:
    from pillow_heif import register_heif_opener
    register_heif_opener()
except ImportError:
    pass


def encode_image_file(path: Union[str, Path], max_side: int = 1024) -> str:
    """Open the image at `path`, downsize it and return it as base64 JPEG.

    Args:
        path: Path to the image file
        max_side: Upper bound for the longer side in pixels (default: 1024)

    Returns:
        Base64-encoded JPEG image data

    Raises:
        ValueError: If the file cannot be read as an image
    """
    try:
        img = Image.open(path)
        img.load()
    except (OSError, Image.UnidentifiedImageError) as err:
        logger.error("Failed to open image '%s': %s", path, err)
        raise ValueError(f"Cannot read image '{path}': {err}") from err

    w, h = img.size
    scale = max_side / max(w, h)
    if scale < 1:
        new_size = (max(1, round(w * scale)), max(1, round(h * scale)))
        logger.debug("Resizing '%s' from %sx%s to %sx%s", path, w, h, *new_size)
        img = img.resize(new_size, resample=Image.Resampling.LANCZOS)

    if img.mode != "RGB":
        img = img.convert("RGB")
    buffer = io.BytesIO()
    img.save(buffer, format="JPEG")
    return base64.b64encode(buffer.getvalue()).decode("utf-8")
